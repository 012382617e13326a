"""Read and write values at dotted property paths.

Example:
    resolve(parent, "child.grandchild.flag", bool)   # None while child is None
    mutate(parent, "child.grandchild.flag", False)
"""

import logging
from typing import Any

from .accessors import check_value, conforms, reader_for, writer_for
from .errors import MemberNotFoundError, TypeMismatchError
from .locator import as_class
from .path import parse_path, split_leaf

log = logging.getLogger(__name__)


def _walk(target: Any, tokens: tuple[str, ...], path: str) -> Any:
    """Read tokens one hop at a time, stopping at the first None."""
    current = target
    for token in tokens:
        if current is None:
            log.debug(f"{path}: None before {token!r}, not resolving further")
            return None
        current = reader_for(current, token).get(current)
    return current


def resolve(target: Any, path: str, expected_type: Any = None) -> Any:
    """Read the value at a dotted path.

    Each token is read with accessor semantics: ``"one.two"`` reads ``one``
    from target, then ``two`` from that result. A None target or None
    intermediate value makes the whole result None, and tokens after it are
    never looked at.

    Args:
        target: Object to start from. May be None.
        path: Dot-separated member names.
        expected_type: If given, a non-None result must conform to it. May
            be a class name.

    Returns:
        The value of the final member, or None.

    Raises:
        InvalidPathError: path is malformed.
        MemberNotFoundError: A token names nothing on the object reached.
        ClassNotFoundError: expected_type names no class.
        TypeMismatchError: The result does not conform to expected_type.
    """
    if isinstance(expected_type, str):
        expected_type = as_class(expected_type)
    value = _walk(target, parse_path(path), path)
    if expected_type is not None and value is not None and not conforms(value, expected_type):
        raise TypeMismatchError(value, expected_type, where=path)
    return value


def mutate(target: Any, path: str, value: Any) -> None:
    """Write value into the member a dotted path names.

    All tokens but the last are read as in resolve(); the last is written
    on the object they lead to, through a setter when one exists.

    Raises:
        InvalidPathError: path is malformed.
        MemberNotFoundError: A token names nothing, or an intermediate value
            is None so there is nothing to write into.
        TypeMismatchError: value does not conform to the member's declared type.
    """
    parents, leaf = split_leaf(path)
    parent = _walk(target, parents, path)
    if parent is None:
        log.debug(f"{path}: no object to write {leaf!r} into")
        raise MemberNotFoundError(None, leaf)

    writer = writer_for(parent, leaf)
    check_value(writer, value, where=path)
    writer.set(parent, value)
