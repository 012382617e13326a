"""Accessor resolution: how a single path token is read from or written to.

A token resolves to the first of, walking the ancestor chain innermost
first:

1. a ``property`` named after the token (with a setter, for writes)
2. a getter/setter method, ``get_<token>``/``set_<token>`` or their
   protected (``_get_<token>``) and private (``__get_<token>``) forms,
   callable with no argument (getters) or exactly one (setters)
3. a declared field (see :mod:`.locator`)

Reads fall back to any data attribute already present on the target;
writes fall back to attributes held by the instance itself. Nothing else
is created.
"""

import inspect
import logging
import types
from typing import Any, Literal, Union, get_args, get_origin, get_type_hints

from .errors import MemberNotFoundError, TypeMismatchError
from .locator import accepts_arguments, ancestors, candidate_names, find_field, strip_optional
from .markers import split_annotated
from .types import Accessor

log = logging.getLogger(__name__)

GETTER_PREFIXES = ("get_", "_get_")
SETTER_PREFIXES = ("set_", "_set_")

# Implicit promotions accepted by type checkers (PEP 484 numeric tower)
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}

_MISSING: Any = object()


def _method_names(owner: type, prefixes: tuple[str, ...], token: str) -> list[str]:
    names = [f"{prefix}{token}" for prefix in prefixes]
    for prefix in prefixes:
        if not prefix.startswith("_"):
            names.extend(candidate_names(owner, f"__{prefix}{token}")[1:])
    return names


def _as_function(raw: Any, count: int) -> Any:
    """The function behind raw when it can be called with count arguments."""
    if isinstance(raw, (staticmethod, classmethod)):
        function = raw.__func__
    elif inspect.isfunction(raw):
        function = raw
    else:
        return None
    if not accepts_arguments(function, count, bound=not isinstance(raw, staticmethod)):
        return None
    return function


def _hints(function: Any) -> dict[str, Any]:
    try:
        return get_type_hints(function, include_extras=True)
    except (NameError, AttributeError, SyntaxError, TypeError):
        return {}


def _value_hint(function: Any) -> Any:
    """The annotation of a setter's value parameter, or None."""
    params = [p for p in inspect.signature(function).parameters if p not in ("self", "cls")]
    if not params:
        return None
    return _hints(function).get(params[0])


def _writer(token: str, owner: type, kind: Any, attribute: str, hint: Any) -> Accessor:
    if hint is None:
        return Accessor(name=token, owner=owner, kind=kind, attribute=attribute)
    hint, _ = split_annotated(hint)
    hint, nullable = strip_optional(hint)
    return Accessor(name=token, owner=owner, kind=kind, attribute=attribute, hint=hint, nullable=nullable)


# ────────────────────────────────────────────────────────────────────────
# Class-level resolution
# ────────────────────────────────────────────────────────────────────────


def find_reader(cls: type, token: str, prefixes: tuple[str, ...] = GETTER_PREFIXES) -> Accessor | None:
    """Resolve how token is read on instances of cls; None when it is not declared."""
    for owner in ancestors(cls):
        attrs = vars(owner)
        prop = attrs.get(token)
        if isinstance(prop, property) and prop.fget is not None:
            return Accessor(name=token, owner=owner, kind="property", attribute=token)
        for name in _method_names(owner, prefixes, token):
            if _as_function(attrs.get(name), 0) is not None:
                return Accessor(name=token, owner=owner, kind="method", attribute=name)

    member = find_field(cls, token)
    if member is None:
        return None
    return Accessor(
        name=token,
        owner=member.owner,
        kind="field",
        attribute=member.name,
        hint=member.type,
        nullable=member.nullable,
        static=member.static,
    )


def find_writer(cls: type, token: str, prefixes: tuple[str, ...] = SETTER_PREFIXES) -> Accessor | None:
    """Resolve how token is written on instances of cls; None when it is not declared.

    Read-only properties are skipped so that a setter method further up the
    chain can still be found.
    """
    for owner in ancestors(cls):
        attrs = vars(owner)
        prop = attrs.get(token)
        if isinstance(prop, property) and prop.fset is not None:
            hint = _value_hint(prop.fset)
            if hint is None and prop.fget is not None:
                hint = _hints(prop.fget).get("return")
            return _writer(token, owner, "property", token, hint)
        for name in _method_names(owner, prefixes, token):
            function = _as_function(attrs.get(name), 1)
            if function is not None:
                return _writer(token, owner, "method", name, _value_hint(function))

    member = find_field(cls, token)
    if member is None:
        return None
    return Accessor(
        name=token,
        owner=member.owner,
        kind="field",
        attribute=member.name,
        hint=member.type,
        nullable=member.nullable,
        static=member.static,
    )


# ────────────────────────────────────────────────────────────────────────
# Instance-level resolution
# ────────────────────────────────────────────────────────────────────────


def reader_for(target: Any, token: str) -> Accessor:
    """Resolve a read accessor for token on target's runtime type.

    Raises:
        MemberNotFoundError: No accessor, field or data attribute is named token.
    """
    cls = type(target)
    accessor = find_reader(cls, token)
    if accessor is None:
        found = inspect.getattr_static(target, token, _MISSING)
        if found is not _MISSING and not _is_callable_member(found):
            accessor = Accessor(name=token, owner=cls, kind="field", attribute=token)
    if accessor is None:
        raise MemberNotFoundError(cls, token)

    log.debug(f"read {cls.__qualname__}.{token} via {accessor.kind} {accessor.attribute!r}")
    return accessor


def writer_for(target: Any, token: str) -> Accessor:
    """Resolve a write accessor for token on target's runtime type.

    Raises:
        MemberNotFoundError: No setter or declared field is named token and
            the instance holds no such attribute.
    """
    cls = type(target)
    accessor = find_writer(cls, token)
    if accessor is None and token in getattr(target, "__dict__", {}):
        accessor = Accessor(name=token, owner=cls, kind="field", attribute=token)
    if accessor is None:
        raise MemberNotFoundError(cls, token)

    log.debug(f"write {cls.__qualname__}.{token} via {accessor.kind} {accessor.attribute!r}")
    return accessor


def _is_callable_member(found: Any) -> bool:
    return inspect.isroutine(found) or isinstance(found, (staticmethod, classmethod))


# ────────────────────────────────────────────────────────────────────────
# Type conformance
# ────────────────────────────────────────────────────────────────────────


def conforms(value: Any, hint: Any) -> bool:
    """Check a non-None value against a type hint, without coercion.

    Hints that cannot be checked at runtime (type variables, unresolved
    forward references) accept everything.
    """
    if hint is None or hint is Any or hint is object:
        return True

    hint, _ = split_annotated(hint)
    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        return any(conforms(value, arg) for arg in get_args(hint))
    if origin is Literal:
        return value in get_args(hint)
    if hint is type(None):
        return value is None
    if origin is not None:
        hint = origin

    if not isinstance(hint, type):
        return True
    if value is None:
        return False
    if isinstance(value, hint):
        return True
    return isinstance(value, _NUMERIC_PROMOTIONS.get(hint, ()))


def check_value(accessor: Accessor, value: Any, where: str | None = None) -> None:
    """Ensure value may be written through accessor.

    Raises:
        TypeMismatchError: value does not conform to the declared type, or
            is None for a member that is not nullable.
    """
    if value is None:
        if accessor.nullable or accessor.hint in (None, Any, object):
            return
        raise TypeMismatchError(value, accessor.hint, where=where)
    if not conforms(value, accessor.hint):
        raise TypeMismatchError(value, accessor.hint, where=where)
