"""Member lookup over a class and its ancestor chain."""

import importlib
import inspect
import logging
import sys
import types
from typing import Any, ClassVar, Union, get_args, get_origin

from .errors import ClassNotFoundError, InvalidPathError, MemberNotFoundError, ReflectionError
from .markers import dataclass_markers, split_annotated
from .path import parse_path
from .types import MemberInfo, MethodInfo

log = logging.getLogger(__name__)

# Interpreter-generated names that are not dunders
SYNTHETIC_NAMES = frozenset(["_abc_impl"])

_MISSING: Any = object()


# ────────────────────────────────────────────────────────────────────────
# Classes by name
# ────────────────────────────────────────────────────────────────────────


def import_object(name: str) -> Any:
    """Import an object by name.

    Accepts ``"pkg.module:Outer.Inner"``, ``"pkg.module.Outer.Inner"`` and,
    for names without a module part, builtins (``"str"``).
    """
    module_name, sep, qualname = name.partition(":")
    if sep:
        candidates = [(module_name, qualname)]
    else:
        parts = name.split(".")
        candidates = [(".".join(parts[:i]), ".".join(parts[i:])) for i in range(len(parts) - 1, 0, -1)]
        candidates.append(("builtins", name))

    for module_name, qualname in candidates:
        module = _import_module(module_name)
        if module is None:
            continue
        obj = _lookup(module, qualname)
        if obj is not _MISSING:
            return obj

    raise ReflectionError(f"Cannot import {name!r}")


def load_class(name: str) -> type:
    """Resolve a class by name.

    Raises:
        ClassNotFoundError: The name does not resolve, or resolves to
            something that is not a class.
    """
    try:
        obj = import_object(name)
    except ReflectionError:
        raise ClassNotFoundError(name) from None
    if not isinstance(obj, type):
        raise ClassNotFoundError(name)
    return obj


def as_class(cls: type | str) -> type:
    """Accept either a class or a class name."""
    if isinstance(cls, str):
        return load_class(cls)
    if isinstance(cls, type):
        return cls
    raise TypeError(f"Expected a class or class name, got {type(cls).__qualname__}")


def _import_module(module_name: str) -> types.ModuleType | None:
    if not module_name or not all(part.isidentifier() for part in module_name.split(".")):
        return None
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        # Only a missing module on the tried path means "not here"
        if e.name and (module_name == e.name or module_name.startswith(e.name + ".")):
            return None
        raise


def _lookup(module: types.ModuleType, qualname: str) -> Any:
    obj: Any = module
    for part in qualname.split("."):
        obj = getattr(obj, part, _MISSING)
        if obj is _MISSING:
            break
    return obj


# ────────────────────────────────────────────────────────────────────────
# Declared members
# ────────────────────────────────────────────────────────────────────────


def ancestors(cls: type) -> tuple[type, ...]:
    """The class followed by its ancestors, most-derived first."""
    return inspect.getmro(cls)


def is_synthetic(name: str) -> bool:
    """Check if a member name is generated by the interpreter or a decorator."""
    return (name.startswith("__") and name.endswith("__")) or name in SYNTHETIC_NAMES


def strip_optional(hint: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into ``(X, True)``; other hints give ``(hint, False)``."""
    if get_origin(hint) in (Union, types.UnionType):
        args = get_args(hint)
        rest = tuple(arg for arg in args if arg is not type(None))
        if len(rest) < len(args):
            if len(rest) == 1:
                return rest[0], True
            return Union[rest], True
    return hint, False


def _is_classvar(hint: Any) -> bool:
    if hint is ClassVar or get_origin(hint) is ClassVar:
        return True
    # Annotations that could not be evaluated stay strings
    return isinstance(hint, str) and hint.startswith(("ClassVar", "typing.ClassVar"))


def _unwrap(hint: Any) -> tuple[Any, tuple[Any, ...], bool, bool]:
    """Reduce an annotation to (type, markers, static, nullable)."""
    hint, markers = split_annotated(hint)
    static = _is_classvar(hint)
    if static:
        args = get_args(hint)
        hint = args[0] if args else Any
        hint, more = split_annotated(hint)
        markers += more
    hint, nullable = strip_optional(hint)
    hint, more = split_annotated(hint)
    return hint, markers + more, static, nullable


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except (NameError, AttributeError, SyntaxError, TypeError):
        pass

    # Some forward reference does not resolve yet: evaluate one by one and
    # leave only the failing annotations as strings
    module = sys.modules.get(cls.__module__)
    globals_ = getattr(module, "__dict__", {})
    locals_ = dict(vars(cls))
    annotations: dict[str, Any] = {}
    for name, hint in inspect.get_annotations(cls).items():
        if isinstance(hint, str):
            try:
                hint = eval(hint, globals_, locals_)  # noqa: S307
            except (NameError, AttributeError, SyntaxError, TypeError):
                log.debug(f"{cls.__qualname__}.{name}: cannot evaluate annotation {hint!r}")
        annotations[name] = hint
    return annotations


def _is_data(value: Any) -> bool:
    """Plain class data, as opposed to methods, descriptors and nested classes."""
    return not isinstance(value, type) and not hasattr(type(value), "__get__")


def declared_members(cls: type) -> list[MemberInfo]:
    """Every field declared directly on cls, synthetic ones included.

    Annotated names come first in declaration order, then ``__slots__``
    entries, then un-annotated class data (which is static).
    """
    members: list[MemberInfo] = []
    annotations = _own_annotations(cls)

    for name, hint in annotations.items():
        type_, markers, static, nullable = _unwrap(hint)
        members.append(
            MemberInfo(
                name=name,
                owner=cls,
                type=type_,
                markers=markers + dataclass_markers(cls, name),
                static=static,
                nullable=nullable,
                synthetic=is_synthetic(name),
            )
        )

    for name, value in vars(cls).items():
        if name in annotations:
            continue
        if isinstance(value, types.MemberDescriptorType):
            members.append(MemberInfo(name=name, owner=cls, type=Any, synthetic=is_synthetic(name)))
        elif _is_data(value):
            members.append(
                MemberInfo(
                    name=name,
                    owner=cls,
                    type=Any if value is None else type(value),
                    static=True,
                    nullable=value is None,
                    synthetic=is_synthetic(name),
                )
            )

    return members


def candidate_names(owner: type, name: str) -> list[str]:
    """Names under which owner may store name, private names mangled too."""
    names = [name]
    if name.startswith("__") and not name.endswith("__"):
        names.append(f"_{owner.__name__.lstrip('_')}{name}")
    return names


# ────────────────────────────────────────────────────────────────────────
# Lookup
# ────────────────────────────────────────────────────────────────────────


def find_field(cls: type | str, name: str) -> MemberInfo | None:
    """Find a field on cls or its nearest ancestor declaring it."""
    cls = as_class(cls)
    for owner in ancestors(cls):
        members = {member.name: member for member in declared_members(owner)}
        for candidate in candidate_names(owner, name):
            if candidate in members:
                if owner is not cls:
                    log.debug(f"{cls.__qualname__}.{name}: declared on ancestor {owner.__qualname__}")
                return members[candidate]
    return None


def locate(cls: type | str, name: str) -> MemberInfo:
    """Like find_field(), but a missing field raises MemberNotFoundError."""
    cls = as_class(cls)
    member = find_field(cls, name)
    if member is None:
        raise MemberNotFoundError(cls, name)
    return member


def accepts_arguments(function: Any, count: int, bound: bool) -> bool:
    """Check whether function can be called with exactly count positional arguments.

    ``bound`` drops the leading self/cls parameter first.
    """
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return True

    params = list(signature.parameters.values())
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if bound and params and params[0].kind in positional:
        params = params[1:]

    slots = [p for p in params if p.kind in positional]
    varargs = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params)
    required = [p for p in slots if p.default is p.empty]
    keyword_required = [
        p for p in params if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty
    ]
    if keyword_required or len(required) > count:
        return False
    return varargs or len(slots) >= count


def find_method(cls: type | str, name: str) -> MethodInfo | None:
    """Find a zero-argument method on cls or its nearest ancestor declaring it."""
    cls = as_class(cls)
    for owner in ancestors(cls):
        for candidate in candidate_names(owner, name):
            raw = vars(owner).get(candidate)
            if raw is None or isinstance(raw, type):
                continue
            static = isinstance(raw, (staticmethod, classmethod))
            function = raw.__func__ if static else raw
            if not callable(function):
                continue
            if accepts_arguments(function, 0, bound=not isinstance(raw, staticmethod)):
                return MethodInfo(name=candidate, owner=owner, function=function, static=static)
    return None


def locate_method(cls: type | str, name: str) -> MethodInfo:
    """Like find_method(), but a missing method raises MemberNotFoundError."""
    cls = as_class(cls)
    method = find_method(cls, name)
    if method is None:
        raise MemberNotFoundError(cls, name)
    return method


# ────────────────────────────────────────────────────────────────────────
# Structural paths
# ────────────────────────────────────────────────────────────────────────


def _hop_class(declared: Any) -> type | None:
    """The class to search for the next token of a path."""
    origin = get_origin(declared) or declared
    return origin if isinstance(origin, type) else None


def find_path(cls: type | str, tokens: tuple[str, ...]) -> MemberInfo | None:
    """Walk tokens through declared field types; None when any token misses."""
    current: type | None = as_class(cls)
    member = None
    for token in tokens:
        if current is None:
            return None
        member = find_field(current, token)
        if member is None:
            return None
        current = _hop_class(member.type)
    return member


def get_field(cls: type | str, path: str) -> MemberInfo:
    """Retrieve the field a dotted path names, following declared field types.

    ``get_field(Parent, "child.grandchild.flag")`` returns the ``flag``
    field of ``Grandchild``. No instance is involved.
    """
    cls = as_class(cls)
    member = find_path(cls, parse_path(path))
    if member is None:
        raise MemberNotFoundError(cls, path)
    return member


def field_exists(cls: type | str, path: str) -> bool:
    """Check whether every token of a dotted path names a declared field."""
    cls = as_class(cls)
    try:
        tokens = parse_path(path)
    except InvalidPathError:
        return False
    return find_path(cls, tokens) is not None
