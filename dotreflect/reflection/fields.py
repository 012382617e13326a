"""Field enumeration over a class hierarchy."""

from collections.abc import Callable
from typing import Any

from .locator import ancestors, as_class, declared_members
from .markers import has_marker
from .types import MemberInfo

Predicate = Callable[[MemberInfo], bool]


def declared_fields(
    cls: type | str,
    include_ancestors: bool = True,
    predicate: Predicate | None = None,
) -> list[MemberInfo]:
    """Retrieve the non-synthetic fields of a class.

    Args:
        cls: Class (or class name) to reflect over.
        include_ancestors: Also list fields declared on base classes.
        predicate: Keep only fields for which this returns True.

    Returns:
        Fields in declaration order, the class's own fields before those of
        its ancestors (most-derived first). A field shadowed by a subclass
        is listed once per declaring class.
    """
    cls = as_class(cls)
    owners = ancestors(cls) if include_ancestors else (cls,)

    fields: list[MemberInfo] = []
    for owner in owners:
        for member in declared_members(owner):
            if member.synthetic:
                continue
            if predicate is None or predicate(member):
                fields.append(member)
    return fields


# ────────────────────────────────────────────────────────────────────────
# Predicates
# ────────────────────────────────────────────────────────────────────────


def of_type(target_type: Any) -> Predicate:
    """Match fields declared with exactly target_type (a class or class name)."""
    if isinstance(target_type, str):
        target_type = as_class(target_type)
    return lambda member: member.type == target_type


def with_marker(marker: Any) -> Predicate:
    return lambda member: has_marker(member, marker)


def is_instance_field(member: MemberInfo) -> bool:
    return not member.static


def all_of(*predicates: Predicate) -> Predicate:
    """Match fields that every predicate matches; no predicates match everything."""
    return lambda member: all(predicate(member) for predicate in predicates)


# ────────────────────────────────────────────────────────────────────────
# Queries
# ────────────────────────────────────────────────────────────────────────


def all_fields(cls: type | str, include_ancestors: bool = True) -> list[MemberInfo]:
    """Retrieve all fields of a class."""
    return declared_fields(cls, include_ancestors)


def fields_of_type(cls: type | str, target_type: Any) -> list[MemberInfo]:
    """Retrieve all fields declared with exactly target_type.

    Subclasses of target_type do not match. ``X | None`` counts as ``X``.
    """
    return declared_fields(cls, predicate=of_type(target_type))


def fields_with_marker(cls: type | str, marker: Any) -> list[MemberInfo]:
    """Retrieve all fields tagged with the given marker."""
    return declared_fields(cls, predicate=with_marker(marker))


def non_static_fields(cls: type | str) -> list[MemberInfo]:
    """Retrieve all instance fields, leaving out class-level ones."""
    return declared_fields(cls, predicate=is_instance_field)
