"""Printable summaries of reflected members."""

import inspect
from dataclasses import dataclass
from typing import Any

from dataclasses_json import DataClassJsonMixin

from dotreflect.reflection.types import MemberInfo, MethodInfo


def type_name(hint: Any) -> str:
    """Short display name for a type or type hint."""
    if isinstance(hint, type):
        return hint.__qualname__
    return repr(hint).replace("typing.", "")


def marker_name(marker: Any) -> str:
    """Display name for a marker class or marker instance."""
    if isinstance(marker, type):
        return marker.__qualname__
    return repr(marker)


@dataclass
class FieldSummary(DataClassJsonMixin):
    """A field as shown by the inspector."""

    name: str
    owner: str
    type: str
    static: bool
    nullable: bool
    markers: list[str]

    @classmethod
    def from_member(cls, member: MemberInfo) -> "FieldSummary":
        return cls(
            name=member.name,
            owner=member.owner.__qualname__,
            type=type_name(member.type),
            static=member.static,
            nullable=member.nullable,
            markers=[marker_name(m) for m in member.markers],
        )


@dataclass
class MethodSummary(DataClassJsonMixin):
    """A method as shown by the inspector."""

    name: str
    owner: str
    static: bool
    signature: str

    @classmethod
    def from_method(cls, method: MethodInfo) -> "MethodSummary":
        try:
            signature = str(inspect.signature(method.function))
        except (TypeError, ValueError):
            signature = "(...)"
        return cls(
            name=method.name,
            owner=method.owner.__qualname__,
            static=method.static,
            signature=signature,
        )
