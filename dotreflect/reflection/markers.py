"""Markers: opaque tags attached to fields and tested for presence."""

from dataclasses import field
from typing import Annotated, Any, get_args, get_origin

from .types import MemberInfo

MARKERS_KEY = "dotreflect.markers"

# Sentinel for missing default
_MISSING: Any = object()


def marked_field(
    *markers: Any,
    default: Any = _MISSING,
    default_factory: Any = _MISSING,
) -> Any:
    """Define a dataclass field tagged with markers.

    Args:
        *markers: Marker objects or marker classes to attach.
        default: Default value for the field.
        default_factory: Factory function for default value.

    Returns:
        A dataclass field with the markers stored in its metadata.

    Example:
        @dataclass
        class Row:
            id: int = marked_field(PrimaryKey, default=0)
    """
    metadata = {MARKERS_KEY: tuple(markers)}

    if default is not _MISSING:
        return field(default=default, metadata=metadata)
    if default_factory is not _MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(metadata=metadata)


def split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Split ``Annotated[T, m1, m2]`` into ``(T, (m1, m2))``."""
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        return base, tuple(metadata)
    return hint, ()


def dataclass_markers(cls: type, name: str) -> tuple[Any, ...]:
    """Markers stored by marked_field() for a field declared on cls."""
    dc_fields = cls.__dict__.get("__dataclass_fields__", {})
    dc_field = dc_fields.get(name)
    if dc_field is None:
        return ()
    return tuple(dc_field.metadata.get(MARKERS_KEY, ()))


def has_marker(member: MemberInfo, marker: Any) -> bool:
    """Check whether a member carries the given marker.

    A marker class matches both the class itself and any instance of it.
    """
    for present in member.markers:
        if present is marker or present == marker:
            return True
        if isinstance(marker, type) and isinstance(present, marker):
            return True
    return False
