"""Runtime descriptors for reflected members.

These dataclasses describe fields, methods and accessors discovered on a
class. They are views over the class's own metadata and never hold a
reference to an instance.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

AccessorKind = Literal["property", "method", "field"]


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """Describes a field declared on a class."""

    name: str
    owner: type
    type: Any
    markers: tuple[Any, ...] = ()
    static: bool = False
    nullable: bool = False
    synthetic: bool = False

    @property
    def qualname(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """Describes a method declared on a class."""

    name: str
    owner: type
    function: Callable[..., Any]
    static: bool = False


@dataclass(frozen=True, slots=True)
class Accessor:
    """A resolved read or write capability for one path token.

    ``attribute`` is the Python attribute actually touched, which differs
    from ``name`` for getter/setter methods (``get_flag`` for ``flag``) and
    for name-mangled private members.
    """

    name: str
    owner: type
    kind: AccessorKind
    attribute: str
    hint: Any = None
    nullable: bool = True
    static: bool = False

    def get(self, target: Any) -> Any:
        """Read the member from target.

        A field that is declared but was never assigned reads as None.
        """
        if self.kind == "field":
            return getattr(target, self.attribute, None)
        value = getattr(target, self.attribute)
        if self.kind == "method":
            return value()
        return value

    def set(self, target: Any, value: Any) -> None:
        """Write value into the member on target.

        Static fields are assigned on their declaring class so the instance
        does not end up shadowing them.
        """
        if self.kind == "method":
            getattr(target, self.attribute)(value)
        elif self.static and self.kind == "field":
            setattr(self.owner, self.attribute, value)
        else:
            setattr(target, self.attribute, value)
