"""Sample class hierarchy shared by the tests."""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, ClassVar


class Identifier:
    """Marker for identifying fields."""


class Audited:
    """Marker that no Parent field carries."""


@dataclass
class BaseGrandchild:
    base_attribute: str | None = None


@dataclass
class Grandchild(BaseGrandchild):
    flag: bool = True


@dataclass
class BaseChild:
    base_attribute: str | None = None


@dataclass
class Child(BaseChild):
    child_string: str | None = None
    grandchild: Grandchild | None = None

    def get_child_string(self) -> str | None:
        return self.child_string

    def set_child_string(self, child_string: str | None) -> None:
        self.child_string = child_string

    def get_grandchild(self) -> Grandchild | None:
        return self.grandchild

    def set_grandchild(self, grandchild: Grandchild | None) -> None:
        self.grandchild = grandchild


@dataclass
class BaseParent:
    base_attribute: str | None = None

    def get_base_attribute(self) -> str | None:
        return self.base_attribute


@dataclass
class Parent(BaseParent):
    PROTECTED_METHOD_VALUE: ClassVar[str] = "protected value"
    PRIVATE_METHOD_VALUE: ClassVar[str] = "private value"

    id: Annotated[int | None, Identifier] = None
    parent_string: str | None = None
    child: Child | None = None
    time_is_a_flat_circle: datetime | None = None

    def get_parent_string(self) -> str | None:
        return self.parent_string

    @staticmethod
    def _get_protected_method_value() -> str:
        return Parent.PROTECTED_METHOD_VALUE

    @staticmethod
    def __get_private_method_value() -> str:
        return Parent.PRIVATE_METHOD_VALUE


class ObjectWithStatics:
    INSTANCES: ClassVar[int] = 0

    name: str
    size: int

    def __init__(self, name: str, size: int) -> None:
        self.name = name
        self.size = size
