"""Errors raised by the reflection utilities."""

from typing import Any


class ReflectionError(RuntimeError):
    """Base class for all reflection failures."""


class ClassNotFoundError(ReflectionError):
    """Raised when a class name does not resolve to a class."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Class {name!r} not found")
        self.name = name


class MemberNotFoundError(ReflectionError):
    """Raised when a path token names no member of the current class."""

    def __init__(self, owner: type | None, name: str) -> None:
        where = owner.__qualname__ if owner is not None else "None"
        super().__init__(f"{where} has no member {name!r}")
        self.owner = owner
        self.name = name


class TypeMismatchError(ReflectionError):
    """Raised when a value does not conform to the expected or declared type."""

    def __init__(self, value: Any, expected: Any, where: str | None = None) -> None:
        expected_name = getattr(expected, "__qualname__", repr(expected))
        message = f"{type(value).__qualname__} value is not a {expected_name}"
        if where:
            message = f"{where}: {message}"
        super().__init__(message)
        self.value = value
        self.expected = expected


class InvalidPathError(ReflectionError):
    """Raised when a property path is not a dot-separated list of identifiers."""
