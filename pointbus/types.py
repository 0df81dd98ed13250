"""Common value types: a boolean with algebraic operators and a type-name helper."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Bool:
    """Boolean value where ``+`` is logical OR and ``*`` is logical AND."""

    value: bool

    def __add__(self, other: Bool) -> Bool:
        return Bool(self.value or other.value)

    def __mul__(self, other: Bool) -> Bool:
        return Bool(self.value and other.value)

    def __or__(self, other: Bool) -> Bool:
        return Bool(self.value | other.value)

    def __and__(self, other: Bool) -> Bool:
        return Bool(self.value & other.value)

    def __invert__(self) -> Bool:
        return Bool(not self.value)

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


def type_of(value: object) -> str:
    """Return the fully qualified name of the type of ``value``."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"