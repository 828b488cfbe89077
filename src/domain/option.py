"""
Optional values as an explicit present/absent wrapper.

Callers must branch on the variant (``isinstance`` or ``match``) or supply
a default through ``unwrap_or``. ``None`` is never used to signal absence
across component boundaries.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that is there."""

    value: T

    @property
    def is_present(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Present(fn(self.value))

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)


@dataclass(frozen=True)
class Absent:
    """No value."""

    @property
    def is_present(self) -> bool:
        return False

    def unwrap(self) -> object:
        raise ValueError("unwrap() called on an absent value")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[object], U]) -> Option[U]:
        return self

    def and_then(self, fn: Callable[[object], Option[U]]) -> Option[U]:
        return self


ABSENT = Absent()

Option = Present[T] | Absent


def from_nullable(value: T | None) -> Option[T]:
    """Wrap a value coming from code that still uses ``None``."""
    return ABSENT if value is None else Present(value)


def first_present(*candidates: Option[T]) -> Option[T]:
    """Return the first present candidate, or absent if none is."""
    for candidate in candidates:
        if isinstance(candidate, Present):
            return candidate
    return ABSENT


def compact(values: list[Option[T]]) -> list[T]:
    """Drop absent entries, keeping order."""
    return [v.value for v in values if isinstance(v, Present)]
