"""
Typed results: success with a payload or failure with a reason.

Validation code returns these instead of raising. Callers branch on the
variant; failures are never propagated by unwinding.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the reason."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[object], U]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[object], Result[U, E]]) -> Err[E]:
        return self


Result = Ok[T] | Err[E]
