"""
Profiles component - Data models.

Invariants:
- ``User.id`` never changes; updates return a new record with the same id
- Optional fields are ``Present``/``Absent``, never ``None``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.domain import ABSENT, Option

# --- Errors ---


class UserError(Enum):
    """Reasons a profile is rejected."""

    NAME_EMPTY = "name_empty"
    AGE_TOO_YOUNG = "age_too_young"
    EMAIL_INVALID = "email_invalid"

    def message(self, min_age: int = 13, required_char: str = "@") -> str:
        if self is UserError.NAME_EMPTY:
            return "Name cannot be empty"
        if self is UserError.AGE_TOO_YOUNG:
            return f"Must be at least {min_age} years old"
        return f"Email must contain {required_char}"


# --- Entities ---


@dataclass(frozen=True)
class Address:
    street: str
    city: str


@dataclass(frozen=True)
class User:
    """User profile."""

    id: int
    name: str
    age: int
    email: Option[str] = ABSENT
    address: Option[Address] = field(default=ABSENT)


# --- Input Models ---


@dataclass(frozen=True)
class CreateUserInput:
    """Input for creating a user."""

    user_id: int
    name: str
    age: int
    email: str
    address: Option[Address] = ABSENT


@dataclass(frozen=True)
class UpdateUserInput:
    """Input for updating a user. Only present fields are applied."""

    name: Option[str] = ABSENT
    age: Option[int] = ABSENT
    email: Option[str] = ABSENT
    address: Option[Option[Address]] = ABSENT


# --- Output Models ---


@dataclass(frozen=True)
class UserOperationOutput:
    """Output from a profile operation."""

    user: User | None
    errors: tuple[UserError, ...]
    messages: tuple[str, ...]
    success: bool
