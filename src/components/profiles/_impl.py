"""
Profile validation and updates.

Functional Core - pure functions over immutable ``User`` records.
Validation failures come back as ``Err(UserError)``; nothing here raises
for bad input.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from src.domain import ABSENT, Err, Ok, Option, Present, Result, first_present
from src.rules.models import ProfileRules

from .models import Address, User, UserError

logger = logging.getLogger(__name__)

DEFAULT_RULES = ProfileRules()


# --- Validation Functions ---


def validate_name(name: str) -> Result[str, UserError]:
    if not name or not name.strip():
        return Err(UserError.NAME_EMPTY)
    return Ok(name.strip())


def validate_age(age: int, minimum: int = DEFAULT_RULES.min_age) -> Result[int, UserError]:
    if age < minimum:
        return Err(UserError.AGE_TOO_YOUNG)
    return Ok(age)


def validate_email(
    email: str, required_char: str = DEFAULT_RULES.email_required_char
) -> Result[str, UserError]:
    """Accept an email containing ``required_char``; the payload is lower-cased."""
    if required_char not in email:
        return Err(UserError.EMAIL_INVALID)
    return Ok(email.lower())


def validate_user(
    name: str, age: int, email: str, rules: ProfileRules = DEFAULT_RULES
) -> list[UserError]:
    """Every reason the fields are rejected, in name/age/email order."""
    checks = [
        validate_name(name),
        validate_age(age, rules.min_age),
        validate_email(email, rules.email_required_char),
    ]
    return [c.error for c in checks if isinstance(c, Err)]


# --- Construction ---


def create_user(
    user_id: int,
    name: str,
    age: int,
    email: str,
    address: Option[Address] = ABSENT,
    rules: ProfileRules = DEFAULT_RULES,
) -> Result[User, UserError]:
    """
    Build a validated user.

    Checks name, then age, then email; the first failure is returned.
    """
    errors = validate_user(name, age, email, rules)
    if errors:
        logger.info("Rejected user %s: %s", user_id, errors[0].value)
        return Err(errors[0])

    user = User(
        id=user_id,
        name=name.strip(),
        age=age,
        email=Present(email.lower()),
        address=address,
    )
    return Ok(user)


# --- Update Functions ---


def update_name(user: User, name: str) -> Result[User, UserError]:
    return validate_name(name).map(lambda valid: replace(user, name=valid))


def update_age(
    user: User, age: int, rules: ProfileRules = DEFAULT_RULES
) -> Result[User, UserError]:
    return validate_age(age, rules.min_age).map(lambda valid: replace(user, age=valid))


def update_email(
    user: User, email: str, rules: ProfileRules = DEFAULT_RULES
) -> Result[User, UserError]:
    return validate_email(email, rules.email_required_char).map(
        lambda valid: replace(user, email=Present(valid))
    )


def update_address(user: User, address: Option[Address]) -> User:
    """Set or clear the address."""
    return replace(user, address=address)


# --- Optional Lookups ---


def city_of(user: User, default: str = DEFAULT_RULES.default_city) -> str:
    """City of the user's address, or ``default`` when there is no address."""
    return user.address.map(lambda a: a.city).unwrap_or(default)


def display_name(
    name: Option[str],
    email: Option[str],
    fallback: str = DEFAULT_RULES.default_display_name,
) -> str:
    """First of name, email; otherwise ``fallback``."""
    return first_present(name, email).unwrap_or(fallback)


def greet_user(name: Option[str], age: Option[int]) -> str:
    """Greeting that degrades with each missing field."""
    if not isinstance(name, Present):
        return "Can't greet without a name"
    if not isinstance(age, Present):
        return f"Hello {name.value}! Age unknown"
    return f"Hello {name.value}, you are {age.value} years old"


def summarize_user(user: User, rules: ProfileRules = DEFAULT_RULES) -> list[str]:
    """Human-readable summary lines."""
    return [
        f"User #{user.id}: {user.name}",
        f"Age: {user.age}",
        f"Email: {user.email.unwrap_or('(none)')}",
        f"City: {city_of(user, rules.default_city)}",
    ]
