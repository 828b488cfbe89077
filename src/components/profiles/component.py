"""
Profiles component - User profile creation and updates.

Shell Layer - converts typed results into operation outputs with
printable messages.

Invariants:
- The input record is never modified; a rejected update returns the
  original user untouched in ``user``
"""

from __future__ import annotations

import logging

from src.domain import Err, Present
from src.rules.models import ProfileRules

from ._impl import (
    DEFAULT_RULES,
    create_user,
    update_address,
    update_age,
    update_email,
    update_name,
    validate_user,
)
from .models import CreateUserInput, UpdateUserInput, User, UserError, UserOperationOutput

logger = logging.getLogger(__name__)


def _messages(errors: list[UserError], rules: ProfileRules) -> tuple[str, ...]:
    return tuple(e.message(rules.min_age, rules.email_required_char) for e in errors)


def run_create(
    input_data: CreateUserInput, rules: ProfileRules = DEFAULT_RULES
) -> UserOperationOutput:
    """Create a user, reporting every invalid field rather than only the first."""
    result = create_user(
        input_data.user_id,
        input_data.name,
        input_data.age,
        input_data.email,
        input_data.address,
        rules,
    )
    if isinstance(result, Err):
        errors = validate_user(input_data.name, input_data.age, input_data.email, rules)
        return UserOperationOutput(
            user=None,
            errors=tuple(errors),
            messages=_messages(errors, rules),
            success=False,
        )

    user = result.value
    return UserOperationOutput(
        user=user,
        errors=(),
        messages=(f"User created: {user.name}",),
        success=True,
    )


def run_update(
    user: User, input_data: UpdateUserInput, rules: ProfileRules = DEFAULT_RULES
) -> UserOperationOutput:
    """
    Apply the present fields of ``input_data`` to ``user``.

    All-or-nothing: if any field is rejected, no change is applied.
    """
    updated = user
    errors: list[UserError] = []
    applied: list[str] = []

    if isinstance(input_data.name, Present):
        result = update_name(updated, input_data.name.value)
        if isinstance(result, Err):
            errors.append(result.error)
        else:
            updated = result.value
            applied.append("name")

    if isinstance(input_data.age, Present):
        result = update_age(updated, input_data.age.value, rules)
        if isinstance(result, Err):
            errors.append(result.error)
        else:
            updated = result.value
            applied.append("age")

    if isinstance(input_data.email, Present):
        result = update_email(updated, input_data.email.value, rules)
        if isinstance(result, Err):
            errors.append(result.error)
        else:
            updated = result.value
            applied.append("email")

    if isinstance(input_data.address, Present):
        updated = update_address(updated, input_data.address.value)
        applied.append("address")

    if errors:
        logger.info("Rejected update for user %s: %s", user.id, [e.value for e in errors])
        return UserOperationOutput(
            user=user,
            errors=tuple(errors),
            messages=_messages(errors, rules),
            success=False,
        )

    message = f"Updated {', '.join(applied)} for {updated.name}" if applied else "Nothing to update"
    return UserOperationOutput(user=updated, errors=(), messages=(message,), success=True)
