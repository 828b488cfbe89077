"""
Profiles component - User profiles with validated fields and optional
contact details.
"""

from ._impl import (
    city_of,
    create_user,
    display_name,
    greet_user,
    summarize_user,
    update_address,
    update_age,
    update_email,
    update_name,
    validate_age,
    validate_email,
    validate_name,
    validate_user,
)
from .component import run_create, run_update
from .models import (
    Address,
    CreateUserInput,
    UpdateUserInput,
    User,
    UserError,
    UserOperationOutput,
)

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    # Validation
    "validate_age",
    "validate_email",
    "validate_name",
    "validate_user",
    # Construction and updates
    "create_user",
    "update_address",
    "update_age",
    "update_email",
    "update_name",
    # Lookups
    "city_of",
    "display_name",
    "greet_user",
    "summarize_user",
    # Models
    "Address",
    "CreateUserInput",
    "UpdateUserInput",
    "User",
    "UserError",
    "UserOperationOutput",
]
