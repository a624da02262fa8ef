"""Field rules for users, evaluated outside the entity.

The entity accepts any value; these rules are applied where users enter the
system (service layer, CLI). Each violated rule is reported as a
``<field>.<rule>`` identifier.
"""

import re

from loguru import logger

from src.usermanagement.entities.core.user.entity import User
from src.usermanagement.runtime.config.config_data import ValidationPolicy
from src.usermanagement.runtime.context import get_config

NOT_BLANK = "not_blank"
SIZE = "size"
FORMAT = "format"
MATCH = "match"


class UserValidationError(ValueError):
    """Raised when a user violates one or more validation rules."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(f"User failed validation: {', '.join(violations)}")


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_user(user: User, policy: ValidationPolicy | None = None) -> list[str]:
    """Return the identifiers of every rule ``user`` violates, in field order.

    A blank or unset field reports only ``not_blank``; size and format rules
    are checked on non-blank values. An empty list means the user is valid.
    """
    policy = policy or get_config().validation
    violations: list[str] = []

    for field in ("first_name", "last_name"):
        value = getattr(user, field)
        if _is_blank(value):
            violations.append(f"{field}.{NOT_BLANK}")
        elif len(value) < policy.name_min_length:
            violations.append(f"{field}.{SIZE}")

    if _is_blank(user.email):
        violations.append(f"email.{NOT_BLANK}")
    elif not re.match(policy.email_pattern, user.email):
        violations.append(f"email.{FORMAT}")

    if _is_blank(user.username):
        violations.append(f"username.{NOT_BLANK}")

    if _is_blank(user.password):
        violations.append(f"password.{NOT_BLANK}")
    elif len(user.password) < policy.password_min_length:
        violations.append(f"password.{SIZE}")

    if policy.require_password_confirmation and user.password != user.confirm_password:
        violations.append(f"confirm_password.{MATCH}")

    if violations:
        logger.debug("User {} violates {}", user.username, violations)
    return violations


def ensure_valid(user: User, policy: ValidationPolicy | None = None) -> User:
    """Return ``user`` unchanged, or raise UserValidationError listing its violations."""
    violations = validate_user(user, policy)
    if violations:
        raise UserValidationError(violations)
    return user
