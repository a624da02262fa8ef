"""Derived values and checks over a user's fields.

These are plain functions rather than entity methods so the entity stays a
pure record. None of them raise on unset fields.
"""

from src.usermanagement.entities.core.user.entity import User


def full_name(user: User) -> str:
    """First and last name joined by a space; unset parts are skipped."""
    parts = [part for part in (user.first_name, user.last_name) if part]
    return " ".join(parts)


def passwords_match(user: User) -> bool:
    return user.password is not None and user.password == user.confirm_password


def has_valid_email(user: User) -> bool:
    """True when the email contains ``@`` with a ``.`` somewhere after it."""
    email = user.email
    if not email or "@" not in email:
        return False
    return "." in email.split("@", 1)[1]


def is_modified_after_creation(user: User) -> bool:
    if user.created_on is None or user.last_modified_on is None:
        return False
    return user.last_modified_on > user.created_on
