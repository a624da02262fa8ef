"""User domain entity."""

from datetime import datetime
from typing import Any

from pydantic import Field

from src.usermanagement.entities.core._base import Entity
from src.usermanagement.entities.core.role.entity import Role


class User(Entity):
    """User entity representing an account in the system.

    A freshly constructed user has every field unset. Keyword construction
    is type-checked like any pydantic model, but attribute assignment is not:
    a field stores whatever object is assigned, including None. Format and
    length rules are checked by the validation service, never by the entity.
    Hashing requires every field value to be hashable.
    """

    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")
    username: str | None = Field(default=None, description="Login name")
    password: str | None = Field(default=None, repr=False, description="Password")
    confirm_password: str | None = Field(
        default=None, repr=False, description="Password confirmation as entered"
    )
    roles: set[Role] = Field(default_factory=set, description="Assigned roles")
    created_on: datetime | None = Field(default=None, description="Creation time")
    last_modified_on: datetime | None = Field(
        default=None, description="Last modification time"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare users by every field, timestamps and roles included."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.username == other.username
            and self.password == other.password
            and self.confirm_password == other.confirm_password
            and self.roles == other.roles
            and self.created_on == other.created_on
            and self.last_modified_on == other.last_modified_on
        )

    def __hash__(self) -> int:
        """Hash over every field in the same order as equality."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.email,
            self.username,
            self.password,
            self.confirm_password,
            frozenset(self.roles) if self.roles is not None else None,
            self.created_on,
            self.last_modified_on,
        ))
