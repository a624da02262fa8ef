"""Role domain entity."""

from typing import Any

from pydantic import Field

from src.usermanagement.entities.core._base import Entity


class Role(Entity):
    """Role entity representing a named permission group.

    Roles are shared references: a role holds no back-reference to the
    users it is assigned to.
    """

    name: str | None = Field(
        default=None, description="Role tag, conventionally upper snake case"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare roles by every field."""
        if not isinstance(other, Role):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        """Hash over every field, consistent with equality."""
        return hash((
            self.id,
            self.name,
        ))
