"""User database table model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, Relationship, SQLModel

from src.usermanagement.entities.core._base import EntityTable
from src.usermanagement.entities.core.role.table import RoleTable


class UserRoleLink(SQLModel, table=True):
    """Association table for the user/role many-to-many relationship."""

    user_id: int | None = Field(
        default=None, foreign_key="usertable.id", primary_key=True
    )
    role_id: int | None = Field(
        default=None, foreign_key="roletable.id", primary_key=True
    )


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    The password confirmation is request data only and has no column.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    username: str | None = Field(
        default=None, sa_column=Column(String(255), unique=True, index=True)
    )
    password: str | None = None
    # Timestamps are naive local times; the column must not coerce them to UTC.
    created_on: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=False))
    )
    last_modified_on: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=False))
    )

    roles: list[RoleTable] = Relationship(link_model=UserRoleLink)
