"""Role database table model."""

from sqlalchemy import Column, String
from sqlmodel import Field

from src.usermanagement.entities.core._base import EntityTable


class RoleTable(EntityTable, table=True):
    """Database persistence model for roles.

    This represents how the Role entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    name: str = Field(sa_column=Column(String(64), nullable=False, unique=True))
