from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with an externally assigned integer identifier.

    Entities are plain mutable records: assignment is not validated, so any
    field may hold any value (including None) until a validation
    collaborator inspects it.
    """

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the caller or the persistence layer",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier for the stored entity",
    )
