"""Schema management for the application database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.usermanagement.entities.core.role import RoleTable  # noqa: F401
        from src.usermanagement.entities.core.user import UserRoleLink, UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        from src.usermanagement.entities.core.role import RoleTable  # noqa: F401
        from src.usermanagement.entities.core.user import UserRoleLink, UserTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all database tables.")
