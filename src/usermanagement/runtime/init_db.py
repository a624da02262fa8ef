"""Database initialization script."""

from src.usermanagement.core.services.database.db_manage import DbManageService
from src.usermanagement.core.services.database.db_session import DbSessionService


def init_db() -> None:
    """Create all database tables in the configured database."""
    DbManageService(DbSessionService().engine).create_all()


if __name__ == "__main__":
    init_db()
