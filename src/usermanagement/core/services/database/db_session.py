"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.usermanagement.runtime.config.config_data import DatabaseConfig
from src.usermanagement.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the database engine for the given or configured database."""
        db_config = db_config or get_config().database

        engine_kwargs = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }
        if db_config.is_memory:
            # One shared connection, otherwise each session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        elif not db_config.is_sqlite:
            engine_kwargs["pool_pre_ping"] = True
            engine_kwargs["pool_timeout"] = db_config.pool_timeout

        logger.info("Initializing database engine for {}", db_config.url)
        self._engine = create_engine(db_config.url, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        if db_config.is_sqlite:
            return {"check_same_thread": False, "timeout": 20}
        return {}

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False
