"""Unit tests for logging setup and the database services."""

import sys
from pathlib import Path

import pytest
from loguru import logger
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from src.usermanagement.core.services.database import DbManageService, DbSessionService
from src.usermanagement.entities.core.role import RoleTable
from src.usermanagement.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)
from src.usermanagement.runtime.context import with_context
from src.usermanagement.runtime.log_setup import configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConfigureLogging:
    def test_stderr_sink_only(self, restore_logger):
        sink_ids = configure_logging(LoggingConfig(level="debug"))

        assert len(sink_ids) == 1

    def test_file_sink(self, tmp_path: Path, restore_logger):
        log_file = tmp_path / "app.log"
        sink_ids = configure_logging(
            LoggingConfig(level="INFO", format="json", file=str(log_file))
        )
        logger.info("written to file")
        logger.complete()

        assert len(sink_ids) == 2
        assert "written to file" in log_file.read_text()


class TestDbSessionService:
    @pytest.fixture
    def db_service(self) -> DbSessionService:
        return DbSessionService(DatabaseConfig(url="sqlite://"))

    def test_health_check(self, db_service: DbSessionService):
        assert db_service.health_check() is True

    def test_session_scope_commits(self, db_service: DbSessionService):
        DbManageService(db_service.engine).create_all()

        with db_service.session_scope() as session:
            session.add(RoleTable(name="ROLE_USER"))

        with db_service.session_scope() as session:
            names = [row.name for row in session.exec(select(RoleTable)).all()]
        assert names == ["ROLE_USER"]

    def test_session_scope_rolls_back(self, db_service: DbSessionService):
        DbManageService(db_service.engine).create_all()

        with pytest.raises(RuntimeError):
            with db_service.session_scope() as session:
                session.add(RoleTable(name="ROLE_USER"))
                session.flush()
                raise RuntimeError("boom")

        with db_service.session_scope() as session:
            assert session.exec(select(RoleTable)).all() == []

    def test_drop_all(self, db_service: DbSessionService):
        manager = DbManageService(db_service.engine)
        manager.create_all()
        manager.drop_all()

        with pytest.raises(OperationalError):
            with db_service.session_scope() as session:
                session.exec(select(RoleTable)).all()

    def test_uses_configured_database(self, tmp_path: Path):
        url = f"sqlite:///{tmp_path / 'configured.db'}"

        with with_context(ConfigData(database=DatabaseConfig(url=url))):
            db_service = DbSessionService()

        assert str(db_service.engine.url) == url
