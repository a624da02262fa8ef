"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from src.usermanagement.core.services.database.db_session import DbSessionService
from src.usermanagement.core.services.user.user_management import UserManagementService
from src.usermanagement.core.services.validation.user_validation import (
    UserValidationError,
)

# Initialize Rich console for colored output
console = Console()


def get_db_service() -> DbSessionService:
    """Database service for the currently configured database."""
    return DbSessionService()


@contextmanager
def service_scope() -> Iterator[UserManagementService]:
    """Yield a user management service, turning service errors into exit code 1."""
    db_service = get_db_service()
    session = db_service.get_session()
    try:
        yield UserManagementService(session)
    except UserValidationError as e:
        console.print("[red]❌ Validation failed:[/red]")
        for violation in e.violations:
            console.print(f"[red]  - {violation}[/red]")
        raise typer.Exit(code=1) from e
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        session.close()
