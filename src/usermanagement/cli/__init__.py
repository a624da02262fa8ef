"""Main CLI application module."""

import typer

from src.usermanagement.runtime.context import get_config
from src.usermanagement.runtime.init_db import init_db as create_tables
from src.usermanagement.runtime.log_setup import configure_logging

from .role_commands import roles_app
from .user_commands import users_app
from .utils import console

app = typer.Typer(
    help="👥 User management CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(users_app, name="users")
app.add_typer(roles_app, name="roles")


@app.command("init-db")
def init_db() -> None:
    """Create all database tables."""
    create_tables()
    console.print("[green]✅ Database initialized[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    configure_logging(get_config().logging)
    app()


if __name__ == "__main__":
    main()
