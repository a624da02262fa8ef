"""User management CLI commands."""

import typer
from rich.table import Table

from src.usermanagement.core.services.user.user_checks import full_name
from src.usermanagement.entities.core.user.entity import User

from .utils import console, service_scope

users_app = typer.Typer(help="Manage users")


def _format_time(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else ""


@users_app.command("add")
def add_user(
    username: str = typer.Argument(..., help="Username for the new user"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password"
    ),
    confirm_password: str = typer.Option(
        ...,
        "--confirm-password",
        prompt="Confirm password",
        hide_input=True,
        help="Password confirmation",
    ),
    first_name: str = typer.Option(..., "--first-name", "-f", help="First name"),
    last_name: str = typer.Option(..., "--last-name", "-l", help="Last name"),
) -> None:
    """Register a new user."""
    user = User(
        username=username,
        email=email,
        password=password,
        confirm_password=confirm_password,
        first_name=first_name,
        last_name=last_name,
    )
    with service_scope() as service:
        created = service.register_user(user)
    console.print(
        f"[green]✅ Successfully created user '{created.username}' (id={created.id})[/green]"
    )


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    with service_scope() as service:
        users = service.list_users()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Name", style="magenta")
    table.add_column("Email", style="blue")
    table.add_column("Roles", style="yellow")

    for user in users:
        table.add_row(
            str(user.id),
            user.username or "",
            full_name(user),
            user.email or "",
            ", ".join(sorted(role.name for role in user.roles)),
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("show")
def show_user(
    username: str = typer.Argument(..., help="Username to show"),
) -> None:
    """Show one user's details."""
    with service_scope() as service:
        user = service.get_user(username)

    if user is None:
        console.print(f"[red]❌ User '{username}' not found[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold]{user.username}[/bold] (id={user.id})")
    console.print(f"  Name:     {full_name(user)}")
    console.print(f"  Email:    {user.email or ''}")
    console.print(f"  Roles:    {', '.join(sorted(role.name for role in user.roles))}")
    console.print(f"  Created:  {_format_time(user.created_on)}")
    console.print(f"  Modified: {_format_time(user.last_modified_on)}")


@users_app.command("grant")
def grant_role(
    username: str = typer.Argument(..., help="Username receiving the role"),
    role: str = typer.Argument(..., help="Name of an existing role"),
) -> None:
    """Assign an existing role to a user."""
    with service_scope() as service:
        service.assign_role(username, role)
    console.print(f"[green]✅ Granted '{role}' to '{username}'[/green]")
