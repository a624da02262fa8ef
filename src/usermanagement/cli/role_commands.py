"""Role management CLI commands."""

import typer
from rich.table import Table

from .utils import console, service_scope

roles_app = typer.Typer(help="Manage roles")


@roles_app.command("add")
def add_role(
    name: str = typer.Argument(..., help="Role name, e.g. ROLE_USER"),
) -> None:
    """Create a new role."""
    with service_scope() as service:
        role = service.create_role(name)
    console.print(f"[green]✅ Created role '{role.name}' (id={role.id})[/green]")


@roles_app.command("list")
def list_roles() -> None:
    """List all roles."""
    with service_scope() as service:
        roles = service.list_roles()

    if not roles:
        console.print("[yellow]No roles found[/yellow]")
        return

    table = Table(title="Roles")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    for role in roles:
        table.add_row(str(role.id), role.name)

    console.print(table)
    console.print(f"\n[green]Found {len(roles)} roles[/green]")
