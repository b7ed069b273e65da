"""
CLI subcommands for users.

Usage:
    biapi users me [--expand RESOURCES]
    biapi users list [--limit N] [--offset N]
    biapi users delete
"""

from typing import Optional

import typer

from biapi.api import http_delete, http_get
from biapi.cli._common import (
    command_errors,
    count_items,
    expand_option,
    format_option,
    report,
)
from biapi.formatting import format_output

users_app = typer.Typer(help="Manage users")


@users_app.command("me")
def users_me(
    expand: Optional[str] = expand_option(example="connections,accounts"),
    output_format: str = format_option(),
):
    """Get current user information."""
    with command_errors("Failed to fetch user information"):
        data = http_get("/users/me", {"expand": expand})
    report("User information retrieved")
    typer.echo(format_output(data, output_format))


@users_app.command("list")
def users_list(
    limit: int = typer.Option(50, "--limit", help="Limit number of results"),
    offset: int = typer.Option(0, "--offset", help="Offset for pagination"),
    output_format: str = format_option(),
):
    """List all users (admin only)."""
    with command_errors("Failed to fetch users"):
        data = http_get("/users", {"limit": limit, "offset": offset})
    report(f"Retrieved {count_items(data, 'users')} users")
    typer.echo(format_output(data, output_format))


@users_app.command("delete")
def users_delete():
    """Delete the current user."""
    with command_errors("Failed to delete user"):
        http_delete("/users/me")
    report("User deleted")
