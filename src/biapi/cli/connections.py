"""
CLI subcommands for bank connections (stored credentials to a bank).

Usage:
    biapi connections list [--expand RESOURCES]
    biapi connections get <id> [--expand RESOURCES]
    biapi connections create --file connection.json
    biapi connections update <id> --file update.json
    biapi connections delete <id>
    biapi connections sync <id>
"""

from pathlib import Path
from typing import Optional

import typer

from biapi.api import http_delete, http_get, http_post, http_put
from biapi.cli._common import (
    command_errors,
    count_items,
    expand_option,
    format_option,
    read_json_file,
    report,
)
from biapi.formatting import format_output

connections_app = typer.Typer(help="Manage bank connections")


@connections_app.command("list")
def connections_list(
    expand: Optional[str] = expand_option("accounts"),
    output_format: str = format_option(),
):
    """List all connections."""
    with command_errors("Failed to fetch connections"):
        data = http_get("/users/me/connections", {"expand": expand})
    report(f"Retrieved {count_items(data, 'connections')} connections")
    typer.echo(format_output(data, output_format))


@connections_app.command("get")
def connections_get(
    connection_id: str = typer.Argument(..., metavar="ID", help="Connection ID"),
    expand: Optional[str] = expand_option(),
    output_format: str = format_option(),
):
    """Get details of a specific connection."""
    with command_errors("Failed to fetch connection"):
        data = http_get(f"/users/me/connections/{connection_id}", {"expand": expand})
    report("Connection details retrieved")
    typer.echo(format_output(data, output_format))


@connections_app.command("create")
def connections_create(
    file: Path = typer.Option(..., "--file", "-f", help="JSON file with connection data"),
    output_format: str = format_option(),
):
    """Create a new bank connection from a JSON file."""
    with command_errors("Failed to create connection"):
        payload = read_json_file(file)
        result = http_post("/users/me/connections", payload)
    report("Connection created")
    typer.echo(format_output(result, output_format))


@connections_app.command("update")
def connections_update(
    connection_id: str = typer.Argument(..., metavar="ID", help="Connection ID"),
    file: Path = typer.Option(..., "--file", "-f", help="JSON file with update data"),
    output_format: str = format_option(),
):
    """Update a connection from a JSON file."""
    with command_errors("Failed to update connection"):
        payload = read_json_file(file)
        result = http_post(f"/users/me/connections/{connection_id}", payload)
    report("Connection updated")
    typer.echo(format_output(result, output_format))


@connections_app.command("delete")
def connections_delete(
    connection_id: str = typer.Argument(..., metavar="ID", help="Connection ID"),
):
    """Delete a connection."""
    with command_errors("Failed to delete connection"):
        http_delete(f"/users/me/connections/{connection_id}")
    report("Connection deleted")


@connections_app.command("sync")
def connections_sync(
    connection_id: str = typer.Argument(..., metavar="ID", help="Connection ID"),
):
    """Trigger synchronization for a connection."""
    with command_errors("Failed to sync connection"):
        result = http_put(f"/users/me/connections/{connection_id}", {})
    report("Connection sync triggered")
    typer.echo(format_output(result, "json"))
