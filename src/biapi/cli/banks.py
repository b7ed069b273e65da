"""
CLI subcommands for listing and querying banks (connectors).

Usage:
    biapi banks list [--limit N] [--offset N] [--expand RESOURCES]
    biapi banks get <id> [--expand RESOURCES]
    biapi banks search <query> [--limit N]
"""

from typing import Optional

import typer

from biapi.api import http_get
from biapi.cli._common import (
    command_errors,
    count_items,
    expand_option,
    format_option,
    report,
)
from biapi.formatting import format_output

banks_app = typer.Typer(help="List and query available banks")


@banks_app.command("list")
def banks_list(
    limit: int = typer.Option(50, "--limit", help="Limit number of results"),
    offset: int = typer.Option(0, "--offset", help="Offset for pagination"),
    expand: Optional[str] = expand_option("fields", example="fields"),
    output_format: str = format_option(),
):
    """List all available banks."""
    with command_errors("Failed to fetch banks"):
        data = http_get("/banks", {"limit": limit, "offset": offset, "expand": expand})
    report(f"Retrieved {count_items(data, 'banks')} banks")
    typer.echo(format_output(data, output_format))


@banks_app.command("get")
def banks_get(
    bank_id: str = typer.Argument(..., metavar="ID", help="Bank ID"),
    expand: Optional[str] = expand_option("fields", example="fields"),
    output_format: str = format_option(),
):
    """Get details of a specific bank."""
    with command_errors("Failed to fetch bank details"):
        data = http_get(f"/banks/{bank_id}", {"expand": expand})
    report("Bank details retrieved")
    typer.echo(format_output(data, output_format))


@banks_app.command("search")
def banks_search(
    query: str = typer.Argument(..., help="Bank name to search for"),
    limit: int = typer.Option(20, "--limit", help="Limit number of results"),
    output_format: str = format_option(),
):
    """Search banks by name."""
    with command_errors("Failed to search banks"):
        data = http_get("/banks", {"search": query, "limit": limit})
    report(f"Found {count_items(data, 'banks')} banks")
    typer.echo(format_output(data, output_format))
