"""
CLI subcommands for bank transfers.

Creating and executing a transfer are two separate commands; each one
issues a single request and succeeds or fails on its own.

Usage:
    biapi transfers list [--limit N] [--offset N]
    biapi transfers get <id>
    biapi transfers create --account ID --recipient ID --amount X --label TEXT [--exec-date D]
    biapi transfers execute <id> [--password PWD]
    biapi transfers cancel <id>
"""

from typing import Optional

import typer

from biapi.api import http_delete, http_get, http_post, http_put
from biapi.cli._common import command_errors, count_items, format_option, report
from biapi.formatting import format_output

transfers_app = typer.Typer(help="Manage bank transfers")


@transfers_app.command("list")
def transfers_list(
    limit: int = typer.Option(50, "--limit", help="Limit number of results"),
    offset: int = typer.Option(0, "--offset", help="Offset for pagination"),
    output_format: str = format_option(),
):
    """List all transfers."""
    with command_errors("Failed to fetch transfers"):
        data = http_get("/users/me/transfers", {"limit": limit, "offset": offset})
    report(f"Retrieved {count_items(data, 'transfers')} transfers")
    typer.echo(format_output(data, output_format))


@transfers_app.command("get")
def transfers_get(
    transfer_id: str = typer.Argument(..., metavar="ID", help="Transfer ID"),
    output_format: str = format_option(),
):
    """Get details of a specific transfer."""
    with command_errors("Failed to fetch transfer"):
        data = http_get(f"/users/me/transfers/{transfer_id}")
    report("Transfer details retrieved")
    typer.echo(format_output(data, output_format))


@transfers_app.command("create")
def transfers_create(
    account: str = typer.Option(..., "--account", help="Source account ID"),
    recipient: str = typer.Option(..., "--recipient", help="Recipient ID"),
    amount: float = typer.Option(..., "--amount", help="Transfer amount"),
    label: str = typer.Option(..., "--label", help="Transfer label"),
    exec_date: Optional[str] = typer.Option(
        None, "--exec-date", help="Execution date (YYYY-MM-DD)"
    ),
    output_format: str = format_option(),
):
    """Create a new (pending) transfer."""
    payload = {"amount": amount, "label": label}
    if exec_date:
        payload["exec_date"] = exec_date

    with command_errors("Failed to create transfer"):
        result = http_post(
            f"/users/me/accounts/{account}/recipients/{recipient}/transfers", payload
        )
    report("Transfer created")
    typer.echo(format_output(result, output_format))


@transfers_app.command("execute")
def transfers_execute(
    transfer_id: str = typer.Argument(..., metavar="ID", help="Transfer ID"),
    password: Optional[str] = typer.Option(
        None, "--password", help="Bank password (if required)"
    ),
    output_format: str = format_option(),
):
    """Execute a pending transfer."""
    payload = {"validated": True}
    if password:
        payload["password"] = password

    with command_errors("Failed to execute transfer"):
        result = http_put(f"/users/me/transfers/{transfer_id}", payload)
    report("Transfer executed")
    typer.echo(format_output(result, output_format))


@transfers_app.command("cancel")
def transfers_cancel(
    transfer_id: str = typer.Argument(..., metavar="ID", help="Transfer ID"),
):
    """Cancel a transfer."""
    with command_errors("Failed to cancel transfer"):
        http_delete(f"/users/me/transfers/{transfer_id}")
    report("Transfer canceled")
