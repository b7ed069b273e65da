"""
CLI subcommands for bank transactions.

Usage:
    biapi transactions list [--account ID] [--min-date D] [--max-date D] [--limit N] [--offset N]
    biapi transactions get <id> [--expand RESOURCES]
    biapi transactions update <id> [--comment TEXT] [--category ID]
    biapi transactions delete <id>
"""

from typing import Optional

import typer

from biapi.api import http_delete, http_get, http_put
from biapi.cli._common import (
    command_errors,
    count_items,
    expand_option,
    format_option,
    report,
)
from biapi.formatting import format_output

transactions_app = typer.Typer(help="Manage bank transactions")


@transactions_app.command("list")
def transactions_list(
    account: Optional[str] = typer.Option(None, "--account", help="Filter by account ID"),
    min_date: Optional[str] = typer.Option(None, "--min-date", help="Minimum date (YYYY-MM-DD)"),
    max_date: Optional[str] = typer.Option(None, "--max-date", help="Maximum date (YYYY-MM-DD)"),
    limit: int = typer.Option(100, "--limit", help="Limit number of results"),
    offset: int = typer.Option(0, "--offset", help="Offset for pagination"),
    expand: Optional[str] = expand_option(example="category"),
    output_format: str = format_option(),
):
    """List transactions, optionally for a single account."""
    params = {
        "limit": limit,
        "offset": offset,
        "min_date": min_date or None,
        "max_date": max_date or None,
        "expand": expand or None,
    }
    endpoint = (
        f"/users/me/accounts/{account}/transactions" if account else "/users/me/transactions"
    )

    with command_errors("Failed to fetch transactions"):
        data = http_get(endpoint, params)
    report(f"Retrieved {count_items(data, 'transactions')} transactions")
    typer.echo(format_output(data, output_format))


@transactions_app.command("get")
def transactions_get(
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID"),
    expand: Optional[str] = expand_option(example="category"),
    output_format: str = format_option(),
):
    """Get details of a specific transaction."""
    with command_errors("Failed to fetch transaction"):
        data = http_get(f"/users/me/transactions/{transaction_id}", {"expand": expand})
    report("Transaction details retrieved")
    typer.echo(format_output(data, output_format))


@transactions_app.command("update")
def transactions_update(
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID"),
    comment: Optional[str] = typer.Option(None, "--comment", help="Add/update comment"),
    category: Optional[int] = typer.Option(None, "--category", help="Set category ID"),
    output_format: str = format_option(),
):
    """Update a transaction's comment or category."""
    payload = {}
    if comment is not None:
        payload["comment"] = comment
    if category is not None:
        payload["id_category"] = category

    with command_errors("Failed to update transaction"):
        result = http_put(f"/users/me/transactions/{transaction_id}", payload)
    report("Transaction updated")
    typer.echo(format_output(result, output_format))


@transactions_app.command("delete")
def transactions_delete(
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID"),
):
    """Delete a transaction."""
    with command_errors("Failed to delete transaction"):
        http_delete(f"/users/me/transactions/{transaction_id}")
    report("Transaction deleted")
