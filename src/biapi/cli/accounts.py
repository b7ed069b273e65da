"""
CLI subcommands for bank accounts.

Usage:
    biapi accounts list [--expand RESOURCES]
    biapi accounts get <id> [--expand RESOURCES]
    biapi accounts update <id> [--name NAME] [--disabled true|false]
    biapi accounts delete <id>
"""

from typing import Optional

import typer

from biapi.api import http_delete, http_get, http_put
from biapi.cli._common import (
    command_errors,
    count_items,
    expand_option,
    format_option,
    parse_bool,
    report,
)
from biapi.formatting import format_output

accounts_app = typer.Typer(help="Manage bank accounts")


@accounts_app.command("list")
def accounts_list(
    expand: Optional[str] = expand_option(example="transactions"),
    output_format: str = format_option(),
):
    """List all accounts."""
    with command_errors("Failed to fetch accounts"):
        data = http_get("/users/me/accounts", {"expand": expand})
    report(f"Retrieved {count_items(data, 'accounts')} accounts")
    typer.echo(format_output(data, output_format))


@accounts_app.command("get")
def accounts_get(
    account_id: str = typer.Argument(..., metavar="ID", help="Account ID"),
    expand: Optional[str] = expand_option(example="transactions"),
    output_format: str = format_option(),
):
    """Get details of a specific account."""
    with command_errors("Failed to fetch account"):
        data = http_get(f"/users/me/accounts/{account_id}", {"expand": expand})
    report("Account details retrieved")
    typer.echo(format_output(data, output_format))


@accounts_app.command("update")
def accounts_update(
    account_id: str = typer.Argument(..., metavar="ID", help="Account ID"),
    name: Optional[str] = typer.Option(None, "--name", help="Custom name for the account"),
    disabled: Optional[str] = typer.Option(
        None, "--disabled", help="Enable/disable account (true/false)"
    ),
    output_format: str = format_option(),
):
    """Update account settings."""
    payload = {}
    if name:
        payload["name"] = name
    if disabled is not None:
        payload["disabled"] = parse_bool(disabled)

    with command_errors("Failed to update account"):
        result = http_put(f"/users/me/accounts/{account_id}", payload)
    report("Account updated")
    typer.echo(format_output(result, output_format))


@accounts_app.command("delete")
def accounts_delete(
    account_id: str = typer.Argument(..., metavar="ID", help="Account ID"),
):
    """Delete an account."""
    with command_errors("Failed to delete account"):
        http_delete(f"/users/me/accounts/{account_id}")
    report("Account deleted")
