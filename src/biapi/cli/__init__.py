"""
biapi CLI - Budgea API client.

This package splits CLI commands into focused modules:
- config:       list, get, set, delete, clear, path
- auth:         init, jwt, revoke
- users:        me, list, delete
- banks:        list, get, search
- connections:  list, get, create, update, delete, sync
- accounts:     list, get, update, delete
- transactions: list, get, update, delete
- transfers:    list, get, create, execute, cancel
"""

import typer

from biapi.cli.accounts import accounts_app
from biapi.cli.auth import auth_app
from biapi.cli.banks import banks_app
from biapi.cli.config import config_app
from biapi.cli.connections import connections_app
from biapi.cli.main import configure_logging, load_environment, version_callback
from biapi.cli.transactions import transactions_app
from biapi.cli.transfers import transfers_app
from biapi.cli.users import users_app

app = typer.Typer(
    help="Budgea API CLI - Banking aggregation and financial data",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    Budgea API CLI - Banking aggregation and financial data.

    Configure a token first: biapi config set accessToken <your-token>
    """
    configure_logging(verbose)
    load_environment()


# Attach subcommand groups
app.add_typer(config_app, name="config")
app.add_typer(auth_app, name="auth")
app.add_typer(users_app, name="users")
app.add_typer(banks_app, name="banks")
app.add_typer(connections_app, name="connections")
app.add_typer(accounts_app, name="accounts")
app.add_typer(transactions_app, name="transactions")
app.add_typer(transfers_app, name="transfers")

if __name__ == "__main__":
    app()
