"""
CLI subcommands for managing local settings.

Usage:
    biapi config list
    biapi config get <key>
    biapi config set <key> <value>
    biapi config delete <key>
    biapi config clear
    biapi config path
"""

import json

import typer

from biapi.cli._common import command_errors
from biapi.credentials import validate_token_format
from biapi.settings import get_store

config_app = typer.Typer(help="Manage CLI configuration")

SENSITIVE_KEYS = ("accessToken", "clientSecret")
MASK_VISIBLE_CHARS = 10


def mask_settings(settings: dict) -> dict:
    """Copy of the settings with secrets truncated for display."""
    masked = dict(settings)
    for key in SENSITIVE_KEYS:
        value = masked.get(key)
        if value:
            masked[key] = str(value)[:MASK_VISIBLE_CHARS] + "***"
    return masked


@config_app.command("list")
def config_list():
    """List all configuration values."""
    with command_errors("Failed to read configuration"):
        settings = get_store().get_all()
    typer.echo("Current configuration:")
    typer.echo(json.dumps(mask_settings(settings), indent=2))


@config_app.command("get")
def config_get(
    key: str = typer.Argument(help="Configuration key to read"),
):
    """Read a configuration value."""
    with command_errors("Failed to read configuration"):
        value = get_store().get_all().get(key)
    if value is None:
        typer.echo(f'Key "{key}" not found')
    else:
        typer.echo(str(value))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Configuration key to set"),
    value: str = typer.Argument(help="Value to set"),
):
    """Set a configuration value."""
    if key == "accessToken" and not validate_token_format(value):
        typer.echo("⚠️  This does not look like an API token (too short).", err=True)

    with command_errors("Failed to save configuration"):
        get_store().set(key, value)
    typer.echo(f"✅ Set {key} = {value[:20]}...")


@config_app.command("delete")
def config_delete(
    key: str = typer.Argument(help="Configuration key to delete"),
):
    """Delete a configuration value."""
    with command_errors("Failed to save configuration"):
        get_store().delete(key)
    typer.echo(f"✅ Deleted {key}")


@config_app.command("clear")
def config_clear():
    """Reset all configuration to defaults."""
    with command_errors("Failed to save configuration"):
        get_store().clear()
    typer.echo("✅ Configuration cleared")


@config_app.command("path")
def config_path():
    """Show where the configuration file is stored."""
    with command_errors("Failed to read configuration"):
        typer.echo(str(get_store().path))
