"""
CLI subcommands for issuing and revoking authentication tokens.

Usage:
    biapi auth init
    biapi auth jwt [--user-id ID] [--expire true|false] [--scope SCOPE]
    biapi auth revoke
"""

from typing import Optional

import typer

from biapi.api import http_delete, http_post
from biapi.cli._common import command_errors, format_option, parse_bool, report
from biapi.credentials import get_client_credentials
from biapi.errors import ConfigurationError
from biapi.formatting import format_output

auth_app = typer.Typer(help="Manage authentication tokens")


@auth_app.command("init")
def auth_init(
    output_format: str = format_option(),
):
    """Create a new temporary token (anonymous user)."""
    with command_errors("Failed to create token"):
        creds = get_client_credentials()
        payload = {}
        if creds["clientId"] and creds["clientSecret"]:
            payload["client_id"] = creds["clientId"]
            payload["client_secret"] = creds["clientSecret"]

        result = http_post("/auth/init", payload)

    report("Temporary token created")
    typer.echo(format_output(result, output_format))
    if isinstance(result, dict) and result.get("expires_in") is not None:
        typer.echo(f"\nToken expires in: {result['expires_in']} seconds")


@auth_app.command("jwt")
def auth_jwt(
    user_id: Optional[int] = typer.Option(None, "--user-id", help="User ID for the token"),
    expire: str = typer.Option(
        "true", "--expire", help="Whether token should expire (true/false)"
    ),
    scope: Optional[str] = typer.Option(None, "--scope", help="Scope for the token"),
    output_format: str = format_option(),
):
    """Generate a JWT token (requires client credentials)."""
    with command_errors("Failed to generate JWT"):
        creds = get_client_credentials()
        if not creds["clientId"] or not creds["clientSecret"]:
            raise ConfigurationError(
                "Client credentials required. Set clientId and clientSecret "
                "(or BIAPI_CLIENT_ID and BIAPI_CLIENT_SECRET)"
            )

        payload = {
            "client_id": creds["clientId"],
            "client_secret": creds["clientSecret"],
            "expire": parse_bool(expire),
        }
        if user_id is not None:
            payload["id_user"] = user_id
        if scope:
            payload["scope"] = scope

        result = http_post("/auth/jwt", payload)

    report("JWT token generated")
    typer.echo(format_output(result, output_format))


@auth_app.command("revoke")
def auth_revoke():
    """Revoke the current token."""
    with command_errors("Failed to revoke token"):
        http_delete("/auth/token")
    report("Token revoked")
