"""
Root-level CLI plumbing: logging, environment loading and --version.
"""

import typer
from dotenv import find_dotenv, load_dotenv

from biapi import __version__


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from biapi.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING")


def load_environment():
    """Load BIAPI_* variables from a .env file in the working directory.

    Variables already present in the environment are left untouched.
    """
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)

        from biapi.logger import get_logger

        get_logger(__name__).debug(f"Loaded environment from {env_file}")


def version_callback(value: bool):
    if value:
        typer.echo(f"biapi {__version__}")
        raise typer.Exit()
