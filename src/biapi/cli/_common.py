"""
Shared helpers for CLI commands: the error boundary, status lines and
flag parsing.
"""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import typer

from biapi.errors import BiapiError, InputError
from biapi.logger import get_logger

logger = get_logger(__name__)


def format_option():
    return typer.Option("pretty", "--format", help="Output format (json, pretty)")


def expand_option(default: Optional[str] = None, example: str = "accounts"):
    return typer.Option(
        default, "--expand", help=f"Expand related resources (e.g., {example})"
    )


@contextmanager
def command_errors(failure: str):
    """Report any biapi error as a single stderr line and exit with status 1."""
    try:
        yield
    except BiapiError as e:
        logger.debug(f"{failure} ({e.kind} error)")
        typer.echo(f"❌ {failure}: {e}", err=True)
        raise typer.Exit(code=1)


def report(message: str) -> None:
    """Print a success status line to stderr, keeping stdout for data."""
    typer.echo(f"✅ {message}", err=True)


def count_items(data: Any, key: str) -> int:
    """Length of a list field in a response object, 0 if absent."""
    if isinstance(data, dict) and isinstance(data.get(key), list):
        return len(data[key])
    return 0


def parse_bool(value: str) -> bool:
    """Interpret a 'true'/'false' flag value."""
    return value.strip().lower() == "true"


def read_json_file(path: Path) -> Any:
    """Load a JSON document supplied with --file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e.strerror or e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {path}: {e}") from e
