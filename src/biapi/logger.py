"""
Logging setup built on loguru.

Modules obtain a bound logger with ``get_logger(__name__)``; the CLI
entry point calls ``setup_logging`` once per invocation.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "WARNING") -> None:
    """Route all log records to stderr at the given level."""
    logger.remove()
    logger.configure(extra={"name": "biapi"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=None)


def get_logger(name: str):
    """Return a logger bound to the given module name."""
    return logger.bind(name=name)
