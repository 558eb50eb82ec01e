"""
Logging setup for CLI commands.
"""
import logging

from rich.logging import RichHandler

from lifelog.core.config import settings
from lifelog.core.logging_config import LOGGER_NAME, setup_logging


def setup_cli_logging(command: str, verbose: bool = False) -> logging.Logger:
    """Route lifelog logs through rich and return a logger for the command."""
    level = "DEBUG" if verbose else settings.log_level
    handler = RichHandler(rich_tracebacks=verbose, show_path=False)
    setup_logging(level, handler=handler)
    return logging.getLogger(f"{LOGGER_NAME}.cli.{command}")
