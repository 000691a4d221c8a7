"""Shared logging and text helpers."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

_LEVEL_PREFIXES = {
    logging.DEBUG: "\033[95m◆\033[0m ",
    logging.INFO: "\033[94;1mi\033[0m ",
    logging.WARNING: "○ ",
    logging.ERROR: "\033[31m✘\033[0m ",
}

_LOGGER_NAME = "unclog"
_LOGGER = logging.getLogger(_LOGGER_NAME)

console = Console(stderr=True)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Configure the shared logger used across the CLI."""
    level = logging.DEBUG if debug else logging.INFO
    _LOGGER.setLevel(level)
    while _LOGGER.handlers:
        handler = _LOGGER.handlers.pop()
        handler.close()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    _LOGGER.addHandler(handler)
    _LOGGER.propagate = False
    return _LOGGER


def _log(level: int, message: str) -> None:
    prefix = _LEVEL_PREFIXES[level]
    for line in message.splitlines() or [""]:
        _LOGGER.log(level, f"{prefix}{line}" if line else prefix.rstrip())


def log_info(message: str) -> None:
    """Log an informational message with the standardized prefix."""
    _log(logging.INFO, message)


def log_error(message: str) -> None:
    """Log an error message with the standardized prefix."""
    _log(logging.ERROR, message)


def log_warning(message: str) -> None:
    """Log a warning message with the standardized prefix."""
    _log(logging.WARNING, message)


def log_debug(message: str) -> None:
    """Log a debug message with the standardized prefix."""
    _log(logging.DEBUG, message)


def emit_output(content: str, *, newline: bool = True) -> None:
    """Emit raw command output to stdout for machine consumption."""
    click.echo(content, nl=newline, err=False)


def trim_newlines(text: str) -> str:
    """Strip leading and trailing newlines, keeping any other whitespace."""
    return text.strip("\r\n")
