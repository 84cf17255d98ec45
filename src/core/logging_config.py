"""Logging setup for the CLI.

Diagnostics go through stdlib loggers under the `hostm` namespace and are
rendered by Rich on stdout. Without `--verbose` only warnings surface.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hostm"


def configure_logging(verbose: bool, *, console: Console | None = None) -> logging.Logger:
    """Attach a single RichHandler to the `hostm` logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("[verbose] %(message)s"))
    logger.addHandler(handler)
    return logger
