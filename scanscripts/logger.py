"""
Logging setup for scanscripts.

Modules log through ``logging.getLogger(__name__)``; diagnostics such as
skipped script headers, rendered commands and tag mismatches are emitted at
DEBUG and only show up when the CLI runs with ``--debug``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Route the ``scanscripts`` loggers to stderr through Rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True
    )

    logger = logging.getLogger("scanscripts")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
