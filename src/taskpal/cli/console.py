"""Shared Rich consoles and logging setup for the CLI layer.

Chat output goes to stdout through :data:`console`; log records go to
stderr through a :class:`rich.logging.RichHandler` so they never mix
with task listings.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(highlight=False)
"""Console for everything the bot says."""

LOG_FORMAT: str = "%(message)s"


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a fresh Rich console targeting stdout or stderr."""
    return Console(stderr=stderr, highlight=False)


def configure_logging(*, verbose: bool = False) -> None:
    """Route the ``taskpal`` loggers through Rich on stderr.

    Warnings and errors are always shown; ``verbose`` adds debug output.
    Safe to call more than once.
    """
    logger = logging.getLogger("taskpal")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
