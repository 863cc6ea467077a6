"""Logger configuration for forge-yourself.

The library only ever logs to the ``forge_yourself`` logger and ships it
with a ``NullHandler``; applications that want to see request traces call
``setup_logger`` to attach a Rich console handler.
"""

from __future__ import annotations

import logging
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME: Final[str] = "forge_yourself"

logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    level: int = logging.INFO,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a Rich handler to the library logger, replacing previous ones."""

    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True, soft_wrap=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
