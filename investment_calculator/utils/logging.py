"""Rich logging helpers shared by the API and the engine."""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.logging import RichHandler


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Configure the root logger with a Rich handler.

    Calling it again only adjusts the level; handlers are installed once.
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"unknown log level: {level!r}")
    else:
        numeric_level = level

    root = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        logging.basicConfig(
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, markup=False)],
        )
    root.setLevel(numeric_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger, ensuring setup has been applied."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger"]
