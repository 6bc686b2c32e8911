"""Logging setup shared by the engine modules and the CLI."""

from __future__ import annotations

import logging
import os
from typing import Optional, TextIO, Union

LOG_LEVEL_ENV = "WORDSEARCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name such as ``"debug"`` into its number; unknown names mean INFO."""

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None, stream: Optional[TextIO] = None) -> None:
    """Route all ``wordsearch`` loggers to one handler.

    Placement attempts log at DEBUG and per-puzzle summaries at INFO. When no
    level is given, ``WORDSEARCH_LOG_LEVEL`` is consulted.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
