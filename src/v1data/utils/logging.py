"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys
from typing import Union

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"
ROOT_LOGGER = "v1data"


def resolve_level(level: Union[int, str]) -> int:
    """Translate ``"debug"``/``"INFO"``/``10`` style levels into an int."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def get_logger(
    name: str = ROOT_LOGGER,
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Return ``name``'s logger with a single stderr handler attached.

    Repeated calls only adjust the level; the handler is added once.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger
