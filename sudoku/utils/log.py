# -*- coding: utf-8 -*-
"""Logging helpers."""
import logging
import os
import sys
from typing import Optional

from sudoku.common.constants import LOG_LEVEL_ENV_VAR

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_DEFAULT_LOGGER_NAME = "sudoku"


class NewLineFormatter(logging.Formatter):
    """Adds logging prefix to newlines to align multi-line messages."""

    def __init__(self, fmt, datefmt=None):
        logging.Formatter.__init__(self, fmt, datefmt)

    def format(self, record):
        msg = logging.Formatter.format(self, record)
        if record.message != "":
            parts = msg.split(record.message)
            msg = msg.replace("\n", "\r\n" + parts[0])
        return msg


def package_handlers(logger: logging.Logger) -> list:
    """The stream handlers `get_logger` installed, ignoring any added by others."""
    return [
        handler
        for handler in logger.handlers
        if type(handler) is logging.StreamHandler
        and isinstance(handler.formatter, NewLineFormatter)
    ]


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package logger, which owns the only stream handler.

    Args:
        name (`Optional[str]`): The logger name. Names outside the package are
            nested under it. Defaults to the package logger.
        level (`Optional[str]`): Sets the package log level. If the package logger
            is not configured yet, the level is read from the `SUDOKU_LOG_LEVEL`
            environment variable, falling back to INFO.

    Returns:
        `logging.Logger`: The logger.
    """
    root = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if not package_handlers(root):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(NewLineFormatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(_resolve_level(level))
    elif level is not None:
        root.setLevel(_resolve_level(level))

    if name is None or name == _DEFAULT_LOGGER_NAME:
        return root
    if not name.startswith(_DEFAULT_LOGGER_NAME + "."):
        name = f"{_DEFAULT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
