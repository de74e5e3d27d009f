# File: src/mstair/stringify/xlogging/logger_factory.py
"""
Logger factory for creating and configuring package loggers.

Loggers created here never own handlers; they propagate to the root logger.
Their level is resolved from environment variables through LogLevelConfig.
`initialize_root()` is the only supported entry point for attaching the
colored stderr handler.
"""

import logging
import sys
from typing import TextIO

from mstair.stringify.xlogging.logger_constants import (
    DEFAULT_LOG_FORMAT,
    initialize_logger_constants,
)
from mstair.stringify.xlogging.logger_formatter import ColorFormatter
from mstair.stringify.xlogging.logger_util import LogLevelConfig


_LOG_ROOT_ATTR_NAME = "_mstair_stringify_handler"


def create_logger(
    name: str,
    *,
    level: int | str | None = None,
) -> logging.Logger:
    """
    Return a logger whose level comes from the environment unless given explicitly.

    :param name: Logger name, normally `__name__`.
    :param level: Explicit level; overrides LOG_LEVEL* environment configuration.
    :return logging.Logger: The configured logger.
    """
    initialize_logger_constants()
    logger = logging.getLogger(name)
    if level is None:
        level = LogLevelConfig.get_instance().get_effective_level(name)
    logger.setLevel(level)
    return logger


def initialize_root(
    level: int | str | None = None,
    *,
    stream: TextIO | None = None,
    fmt: str | None = None,
    force: bool = False,
) -> logging.Handler:
    """
    Attach a single ColorFormatter stream handler to the root logger.

    Calling it again reuses the handler it installed earlier, unless `force` is set,
    in which case the previous handler is replaced.

    :param level: Root level; defaults to the environment's root/default level.
    :param stream: Output stream, stderr by default.
    :param fmt: Log format string.
    :param force: Replace a previously installed handler.
    :return logging.Handler: The installed handler.
    """
    initialize_logger_constants()
    root = logging.getLogger()
    existing: logging.Handler | None = getattr(root, _LOG_ROOT_ATTR_NAME, None)
    if existing is not None and not force:
        handler = existing
    else:
        if existing is not None:
            root.removeHandler(existing)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(ColorFormatter(fmt or DEFAULT_LOG_FORMAT))
        root.addHandler(handler)
        setattr(root, _LOG_ROOT_ATTR_NAME, handler)

    if level is None:
        level = LogLevelConfig.get_instance().get_effective_level("root")
    root.setLevel(level)
    return handler


# End of file: src/mstair/stringify/xlogging/logger_factory.py
