# File: src/mstair/stringify/xlogging/logger_constants.py

import logging


TRACE = logging.DEBUG - 1  # (9) strategy and field failures; hidden at DEBUG

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelName)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING


def initialize_logger_constants() -> None:
    """Register the TRACE level name with the logging module; safe to call repeatedly."""
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")


# End of file: src/mstair/stringify/xlogging/logger_constants.py
