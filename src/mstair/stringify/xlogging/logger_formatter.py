import logging
from datetime import datetime
from typing import Any, Literal

import pytz
from colorama import Fore, Style

import mstair.stringify.base.config as cfg

from .logger_constants import initialize_logger_constants


__all__ = ["ColorFormatter", "get_color_code"]


FormatStyle = Literal["%", "{", "$"]
"""Format string style accepted by `ColorFormatter` (and `logging.Formatter`)."""

COLOR_MAP: dict[str | None, str] = {
    "TRACE": Fore.MAGENTA,
    "DEBUG": Style.DIM + Fore.WHITE,
    "INFO": Fore.LIGHTBLACK_EX,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.LIGHTRED_EX,
    "CRITICAL": Fore.RED + Style.BRIGHT,
    None: Style.RESET_ALL,
}


def get_color_code(key: Any = None) -> str:
    """
    Return the ANSI color sequence for a level name or colorama Fore name.

    Colors are disabled (empty string) outside desktop mode.
    """
    if not cfg.in_desktop_mode():
        return ""

    if key in {"", "RESET"} or key is None:
        return Style.RESET_ALL

    if key in COLOR_MAP:
        return COLOR_MAP[key]

    clean_key = str(key).upper().replace("BRIGHT", "LIGHT").removesuffix("_EX").replace("_", "")
    if clean_key.startswith("LIGHT"):
        clean_key += "_EX"
    return getattr(Fore, clean_key, Style.RESET_ALL)


class ColorFormatter(logging.Formatter):
    """
    Formatter that adds a color-coded `levelName` field and UTC timestamps.

    Use `%(levelName)s` in the format string for the colored level name;
    `%(levelname)s` stays plain.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
    ) -> None:
        initialize_logger_constants()
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.tz = pytz.utc

    def format(self, record: logging.LogRecord) -> str:
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        try:
            return super().format(record)
        except Exception as exc:
            return f"(LOGGING FORMAT ERROR: {type(exc).__name__} in {record.name}:{record.lineno})"

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        moment = datetime.fromtimestamp(record.created, tz=self.tz)
        if datefmt:
            return moment.strftime(datefmt)
        return moment.strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}Z"
