"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS, e.g. "mstair.*:DEBUG; root=WARNING"
- Per-logger overrides in variables like LOG_LEVEL_MSTAIR_STRINGIFY (-> "mstair.stringify")

A .env file, if found, is loaded before the environment is read.
See LogLevelConfig for resolution rules.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final, NamedTuple

from mstair.stringify.base import fs_helpers
from mstair.stringify.xlogging.logger_constants import (
    DEFAULT_LOG_LEVEL,
    initialize_logger_constants,
)


__all__ = ["LogEnvVar", "LogLevelConfig"]

_LOG_VAR_NAME_RX: Final[re.Pattern[str]] = re.compile(
    r"^(?P<BASENAME>LOG_LEVELS?)(?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$"
)
_LOG_VAR_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_LOG_VAR_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


class LogEnvVar(NamedTuple):
    """A LOG_LEVEL* environment variable with the logger name its suffix targets."""

    name: str
    module: str
    value: str

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if `name` is a LOG_LEVEL/LOG_LEVELS variable, else None."""
        re_match = _LOG_VAR_NAME_RX.match(name)
        if re_match is None:
            return None
        suffix: str = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        fs_helpers.fs_load_dotenv_once()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels using environment variables.

    Precedence: exact > ancestor > glob > default > fallback.
    Unknown level names are ignored rather than reported.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from the current environment."""
        initialize_logger_constants()
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for pattern, level in self.parse_log_var(var):
                self.pattern_to_level[pattern] = level

    def get_effective_level(self, logger_name: str, *, default: int = DEFAULT_LOG_LEVEL) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        named: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name_lc in named:
            return named[name_lc]

        parts = name_lc.split(".")
        for end in range(len(parts) - 1, 0, -1):
            ancestor = ".".join(parts[:end])
            if ancestor in named:
                return named[ancestor]

        best: tuple[int, int] | None = None
        for pattern, level in named.items():
            if not any(ch in pattern for ch in "*?[") or not fnmatch.fnmatch(name_lc, pattern):
                continue
            specificity = min(
                (i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern)
            )
            if best is None or specificity > best[0]:
                best = (specificity, level)
        if best is not None:
            return best[1]

        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            initialize_logger_constants()
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @staticmethod
    def parse_log_var(var: LogEnvVar) -> Iterator[tuple[str, int]]:
        """Parse one LogEnvVar into (pattern, level) pairs; "" is the default pattern."""
        level_names = logging.getLevelNamesMapping()
        for fragment in _LOG_VAR_FRAGMENT_SEPARATOR_RX.split(var.value):
            fragment = fragment.strip()
            if not fragment:
                continue
            parts = _LOG_VAR_ASSIGNMENT_OPERATOR_RX.split(fragment, maxsplit=1)
            if len(parts) == 2:
                pattern = parts[0].strip().strip("'\"")
                level_text = parts[1].strip().strip("'\"")
            else:
                pattern = ""
                level_text = parts[0].strip().strip("'\"")

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            if level_text.isdigit():
                level = int(level_text)
            else:
                level = level_names.get(level_text.upper(), logging.NOTSET)
            if level == logging.NOTSET:
                continue
            yield pattern, level
