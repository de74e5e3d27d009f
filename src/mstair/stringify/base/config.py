# File: src/mstair/stringify/base/config.py
"""
Process context detection for log output.

Answers two questions for the logging stack: is a test runner driving this
process, and should log lines be colored for a human at a terminal. Both
answers can be forced per thread, so a test can pin them without affecting
other threads.

Exports:
- in_test_mode(): detect, or override for this thread, test-runner execution.
- in_desktop_mode(): detect, or override for this thread, colored terminal output.
- desktop_mode_context(): temporarily force colored output on or off.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final, Literal


type _Flag = Literal["test_mode", "desktop_mode"]

_TEST_RUNNER_MODULES: Final[tuple[str, ...]] = ("pytest", "unittest")
_TEST_RUNNER_ENV_VARS: Final[tuple[str, ...]] = (
    "PYTEST_CURRENT_TEST",
    "PYTEST_RUNNING",
    "UNITTEST_RUNNING",
)

_tls = threading.local()


@dataclass
class ContextOverrides:
    """Per-thread forced answers; None means "detect"."""

    test_mode: bool | None = None
    desktop_mode: bool | None = None


def _overrides() -> ContextOverrides:
    state: ContextOverrides | None = getattr(_tls, "overrides", None)
    if state is None:
        state = _tls.overrides = ContextOverrides()
    return state


def _resolve(
    flag: _Flag,
    detect: Callable[[], bool],
    *,
    unset_override: bool,
    override: bool | None,
) -> bool:
    state = _overrides()
    if unset_override:
        setattr(state, flag, None)
    if override is not None:
        setattr(state, flag, override)
        return override
    forced: bool | None = getattr(state, flag)
    return detect() if forced is None else forced


def _detect_test_mode() -> bool:
    if any(name in sys.modules for name in _TEST_RUNNER_MODULES):
        return True
    return any(os.environ.get(k) for k in _TEST_RUNNER_ENV_VARS) or os.environ.get("CI") == "true"


def _detect_desktop_mode() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if in_test_mode():
        return True
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def in_test_mode(*, unset_override: bool = False, override: bool | None = None) -> bool:
    """
    Return True when running under pytest or unittest, or in CI.

    :param unset_override: Forget this thread's forced answer first.
    :param override: Force the answer for this thread and return it.
    """
    return _resolve(
        "test_mode", _detect_test_mode, unset_override=unset_override, override=override
    )


def in_desktop_mode(*, unset_override: bool = False, override: bool | None = None) -> bool:
    """
    Return True when log output should carry ANSI colors.

    Without an override: NO_COLOR disables colors, test mode enables them,
    otherwise they follow whether stderr is a terminal.

    :param unset_override: Forget this thread's forced answer first.
    :param override: Force the answer for this thread and return it.
    """
    return _resolve(
        "desktop_mode", _detect_desktop_mode, unset_override=unset_override, override=override
    )


@contextmanager
def desktop_mode_context(enabled: bool = True) -> Iterator[None]:
    """Force desktop mode on (or off) for this thread inside the block; nests."""
    state = _overrides()
    previous = state.desktop_mode
    state.desktop_mode = enabled
    try:
        yield
    finally:
        state.desktop_mode = previous


# End of file: src/mstair/stringify/base/config.py
