# File: src/mstair/stringify/stringifier/strategies.py
"""
The ordered strategy table.

Order encodes specificity: a value is claimed by the first strategy whose
predicate matches, so a later strategy never sees a case an earlier one was
meant to catch. In particular enum members that are also ints or strs are
claimed by the enumerated strategy before the iterable one can see a StrEnum,
text is atomic before it could be iterated, and mappings skip the iterable
strategy to reach the composite one.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Final

from mstair.stringify.stringifier import reflection, view
from mstair.stringify.stringifier.model import Kind, Strategy, StringifyConfig


if TYPE_CHECKING:
    from mstair.stringify.stringifier.dispatcher import Stringifier


__all__ = [
    "DEFAULT_CONFIG",
    "STRATEGIES",
]


def _matches_null(_s: Stringifier, value: Any, _depth: int) -> bool:
    return value is None


def _render_null(s: Stringifier, _value: Any, _depth: int) -> str:
    return s.null_representation


def _matches_atomic(s: Stringifier, value: Any, depth: int) -> bool:
    if depth >= s.config.max_depth:
        return True
    return isinstance(value, s.config.atomic_types) and not isinstance(value, enum.Enum)


def _render_atomic(s: Stringifier, value: Any, _depth: int) -> str:
    return view.render_atom(value, s.null_representation)


def _matches_enumerated(_s: Stringifier, value: Any, _depth: int) -> bool:
    return isinstance(value, enum.Enum)


def _render_enumerated(s: Stringifier, value: Any, _depth: int) -> str:
    return view.render_atom(value, s.null_representation)


def _matches_iterable(_s: Stringifier, value: Any, _depth: int) -> bool:
    return reflection.is_enumerable(type(value))


def _render_iterable(s: Stringifier, value: Any, depth: int) -> str:
    if not reflection.is_enumerable(type(value)):
        raise TypeError(f"{type(value).__name__} is not an enumerable collection")
    return view.render_collection(s, value, depth)


def _matches_always(_s: Stringifier, _value: Any, _depth: int) -> bool:
    return True


def _render_composite(s: Stringifier, value: Any, depth: int) -> str:
    return view.render_composite(s, value, depth)


def _render_fallback(_s: Stringifier, value: Any, _depth: int) -> str:
    return view.fallback_text(value)


STRATEGIES: Final[tuple[Strategy, ...]] = (
    Strategy(Kind.NULL, _matches_null, _render_null),
    Strategy(Kind.ATOMIC, _matches_atomic, _render_atomic),
    Strategy(Kind.ENUMERATED, _matches_enumerated, _render_enumerated),
    Strategy(Kind.ITERABLE, _matches_iterable, _render_iterable),
    Strategy(Kind.COMPOSITE, _matches_always, _render_composite),
    Strategy(Kind.FALLBACK, _matches_always, _render_fallback),
)
"""Built-in strategies in dispatch order; the last one always matches and never fails."""

DEFAULT_CONFIG: Final[StringifyConfig] = StringifyConfig(strategies=STRATEGIES)
"""Shared, read-only configuration used when callers pass none."""


# End of file: src/mstair/stringify/stringifier/strategies.py
