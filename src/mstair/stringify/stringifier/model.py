# File: src/mstair/stringify/stringifier/model.py
"""
Value classification model and immutable configuration for the stringifier.
"""

from __future__ import annotations

import dataclasses
import datetime
import ipaddress
import pathlib
import re
import types
import uuid
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Final, Self

from mstair.stringify.base.constants import HARD_MAX_DEPTH, INDENT_SIZE, MAX_DEPTH
from mstair.stringify.base.types import PRIMITIVE_NON_STRING_TYPES, TEXTUAL_TYPES, Sentinel


if TYPE_CHECKING:
    from mstair.stringify.stringifier.dispatcher import Stringifier


__all__ = [
    "DEFAULT_ATOMIC_TYPES",
    "DEFAULT_IGNORED_ORIGINS",
    "Field",
    "Kind",
    "KindT",
    "Strategy",
    "StringifyConfig",
]

type MatchFunction = Callable[[Stringifier, Any, int], bool]
type RenderFunction = Callable[[Stringifier, Any, int], str]


@total_ordering
class KindT:
    """One variant of the closed set of value kinds, ordered by dispatch precedence."""

    _order: int
    """Unique identifier used for sorting and comparison."""

    name: str
    """Name of the kind, used for debugging and display."""

    def __init__(self, name: str, order: int) -> None:
        self.name = name
        self._order = order

    def __lt__(self, other: Self) -> bool:
        return self._order < other._order

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KindT) and self._order == other._order

    def __hash__(self) -> int:
        return hash(self._order)

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class Kind:
    """Static namespace for all defined KindT value kinds, in precedence order."""

    NULL = KindT("NULL", 1)
    ATOMIC = KindT("ATOMIC", 2)
    ENUMERATED = KindT("ENUMERATED", 3)
    ITERABLE = KindT("ITERABLE", 4)
    COMPOSITE = KindT("COMPOSITE", 5)
    FALLBACK = KindT("FALLBACK", 6)

    @classmethod
    def all(cls) -> list[KindT]:
        """
        Return all KindT constants defined on the class, in declaration order.
        """
        return [
            v
            for k, v in vars(cls).items()
            if isinstance(v, KindT) and not k.startswith("_") and k.isupper()
        ]


@dataclasses.dataclass(frozen=True, slots=True)
class Strategy:
    """A (predicate, renderer) pair that classifies and renders one value at one depth."""

    kind: KindT
    matches: MatchFunction
    render: RenderFunction

    def __repr__(self) -> str:
        return f"Strategy({self.kind})"


@dataclasses.dataclass(frozen=True, slots=True)
class Field:
    """A readable field of a composite value."""

    name: str
    """Display name of the field."""

    read: Callable[[], Any]
    """Reads the field's current value; may raise."""

    origin: str = ""
    """Module of the type that declares the field, or "" when no type declares it (e.g. mapping entries)."""


DEFAULT_ATOMIC_TYPES: Final[tuple[type, ...]] = (
    *TEXTUAL_TYPES,
    *PRIMITIVE_NON_STRING_TYPES,
    memoryview,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    pathlib.PurePath,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    re.Pattern,
    ET.Element,
    ET.ElementTree,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    Iterator,
    Sentinel,
)
"""Types rendered directly, without recursion. datetime.datetime is covered by datetime.date."""

DEFAULT_IGNORED_ORIGINS: Final[frozenset[str]] = frozenset({"builtins"})
"""Modules whose declared fields are rendered with str() instead of being recursed into."""


@dataclasses.dataclass(frozen=True, kw_only=True)
class StringifyConfig:
    """
    Immutable formatting configuration, shared read-only by every stringify() call.

    :param max_depth: Composite depth at which values are forced into atomic rendering,
        clamped to HARD_MAX_DEPTH.
    :param indent_size: Spaces per indentation level.
    :param atomic_types: Allow-list of types rendered without recursion.
    :param ignored_origins: Modules whose declared fields are not recursed into.
    :param strategies: Ordered strategy table; empty means the built-in table.
    """

    max_depth: int = MAX_DEPTH
    indent_size: int = INDENT_SIZE
    atomic_types: tuple[type, ...] = DEFAULT_ATOMIC_TYPES
    ignored_origins: frozenset[str] = DEFAULT_IGNORED_ORIGINS
    strategies: tuple[Strategy, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError(f"max_depth must be an int, got {type(self.max_depth).__name__}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise TypeError(f"indent_size must be an int, got {type(self.indent_size).__name__}")
        if self.indent_size < 0:
            raise ValueError(f"indent_size must be >= 0, got {self.indent_size}")
        object.__setattr__(self, "max_depth", min(self.max_depth, HARD_MAX_DEPTH))
        object.__setattr__(self, "atomic_types", tuple(self.atomic_types))
        object.__setattr__(self, "ignored_origins", frozenset(self.ignored_origins))
        object.__setattr__(self, "strategies", tuple(self.strategies))

    def with_changes(self, **changes: Any) -> StringifyConfig:
        """Return a copy of this configuration with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def with_atomic_types(self, *extra: type) -> StringifyConfig:
        """Return a copy that also renders instances of `extra` atomically."""
        return self.with_changes(atomic_types=(*self.atomic_types, *extra))

    def with_ignored_origins(self, *modules: str) -> StringifyConfig:
        """Return a copy that also treats fields declared in `modules` as opaque."""
        return self.with_changes(ignored_origins=self.ignored_origins | set(modules))


# End of file: src/mstair/stringify/stringifier/model.py
