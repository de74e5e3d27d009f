"""
Public entry points: stringify() and stringify_collection().

Example:
    >>> stringify({"foo": 1})
    '{\\n  foo: 1\\n}'
    >>> stringify([[1, 2], [5, 6, 7]])
    '[ [ 1, 2 ], [ 5, 6, 7 ] ]'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mstair.stringify.base.constants import DEFAULT_NULL_REPRESENTATION
from mstair.stringify.stringifier.dispatcher import Stringifier
from mstair.stringify.stringifier.model import StringifyConfig


__all__ = ["stringify", "stringify_collection"]


def stringify(
    value: Any,
    null_representation: str | None = DEFAULT_NULL_REPRESENTATION,
    *,
    config: StringifyConfig | None = None,
) -> str:
    """
    Render any value as deterministic, indented, human-readable text.

    Never raises an Exception: parts of `value` that cannot be inspected are
    omitted or replaced by placeholder text.

    :param value: The value to render.
    :param null_representation: Text for None values; None means "null".
    :param config: Formatting configuration; the shared default when omitted.
    :return str: The rendered text.
    """
    return Stringifier(null_representation, config).stringify(value)


def stringify_collection(
    items: Iterable[Any] | None,
    null_representation: str | None = DEFAULT_NULL_REPRESENTATION,
    *,
    config: StringifyConfig | None = None,
) -> str:
    """
    Render `items` as a collection, even if its type would otherwise render as a composite.

    A None collection renders as "(null collection)".
    """
    return Stringifier(null_representation, config).stringify_collection(items)
