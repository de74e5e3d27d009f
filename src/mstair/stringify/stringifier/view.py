"""
Text rendering for atoms, collections and composites.

This module holds the render functions the strategy table dispatches to:

- `render_atom`: leaf values, via a per-type renderer table.
- `render_collection`: "[ a, b ]" lists, rendered at the parent's depth.
- `render_composite`: indented "{ name: value }" blocks, one level deeper.
- `fallback_text`: the failure-proof last resort.
"""

from __future__ import annotations

import datetime
import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable, Set
from typing import TYPE_CHECKING, Any, Final

from mstair.stringify.base.constants import (
    COLLECTION_CLOSE,
    COLLECTION_ITEM_SEP,
    COLLECTION_OPEN,
    COMPOSITE_CLOSE,
    COMPOSITE_KV_SEP,
    COMPOSITE_OPEN,
    MAX_COLLECTION_NESTING,
    NULL_COLLECTION,
    RECURSIVE_COLLECTION,
)
from mstair.stringify.base.datetime_helpers import datetime_with_kind
from mstair.stringify.base.string_helpers import fqn, indentation
from mstair.stringify.base.types import Outcome
from mstair.stringify.stringifier import reflection
from mstair.stringify.xlogging.logger_constants import TRACE
from mstair.stringify.xlogging.logger_factory import create_logger


if TYPE_CHECKING:
    from mstair.stringify.stringifier.dispatcher import Stringifier


__all__ = [
    "fallback_text",
    "render_atom",
    "render_collection",
    "render_composite",
]

LOG = create_logger(__name__)

type _AtomRendererFunction = Callable[[Any], str]


def _atom_render_str(obj: str) -> str:
    return f'"{obj}"'


def _atom_render_bool(obj: bool) -> str:
    return "true" if obj else "false"


def _atom_render_xml(obj: ET.Element | ET.ElementTree) -> str:
    """Render an XML element (or the root of a tree) as its serialized markup."""
    root = obj.getroot() if isinstance(obj, ET.ElementTree) else obj
    return ET.tostring(root, encoding="unicode")


_ATOMIC_RENDERERS: Final[dict[type, _AtomRendererFunction]] = {
    str: _atom_render_str,
    bool: _atom_render_bool,
    datetime.datetime: datetime_with_kind,
    ET.Element: _atom_render_xml,
    ET.ElementTree: _atom_render_xml,
}


def _atom_renderer_for(tp: type) -> _AtomRendererFunction:
    for klass in tp.__mro__:
        renderer = _ATOMIC_RENDERERS.get(klass)
        if renderer is not None:
            return renderer
    return str


def render_atom(value: Any, null_representation: str) -> str:
    """
    Render a leaf value without recursion.

    Enum members render by name (combined flags as "A|B"), even when their
    type also derives from int or str.
    """
    if value is None:
        return null_representation
    if isinstance(value, enum.Enum):
        return value.name if value.name is not None else str(value)
    return _atom_renderer_for(type(value))(value)


def fallback_text(value: Any) -> str:
    """
    Render `value` with its own str(), or as a "{module.QualName}" placeholder if that fails.

    Never raises an Exception.
    """
    text = Outcome.attempt(str, value)
    if text.ok and isinstance(text.value, str):
        return text.value
    LOG.log(TRACE, "str() failed for %s; using placeholder", type(value).__name__)
    return COMPOSITE_OPEN + Outcome.attempt(fqn, value).unwrap_or("object") + COMPOSITE_CLOSE


def _materialize(items: Iterable[Any]) -> list[Any]:
    materialized = list(items)
    if isinstance(items, Set):
        return Outcome.attempt(sorted, materialized).unwrap_or(materialized)
    return materialized


def render_collection(stringifier: Stringifier, items: Iterable[Any] | None, depth: int) -> str:
    """
    Render a collection as "[ a, b ]", each element at the collection's own depth.

    A collection already being rendered further up the path, or nested below
    MAX_COLLECTION_NESTING open collections, renders as "[...]".
    """
    if items is None:
        return NULL_COLLECTION
    if stringifier.is_active(items):
        return RECURSIVE_COLLECTION
    if stringifier.collection_nesting >= MAX_COLLECTION_NESTING:
        LOG.log(TRACE, "collection nesting limit reached at %s", type(items).__name__)
        return RECURSIVE_COLLECTION

    with stringifier.activate(items):
        materialized = _materialize(items)
        if LOG.isEnabledFor(TRACE):
            item_type = reflection.enumerable_item_type(items, materialized)
            LOG.log(
                TRACE,
                "rendering %s of %d %s item(s) at depth %d",
                type(items).__name__,
                len(materialized),
                getattr(item_type, "__name__", "unknown"),
                depth,
            )
        rendered = [stringifier.render(item, depth) for item in materialized]

    return COLLECTION_OPEN + COLLECTION_ITEM_SEP.join(rendered) + COLLECTION_CLOSE


def render_composite(stringifier: Stringifier, value: Any, depth: int) -> str:
    """
    Render the readable fields of `value` as an indented block, one field per line.

    Unreadable fields are omitted. Fields declared by an ignored origin are
    rendered with str() instead of recursion.
    """
    config = stringifier.config
    lines: list[str] = []
    for field in reflection.readable_fields(value):
        read = Outcome.attempt(field.read)
        if not read.ok:
            LOG.log(
                TRACE,
                "omitting unreadable field %s of %s (%s)",
                field.name,
                type(value).__name__,
                type(read.error).__name__,
            )
            continue
        item = read.value
        if field.origin in config.ignored_origins:
            text = stringifier.null_representation if item is None else fallback_text(item)
        else:
            text = stringifier.render(item, depth + 1)
        lines.append(field.name + COMPOSITE_KV_SEP + text)

    inner = indentation(depth + 1, config.indent_size)
    outer = indentation(depth, config.indent_size)
    return (
        COMPOSITE_OPEN
        + "\n"
        + inner
        + ("\n" + inner).join(lines)
        + "\n"
        + outer
        + COMPOSITE_CLOSE
    )
