# File: src/mstair/stringify/stringifier/dispatcher.py
"""
Recursive, failure-tolerant dispatch of values to rendering strategies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from mstair.stringify.base.constants import DEFAULT_NULL_REPRESENTATION, NULL_COLLECTION
from mstair.stringify.base.string_helpers import compact
from mstair.stringify.base.types import Outcome
from mstair.stringify.stringifier import view
from mstair.stringify.stringifier.model import Kind, KindT, Strategy, StringifyConfig
from mstair.stringify.stringifier.strategies import DEFAULT_CONFIG, STRATEGIES
from mstair.stringify.xlogging.logger_constants import TRACE
from mstair.stringify.xlogging.logger_factory import create_logger


__all__ = ["Stringifier"]

LOG = create_logger(__name__)


class Stringifier:
    """
    Renders one value graph to text.

    Holds the per-call state (null representation, configuration and the set of
    collections on the active rendering path); create one per top-level call.
    `render()` is total: no Exception raised by a value's own code escapes it.
    """

    null_representation: str
    """Text emitted for None values."""

    config: StringifyConfig
    """Formatting configuration; shared and immutable."""

    strategies: tuple[Strategy, ...]
    """Strategy table scanned in order by render()."""

    def __init__(
        self,
        null_representation: str | None = DEFAULT_NULL_REPRESENTATION,
        config: StringifyConfig | None = None,
    ) -> None:
        self.null_representation = (
            DEFAULT_NULL_REPRESENTATION if null_representation is None else null_representation
        )
        self.config = DEFAULT_CONFIG if config is None else config
        self.strategies = self.config.strategies or STRATEGIES
        self._active: set[int] = set()

    def __repr__(self) -> str:
        return f"Stringifier(null_representation={self.null_representation!r}, max_depth={self.config.max_depth})"

    def stringify(self, value: Any) -> str:
        """Render `value` from depth 0 and compact the result."""
        return compact(self.render(value, 0))

    def stringify_collection(self, items: Iterable[Any] | None) -> str:
        """Render `items` as a collection from depth 0; None renders as "(null collection)"."""
        if items is None:
            return NULL_COLLECTION
        text = Outcome.attempt(view.render_collection, self, items, 0)
        if text.ok:
            return compact(text.value)  # type: ignore[arg-type]
        LOG.log(TRACE, "collection rendering failed for %s", type(items).__name__)
        return self.stringify(items)

    def render(self, value: Any, depth: int = 0) -> str:
        """
        Render `value` as if it were found `depth` composite levels below the root.

        At or beyond the configured max depth the value is rendered as a leaf.
        Otherwise the first matching strategy whose renderer succeeds wins.
        """
        if depth >= self.config.max_depth:
            leaf = Outcome.attempt(view.render_atom, value, self.null_representation)
            if leaf.ok and isinstance(leaf.value, str):
                return leaf.value
            LOG.log(TRACE, "leaf rendering failed for %s at depth %d", type(value).__name__, depth)
            return view.fallback_text(value)

        for strategy in self._candidates(value, depth):
            text = Outcome.attempt(strategy.render, self, value, depth)
            if text.ok and isinstance(text.value, str):
                return text.value
            LOG.log(
                TRACE,
                "%s renderer failed for %s at depth %d (%s)",
                strategy.kind,
                type(value).__name__,
                depth,
                type(text.error).__name__ if text.error is not None else "non-text result",
            )
        return view.fallback_text(value)

    def classify(self, value: Any, depth: int = 0) -> KindT:
        """Return the kind of the first strategy whose predicate matches `value`."""
        for strategy in self._candidates(value, depth):
            return strategy.kind
        return Kind.FALLBACK

    def _candidates(self, value: Any, depth: int) -> Iterator[Strategy]:
        """Yield matching strategies in order; a predicate that raises does not match."""
        for strategy in self.strategies:
            matched = Outcome.attempt(strategy.matches, self, value, depth)
            if not matched.ok:
                LOG.log(
                    TRACE,
                    "%s predicate failed for %s (%s)",
                    strategy.kind,
                    type(value).__name__,
                    type(matched.error).__name__,
                )
                continue
            if matched.value:
                yield strategy

    # Cycle guard. Collections do not consume depth, so a collection that
    # contains itself would otherwise recurse without bound.

    def is_active(self, items: object) -> bool:
        """Return True if `items` is already being rendered further up the path."""
        return id(items) in self._active

    @property
    def collection_nesting(self) -> int:
        """Number of collections open on the current rendering path."""
        return len(self._active)

    @contextmanager
    def activate(self, items: object) -> Iterator[None]:
        """Mark `items` as on the active rendering path for the duration of the block."""
        key = id(items)
        self._active.add(key)
        try:
            yield
        finally:
            self._active.discard(key)


# End of file: src/mstair/stringify/stringifier/dispatcher.py
