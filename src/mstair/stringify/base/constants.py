from __future__ import annotations

from typing import Final


# Formatting constants

MAX_DEPTH: Final[int] = 10
"""Composite nesting depth at which every value is forced into atomic rendering."""

HARD_MAX_DEPTH: Final[int] = 64
"""Absolute ceiling for a configured max_depth, well below the interpreter recursion limit."""

MAX_COLLECTION_NESTING: Final[int] = 32
"""Collections open on one rendering path before further nested collections render as "[...]"."""

INDENT_SIZE: Final[int] = 2
"""Spaces per indentation level in composite blocks."""

DEFAULT_NULL_REPRESENTATION: Final[str] = "null"
NULL_COLLECTION: Final[str] = "(null collection)"
RECURSIVE_COLLECTION: Final[str] = "[...]"

# Collection punctuation

COLLECTION_OPEN: Final[str] = "[ "
COLLECTION_CLOSE: Final[str] = " ]"
COLLECTION_ITEM_SEP: Final[str] = ", "

# Composite punctuation

COMPOSITE_OPEN: Final[str] = "{"
COMPOSITE_CLOSE: Final[str] = "}"
COMPOSITE_KV_SEP: Final[str] = ": "

# Time-zone kind suffixes for datetime values

TZ_KIND_LOCAL: Final[str] = "Local"
TZ_KIND_UTC: Final[str] = "Utc"
TZ_KIND_UNSPECIFIED: Final[str] = "Unspecified"
