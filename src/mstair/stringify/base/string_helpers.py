import re
from typing import Final


_LINE_BREAK_RUN_RE: Final[re.Pattern[str]] = re.compile(r"(\r\n|\n)(?:\r\n|\n)+")
_EMPTY_OBJECT_RE: Final[re.Pattern[str]] = re.compile(r"\{\s*\}")


def fqn(o: object) -> str:
    """Return the fully-qualified class name of an object, e.g. "pkg.module.Klass"."""
    klass = type(o)
    return f"{klass.__module__}.{klass.__qualname__}"


def indentation(depth: int, indent_size: int) -> str:
    """Return the leading whitespace for a given nesting depth (empty at depth 0)."""
    return " " * (max(depth, 0) * indent_size)


def collapse_line_breaks(text: str) -> str:
    """
    Collapse every run of two or more line breaks into a single line break.

    The first break of a run is kept, so "\\r\\n\\r\\n" becomes "\\r\\n" and "\\n\\n\\n" becomes "\\n".
    A blank line made only of spaces is not a run and is left for squash_empty_objects().
    """
    return _LINE_BREAK_RUN_RE.sub(r"\1", text)


def squash_empty_objects(text: str) -> str:
    """Replace every brace pair enclosing only whitespace with the literal "{}"."""
    return _EMPTY_OBJECT_RE.sub("{}", text)


def compact(text: str) -> str:
    """
    Tidy a fully rendered block: collapse blank lines, then squash empty objects.

    Idempotent: compact(compact(s)) == compact(s).
    """
    return squash_empty_objects(collapse_line_breaks(text))
