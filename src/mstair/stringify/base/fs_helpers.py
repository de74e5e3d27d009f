"""
.env discovery and loading for environment-driven log configuration.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

import dotenv


type StrPath = str | Path


def fs_find_dotenv(start_dir: StrPath | None = None, filename: str = ".env") -> Path | None:
    """
    Return the nearest `filename` in `start_dir` or one of its parents, or None.

    Searches from the current working directory when `start_dir` is omitted.
    """
    directory = Path(start_dir) if start_dir is not None else Path.cwd()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / filename
        if candidate.is_file():
            return candidate
    return None


def fs_load_dotenv(dotenv_path: StrPath | None = None, *, override: bool = False) -> bool:
    """
    Load variables from a .env file into os.environ.

    :param dotenv_path: File to load; the nearest .env above the working directory when omitted.
    :param override: Replace variables that are already set.
    :return bool: True if at least one variable was set.
    """
    path = Path(dotenv_path) if dotenv_path is not None else fs_find_dotenv()
    if path is None or not path.is_file():
        return False
    return dotenv.load_dotenv(dotenv_path=path, override=override, encoding="utf-8")


@cache
def fs_load_dotenv_once() -> bool:
    """Load the nearest .env file on the first call only; later calls return the first result."""
    return fs_load_dotenv()
