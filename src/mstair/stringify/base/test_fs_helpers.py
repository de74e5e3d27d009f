"""
Tests for .env discovery and loading.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from mstair.stringify.base.fs_helpers import fs_find_dotenv, fs_load_dotenv


_VAR = "MSTAIR_STRINGIFY_FS_HELPERS_TEST"


@pytest.fixture
def unset_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure the test variable is absent now and removed again afterwards."""
    monkeypatch.setenv(_VAR, "placeholder")
    monkeypatch.delenv(_VAR)


@pytest.mark.unit
def test_find_dotenv_searches_parents(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(f"{_VAR}=1\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert fs_find_dotenv(nested) == env_file
    assert fs_find_dotenv(nested, filename="missing.env") is None


@pytest.mark.unit
def test_load_dotenv_sets_variables(tmp_path: Path, unset_var: None) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(f"{_VAR}=loaded\n", encoding="utf-8")
    assert fs_load_dotenv(env_file) is True
    assert os.environ[_VAR] == "loaded"


@pytest.mark.unit
def test_load_dotenv_respects_existing_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(_VAR, "kept")
    env_file = tmp_path / ".env"
    env_file.write_text(f"{_VAR}=ignored\n", encoding="utf-8")
    fs_load_dotenv(env_file)
    assert os.environ[_VAR] == "kept"
    fs_load_dotenv(env_file, override=True)
    assert os.environ[_VAR] == "ignored"


@pytest.mark.unit
def test_load_dotenv_missing_file(tmp_path: Path) -> None:
    assert fs_load_dotenv(tmp_path / "absent.env") is False
