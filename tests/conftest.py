"""Shared pytest fixtures for sqlgen unit and integration tests."""
from __future__ import annotations

import shutil
import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.fixtures import QUERIES_DIR, load_ddl


@pytest.fixture()
def queries_dir(tmp_path: Path) -> Path:
    """A scratch copy of the sample template directory."""
    target = tmp_path / "queries"
    shutil.copytree(QUERIES_DIR, target)
    return target


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database seeded with users and items."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    yield conn
    conn.close()
