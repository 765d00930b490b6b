"""Test fixtures: sample two-way SQL templates and SQLite DDL."""

from __future__ import annotations

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent
QUERIES_DIR = FIXTURES_DIR / "queries"


def load_template(name: str) -> str:
    """Return the text of ``queries/<name>.sql``."""
    return (QUERIES_DIR / f"{name}.sql").read_text(encoding="utf-8")


def load_ddl() -> str:
    """Return the sample SQLite DDL and seed data."""
    return (FIXTURES_DIR / "ddl_sqlite.sql").read_text(encoding="utf-8")
