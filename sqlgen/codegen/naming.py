"""Name helpers for generated code."""
from __future__ import annotations

import keyword
from pathlib import Path


def to_camel(s: str) -> str:
    """``select_user_items`` → ``SelectUserItems``.

    Each ``_``/``-``/space separated part is lower-cased and capitalised;
    empty parts are dropped.
    """
    parts = s.replace("-", "_").replace(" ", "_").split("_")
    return "".join(p.lower().capitalize() for p in parts if p)


def record_name(sql_file: str | Path, suffix: str) -> str:
    """Record class name for a template file: ``select_users.sql`` → ``SelectUsersRecord``."""
    stem = Path(sql_file).stem
    name = to_camel(stem) + suffix
    if name[:1].isdigit():
        name = "_" + name
    return name


def field_name_problem(name: str, reserved: frozenset[str]) -> str | None:
    """Return why ``name`` cannot be a record attribute, or ``None``."""
    if not name.isidentifier():
        return "not a valid Python identifier"
    if keyword.iskeyword(name):
        return "a Python keyword"
    if name.startswith("_"):
        return "leading underscores are private to the model"
    if name.startswith("model_"):
        return "the 'model_' prefix is reserved by pydantic"
    if name in reserved:
        return "shadows a QueryRecord attribute"
    return None
