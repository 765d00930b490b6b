"""Placeholder styles and their registry.

DB-API drivers disagree on how a positional parameter is spelled in SQL
text (``paramstyle``).  A :class:`PlaceholderStyle` renders the marker for
the n-th bound argument; :class:`PlaceholderRegistry` maps style names to
implementations so new styles can be added without touching the compiler::

    from sqlgen.compile.placeholders import PlaceholderRegistry, PlaceholderStyle

    @PlaceholderRegistry.register("oracle")
    class OracleStyle(PlaceholderStyle):
        def render(self, index: int) -> str:
            return f":p{index}"
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from sqlgen.errors import PlaceholderStyleError

#: Marker used for bound arguments inside ``multi`` sub-templates.
QMARK = "?"


class PlaceholderStyle(ABC):
    """Renders positional placeholders for one driver paramstyle."""

    @abstractmethod
    def render(self, index: int) -> str:
        """Return the placeholder for the argument at one-based ``index``."""


class QmarkStyle(PlaceholderStyle):
    """``?`` (sqlite3, pyodbc)."""

    def render(self, index: int) -> str:
        return QMARK


class FormatStyle(PlaceholderStyle):
    """``%s`` (psycopg, PyMySQL, mysqlclient)."""

    def render(self, index: int) -> str:
        return "%s"


class NumericStyle(PlaceholderStyle):
    """``:1``, ``:2``, ... (oracledb)."""

    def render(self, index: int) -> str:
        return f":{index}"


class DollarStyle(PlaceholderStyle):
    """``$1``, ``$2``, ... (asyncpg)."""

    def render(self, index: int) -> str:
        return f"${index}"


class PlaceholderRegistry:
    """Registry mapping style names to :class:`PlaceholderStyle` classes."""

    _styles: ClassVar[dict[str, type[PlaceholderStyle]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[PlaceholderStyle]], type[PlaceholderStyle]]:
        """Decorator that registers a style class under ``name``."""

        def decorator(style_cls: type[PlaceholderStyle]) -> type[PlaceholderStyle]:
            cls._styles[name] = style_cls
            return style_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, style_cls: type[PlaceholderStyle]) -> None:
        cls._styles[name] = style_cls

    @classmethod
    def create(cls, name: str) -> PlaceholderStyle:
        """Instantiate the style registered for ``name``.

        Raises:
            PlaceholderStyleError: If no style is registered for ``name``.
        """
        style_cls = cls._styles.get(name)
        if style_cls is None:
            raise PlaceholderStyleError(name, cls.registered_styles())
        return style_cls()

    @classmethod
    def registered_styles(cls) -> list[str]:
        return sorted(cls._styles)


PlaceholderRegistry.register_class("qmark", QmarkStyle)
PlaceholderRegistry.register_class("format", FormatStyle)
PlaceholderRegistry.register_class("numeric", NumericStyle)
PlaceholderRegistry.register_class("dollar", DollarStyle)
