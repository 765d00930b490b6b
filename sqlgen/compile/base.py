"""Compilation value objects: the :class:`Query` result and the per-call
argument accumulator."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from sqlgen.compile.placeholders import PlaceholderStyle


@dataclass(frozen=True)
class Query:
    """The output of a successful compilation.

    Attributes:
        sql: Final SQL text with positional placeholders.
        args: Bound values, in the order their placeholders appear in
            ``sql``.

    A ``Query`` unpacks as ``(sql, args)`` so it can be handed straight to a
    DB-API cursor::

        cursor.execute(*record.query())
    """

    sql: str
    args: tuple[Any, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.args


@dataclass
class RuntimeContext:
    """Accumulates bound arguments during a single compilation run.

    One instance is created per :func:`~sqlgen.compile.compiler.compile_template`
    call, so concurrent compilations never share state.
    """

    style: PlaceholderStyle
    args: list[Any] = field(default_factory=list)

    def bind(self, value: Any) -> str:
        """Store ``value`` and return the placeholder that refers to it."""
        self.args.append(value)
        return self.style.render(len(self.args))
