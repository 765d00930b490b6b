"""Removal of the dummy literals that follow value directives.

In a two-way template every value directive is followed by a literal that
keeps the raw file runnable::

    WHERE id = /** int .ID **/1234 AND name IN /** in .Names **/('a', 'b')

Before expansion that literal must go, otherwise it would leak into the
compiled SQL next to the placeholder.  The recognised literal shapes are an
ordered table, most specific first, so that a generic shape never eats part
of a more specific one.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from sqlgen.directive.catalog import Keyword, spec_for
from sqlgen.directive.scanner import DIRECTIVE_PATTERN
from sqlgen.directive.tokenizer import tokenize

#: A literal only counts as a dummy when followed by one of these (or the
#: end of the text).  The boundary character itself is kept.
_BOUNDARY = r"(?=[\s,);]|$)"


@dataclass(frozen=True)
class DummyLiteralPattern:
    """One recognised dummy-literal shape.

    Attributes:
        name: Short label used in tests and debugging.
        literal: Regex for the literal text itself.
    """

    name: str
    literal: str

    def compile(self) -> re.Pattern[str]:
        return re.compile(
            f"(?P<directive>{DIRECTIVE_PATTERN})(?:{self.literal}){_BOUNDARY}",
            re.DOTALL,
        )


#: Tried in this order.  Parenthesised lists come first so that a quoted
#: string or number inside ``('a', 'b')`` is never stripped on its own.
DUMMY_LITERAL_PATTERNS: tuple[DummyLiteralPattern, ...] = (
    DummyLiteralPattern("list", r"\((?:'(?:[^']|'')*'|[^')])*\)"),
    DummyLiteralPattern("string", r"'(?:[^']|'')*'"),
    DummyLiteralPattern("number", r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"),
    DummyLiteralPattern("placeholder", r"\?"),
)

_COMPILED: tuple[re.Pattern[str], ...] = tuple(p.compile() for p in DUMMY_LITERAL_PATTERNS)


def _takes_dummy(body: str) -> bool:
    tokens = tokenize(body)
    keyword = Keyword.lookup(tokens[0]) if tokens else None
    return keyword is not None and spec_for(keyword).emits_value


def _replace(match: re.Match[str]) -> str:
    if _takes_dummy(match.group("body")):
        return match.group("directive")
    return match.group(0)


def strip_dummy_literals(template: str) -> str:
    """Remove the dummy literal directly after each value directive.

    ``if``, ``end`` and unknown directives are left alone: whatever follows
    them is real SQL.  Applying the function twice gives the same result
    as applying it once.
    """
    for pattern in _COMPILED:
        template = pattern.sub(_replace, template)
    return template
