"""Locate directive occurrences in template text.

A directive is written between ``/**`` and ``**/``.  A ``-`` placed just
inside either delimiter and separated from the body by whitespace is a trim
marker: ``/**- end **/`` trims whitespace before the directive,
``/** if .Flag -**/`` trims whitespace after it.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Union

from sqlgen.directive.arguments import Argument, parse_argument
from sqlgen.directive.catalog import Keyword
from sqlgen.directive.tokenizer import tokenize
from sqlgen.errors import SourcePosition

logger = logging.getLogger(__name__)

LEFT_DELIMITER = "/**"
RIGHT_DELIMITER = "**/"

#: Matches one directive.  Shared by the scanner and the dummy-literal
#: stripper so both agree on where a directive ends.  The body never spans
#: another opening delimiter, so an unclosed ``/**`` stays in the text.
DIRECTIVE_PATTERN = (
    r"/\*\*(?:(?P<trim_left>-)(?=\s))?"
    r"(?P<body>(?:(?!\*\*/|/\*\*).)*?)"
    r"(?:(?<=\s)(?P<trim_right>-))?\*\*/"
)
DIRECTIVE_RE = re.compile(DIRECTIVE_PATTERN, re.DOTALL)


@dataclass(frozen=True)
class Directive:
    """One ``/** keyword arg ... **/`` occurrence.

    Attributes:
        word: The keyword as written (empty for an empty body).
        keyword: The catalog member, or ``None`` when ``word`` is unknown.
        tokens: Raw argument tokens after the keyword.
        trim_left: Whitespace before the directive is removed.
        trim_right: Whitespace after the directive is removed.
        start: Offset of the opening delimiter.
        end: Offset just past the closing delimiter.
        raw: The directive text including delimiters.
        position: Line/column of ``start``.
    """

    word: str
    keyword: Keyword | None
    tokens: tuple[str, ...]
    trim_left: bool
    trim_right: bool
    start: int
    end: int
    raw: str
    position: SourcePosition = field(compare=False)

    @property
    def is_known(self) -> bool:
        return self.keyword is not None

    def arguments(self) -> list[Argument]:
        """Parse every argument token (see :func:`parse_argument`)."""
        return [parse_argument(t, self.position) for t in self.tokens]


@dataclass(frozen=True)
class TextSegment:
    """Literal SQL between directives."""

    text: str
    start: int


Segment = Union[TextSegment, Directive]


def _to_directive(text: str, match: re.Match[str]) -> Directive:
    tokens = tokenize(match.group("body"))
    word = tokens[0] if tokens else ""
    return Directive(
        word=word,
        keyword=Keyword.lookup(word),
        tokens=tuple(tokens[1:]),
        trim_left=match.group("trim_left") is not None,
        trim_right=match.group("trim_right") is not None,
        start=match.start(),
        end=match.end(),
        raw=match.group(0),
        position=SourcePosition.from_offset(text, match.start()),
    )


def find_directives(text: str, unknown_level: int = logging.WARNING) -> list[Directive]:
    """Return every directive in ``text`` in source order.

    Unknown keywords are returned too (``keyword is None``) and logged at
    ``unknown_level`` so that a misspelt keyword does not go unnoticed.
    """
    directives = [_to_directive(text, m) for m in DIRECTIVE_RE.finditer(text)]
    for d in directives:
        if d.keyword is None:
            logger.log(
                unknown_level, "Ignoring unknown directive %r at %s", d.word, d.position
            )
    return directives


def scan(text: str) -> list[Segment]:
    """Split ``text`` into alternating text segments and directives.

    Used on the compile path, so unknown directives are only logged at DEBUG;
    extraction reports them as warnings.
    """
    segments: list[Segment] = []
    cursor = 0
    for directive in find_directives(text, unknown_level=logging.DEBUG):
        if directive.start > cursor:
            segments.append(TextSegment(text[cursor:directive.start], cursor))
        segments.append(directive)
        cursor = directive.end
    if cursor < len(text):
        segments.append(TextSegment(text[cursor:], cursor))
    return segments
