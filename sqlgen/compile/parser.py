"""Turns cleaned template text into a small node tree.

The tree has four node kinds: literal text, value directives, ``if`` blocks
and inert (unknown) directives.  Trim markers are applied to the text nodes
while the tree is built, and ``if``/``end`` balance and directive arity are
checked here so that execution never sees a malformed tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from sqlgen.directive.arguments import Argument
from sqlgen.directive.catalog import Keyword, spec_for
from sqlgen.directive.scanner import (
    LEFT_DELIMITER,
    RIGHT_DELIMITER,
    Directive,
    TextSegment,
    scan,
)
from sqlgen.errors import (
    DirectiveArityError,
    MalformedTemplateError,
    SourcePosition,
    UnbalancedBlockError,
)

_TRIM_CHARS = " \t\r\n"


@dataclass
class TextNode:
    text: str


@dataclass
class ValueNode:
    """A ``param``/``int``/``float``/``string``/``in``/``multi`` directive."""

    directive: Directive
    args: list[Argument]


@dataclass
class BlockNode:
    """An ``if`` directive and everything up to its matching ``end``."""

    directive: Directive
    condition: Argument
    body: list[Node] = field(default_factory=list)


@dataclass
class InertNode:
    """An unknown directive, copied to the output as a plain comment."""

    directive: Directive


Node = Union[TextNode, ValueNode, BlockNode, InertNode]


def _check_arity(directive: Directive, keyword: Keyword) -> None:
    spec = spec_for(keyword)
    if len(directive.tokens) != spec.arity:
        raise DirectiveArityError(
            directive.word,
            expected=spec.arity,
            observed=len(directive.tokens),
            position=directive.position,
        )


_STRAY_DELIMITERS = (
    (LEFT_DELIMITER, f"Unclosed directive: '{LEFT_DELIMITER}' without a closing '{RIGHT_DELIMITER}'."),
    (RIGHT_DELIMITER, f"Stray '{RIGHT_DELIMITER}' without an opening '{LEFT_DELIMITER}'."),
)


def _check_stray_delimiters(text: str, seg: TextSegment) -> None:
    for delimiter, message in _STRAY_DELIMITERS:
        stray = seg.text.find(delimiter)
        if stray != -1:
            raise MalformedTemplateError(
                message,
                details={"delimiter": delimiter},
                position=SourcePosition.from_offset(text, seg.start + stray),
            )


def _trimmed(segments: list[TextSegment | Directive], i: int, text: str) -> str:
    prev = segments[i - 1] if i > 0 else None
    nxt = segments[i + 1] if i + 1 < len(segments) else None
    if isinstance(prev, Directive) and prev.trim_right:
        text = text.lstrip(_TRIM_CHARS)
    if isinstance(nxt, Directive) and nxt.trim_left:
        text = text.rstrip(_TRIM_CHARS)
    return text


def parse_template(text: str) -> list[Node]:
    """Parse cleaned template text into a node tree.

    Positions in raised errors refer to ``text``.

    Raises:
        DirectiveArityError: If a known directive has the wrong argument count.
        UnbalancedBlockError: If ``if`` and ``end`` do not pair up.
        MalformedTemplateError: If an opening ``/**`` is never closed, a
            ``**/`` appears outside a directive, or an argument cannot be
            parsed.
    """
    segments = scan(text)
    root: list[Node] = []
    current = root
    open_blocks: list[tuple[BlockNode, list[Node]]] = []

    for i, seg in enumerate(segments):
        if isinstance(seg, TextSegment):
            _check_stray_delimiters(text, seg)
            chunk = _trimmed(segments, i, seg.text)
            if chunk:
                current.append(TextNode(chunk))
            continue

        if seg.keyword is None:
            current.append(InertNode(seg))
            continue

        _check_arity(seg, seg.keyword)
        if seg.keyword is Keyword.IF:
            block = BlockNode(seg, seg.arguments()[0])
            current.append(block)
            open_blocks.append((block, current))
            current = block.body
        elif seg.keyword is Keyword.END:
            if not open_blocks:
                raise UnbalancedBlockError(
                    "'end' without a matching 'if'.", position=seg.position
                )
            _, current = open_blocks.pop()
        else:
            current.append(ValueNode(seg, seg.arguments()))

    if open_blocks:
        block, _ = open_blocks[-1]
        raise UnbalancedBlockError(
            "'if' without a matching 'end'.", position=block.directive.position
        )
    return root
