"""Unit tests for the directive tokenizer."""
from __future__ import annotations

import pytest

from sqlgen.directive.tokenizer import tokenize


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("param .ID", ["param", ".ID"]),
        ("  int   .ID  ", ["int", ".ID"]),
        ("if\t.IsFoo\n", ["if", ".IsFoo"]),
        ("end", ["end"]),
        ("", []),
        ("   ", []),
    ],
)
def test_splits_on_whitespace(body, expected):
    assert tokenize(body) == expected


def test_quoted_segment_keeps_spaces_and_quotes():
    body = 'multi "(name LIKE ? OR kana LIKE ?)" " AND " .Names'
    assert tokenize(body) == [
        "multi",
        '"(name LIKE ? OR kana LIKE ?)"',
        '" AND "',
        ".Names",
    ]


def test_escaped_quote_does_not_close_segment():
    body = r'multi "a \"b c\" d" "OR" .L'
    assert tokenize(body) == ["multi", r'"a \"b c\" d"', '"OR"', ".L"]


def test_unterminated_quote_runs_to_end():
    assert tokenize('string "abc def') == ["string", '"abc def']


def test_quote_inside_bare_word():
    assert tokenize('x a"b c"d') == ["x", 'a"b c"d']
