"""Unit tests for placeholder styles."""
from __future__ import annotations

import pytest

from sqlgen.compile.compiler import TemplateCompiler, compile_template
from sqlgen.compile.placeholders import PlaceholderRegistry, PlaceholderStyle
from sqlgen.errors import PlaceholderStyleError

_SQL = (
    "SELECT * FROM t WHERE a = /** param .A **/1 "
    "AND b IN /** in .B **/(1, 2) "
    'AND /** multi "(c = ? OR d = ?)" "OR" .C **/(c = 1)'
)
_DATA = {"A": 0, "B": [1, 2], "C": ["x"]}


def test_builtin_styles_registered():
    assert {"qmark", "format", "numeric", "dollar"} <= set(
        PlaceholderRegistry.registered_styles()
    )


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("qmark", "a = ? AND b IN (?, ?) AND (c = ? OR d = ?)"),
        ("format", "a = %s AND b IN (%s, %s) AND (c = %s OR d = %s)"),
        ("numeric", "a = :1 AND b IN (:2, :3) AND (c = :4 OR d = :5)"),
        ("dollar", "a = $1 AND b IN ($2, $3) AND (c = $4 OR d = $5)"),
    ],
)
def test_styles_number_across_directives(style, expected):
    q = compile_template(_SQL, _DATA, style=style)
    assert q.sql == f"SELECT * FROM t WHERE {expected}"
    assert q.args == (0, 1, 2, "x", "x")


def test_unknown_style():
    with pytest.raises(PlaceholderStyleError) as exc_info:
        TemplateCompiler("pyformat-ish")
    assert "qmark" in exc_info.value.details["registered"]


def test_custom_style_registration():
    @PlaceholderRegistry.register("test_at")
    class AtStyle(PlaceholderStyle):
        def render(self, index: int) -> str:
            return f"@p{index}"

    q = compile_template("x = /** param .X **/1", {"X": 1}, style="test_at")
    assert q.sql == "x = @p1"


def test_style_instance_accepted():
    class Fixed(PlaceholderStyle):
        def render(self, index: int) -> str:
            return "<>"

    assert TemplateCompiler(Fixed()).compile("/** param .X **/1", {"X": 1}).sql == "<>"
