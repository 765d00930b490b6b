"""Unit tests for the directive catalog and field extractor."""
from __future__ import annotations

import logging

import pytest

from sqlgen.directive.catalog import CATALOG, FieldType, Keyword
from sqlgen.errors import DuplicateFieldError, ExtractionArityError
from sqlgen.extract.extractor import Field, extract_fields, extract_file, unify_fields
from tests.fixtures import QUERIES_DIR


def _d(body: str) -> str:
    return f"/** {body} **/"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def test_catalog_covers_every_keyword():
    assert set(CATALOG) == set(Keyword)


@pytest.mark.parametrize(
    ("keyword", "arity"),
    [
        (Keyword.PARAM, 1),
        (Keyword.INT, 1),
        (Keyword.FLOAT, 1),
        (Keyword.STRING, 1),
        (Keyword.IF, 1),
        (Keyword.IN, 1),
        (Keyword.MULTI, 3),
        (Keyword.END, 0),
    ],
)
def test_catalog_arity(keyword, arity):
    assert CATALOG[keyword].arity == arity


def test_only_value_directives_take_dummies():
    takes = {k for k, spec in CATALOG.items() if spec.emits_value}
    assert takes == {
        Keyword.PARAM, Keyword.INT, Keyword.FLOAT, Keyword.STRING, Keyword.IN, Keyword.MULTI
    }


def test_field_type_annotations():
    assert FieldType.OPAQUE.annotation == "Any"
    assert FieldType.LIST.annotation == "list[Any]"
    assert FieldType.INTEGER.annotation == "int"


# ---------------------------------------------------------------------------
# Single directives
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("param .Filed", [Field(name="Filed", type=FieldType.OPAQUE)]),
        ("param 12345", []),
        ("int .Filed", [Field(name="Filed", type=FieldType.INTEGER)]),
        ("float .Filed", [Field(name="Filed", type=FieldType.FLOAT)]),
        ("string .Filed", [Field(name="Filed", type=FieldType.STRING)]),
        ("if .IsFoo", [Field(name="IsFoo", type=FieldType.BOOLEAN)]),
        ("if false", []),
        ("in .Names", [Field(name="Names", type=FieldType.LIST)]),
        ("end", []),
        (
            "multi .Where .Sep .Slice",
            [
                Field(name="Where", type=FieldType.STRING),
                Field(name="Sep", type=FieldType.STRING),
                Field(name="Slice", type=FieldType.LIST),
            ],
        ),
        (
            'multi "(name LIKE ? OR kana LIKE ?)" " AND " .Slice',
            [Field(name="Slice", type=FieldType.LIST)],
        ),
    ],
)
def test_directive_fields(body, expected):
    assert extract_fields(_d(body)) == expected


def test_multi_missing_argument_is_arity_error():
    with pytest.raises(ExtractionArityError) as exc_info:
        extract_fields(_d("multi .Where .Sep"))
    err = exc_info.value
    assert err.keyword == "multi"
    assert err.expected == 3
    assert err.observed == 2
    assert err.code == "ARITY_MISMATCH"
    assert "got 2" in str(err)


def test_arity_enforced_for_every_keyword():
    with pytest.raises(ExtractionArityError):
        extract_fields(_d("param .A .B"))
    with pytest.raises(ExtractionArityError):
        extract_fields(_d("end .A"))


def test_arity_error_aborts_whole_template():
    sql = f"SELECT {_d('int .A')}1, {_d('multi .X .Y')}(1)"
    with pytest.raises(ExtractionArityError) as exc_info:
        extract_fields(sql)
    assert exc_info.value.position is not None
    assert exc_info.value.position.line == 1


def test_unknown_keyword_is_skipped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="sqlgen.directive.scanner"):
        fields = extract_fields(f"SELECT 1 {_d('parm .ID')}1 {_d('int .N')}2")
    assert fields == [Field(name="N", type=FieldType.INTEGER)]
    assert "parm" in caplog.text


# ---------------------------------------------------------------------------
# Whole templates
# ---------------------------------------------------------------------------


def test_source_order_not_alphabetical():
    sql = f"WHERE name = {_d('string .Name')}'x' AND id = {_d('int .ID')}1"
    fields = extract_fields(sql)
    assert [f.name for f in fields] == ["Name", "ID"]
    assert [f.type for f in fields] == [FieldType.STRING, FieldType.INTEGER]


def test_duplicates_are_kept_verbatim():
    sql = f"{_d('param .ID')}1 {_d('int .ID')}2 {_d('param .ID')}3"
    fields = extract_fields(sql)
    assert [(f.name, f.type) for f in fields] == [
        ("ID", FieldType.OPAQUE),
        ("ID", FieldType.INTEGER),
        ("ID", FieldType.OPAQUE),
    ]


def test_trim_markers_do_not_change_fields():
    sql = "/** if .On -**/ a = 1 /**- end **/"
    assert extract_fields(sql) == [Field(name="On", type=FieldType.BOOLEAN)]


def test_open_delimiter_in_comment_does_not_hide_directives(caplog):
    sql = "/** Users by id */\nSELECT * FROM users WHERE id = /** int .ID **/1"
    with caplog.at_level(logging.WARNING, logger="sqlgen.directive.scanner"):
        fields = extract_fields(sql)
    assert fields == [Field(name="ID", type=FieldType.INTEGER)]
    assert caplog.records == []


def test_template_without_directives():
    assert extract_fields("SELECT * FROM t /* plain comment */") == []


def test_extract_file():
    fields = extract_file(QUERIES_DIR / "select_items.sql")
    assert [f.name for f in fields] == ["ID", "IsSelectMultiNames", "Where", "Sep", "Names"]


# ---------------------------------------------------------------------------
# unify_fields
# ---------------------------------------------------------------------------


def test_unify_collapses_same_type_repeats():
    fields = [
        Field(name="Names", type=FieldType.LIST),
        Field(name="ID", type=FieldType.INTEGER),
        Field(name="Names", type=FieldType.LIST),
    ]
    assert unify_fields(fields) == fields[:2]


def test_unify_rejects_conflicting_types():
    fields = [
        Field(name="ID", type=FieldType.OPAQUE),
        Field(name="ID", type=FieldType.INTEGER),
    ]
    with pytest.raises(DuplicateFieldError) as exc_info:
        unify_fields(fields)
    assert exc_info.value.details == {"name": "ID", "types": ["opaque", "integer"]}
