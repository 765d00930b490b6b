"""Unit tests for generator configuration loading."""
from __future__ import annotations

import pytest

from sqlgen.config import GeneratorConfig, load_config
from sqlgen.errors import ConfigError


def test_defaults():
    config = load_config()
    assert config == GeneratorConfig()
    assert config.output_filename == "query_records_gen.py"
    assert config.record_suffix == "Record"
    assert config.placeholder_style == "qmark"
    assert config.extension == ".sql"


def test_yaml_file(tmp_path):
    path = tmp_path / "sqlgen.yaml"
    path.write_text(
        "output_filename: queries_gen.py\nrecord_suffix: Query\nplaceholder_style: format\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.output_filename == "queries_gen.py"
    assert config.record_suffix == "Query"
    assert config.placeholder_style == "format"


def test_json_file_is_yaml(tmp_path):
    path = tmp_path / "sqlgen.json"
    path.write_text('{"extension": "tmpl"}', encoding="utf-8")
    assert load_config(path).extension == ".tmpl"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == GeneratorConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path / "absent.yaml")
    assert exc_info.value.code == "CONFIG_ERROR"
    assert exc_info.value.details["path"].endswith("absent.yaml")


def test_unparsable_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("output_filename: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(path)


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


@pytest.mark.parametrize(
    "body",
    [
        "unknown_option: 1\n",
        "placeholder_style: pyformat\n",
        "output_filename: out.txt\n",
        "output_filename: sub/out.py\n",
    ],
)
def test_invalid_options(tmp_path, body):
    path = tmp_path / "c.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(path)


def test_merged_ignores_none_overrides():
    base = GeneratorConfig(record_suffix="Query")
    merged = base.merged(record_suffix=None, placeholder_style="dollar")
    assert merged.record_suffix == "Query"
    assert merged.placeholder_style == "dollar"
    assert base.placeholder_style == "qmark"


def test_merged_rejects_invalid_override():
    with pytest.raises(ConfigError):
        GeneratorConfig().merged(placeholder_style="nope")
