"""Generator configuration.

Settings can come from an optional YAML (or JSON) file; command-line flags
override file values::

    # sqlgen.yaml
    output_filename: queries_gen.py
    record_suffix: Query
    placeholder_style: format
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sqlgen.compile.placeholders import PlaceholderRegistry
from sqlgen.errors import ConfigError


class GeneratorConfig(BaseModel):
    """Options for :class:`~sqlgen.codegen.generator.RecordGenerator`.

    Attributes:
        output_filename: Name of the generated module, written inside the
            input directory.
        record_suffix: Appended to the camel-cased file stem to name each
            record class.
        placeholder_style: Default placeholder style baked into the
            generated records.
        extension: Input file extension, matched case-insensitively.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_filename: str = "query_records_gen.py"
    record_suffix: str = "Record"
    placeholder_style: str = "qmark"
    extension: str = ".sql"

    @field_validator("output_filename")
    @classmethod
    def _python_module(cls, v: str) -> str:
        if not v.endswith(".py") or Path(v).name != v:
            raise ValueError("output_filename must be a bare '*.py' file name")
        return v

    @field_validator("placeholder_style")
    @classmethod
    def _registered_style(cls, v: str) -> str:
        registered = PlaceholderRegistry.registered_styles()
        if v not in registered:
            raise ValueError(f"unknown placeholder style '{v}', expected one of {registered}")
        return v

    @field_validator("extension")
    @classmethod
    def _dotted(cls, v: str) -> str:
        return v if v.startswith(".") else f".{v}"

    def merged(self, **overrides: Any) -> GeneratorConfig:
        """Return a copy with every non-``None`` override applied.

        Raises:
            ConfigError: If an override value is invalid.
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return GeneratorConfig(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid generator option: {exc}") from exc


def load_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load a :class:`GeneratorConfig` from a YAML/JSON file.

    ``None`` returns the defaults.

    Raises:
        ConfigError: If the file is missing, unparsable, not a mapping, or
            contains invalid options.
    """
    if path is None:
        return GeneratorConfig()
    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"Config not found: {p}", path=str(p))
    try:
        obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config {p}: {exc}", path=str(p)) from exc
    if obj is None:
        return GeneratorConfig()
    if not isinstance(obj, dict):
        raise ConfigError(
            f"Config must be a mapping at top-level, got {type(obj).__name__}: {p}",
            path=str(p),
        )
    try:
        return GeneratorConfig.model_validate(obj)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {p}: {exc}", path=str(p)) from exc
