"""Record generation: a directory of ``.sql`` files → one Python module.

For every template in the directory the generator extracts the fields,
folds duplicates, checks that the template parses, and renders one
:class:`~sqlgen.record.QueryRecord` subclass.  All records of a directory
are written as a single module, so generation is all-or-nothing: the first
error aborts the run before anything is written.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined

from sqlgen.codegen.naming import field_name_problem, record_name
from sqlgen.compile.parser import parse_template
from sqlgen.compile.stripper import strip_dummy_literals
from sqlgen.config import GeneratorConfig
from sqlgen.errors import GenerationError, InvalidFieldNameError, SqlGenError
from sqlgen.extract.extractor import Field, extract_fields, unify_fields
from sqlgen.record import RESERVED_NAMES

logger = logging.getLogger(__name__)

_ENV: Environment | None = None


def _get_env() -> Environment:
    """Return the shared Jinja2 Environment for generated Python source."""
    global _ENV
    if _ENV is None:
        _ENV = Environment(
            loader=PackageLoader("sqlgen.codegen", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        _ENV.filters["pyrepr"] = repr
    return _ENV


@dataclass(frozen=True)
class RecordSpec:
    """Everything needed to render one record class.

    Attributes:
        name: Class name.
        sql_file: Template file name (no directory).
        template: Template text.
        fields: Unified fields in first-seen order.
    """

    name: str
    sql_file: str
    template: str
    fields: tuple[Field, ...]

    @property
    def lines(self) -> list[str]:
        return self.template.splitlines(keepends=True)


class RecordGenerator:
    """Generates the record module for one directory of templates.

    Args:
        directory: Directory holding the ``.sql`` files.  Not searched
            recursively.
        config: Generator options; defaults to ``GeneratorConfig()``.
    """

    def __init__(self, directory: str | Path, config: GeneratorConfig | None = None) -> None:
        self.directory = Path(directory)
        self.config = config or GeneratorConfig()

    @property
    def output_path(self) -> Path:
        return self.directory / self.config.output_filename

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def discover(self) -> list[Path]:
        """Return the template files in the directory, sorted by name.

        Raises:
            GenerationError: If the directory does not exist.
        """
        if not self.directory.is_dir():
            raise GenerationError(
                f"Input directory not found: {self.directory}", path=str(self.directory)
            )
        ext = self.config.extension.lower()
        files = sorted(
            p for p in self.directory.iterdir()
            if p.is_file() and p.suffix.lower() == ext
        )
        logger.debug("Found %d template(s) in %s", len(files), self.directory)
        return files

    def build_records(self) -> list[RecordSpec]:
        """Extract and validate a :class:`RecordSpec` for every template.

        Raises:
            GenerationError: (or subclass) wrapping the first extraction or
                parse error, with the offending file in ``details["path"]``.
        """
        records: list[RecordSpec] = []
        names: dict[str, str] = {}
        for path in self.discover():
            record = self._build_record(path)
            if record.name in names:
                raise GenerationError(
                    f"{path.name}: record name '{record.name}' already used by "
                    f"{names[record.name]}",
                    path=str(path),
                    code="DUPLICATE_RECORD",
                )
            names[record.name] = path.name
            records.append(record)
        return records

    def render(self, records: list[RecordSpec] | None = None) -> str:
        """Render the module source without writing it."""
        if records is None:
            records = self.build_records()
        return render_module(records, self.directory.resolve().name, self.config.placeholder_style)

    def generate(self) -> Path:
        """Render the module and write it to :attr:`output_path`.

        Returns:
            The path written.
        """
        source = self.render()
        self.output_path.write_text(source, encoding="utf-8")
        logger.info("Wrote %s", self.output_path)
        return self.output_path

    # ------------------------------------------------------------------
    # Per-file work
    # ------------------------------------------------------------------

    def _build_record(self, path: Path) -> RecordSpec:
        name = record_name(path.name, self.config.record_suffix)
        if not name.isidentifier():
            raise GenerationError(
                f"{path.name}: cannot derive a class name from the file name",
                path=str(path),
            )
        template = path.read_text(encoding="utf-8")
        try:
            fields = unify_fields(extract_fields(template))
            parse_template(strip_dummy_literals(template))
        except SqlGenError as exc:
            raise GenerationError(
                f"{path.name}: {exc}",
                path=str(path),
                code=exc.code,
                details=exc.details,
            ) from exc

        for f in fields:
            problem = field_name_problem(f.name, RESERVED_NAMES)
            if problem is not None:
                raise InvalidFieldNameError(f.name, problem, path=str(path))

        logger.debug("%s -> %s (%d field(s))", path.name, name, len(fields))
        return RecordSpec(
            name=name, sql_file=path.name, template=template, fields=tuple(fields)
        )


def render_module(records: list[RecordSpec], package: str, style: str = "qmark") -> str:
    """Render the generated module source for ``records``."""
    tmpl = _get_env().get_template("records.py.jinja")
    return tmpl.render(records=records, package=package, style=style)


def generate(directory: str | Path, config: GeneratorConfig | None = None) -> Path:
    """Generate and write the record module for ``directory``."""
    return RecordGenerator(directory, config).generate()
