"""sqlgen – two-way SQL templates for Python.

Keep your queries as plain, runnable ``.sql`` files.  Directives in
``/** ... **/`` comments say which dummy literals are really parameters;
sqlgen turns them into typed records at build time and into
``(sql, args)`` pairs at run time.

Public API
----------
``compile_template``
    Expand a template against a data record into a :class:`Query`.

``extract_fields``
    List the typed fields a template needs.

``generate``
    Write the record module for a directory of ``.sql`` files.

Re-exported types
-----------------
``Query``, ``QueryRecord``, ``Field``, ``FieldType``, ``Keyword``,
``GeneratorConfig`` and all error classes.

Example::

    import sqlgen

    query = sqlgen.compile_template(
        "SELECT * FROM users WHERE id IN /** in .IDs **/(1, 2)",
        {"IDs": [3, 4, 5]},
    )
    cursor.execute(query.sql, query.args)
"""

from __future__ import annotations

from sqlgen.codegen.generator import RecordGenerator, generate
from sqlgen.compile.base import Query
from sqlgen.compile.compiler import TemplateCompiler, compile_template
from sqlgen.compile.placeholders import PlaceholderRegistry, PlaceholderStyle
from sqlgen.compile.stripper import strip_dummy_literals
from sqlgen.config import GeneratorConfig, load_config
from sqlgen.directive.catalog import FieldType, Keyword
from sqlgen.directive.tokenizer import tokenize
from sqlgen.errors import (
    CompileError,
    ConfigError,
    DirectiveArityError,
    DuplicateFieldError,
    ExtractionArityError,
    ExtractionError,
    FieldTypeError,
    GenerationError,
    InvalidFieldNameError,
    MalformedTemplateError,
    PlaceholderStyleError,
    SourcePosition,
    SqlGenError,
    UnbalancedBlockError,
    UnresolvedFieldError,
)
from sqlgen.extract.extractor import Field, extract_fields, extract_file, unify_fields
from sqlgen.record import QueryRecord

__version__ = "0.1.0"

__all__ = [
    # Core pipeline
    "compile_template",
    "extract_fields",
    "extract_file",
    "unify_fields",
    "strip_dummy_literals",
    "tokenize",
    "generate",
    # Types
    "Query",
    "QueryRecord",
    "Field",
    "FieldType",
    "Keyword",
    "TemplateCompiler",
    "RecordGenerator",
    "PlaceholderRegistry",
    "PlaceholderStyle",
    # Config
    "GeneratorConfig",
    "load_config",
    # Errors
    "SqlGenError",
    "SourcePosition",
    "ExtractionError",
    "ExtractionArityError",
    "DuplicateFieldError",
    "CompileError",
    "UnresolvedFieldError",
    "FieldTypeError",
    "DirectiveArityError",
    "UnbalancedBlockError",
    "MalformedTemplateError",
    "PlaceholderStyleError",
    "GenerationError",
    "InvalidFieldNameError",
    "ConfigError",
]
