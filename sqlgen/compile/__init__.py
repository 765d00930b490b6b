"""sqlgen compilation layer: two-way SQL template → parameterized Query."""
from sqlgen.compile.base import Query, RuntimeContext
from sqlgen.compile.compiler import TemplateCompiler, compile_template
from sqlgen.compile.placeholders import PlaceholderRegistry, PlaceholderStyle
from sqlgen.compile.stripper import DUMMY_LITERAL_PATTERNS, strip_dummy_literals

__all__ = [
    "Query",
    "RuntimeContext",
    "TemplateCompiler",
    "compile_template",
    "PlaceholderRegistry",
    "PlaceholderStyle",
    "DUMMY_LITERAL_PATTERNS",
    "strip_dummy_literals",
]
