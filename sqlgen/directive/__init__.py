"""sqlgen directive layer: tokenizer, keyword catalog and scanner."""
from sqlgen.directive.arguments import Argument, FieldRef, Literal, parse_argument
from sqlgen.directive.catalog import CATALOG, DirectiveSpec, FieldType, Keyword
from sqlgen.directive.scanner import Directive, TextSegment, find_directives, scan
from sqlgen.directive.tokenizer import tokenize

__all__ = [
    "Argument",
    "FieldRef",
    "Literal",
    "parse_argument",
    "CATALOG",
    "DirectiveSpec",
    "FieldType",
    "Keyword",
    "Directive",
    "TextSegment",
    "find_directives",
    "scan",
    "tokenize",
]
