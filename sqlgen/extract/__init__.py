"""sqlgen extraction layer: templates → typed fields."""
from sqlgen.extract.extractor import (
    Field,
    directive_fields,
    extract_fields,
    extract_file,
    unify_fields,
)

__all__ = [
    "Field",
    "directive_fields",
    "extract_fields",
    "extract_file",
    "unify_fields",
]
