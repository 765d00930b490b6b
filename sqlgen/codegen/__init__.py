"""sqlgen code generation: ``.sql`` directories → typed record modules."""
from sqlgen.codegen.generator import RecordGenerator, RecordSpec, generate, render_module

__all__ = [
    "RecordGenerator",
    "RecordSpec",
    "generate",
    "render_module",
]
