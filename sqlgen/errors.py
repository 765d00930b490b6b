"""Custom exception hierarchy for sqlgen.

All public errors inherit from SqlGenError so callers can catch the base
class for any sqlgen-specific failure.  Errors raised while reading a
template carry the :class:`SourcePosition` of the offending directive.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SourcePosition:
    """Location of a directive inside template text.

    Attributes:
        offset: Zero-based character offset of the opening ``/**``.
        line: One-based line number.
        column: One-based column number.
    """

    offset: int
    line: int
    column: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> SourcePosition:
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return cls(offset=offset, line=line, column=column)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class SqlGenError(Exception):
    """Base exception for all sqlgen errors.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ``ARITY_MISMATCH``).
        details: Extra structured context.
        position: Where in the template the error was detected, if known.
    """

    default_code = "SQLGEN_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        position: SourcePosition | None = None,
    ) -> None:
        if position is not None:
            message = f"{message} (at {position})"
        super().__init__(message)
        self.code = code or self.default_code
        self.details: dict[str, Any] = details or {}
        self.position = position

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for diagnostics."""
        response: dict[str, Any] = {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }
        if self.position is not None:
            response["position"] = {
                "offset": self.position.offset,
                "line": self.position.line,
                "column": self.position.column,
            }
        return response


# ---------------------------------------------------------------------------
# Extraction (build time)
# ---------------------------------------------------------------------------


class ExtractionError(SqlGenError):
    """Raised when fields cannot be extracted from a template."""

    default_code = "EXTRACTION_ERROR"


class ExtractionArityError(ExtractionError):
    """Raised when a directive has the wrong number of arguments."""

    def __init__(
        self,
        keyword: str,
        expected: int,
        observed: int,
        position: SourcePosition | None = None,
    ) -> None:
        super().__init__(
            f"Directive '{keyword}' takes {expected} argument(s), got {observed}.",
            code="ARITY_MISMATCH",
            details={"keyword": keyword, "expected": expected, "observed": observed},
            position=position,
        )
        self.keyword = keyword
        self.expected = expected
        self.observed = observed


class DuplicateFieldError(ExtractionError):
    """Raised when one field name is bound with conflicting types."""

    def __init__(self, name: str, types: list[str]) -> None:
        super().__init__(
            f"Field '{name}' is referenced with conflicting types: {', '.join(types)}.",
            code="DUPLICATE_FIELD",
            details={"name": name, "types": types},
        )
        self.name = name
        self.types = types


# ---------------------------------------------------------------------------
# Compilation (request time)
# ---------------------------------------------------------------------------


class CompileError(SqlGenError):
    """Raised when a template cannot be compiled against a data record."""

    default_code = "COMPILE_ERROR"


class UnresolvedFieldError(CompileError):
    """Raised when a field reference is missing from the data record."""

    def __init__(
        self,
        name: str,
        available: list[str] | None = None,
        position: SourcePosition | None = None,
    ) -> None:
        details: dict[str, Any] = {"name": name}
        if available is not None:
            details["available"] = available
        super().__init__(
            f"Field '{name}' not found on data record.",
            code="UNRESOLVED_FIELD",
            details=details,
            position=position,
        )
        self.name = name


class FieldTypeError(CompileError):
    """Raised when a resolved value has the wrong type for its directive."""

    def __init__(
        self,
        keyword: str,
        argument: str,
        expected: str,
        value: Any,
        position: SourcePosition | None = None,
    ) -> None:
        actual = type(value).__name__
        super().__init__(
            f"Directive '{keyword}' expects {expected} for {argument}, got {actual}.",
            code="FIELD_TYPE",
            details={
                "keyword": keyword,
                "argument": argument,
                "expected": expected,
                "actual": actual,
            },
            position=position,
        )


class DirectiveArityError(CompileError):
    """Raised at compile time when a directive has the wrong argument count."""

    def __init__(
        self,
        keyword: str,
        expected: int,
        observed: int,
        position: SourcePosition | None = None,
    ) -> None:
        super().__init__(
            f"Directive '{keyword}' takes {expected} argument(s), got {observed}.",
            code="ARITY_MISMATCH",
            details={"keyword": keyword, "expected": expected, "observed": observed},
            position=position,
        )
        self.keyword = keyword
        self.expected = expected
        self.observed = observed


class UnbalancedBlockError(CompileError):
    """Raised when an ``if`` has no matching ``end`` or vice versa."""

    def __init__(self, message: str, position: SourcePosition | None = None) -> None:
        super().__init__(message, code="UNBALANCED_BLOCK", position=position)


class MalformedTemplateError(CompileError):
    """Raised when template text or a directive argument cannot be parsed."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        position: SourcePosition | None = None,
    ) -> None:
        super().__init__(
            message, code="MALFORMED_TEMPLATE", details=details, position=position
        )


class PlaceholderStyleError(CompileError):
    """Raised when an unregistered placeholder style is requested."""

    def __init__(self, name: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported placeholder style: '{name}'. Registered styles: {registered}.",
            code="UNKNOWN_PLACEHOLDER_STYLE",
            details={"style": name, "registered": registered},
        )


# ---------------------------------------------------------------------------
# Code generation and configuration
# ---------------------------------------------------------------------------


class GenerationError(SqlGenError):
    """Raised when record source code cannot be generated for a directory.

    Args:
        message: Human-readable description.
        path: The ``.sql`` file being processed, if any.
    """

    default_code = "GENERATION_ERROR"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path is not None:
            details["path"] = path
        super().__init__(message, code=code, details=details)
        self.path = path


class InvalidFieldNameError(GenerationError):
    """Raised when an extracted field name cannot become a record attribute."""

    def __init__(self, name: str, reason: str, path: str | None = None) -> None:
        super().__init__(
            f"Field name '{name}' cannot be used: {reason}.",
            path=path,
            code="INVALID_FIELD_NAME",
            details={"name": name, "reason": reason},
        )
        self.name = name


class ConfigError(SqlGenError):
    """Raised when generator configuration is missing or invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(
            message,
            code="CONFIG_ERROR",
            details={"path": path} if path is not None else None,
        )
        self.path = path
