"""Directive argument model: field references and literals."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from sqlgen.errors import MalformedTemplateError, SourcePosition

#: Leading marker that turns a token into a field reference.
FIELD_MARKER = "."

_INT_RE = re.compile(r"^-?\d+$")
_FLOAT_RE = re.compile(r"^-?\d+\.\d+$")
_ESCAPE_RE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


@dataclass(frozen=True)
class FieldRef:
    """Reads ``name`` from the data record.  Dotted names walk attributes."""

    name: str
    token: str

    @property
    def path(self) -> list[str]:
        return self.name.split(".")


@dataclass(frozen=True)
class Literal:
    """A constant written directly in the directive."""

    value: Any
    token: str


Argument = Union[FieldRef, Literal]


def is_field_reference(token: str) -> bool:
    return token.startswith(FIELD_MARKER)


def parse_argument(token: str, position: SourcePosition | None = None) -> Argument:
    """Classify a raw token.

    Tokens starting with ``.`` are field references.  Anything else is a
    literal: a double-quoted string, an integer, a decimal, ``true`` /
    ``false``, ``nil`` / ``null`` (``None``), or a bare word kept as text.

    Raises:
        MalformedTemplateError: If a quoted string is not terminated.
    """
    if is_field_reference(token):
        return FieldRef(name=token[len(FIELD_MARKER):], token=token)
    if token.startswith('"'):
        if len(token) < 2 or not token.endswith('"') or token.endswith('\\"'):
            raise MalformedTemplateError(
                f"Unterminated string literal: {token}",
                details={"token": token},
                position=position,
            )
        return Literal(value=_unescape(token[1:-1]), token=token)
    if _INT_RE.match(token):
        return Literal(value=int(token), token=token)
    if _FLOAT_RE.match(token):
        return Literal(value=float(token), token=token)
    lowered = token.lower()
    if lowered in ("true", "false"):
        return Literal(value=lowered == "true", token=token)
    if lowered in ("nil", "null"):
        return Literal(value=None, token=token)
    return Literal(value=token, token=token)


def _unescape(s: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), s)
