"""The closed set of directive keywords and what each one means.

Every keyword maps to a :class:`DirectiveSpec` describing its arity and the
role of each argument.  The extractor reads argument roles to infer field
types; the compiler reads them to validate resolved values.  Adding a
keyword means adding a :class:`Keyword` member, a catalog entry, and a
handler in :mod:`sqlgen.compile.compiler`; the extractor is driven by the
catalog alone.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Keyword(str, Enum):
    PARAM = "param"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    IF = "if"
    IN = "in"
    MULTI = "multi"
    END = "end"

    @classmethod
    def lookup(cls, word: str) -> Keyword | None:
        """Return the member spelled ``word``, or ``None`` for unknown words."""
        try:
            return cls(word)
        except ValueError:
            return None


class FieldType(str, Enum):
    """Type inferred for a field from the directive argument it feeds."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    OPAQUE = "opaque"
    LIST = "list"

    @property
    def annotation(self) -> str:
        """Python annotation used for this type in generated records."""
        return _ANNOTATIONS[self]


_ANNOTATIONS: dict[FieldType, str] = {
    FieldType.STRING: "str",
    FieldType.INTEGER: "int",
    FieldType.FLOAT: "float",
    FieldType.BOOLEAN: "bool",
    FieldType.OPAQUE: "Any",
    FieldType.LIST: "list[Any]",
}


@dataclass(frozen=True)
class ArgumentRole:
    """One positional argument slot of a directive.

    Attributes:
        name: Descriptive slot name used in error messages.
        field_type: Type inferred for a field reference in this slot.
    """

    name: str
    field_type: FieldType


@dataclass(frozen=True)
class DirectiveSpec:
    """Catalog entry for a keyword.

    Attributes:
        keyword: The keyword this entry describes.
        roles: Argument slots in order; ``len(roles)`` is the arity.
        emits_value: Whether the directive renders a placeholder into the
            SQL text.  Only such directives are followed by a dummy literal.
    """

    keyword: Keyword
    roles: tuple[ArgumentRole, ...]
    emits_value: bool

    @property
    def arity(self) -> int:
        return len(self.roles)


CATALOG: dict[Keyword, DirectiveSpec] = {
    Keyword.PARAM: DirectiveSpec(
        Keyword.PARAM, (ArgumentRole("value", FieldType.OPAQUE),), emits_value=True
    ),
    Keyword.INT: DirectiveSpec(
        Keyword.INT, (ArgumentRole("value", FieldType.INTEGER),), emits_value=True
    ),
    Keyword.FLOAT: DirectiveSpec(
        Keyword.FLOAT, (ArgumentRole("value", FieldType.FLOAT),), emits_value=True
    ),
    Keyword.STRING: DirectiveSpec(
        Keyword.STRING, (ArgumentRole("value", FieldType.STRING),), emits_value=True
    ),
    Keyword.IF: DirectiveSpec(
        Keyword.IF, (ArgumentRole("condition", FieldType.BOOLEAN),), emits_value=False
    ),
    Keyword.IN: DirectiveSpec(
        Keyword.IN, (ArgumentRole("list", FieldType.LIST),), emits_value=True
    ),
    Keyword.MULTI: DirectiveSpec(
        Keyword.MULTI,
        (
            ArgumentRole("sub-template", FieldType.STRING),
            ArgumentRole("separator", FieldType.STRING),
            ArgumentRole("list", FieldType.LIST),
        ),
        emits_value=True,
    ),
    Keyword.END: DirectiveSpec(Keyword.END, (), emits_value=False),
}


def spec_for(keyword: Keyword) -> DirectiveSpec:
    return CATALOG[keyword]
