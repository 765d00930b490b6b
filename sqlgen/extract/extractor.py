"""Static field extraction from two-way SQL templates.

Runs at build time.  Each field-reference argument of each known directive
becomes a :class:`Field` typed by the argument's catalog role::

    >>> extract_fields("WHERE name = /** string .Name **/'x' AND id = /** int .ID **/1")
    [Field(name='Name', type=<FieldType.STRING: 'string'>), Field(name='ID', type=<FieldType.INTEGER: 'integer'>)]

:func:`extract_fields` keeps every occurrence, duplicates included.
:func:`unify_fields` folds duplicates for record generation.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from sqlgen.directive.arguments import FIELD_MARKER, is_field_reference
from sqlgen.directive.catalog import FieldType, spec_for
from sqlgen.directive.scanner import Directive, find_directives
from sqlgen.errors import DuplicateFieldError, ExtractionArityError

logger = logging.getLogger(__name__)


class Field(BaseModel):
    """A named, typed value a compiled template needs from its caller.

    Attributes:
        name: Field name, without the leading ``.`` marker.
        type: Type inferred from the directive argument role.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType


def directive_fields(directive: Directive) -> list[Field]:
    """Return the fields bound by a single directive.

    Unknown directives bind nothing.

    Raises:
        ExtractionArityError: If the argument count differs from the
            keyword's catalog arity.
    """
    if directive.keyword is None:
        return []
    spec = spec_for(directive.keyword)
    if len(directive.tokens) != spec.arity:
        raise ExtractionArityError(
            directive.word,
            expected=spec.arity,
            observed=len(directive.tokens),
            position=directive.position,
        )
    return [
        Field(name=token[len(FIELD_MARKER):], type=role.field_type)
        for role, token in zip(spec.roles, directive.tokens)
        if is_field_reference(token)
    ]


def extract_fields(template: str) -> list[Field]:
    """Return the fields referenced by ``template`` in source order.

    Raises:
        ExtractionArityError: On the first directive with a bad argument
            count; no fields are returned in that case.
    """
    fields: list[Field] = []
    for directive in find_directives(template):
        fields.extend(directive_fields(directive))
    return fields


def extract_file(path: str | Path) -> list[Field]:
    """Read a ``.sql`` file as UTF-8 and extract its fields."""
    p = Path(path)
    logger.debug("Extracting fields from %s", p)
    return extract_fields(p.read_text(encoding="utf-8"))


def unify_fields(fields: list[Field]) -> list[Field]:
    """Collapse repeated field names, keeping first-seen order.

    Repeats with the same type are dropped.  A name used with two different
    types cannot become one record attribute.

    Raises:
        DuplicateFieldError: If a name is bound with conflicting types.
    """
    seen: dict[str, Field] = {}
    for f in fields:
        first = seen.get(f.name)
        if first is None:
            seen[f.name] = f
        elif first.type != f.type:
            raise DuplicateFieldError(f.name, [first.type.value, f.type.value])
    return list(seen.values())
