"""Base class for generated query records.

A generated record is a pydantic model whose fields are the parameters of
one ``.sql`` template.  The template text lives on the class, so a record
instance is everything needed to produce a :class:`~sqlgen.compile.base.Query`::

    class SelectUsersRecord(QueryRecord):
        sql_template: ClassVar[str] = "SELECT * FROM users WHERE id = /** int .ID **/1"

        ID: int

    sql, args = SelectUsersRecord(ID=2).query()
"""
from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from sqlgen.compile.base import Query
from sqlgen.compile.compiler import compile_template


class QueryRecord(BaseModel):
    """Typed parameter record for one two-way SQL template.

    Class attributes:
        sql_template: Raw template text, dummy literals included.
        sql_file: Name of the ``.sql`` file the record was generated from.
        placeholder_style: Default placeholder style for :meth:`query`.
    """

    model_config = ConfigDict(extra="forbid")

    sql_template: ClassVar[str] = ""
    sql_file: ClassVar[str] = ""
    placeholder_style: ClassVar[str] = "qmark"

    def query(self, style: str | None = None) -> Query:
        """Compile the class template using this record as the data source.

        Raises:
            CompileError: (or subclass) if the template cannot be compiled.
        """
        return compile_template(
            self.sql_template, self, style=style or self.placeholder_style
        )

    def compile(self) -> Query:
        """Same as :meth:`query` with the class default style."""
        return self.query()


#: Attribute names a template field may not use.
RESERVED_NAMES: frozenset[str] = frozenset(
    name for name in dir(QueryRecord) if not name.startswith("_")
)
