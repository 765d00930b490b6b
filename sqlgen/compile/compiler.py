"""Runtime compilation of two-way SQL templates.

``TemplateCompiler`` is the top-level orchestrator: it strips dummy
literals, parses the cleaned text into a node tree and executes the tree
against a data record in a single left-to-right pass.  Every placeholder
written to the SQL text is paired with exactly one bound argument, in the
same order.

Usage::

    query = compile_template(
        "SELECT * FROM users WHERE id = /** int .ID **/1",
        {"ID": 42},
    )
    cursor.execute(query.sql, query.args)
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlgen.compile.base import Query, RuntimeContext
from sqlgen.compile.parser import (
    BlockNode,
    InertNode,
    Node,
    TextNode,
    ValueNode,
    parse_template,
)
from sqlgen.compile.placeholders import QMARK, PlaceholderRegistry, PlaceholderStyle
from sqlgen.compile.stripper import strip_dummy_literals
from sqlgen.directive.arguments import Argument, FieldRef
from sqlgen.directive.catalog import Keyword
from sqlgen.directive.scanner import Directive
from sqlgen.errors import (
    CompileError,
    FieldTypeError,
    MalformedTemplateError,
    UnresolvedFieldError,
)

#: Rendered for an ``in`` directive bound to an empty list, so that
#: ``x IN (...)`` is false and ``x NOT IN (...)`` is true.
EMPTY_IN_LIST = "(SELECT 1 WHERE 1=0)"

_MISSING = object()


def _available_names(data: Any) -> list[str] | None:
    if isinstance(data, Mapping):
        return sorted(str(k) for k in data)
    if hasattr(data, "__dict__"):
        return sorted(k for k in vars(data) if not k.startswith("_"))
    return None


def _lookup(data: Any, name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(name, _MISSING)
    return getattr(data, name, _MISSING)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _pad_separator(sep: str) -> str:
    """Surround a bare separator such as ``AND`` with single spaces."""
    if sep and sep == sep.strip():
        return f" {sep} "
    return sep


class TemplateCompiler:
    """Compiles two-way SQL templates to :class:`Query` objects.

    Args:
        style: Placeholder style name (see
            :class:`~sqlgen.compile.placeholders.PlaceholderRegistry`) or a
            style instance.  Defaults to ``"qmark"``.

    Raises:
        PlaceholderStyleError: If ``style`` names an unregistered style.
    """

    def __init__(self, style: str | PlaceholderStyle = "qmark") -> None:
        if isinstance(style, str):
            style = PlaceholderRegistry.create(style)
        self._style = style

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, template: str, data: Any) -> Query:
        """Expand ``template`` against ``data``.

        Args:
            template: Raw two-way SQL, dummy literals included.
            data: The data record.  Mappings are read by key, any other
                object by attribute.

        Returns:
            :class:`Query` with the final SQL text and ordered arguments.

        Raises:
            CompileError: (or subclass) if the template is malformed or a
                directive argument does not resolve.  No partial query is
                returned.
        """
        nodes = parse_template(strip_dummy_literals(template))
        runtime = RuntimeContext(style=self._style)
        out: list[str] = []
        self._render(nodes, data, runtime, out)
        return Query(sql="".join(out), args=tuple(runtime.args))

    # ------------------------------------------------------------------
    # Tree execution
    # ------------------------------------------------------------------

    def _render(
        self,
        nodes: list[Node],
        data: Any,
        runtime: RuntimeContext,
        out: list[str],
    ) -> None:
        for node in nodes:
            if isinstance(node, TextNode):
                out.append(node.text)
            elif isinstance(node, BlockNode):
                condition = self._resolve(node.condition, data, node.directive)
                if not isinstance(condition, bool):
                    raise FieldTypeError(
                        "if",
                        node.condition.token,
                        "bool",
                        condition,
                        position=node.directive.position,
                    )
                if condition:
                    self._render(node.body, data, runtime, out)
            elif isinstance(node, ValueNode):
                out.append(self._render_value(node, data, runtime))
            elif isinstance(node, InertNode):
                out.append(node.directive.raw)
            else:
                raise CompileError(f"Unexpected template node: {node!r}")

    def _render_value(self, node: ValueNode, data: Any, runtime: RuntimeContext) -> str:
        d = node.directive
        values = [self._resolve(arg, data, d) for arg in node.args]
        keyword = d.keyword

        if keyword is Keyword.PARAM:
            return runtime.bind(values[0])
        if keyword is Keyword.INT:
            self._expect(values[0] is None or _is_int(values[0]), d, node.args[0], "int", values[0])
            return runtime.bind(values[0])
        if keyword is Keyword.FLOAT:
            self._expect(values[0] is None or _is_number(values[0]), d, node.args[0], "float", values[0])
            return runtime.bind(values[0])
        if keyword is Keyword.STRING:
            self._expect(values[0] is None or isinstance(values[0], str), d, node.args[0], "str", values[0])
            return runtime.bind(values[0])
        if keyword is Keyword.IN:
            self._expect(isinstance(values[0], (list, tuple)), d, node.args[0], "list", values[0])
            return self._render_in(values[0], runtime)
        if keyword is Keyword.MULTI:
            sub, sep, items = values
            self._expect(isinstance(sub, str), d, node.args[0], "str", sub)
            self._expect(isinstance(sep, str), d, node.args[1], "str", sep)
            self._expect(isinstance(items, (list, tuple)), d, node.args[2], "list", items)
            return self._render_multi(sub, sep, items, runtime)
        raise CompileError(
            f"Directive '{d.word}' cannot appear here.", position=d.position
        )

    @staticmethod
    def _render_in(items: list[Any] | tuple[Any, ...], runtime: RuntimeContext) -> str:
        if not items:
            return EMPTY_IN_LIST
        return "(" + ", ".join(runtime.bind(item) for item in items) + ")"

    @staticmethod
    def _render_multi(
        sub: str,
        sep: str,
        items: list[Any] | tuple[Any, ...],
        runtime: RuntimeContext,
    ) -> str:
        parts = sub.split(QMARK)
        copies: list[str] = []
        for item in items:
            pieces = [parts[0]]
            for part in parts[1:]:
                pieces.append(runtime.bind(item))
                pieces.append(part)
            copies.append("".join(pieces))
        return _pad_separator(sep).join(copies)

    # ------------------------------------------------------------------
    # Argument resolution
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(arg: Argument, data: Any, directive: Directive) -> Any:
        if not isinstance(arg, FieldRef):
            return arg.value
        if not arg.name or "" in arg.path:
            raise MalformedTemplateError(
                f"Invalid field reference: '{arg.token}'.",
                details={"token": arg.token},
                position=directive.position,
            )
        value = data
        for segment in arg.path:
            found = _lookup(value, segment)
            if found is _MISSING:
                raise UnresolvedFieldError(
                    arg.name,
                    available=_available_names(value),
                    position=directive.position,
                )
            value = found
        return value

    @staticmethod
    def _expect(
        ok: bool,
        directive: Directive,
        arg: Argument,
        expected: str,
        value: Any,
    ) -> None:
        if not ok:
            raise FieldTypeError(
                directive.word,
                arg.token,
                expected,
                value,
                position=directive.position,
            )


def compile_template(
    template: str,
    data: Any,
    *,
    style: str | PlaceholderStyle = "qmark",
) -> Query:
    """Compile ``template`` against ``data`` (see :meth:`TemplateCompiler.compile`)."""
    return TemplateCompiler(style).compile(template, data)
