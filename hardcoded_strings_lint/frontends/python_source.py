"""Python front end: lowers a module's `ast` into the generic node model.

Python has no syntactic difference between constructing an object and
calling a function, so a call becomes an `INSTANCE_CREATION` only when its
callee name resolves to a class: one declared in the same module, or one
listed in the caller-supplied `known_types` table (`name -> supertype name`,
`None` for a root type). Everything else is a `METHOD_INVOCATION`.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping
import logging
from typing import TypeAlias

from hardcoded_strings_lint.frontends.errors import SourceParseError
from hardcoded_strings_lint.syntax import (
    PYTHON,
    BlockNode,
    InstanceCreationNode,
    NamedArgumentNode,
    ResolvedType,
    SourceUnit,
    StringLiteralNode,
    SyntaxKind,
    SyntaxNode,
    cover_children,
)
from hardcoded_strings_lint.text import LineIndex

logger = logging.getLogger(__name__)

_SKIPPED_NODES = (
    ast.expr_context,
    ast.boolop,
    ast.operator,
    ast.unaryop,
    ast.cmpop,
    ast.type_ignore,
)
_COMPREHENSION_NODES = (ast.ListComp, ast.SetComp, ast.DictComp, ast.GeneratorExp)

_FunctionDef: TypeAlias = ast.FunctionDef | ast.AsyncFunctionDef


def parse_python_source(
    text: str,
    *,
    known_types: Mapping[str, str | None] | None = None,
    path: str | None = None,
) -> SourceUnit:
    """Parse `text` and lower it into a `SourceUnit` with the Python profile."""
    try:
        module = ast.parse(text, filename=path or "<unknown>")
    except (SyntaxError, ValueError) as exc:
        raise SourceParseError(f"Cannot parse Python source {path or '<unknown>'}: {exc}") from exc

    lowerer = _Lowerer(text, known_types or {})
    root = lowerer.lower_module(module)
    logger.debug(f"Lowered Python source (path={path} classes={len(lowerer.class_bases)})")
    return SourceUnit(source_text=text, root=root, profile=PYTHON, path=path)


class _Lowerer:
    def __init__(self, text: str, known_types: Mapping[str, str | None]) -> None:
        self._text = text
        self._line_index = LineIndex.from_text(text)
        self._encoded_lines: dict[int, bytes] = {}
        self._known_types = known_types
        self.class_bases: dict[str, tuple[str, ...]] = {}

    def lower_module(self, module: ast.Module) -> SyntaxNode:
        for node in ast.walk(module):
            if isinstance(node, ast.ClassDef):
                self.class_bases[node.name] = tuple(
                    name for name in (_type_name(base) for base in node.bases) if name is not None
                )
        children = self._lower_all(module.body, in_class=False)
        return SyntaxNode(SyntaxKind.COMPILATION_UNIT, 0, len(self._text), children)

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #
    def _lower(self, node: ast.AST, *, in_class: bool = False) -> SyntaxNode | None:
        if isinstance(node, _SKIPPED_NODES):
            return None
        if isinstance(node, ast.ClassDef):
            return self._lower_class(node)
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            return self._lower_function(node, in_class=in_class)
        if isinstance(node, ast.Lambda):
            return self._lower_lambda(node)
        if isinstance(node, _COMPREHENSION_NODES):
            return self._with_span(SyntaxKind.COMPREHENSION, node, self._lower_all(ast.iter_child_nodes(node)))
        if isinstance(node, ast.Call):
            return self._lower_call(node)
        if isinstance(node, ast.keyword):
            return self._lower_keyword(node)
        if isinstance(node, ast.Subscript):
            return self._with_span(
                SyntaxKind.INDEX_EXPRESSION,
                node,
                self._lower_all([node.value, node.slice]),
            )
        if isinstance(node, ast.Dict):
            return self._lower_dict(node)
        if isinstance(node, ast.Constant) and isinstance(node.value, str):
            start, end = self._span(node)
            return StringLiteralNode(start, end, node.value)
        if isinstance(node, ast.JoinedStr):
            start, end = self._span(node)
            parts = [value.value for value in node.values if isinstance(value, ast.FormattedValue)]
            return StringLiteralNode(start, end, None, self._lower_all(parts))
        return self._with_span(SyntaxKind.OTHER, node, self._lower_all(ast.iter_child_nodes(node)))

    def _lower_all(self, nodes: Iterable[ast.AST], *, in_class: bool = False) -> list[SyntaxNode]:
        lowered: list[SyntaxNode] = []
        for node in nodes:
            child = self._lower(node, in_class=in_class)
            if child is not None:
                lowered.append(child)
        return lowered

    # ------------------------------------------------------------------ #
    # Declarations
    # ------------------------------------------------------------------ #
    def _lower_class(self, node: ast.ClassDef) -> SyntaxNode:
        header = self._lower_all(
            [*node.decorator_list, *node.bases, *node.keywords, *getattr(node, "type_params", [])]
        )
        body = self._lower_block(SyntaxKind.CLASS_BODY, node, in_class=True)
        return self._declaration(SyntaxKind.CLASS_DECLARATION, node, [*header, body])

    def _lower_function(self, node: _FunctionDef, *, in_class: bool) -> SyntaxNode:
        kind = SyntaxKind.METHOD_DECLARATION if in_class else SyntaxKind.FUNCTION_DECLARATION
        header_nodes: list[ast.AST] = [*node.decorator_list, *getattr(node, "type_params", []), node.args]
        if node.returns is not None:
            header_nodes.append(node.returns)
        body = self._lower_block(SyntaxKind.BLOCK_FUNCTION_BODY, node, in_class=False)
        return self._declaration(kind, node, [*self._lower_all(header_nodes), body])

    def _lower_lambda(self, node: ast.Lambda) -> SyntaxNode | None:
        children = self._lower_all([node.args])
        body = self._lower(node.body)
        if body is not None:
            children.append(cover_children(SyntaxKind.EXPRESSION_FUNCTION_BODY, [body]))
        return self._with_span(SyntaxKind.FUNCTION_EXPRESSION, node, children)

    def _lower_block(self, kind: SyntaxKind, owner: ast.ClassDef | _FunctionDef, *, in_class: bool) -> BlockNode:
        statements = self._lower_all(owner.body, in_class=in_class)
        start = statements[0].start if statements else self._span(owner)[1]
        end = statements[-1].end if statements else start
        insert_offset, indent = self._insertion_point(owner)
        return BlockNode(
            kind,
            start,
            end,
            insert_offset=insert_offset,
            indent=indent,
            leading_newline=False,
            children=statements,
        )

    def _insertion_point(self, owner: ast.ClassDef | _FunctionDef) -> tuple[int | None, str]:
        """Start of the line holding the first non-docstring statement of `owner`."""
        body = owner.body
        if body and _is_docstring(body[0]):
            body = body[1:]
        if not body:
            return None, ""
        anchor = body[0]
        anchor_line = _first_line(anchor)
        if anchor_line <= owner.lineno:
            return None, ""
        line_start = self._line_index.line_start(anchor_line)
        line_text = self._line_index.line_text(anchor_line)
        indent = line_text[: len(line_text) - len(line_text.lstrip())]
        # A docstring sharing the anchor line leaves no line to insert before.
        if anchor_line == anchor.lineno and self._offset(anchor.lineno, anchor.col_offset) != line_start + len(indent):
            return None, ""
        return line_start, indent

    # ------------------------------------------------------------------ #
    # Expressions
    # ------------------------------------------------------------------ #
    def _lower_call(self, node: ast.Call) -> SyntaxNode:
        start, end = self._span(node)
        callee = self._lower(node.func)
        arguments = sorted([*node.args, *node.keywords], key=lambda arg: (arg.lineno, arg.col_offset))
        list_start = callee.end if callee is not None else start
        argument_list = SyntaxNode(SyntaxKind.ARGUMENT_LIST, list_start, end, self._lower_all(arguments))
        children = [argument_list] if callee is None else [callee, argument_list]

        static_type = self._resolve_callee(node.func)
        if static_type is None:
            return SyntaxNode(SyntaxKind.METHOD_INVOCATION, start, end, children)
        return InstanceCreationNode(start, end, static_type, children)

    def _lower_keyword(self, node: ast.keyword) -> SyntaxNode:
        value = self._lower(node.value)
        start, end = self._span(node)
        return NamedArgumentNode(start, end, node.arg, [value] if value is not None else [])

    def _lower_dict(self, node: ast.Dict) -> SyntaxNode | None:
        entries: list[SyntaxNode] = []
        for key, value in zip(node.keys, node.values):
            value_node = self._lower(value)
            if value_node is None:
                continue
            if key is None:
                entries.append(value_node)
                continue
            key_node = self._lower(key)
            if key_node is None:
                entries.append(value_node)
                continue
            entries.append(cover_children(SyntaxKind.MAP_ENTRY, [key_node, value_node]))
        return self._with_span(SyntaxKind.MAP_LITERAL, node, entries)

    # ------------------------------------------------------------------ #
    # Types
    # ------------------------------------------------------------------ #
    def _resolve_callee(self, func: ast.expr) -> ResolvedType | None:
        name = _type_name(func)
        if name is None:
            return None
        return self._resolve_type(name, frozenset())

    def _resolve_type(self, name: str, seen: frozenset[str]) -> ResolvedType | None:
        if name in seen:
            return ResolvedType(name)
        if name in self.class_bases:
            bases = self.class_bases[name]
            supertype = self._resolve_base(bases[0], seen | {name}) if bases else None
            return ResolvedType(name, supertype)
        if name in self._known_types:
            supertype_name = self._known_types[name]
            supertype = self._resolve_base(supertype_name, seen | {name}) if supertype_name else None
            return ResolvedType(name, supertype)
        return None

    def _resolve_base(self, name: str, seen: frozenset[str]) -> ResolvedType:
        return self._resolve_type(name, seen) or ResolvedType(name)

    # ------------------------------------------------------------------ #
    # Offsets
    # ------------------------------------------------------------------ #
    def _offset(self, lineno: int, col_offset: int) -> int:
        """Character offset of an ast (line, UTF-8 byte column) position."""
        encoded = self._encoded_lines.get(lineno)
        if encoded is None:
            encoded = self._line_index.line_text(lineno).encode("utf-8")
            self._encoded_lines[lineno] = encoded
        return self._line_index.line_start(lineno) + len(encoded[:col_offset].decode("utf-8", errors="replace"))

    def _span(self, node: ast.AST) -> tuple[int, int]:
        return (
            self._offset(node.lineno, node.col_offset),  # type: ignore[attr-defined]
            self._offset(node.end_lineno, node.end_col_offset),  # type: ignore[attr-defined]
        )

    def _with_span(self, kind: SyntaxKind, node: ast.AST, children: list[SyntaxNode]) -> SyntaxNode | None:
        if getattr(node, "end_lineno", None) is not None:
            start, end = self._span(node)
            return SyntaxNode(kind, start, end, children)
        if not children:
            return None
        return cover_children(kind, children)

    def _declaration(
        self,
        kind: SyntaxKind,
        node: ast.ClassDef | _FunctionDef,
        children: list[SyntaxNode],
    ) -> SyntaxNode:
        start, end = self._span(node)
        start = min([start, *(child.start for child in children)])
        end = max([end, *(child.end for child in children)])
        return SyntaxNode(kind, start, end, children)


def _type_name(expr: ast.expr) -> str | None:
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, ast.Attribute):
        return expr.attr
    if isinstance(expr, ast.Subscript):
        return _type_name(expr.value)
    return None


def _is_docstring(statement: ast.stmt) -> bool:
    return (
        isinstance(statement, ast.Expr)
        and isinstance(statement.value, ast.Constant)
        and isinstance(statement.value.value, str)
    )


def _first_line(statement: ast.stmt) -> int:
    decorators = getattr(statement, "decorator_list", [])
    return min([statement.lineno, *(decorator.lineno for decorator in decorators)])
