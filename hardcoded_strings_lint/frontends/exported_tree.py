"""Exported-tree front end: loads a syntax tree serialized by an external host.

Payload shape::

    {
        "language": "dart",
        "path": "lib/main.dart",
        "source": "...",
        "root": {"kind": "COMPILATION_UNIT", "offset": 0, "length": 42, "children": [...]}
    }

Each node carries `kind`, `offset` and `length`, and optionally `value`
(string literals), `label` (named arguments), `type` (instance creations,
`{"name": ..., "supertype": {...}}`) and `children`. Kinds are either
`SyntaxKind` member names or analyzer class names such as
`InstanceCreationExpression`; anything else becomes `OTHER`.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from typing import Any, Final

from hardcoded_strings_lint.frontends.errors import SourceParseError
from hardcoded_strings_lint.syntax import (
    BLOCK_KINDS,
    PROFILES,
    BlockNode,
    InstanceCreationNode,
    NamedArgumentNode,
    ResolvedType,
    SourceUnit,
    StringLiteralNode,
    SyntaxKind,
    SyntaxNode,
)
from hardcoded_strings_lint.text import LineIndex

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "dart"
BRACED_BODY_INDENT = "  "

ANALYZER_KIND_ALIASES: Final[dict[str, SyntaxKind]] = {
    "CompilationUnit": SyntaxKind.COMPILATION_UNIT,
    "ClassDeclaration": SyntaxKind.CLASS_DECLARATION,
    "ClassBody": SyntaxKind.CLASS_BODY,
    "MethodDeclaration": SyntaxKind.METHOD_DECLARATION,
    "FunctionDeclaration": SyntaxKind.FUNCTION_DECLARATION,
    "FunctionExpression": SyntaxKind.FUNCTION_EXPRESSION,
    "BlockFunctionBody": SyntaxKind.BLOCK_FUNCTION_BODY,
    "ExpressionFunctionBody": SyntaxKind.EXPRESSION_FUNCTION_BODY,
    "InstanceCreationExpression": SyntaxKind.INSTANCE_CREATION,
    "MethodInvocation": SyntaxKind.METHOD_INVOCATION,
    "ArgumentList": SyntaxKind.ARGUMENT_LIST,
    "NamedExpression": SyntaxKind.NAMED_ARGUMENT,
    "SimpleStringLiteral": SyntaxKind.STRING_LITERAL,
    "AdjacentStrings": SyntaxKind.STRING_LITERAL,
    "StringInterpolation": SyntaxKind.STRING_LITERAL,
    "IndexExpression": SyntaxKind.INDEX_EXPRESSION,
    "SetOrMapLiteral": SyntaxKind.MAP_LITERAL,
    "MapLiteralEntry": SyntaxKind.MAP_ENTRY,
}


def load_exported_tree_json(text: str) -> SourceUnit:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceParseError(f"Exported tree is not valid JSON: {exc}") from exc
    return load_exported_tree(payload)


def load_exported_tree(payload: Mapping[str, Any]) -> SourceUnit:
    """Build a `SourceUnit` from an already-decoded exported tree."""
    if not isinstance(payload, Mapping):
        raise SourceParseError("Exported tree payload must be an object")

    language = payload.get("language", DEFAULT_LANGUAGE)
    profile = PROFILES.get(language) if isinstance(language, str) else None
    if profile is None:
        raise SourceParseError(f"Unsupported exported tree language: {language!r}")

    source = payload.get("source")
    if not isinstance(source, str):
        raise SourceParseError("Exported tree payload needs a `source` string")
    path = payload.get("path")
    if path is not None and not isinstance(path, str):
        raise SourceParseError("Exported tree `path` must be a string")

    root_payload = payload.get("root")
    if not isinstance(root_payload, Mapping):
        raise SourceParseError("Exported tree payload needs a `root` node")

    builder = _TreeBuilder(source)
    root = builder.build(root_payload)
    logger.debug(f"Loaded exported tree (path={path} language={profile.name} nodes={builder.node_count})")
    return SourceUnit(source_text=source, root=root, profile=profile, path=path)


def resolve_kind(name: str) -> SyntaxKind:
    alias = ANALYZER_KIND_ALIASES.get(name)
    if alias is not None:
        return alias
    try:
        return SyntaxKind[name.upper()]
    except KeyError:
        return SyntaxKind.OTHER


class _TreeBuilder:
    def __init__(self, source: str) -> None:
        self._source = source
        self._line_index = LineIndex.from_text(source)
        self.node_count = 0

    def build(self, payload: Mapping[str, Any]) -> SyntaxNode:
        kind_name = payload.get("kind")
        if not isinstance(kind_name, str):
            raise SourceParseError(f"Exported node without a `kind` name: {dict(payload)!r}")
        kind = resolve_kind(kind_name)
        start, end = self._span(payload, kind_name)

        children_payload = payload.get("children", [])
        if not isinstance(children_payload, list):
            raise SourceParseError(f"`children` of {kind_name} at {start} must be a list")
        children = []
        for child in children_payload:
            if not isinstance(child, Mapping):
                raise SourceParseError(f"Child of {kind_name} at {start} must be an object")
            children.append(self.build(child))
        self.node_count += 1

        if kind == SyntaxKind.STRING_LITERAL:
            value = payload.get("value")
            if value is not None and not isinstance(value, str):
                raise SourceParseError(f"String literal value at {start} must be a string or null")
            return StringLiteralNode(start, end, value, children)
        if kind == SyntaxKind.NAMED_ARGUMENT:
            label = payload.get("label")
            if label is not None and not isinstance(label, str):
                raise SourceParseError(f"Named argument label at {start} must be a string")
            return NamedArgumentNode(start, end, label, children)
        if kind == SyntaxKind.INSTANCE_CREATION:
            static_type = _resolved_type(payload.get("type"))
            if static_type is None:
                logger.debug(f"Instance creation without a resolved type (offset={start})")
            return InstanceCreationNode(start, end, static_type, children)
        if kind in BLOCK_KINDS:
            insert_offset, indent = self._braced_layout(start, end, children)
            return BlockNode(
                kind,
                start,
                end,
                insert_offset=insert_offset,
                indent=indent,
                leading_newline=True,
                children=children,
            )
        return SyntaxNode(kind, start, end, children)

    def _span(self, payload: Mapping[str, Any], kind_name: str) -> tuple[int, int]:
        offset = payload.get("offset")
        length = payload.get("length")
        if not _is_int(offset) or not _is_int(length):
            raise SourceParseError(f"{kind_name} node needs integer `offset` and `length`")
        if offset < 0 or length < 0 or offset + length > len(self._source):
            raise SourceParseError(
                f"{kind_name} node span ({offset}, {length}) is outside the source (length={len(self._source)})"
            )
        return offset, offset + length

    def _braced_layout(self, start: int, end: int, children: list[SyntaxNode]) -> tuple[int | None, str]:
        """Insertion point right after the body's `{` and the indentation of its members."""
        brace = self._source.find("{", start, end)
        if brace < 0:
            return None, ""
        brace_line = self._line_index.line_number(brace)
        if children and self._line_index.line_number(children[0].start) > brace_line:
            return brace + 1, self._line_index.indentation_before(self._source, children[0].start)
        brace_text = self._line_index.line_text(brace_line)
        brace_indent = brace_text[: len(brace_text) - len(brace_text.lstrip())]
        return brace + 1, brace_indent + BRACED_BODY_INDENT


def _resolved_type(payload: object) -> ResolvedType | None:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        raise SourceParseError(f"Resolved type must be an object, got {payload!r}")
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        raise SourceParseError(f"Resolved type without a name: {dict(payload)!r}")
    return ResolvedType(name, _resolved_type(payload.get("supertype")))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
