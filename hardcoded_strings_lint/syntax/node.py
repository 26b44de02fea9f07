"""Generic syntax nodes consumed by the lint engine.

Nodes are built bottom-up by a front end: children first, then the parent,
which adopts them and becomes their `parent`. After construction a tree is
treated as read-only.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from hardcoded_strings_lint.syntax.kind import BLOCK_KINDS, SyntaxKind
from hardcoded_strings_lint.text import TextRange


@dataclass(frozen=True, slots=True)
class ResolvedType:
    """Static type of a construction expression with its supertype chain."""

    name: str
    supertype: ResolvedType | None = None

    def chain(self) -> Iterator[ResolvedType]:
        """Yield this type and then each supertype, nearest first."""
        current: ResolvedType | None = self
        while current is not None:
            yield current
            current = current.supertype


class SyntaxNode:
    __slots__ = (
        "kind",
        "parent",
        "index_in_parent",
        "_children",
        "_start",
        "_end",
    )

    def __init__(
        self,
        kind: SyntaxKind,
        start: int,
        end: int,
        children: Sequence[SyntaxNode] = (),
    ) -> None:
        if start < 0 or start > end:
            raise ValueError(f"Invalid node span ({start}, {end}) for {kind.name}")
        self.kind = kind
        self.parent: SyntaxNode | None = None
        self.index_in_parent = 0
        self._start = start
        self._end = end
        self._children: tuple[SyntaxNode, ...] = ()
        self._adopt(children)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange.from_offsets(self._start, self._end)

    @property
    def children(self) -> tuple[SyntaxNode, ...]:
        return self._children

    def ancestors(self) -> Iterator[SyntaxNode]:
        """Yield the parent, grandparent, ... up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def descendants(self) -> Iterator[SyntaxNode]:
        """Yield every node below this one in document (pre-)order."""
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def _adopt(self, children: Sequence[SyntaxNode]) -> None:
        for index, child in enumerate(children):
            if child.parent is not None:
                raise ValueError(f"{child.kind.name} node already has a parent")
            child.parent = self
            child.index_in_parent = index
        self._children = tuple(children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self._start}..{self._end})"


class StringLiteralNode(SyntaxNode):
    """String literal; `value` is `None` when it is not a compile-time constant."""

    __slots__ = ("value",)

    def __init__(
        self,
        start: int,
        end: int,
        value: str | None,
        children: Sequence[SyntaxNode] = (),
    ) -> None:
        super().__init__(SyntaxKind.STRING_LITERAL, start, end, children)
        self.value = value


class InstanceCreationNode(SyntaxNode):
    """Object construction; `static_type` is `None` when unresolved."""

    __slots__ = ("static_type",)

    def __init__(
        self,
        start: int,
        end: int,
        static_type: ResolvedType | None,
        children: Sequence[SyntaxNode] = (),
    ) -> None:
        super().__init__(SyntaxKind.INSTANCE_CREATION, start, end, children)
        self.static_type = static_type

    @property
    def argument_list(self) -> SyntaxNode | None:
        for child in self._children:
            if child.kind == SyntaxKind.ARGUMENT_LIST:
                return child
        return None


class NamedArgumentNode(SyntaxNode):
    """`label: expression` inside an argument list (`label=expression` in Python)."""

    __slots__ = ("label",)

    def __init__(
        self,
        start: int,
        end: int,
        label: str | None,
        children: Sequence[SyntaxNode] = (),
    ) -> None:
        super().__init__(SyntaxKind.NAMED_ARGUMENT, start, end, children)
        self.label = label

    @property
    def expression(self) -> SyntaxNode | None:
        return self._children[0] if self._children else None


class BlockNode(SyntaxNode):
    """Function-like body or type body that can receive a new first member.

    `insert_offset` is where that member goes (`None` when the body cannot
    take one, for example a body sharing its header's line). Braced bodies
    insert right after `{`, so the inserted text starts with a line break;
    indentation-based bodies insert at the start of the first statement's
    line, so the inserted text ends with one.
    """

    __slots__ = ("insert_offset", "indent", "leading_newline")

    def __init__(
        self,
        kind: SyntaxKind,
        start: int,
        end: int,
        *,
        insert_offset: int | None,
        indent: str,
        leading_newline: bool,
        children: Sequence[SyntaxNode] = (),
    ) -> None:
        if kind not in BLOCK_KINDS:
            raise ValueError(f"{kind.name} is not a block kind")
        super().__init__(kind, start, end, children)
        self.insert_offset = insert_offset
        self.indent = indent
        self.leading_newline = leading_newline

    def render_member(self, declaration: str) -> str:
        """Wrap a one-line declaration so it lands as this body's first member."""
        if self.leading_newline:
            return f"\n{self.indent}{declaration}"
        return f"{self.indent}{declaration}\n"


def cover_children(kind: SyntaxKind, children: Sequence[SyntaxNode], fallback: int = 0) -> SyntaxNode:
    """Build a node spanning its children (for synthetic nodes without positions)."""
    if not children:
        return SyntaxNode(kind, fallback, fallback)
    start = min(child.start for child in children)
    end = max(child.end for child in children)
    return SyntaxNode(kind, start, end, children)


__all__ = [
    "BlockNode",
    "InstanceCreationNode",
    "NamedArgumentNode",
    "ResolvedType",
    "StringLiteralNode",
    "SyntaxNode",
    "cover_children",
]
