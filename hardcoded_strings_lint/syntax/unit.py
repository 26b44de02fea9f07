"""Per-pass carrier for one analyzed file."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from hardcoded_strings_lint.syntax.kind import SyntaxKind
from hardcoded_strings_lint.syntax.node import StringLiteralNode, SyntaxNode
from hardcoded_strings_lint.syntax.profile import LanguageProfile
from hardcoded_strings_lint.text import LineIndex, TextRange, slice_text_range


@dataclass(slots=True)
class SourceUnit:
    """Tree, text and language profile of one file for one analysis pass.

    A unit is built by a front end, consumed by the lint rules and fixes, and
    discarded once the file changes.
    """

    source_text: str
    root: SyntaxNode
    profile: LanguageProfile
    path: str | None = None
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex.from_text(self.source_text)
        return self._line_index

    def text_of(self, node: SyntaxNode) -> str:
        return slice_text_range(self.source_text, node.range)

    def string_literals(self) -> Iterator[StringLiteralNode]:
        """Outermost string literals in document order.

        Literals nested directly inside another literal (parts of adjacent
        strings) are represented by their enclosing literal.
        """
        for node in self.root.descendants():
            if not isinstance(node, StringLiteralNode):
                continue
            if node.parent is not None and node.parent.kind == SyntaxKind.STRING_LITERAL:
                continue
            yield node

    def string_literal_at(self, range: TextRange) -> StringLiteralNode | None:
        """The literal a diagnostic range points at.

        Prefers an exact range match, then the first literal overlapping it.
        """
        overlapping: StringLiteralNode | None = None
        for node in self.string_literals():
            if node.range == range:
                return node
            if overlapping is None:
                shared = node.range.intersect(range)
                if shared is not None and not shared.is_empty():
                    overlapping = node
        return overlapping
