"""Fix: move the literal into a named constant in the nearest enclosing body."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from hardcoded_strings_lint.diagnostics import HARDCODED_STRING_IN_WIDGET, Diagnostic
from hardcoded_strings_lint.fixes.edits import FixProposal, TextEdit
from hardcoded_strings_lint.fixes.naming import disambiguate_identifier, generate_identifier
from hardcoded_strings_lint.syntax import CALLABLE_BOUNDARY_KINDS, BlockNode, SourceUnit, SyntaxKind, SyntaxNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractToVariableFix:
    name: str = "extract_to_variable"
    message: str = "Extract to variable"
    priority: int = 70

    def compute(self, diagnostic: Diagnostic, unit: SourceUnit) -> FixProposal | None:
        if diagnostic.code != HARDCODED_STRING_IN_WIDGET.code:
            return None
        literal = unit.string_literal_at(diagnostic.range)
        if literal is None or not literal.value:
            return None

        target = enclosing_insertion_body(
            literal,
            class_members_visible_in_functions=unit.profile.class_members_visible_in_functions,
        )
        if target is None or target.insert_offset is None:
            logger.debug(f"No enclosing body can take a constant (path={unit.path} offset={literal.start})")
            return None

        identifier = disambiguate_identifier(generate_identifier(literal.value), unit.text_of(target))
        literal_source = unit.text_of(literal)
        if target.kind == SyntaxKind.BLOCK_FUNCTION_BODY:
            declaration = unit.profile.local_constant(identifier, literal_source)
        else:
            declaration = unit.profile.static_constant(identifier, literal_source)

        return FixProposal(
            fix_name=self.name,
            message=self.message,
            priority=self.priority,
            edits=(
                TextEdit.insert(target.insert_offset, target.render_member(declaration)),
                TextEdit.replace(literal.range, identifier),
            ),
        )


def enclosing_insertion_body(
    node: SyntaxNode,
    *,
    class_members_visible_in_functions: bool = True,
) -> BlockNode | None:
    """Nearest function body or class body that can receive a new first member.

    Bodies without an insertion point (expression bodies, one-line bodies)
    are passed over in favor of the next enclosing one. A class body reached
    from inside a function or comprehension only qualifies when the language
    lets that code name class members unqualified.
    """
    left_class_scope = False
    for ancestor in node.ancestors():
        if isinstance(ancestor, BlockNode) and ancestor.insert_offset is not None:
            if ancestor.kind == SyntaxKind.CLASS_BODY and left_class_scope and not class_members_visible_in_functions:
                return None
            return ancestor
        if ancestor.kind in CALLABLE_BOUNDARY_KINDS or ancestor.kind == SyntaxKind.COMPREHENSION:
            left_class_scope = True
    return None
