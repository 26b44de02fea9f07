"""Fix: insert a suppression comment above the flagged line."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from hardcoded_strings_lint.diagnostics import HARDCODED_STRING_IN_WIDGET, Diagnostic
from hardcoded_strings_lint.fixes.edits import FixProposal, TextEdit
from hardcoded_strings_lint.lint.ignore import has_ignore_directive, ignore_comment_text
from hardcoded_strings_lint.syntax import SourceUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddIgnoreCommentFix:
    name: str = "add_ignore_comment"
    message: str = "Add ignore comment"
    priority: int = 80

    def compute(self, diagnostic: Diagnostic, unit: SourceUnit) -> FixProposal | None:
        if diagnostic.code != HARDCODED_STRING_IN_WIDGET.code:
            return None
        literal = unit.string_literal_at(diagnostic.range)
        if literal is None:
            return None

        line_index = unit.line_index()
        line_number = line_index.line_number(literal.start)
        comment_prefix = unit.profile.comment_prefix
        if has_ignore_directive(line_number, line_index.lines, comment_prefix):
            logger.debug(f"Line already suppressed, skipping ignore comment (path={unit.path} line={line_number})")
            return None

        insert_at = line_index.line_start(line_number)
        if not _line_start_is_free(unit, line_number, insert_at):
            logger.debug(f"Line continues an earlier token, skipping ignore comment (path={unit.path} line={line_number})")
            return None

        indent = line_index.indentation_before(unit.source_text, literal.start)
        comment = f"{indent}{ignore_comment_text(comment_prefix)}\n"
        return FixProposal(
            fix_name=self.name,
            message=self.message,
            priority=self.priority,
            edits=(TextEdit.insert(insert_at, comment),),
        )


def _line_start_is_free(unit: SourceUnit, line_number: int, offset: int) -> bool:
    """Whether a new line can go before `offset` without splitting a string or a continued line."""
    if line_number > 1 and unit.line_index().line_text(line_number - 1).rstrip("\r").endswith("\\"):
        return False
    return not any(literal.start < offset < literal.end for literal in unit.string_literals())
