"""Suppression comments recognized next to a flagged literal."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache
import re

from hardcoded_strings_lint.diagnostics import HARDCODED_STRING_IN_WIDGET

RULE_NAME = HARDCODED_STRING_IN_WIDGET.code


def ignore_comment_text(comment_prefix: str) -> str:
    """The per-rule suppressor the ignore-comment fix inserts."""
    return f"{comment_prefix} ignore: {RULE_NAME}"


@cache
def _directive_patterns(comment_prefix: str) -> tuple[re.Pattern[str], ...]:
    prefix = re.escape(comment_prefix)
    return (
        re.compile(rf"{prefix}\s*ignore:\s*{RULE_NAME}"),
        re.compile(rf"{prefix}\s*ignore_for_file:\s*{RULE_NAME}"),
        re.compile(rf"{prefix}\s*ignore:\s*hardcoded.string", re.IGNORECASE),
        re.compile(rf"{prefix}\s*hardcoded.ok", re.IGNORECASE),
    )


def contains_ignore_directive(line: str, comment_prefix: str = "//") -> bool:
    return any(pattern.search(line) for pattern in _directive_patterns(comment_prefix))


def has_ignore_directive(
    line_number: int,
    lines: Sequence[str],
    comment_prefix: str = "//",
) -> bool:
    """Check the node's own line and the line before it.

    `line_number` is 1-based. Nothing outside this two-line window suppresses,
    and a `ignore_for_file` directive is only honored inside it too.
    """
    if not 0 < line_number <= len(lines):
        return False
    if contains_ignore_directive(lines[line_number - 1], comment_prefix):
        return True
    if line_number > 1 and contains_ignore_directive(lines[line_number - 2], comment_prefix):
        return True
    return False
