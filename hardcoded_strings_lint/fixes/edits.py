"""Text edits and fix proposals; application is the host's job."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from hardcoded_strings_lint.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace `range` with `text`; an empty range is a plain insertion."""

    range: TextRange
    text: str

    @staticmethod
    def insert(offset: int, text: str) -> "TextEdit":
        return TextEdit(range=TextRange.empty(TextSize(offset)), text=text)

    @staticmethod
    def replace(range: TextRange, text: str) -> "TextEdit":
        return TextEdit(range=range, text=text)


@dataclass(frozen=True, slots=True)
class FixProposal:
    """A named, prioritized bundle of edits that must be applied all together."""

    fix_name: str
    message: str
    priority: int
    edits: tuple[TextEdit, ...]


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply edits expressed against the same original `text`.

    All edits are validated before any is applied. Insertions sharing an
    offset keep their given order.
    """
    ordered = sorted(edits, key=lambda edit: edit.range.as_tuple())
    text_len = len(text)
    previous_end = 0
    for edit in ordered:
        start, end = edit.range.as_tuple()
        if end > text_len:
            raise ValueError(f"Edit {edit.range!r} is outside text of length {text_len}")
        if start < previous_end:
            raise ValueError(f"Edit {edit.range!r} overlaps a previous edit")
        previous_end = end

    pieces: list[str] = []
    cursor = 0
    for edit in ordered:
        start, end = edit.range.as_tuple()
        pieces.append(text[cursor:start])
        pieces.append(edit.text)
        cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def apply_fix(text: str, proposal: FixProposal) -> str:
    return apply_edits(text, proposal.edits)
