"""Offset <-> line lookups over one source text."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
import re

_LEADING_WHITESPACE = re.compile(r"^(\s*)")


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Line table for a source text.

    Lines are split on `\\n` only; a `\\r` left at the end of a CRLF line stays
    part of that line's text.
    """

    line_starts: tuple[int, ...]
    lines: tuple[str, ...]

    @staticmethod
    def from_text(text: str) -> LineIndex:
        starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                starts.append(index + 1)
        return LineIndex(line_starts=tuple(starts), lines=tuple(text.split("\n")))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_number(self, offset: int) -> int:
        """1-based line number of the line containing `offset`."""
        if offset < 0:
            raise ValueError("Offset cannot be negative")
        return bisect_right(self.line_starts, offset)

    def line_start(self, line_number: int) -> int:
        """Offset of the first character of a 1-based line."""
        if not 1 <= line_number <= len(self.line_starts):
            raise ValueError(f"Line {line_number} is out of range 1..{len(self.line_starts)}")
        return self.line_starts[line_number - 1]

    def line_text(self, line_number: int) -> str:
        return self.lines[line_number - 1]

    def column(self, offset: int) -> int:
        """1-based column of `offset` within its line."""
        return offset - self.line_start(self.line_number(offset)) + 1

    def indentation_before(self, text: str, offset: int) -> str:
        """Leading whitespace of the line containing `offset`, up to `offset`."""
        line_start = self.line_start(self.line_number(offset))
        match = _LEADING_WHITESPACE.match(text[line_start:offset])
        return match.group(1) if match else ""
