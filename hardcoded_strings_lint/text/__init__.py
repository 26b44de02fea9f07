"""Text offsets, ranges and line tables."""

from hardcoded_strings_lint.text.lines import LineIndex
from hardcoded_strings_lint.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
