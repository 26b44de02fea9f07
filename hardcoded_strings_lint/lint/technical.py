"""Heuristics for strings that are identifiers, paths or values rather than copy.

Every pattern is anchored at the start of the trimmed value only, so
`12px wide` is as technical as `12px`. A wrongly exempted string is an
acceptable miss; a wrongly reported one is not.
"""

from __future__ import annotations

import re
from typing import Final

TECHNICAL_PATTERNS: Final[dict[str, re.Pattern[str]]] = {
    "scheme": re.compile(r"^\w+://", re.ASCII),
    "email": re.compile(r"^[\w\-\.]+@[\w\-\.]+\.\w+", re.ASCII),
    "hex_color": re.compile(r"^#[0-9A-Fa-f]{3,8}"),
    "number_with_unit": re.compile(r"^\d+(\.\d+)?[a-zA-Z]*", re.ASCII),
    "constant_case": re.compile(r"^[A-Z][A-Z0-9]*_[A-Z0-9_]*"),
    "snake_case": re.compile(r"^[a-z]+_[a-z_]+"),
    "absolute_path": re.compile(r"^/[\w/\-\.]*", re.ASCII),
    "dotted": re.compile(r"^\w+\.\w+", re.ASCII),
    "file_name": re.compile(r"^[\w\-]+\.[\w]+", re.ASCII),
    "identifier": re.compile(r"^[a-zA-Z0-9]*[_\-0-9]+[a-zA-Z0-9_\-]*"),
}


def technical_pattern_name(value: str) -> str | None:
    """Name of the first pattern `value` matches, if any."""
    trimmed = value.strip()
    for name, pattern in TECHNICAL_PATTERNS.items():
        if pattern.match(trimmed):
            return name
    return None


def is_technical_string(value: str) -> bool:
    return technical_pattern_name(value) is not None
