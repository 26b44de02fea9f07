"""Identifier derivation for extracted string constants."""

from __future__ import annotations

import re

DEFAULT_IDENTIFIER = "text_value"
IDENTIFIER_SUFFIX = "_text"
MAX_WORDS = 3

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def generate_identifier(value: str) -> str:
    """`'Welcome to our application'` -> `welcome_to_our_text`."""
    cleaned = _NON_WORD.sub("", value).strip().lower()
    words = [word for word in cleaned.split() if word][:MAX_WORDS]
    if not words:
        return DEFAULT_IDENTIFIER
    identifier = "_".join(words) + IDENTIFIER_SUFFIX
    if identifier[0].isdigit():
        identifier = f"text_{identifier}"
    return identifier


def disambiguate_identifier(identifier: str, scope_text: str) -> str:
    """First of `name`, `name_2`, `name_3`, ... not already used as a word in `scope_text`."""
    candidate = identifier
    counter = 2
    while re.search(rf"\b{re.escape(candidate)}\b", scope_text):
        candidate = f"{identifier}_{counter}"
        counter += 1
    return candidate
