"""Named-argument labels whose string values are never reported."""

from __future__ import annotations

from typing import Final

ALLOWED_PROPERTIES: Final[frozenset[str]] = frozenset(
    {
        # Accessibility and semantics
        "semanticsLabel",
        "excludeSemantics",
        # Technical identifiers
        "restorationId",
        "heroTag",
        "key",
        "debugLabel",
        # Asset and resource references
        "fontFamily",
        "package",
        "name",
        "asset",
        "tooltip",
        # Enumerant-like layout and text properties
        "textDirection",
        "locale",
        "materialType",
        "clipBehavior",
        "crossAxisAlignment",
        "mainAxisAlignment",
        "textAlign",
        "textBaseline",
        "overflow",
        "softWrap",
        "textScaleFactor",
    }
)


def normalize_label(label: str) -> str:
    """`font_family` -> `fontFamily`; camelCase labels pass through unchanged."""
    head, *rest = label.split("_")
    if not rest:
        return label
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def is_allowed_property(
    label: str | None,
    allowed: frozenset[str] = ALLOWED_PROPERTIES,
) -> bool:
    if not label:
        return False
    return label in allowed or normalize_label(label) in allowed
