"""Lint options controlling classifier strictness and tables."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from hardcoded_strings_lint.lint.properties import ALLOWED_PROPERTIES
from hardcoded_strings_lint.lint.widgets import WIDGET_BASE_CLASSES, ArgumentScope


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Feature flags and lookup tables for the hardcoded-string rule."""

    argument_scope: ArgumentScope = ArgumentScope.DIRECT
    widget_base_classes: frozenset[str] = WIDGET_BASE_CLASSES
    allowed_properties: frozenset[str] = ALLOWED_PROPERTIES

    @staticmethod
    def with_extras(
        *,
        argument_scope: ArgumentScope = ArgumentScope.DIRECT,
        widget_base_classes: Iterable[str] = (),
        allowed_properties: Iterable[str] = (),
    ) -> "LintOptions":
        """Options whose tables extend, never replace, the built-in ones."""
        return LintOptions(
            argument_scope=argument_scope,
            widget_base_classes=WIDGET_BASE_CLASSES | frozenset(widget_base_classes),
            allowed_properties=ALLOWED_PROPERTIES | frozenset(allowed_properties),
        )
