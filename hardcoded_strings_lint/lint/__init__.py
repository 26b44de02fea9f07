"""Hardcoded-string lint rule and its classifier components."""

from hardcoded_strings_lint.lint.ignore import contains_ignore_directive, has_ignore_directive, ignore_comment_text
from hardcoded_strings_lint.lint.options import LintOptions
from hardcoded_strings_lint.lint.properties import ALLOWED_PROPERTIES, is_allowed_property
from hardcoded_strings_lint.lint.rules import (
    HardcodedStringInWidgetRule,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from hardcoded_strings_lint.lint.runner import lint_unit
from hardcoded_strings_lint.lint.technical import is_technical_string, technical_pattern_name
from hardcoded_strings_lint.lint.widgets import (
    WIDGET_BASE_CLASSES,
    ArgumentScope,
    BaseClassAllowlist,
    WidgetCapability,
    is_widget_argument,
)

__all__ = [
    "ALLOWED_PROPERTIES",
    "WIDGET_BASE_CLASSES",
    "ArgumentScope",
    "BaseClassAllowlist",
    "HardcodedStringInWidgetRule",
    "LintOptions",
    "LintRule",
    "WidgetCapability",
    "contains_ignore_directive",
    "default_lint_rules",
    "has_ignore_directive",
    "ignore_comment_text",
    "is_allowed_property",
    "is_technical_string",
    "is_widget_argument",
    "lint_unit",
    "technical_pattern_name",
    "validate_lint_rules",
]
