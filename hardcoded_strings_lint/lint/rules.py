"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias

from hardcoded_strings_lint.diagnostics import HARDCODED_STRING_IN_WIDGET, Diagnostic
from hardcoded_strings_lint.lint.ignore import has_ignore_directive
from hardcoded_strings_lint.lint.options import LintOptions
from hardcoded_strings_lint.lint.properties import is_allowed_property
from hardcoded_strings_lint.lint.technical import is_technical_string
from hardcoded_strings_lint.lint.widgets import BaseClassAllowlist, is_widget_argument
from hardcoded_strings_lint.syntax import NamedArgumentNode, SourceUnit, StringLiteralNode, SyntaxKind, SyntaxNode

LintDomain: TypeAlias = Literal["i18n", "style", "heuristic"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]

MIN_REPORTED_LENGTH = 3


class LintRule(Protocol):
    """Lint rule contract: one pass over one unit, fresh diagnostics each call."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, unit: SourceUnit) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class HardcodedStringInWidgetRule:
    """Flags natural-language literals passed straight into widget constructors.

    A literal is reported only when none of the exemptions applies: a
    suppression comment on its line or the line above, not a widget argument,
    too short, used as a map key or index, passed under an allowlisted
    property, or shaped like a technical value.
    """

    code: str = HARDCODED_STRING_IN_WIDGET.code
    name: str = "avoidHardcodedStringsInWidgets"
    category: str = "i18n"
    domain: LintDomain = "i18n"
    confidence: LintConfidence = "heuristic"
    options: LintOptions = field(default_factory=LintOptions)

    def run(self, unit: SourceUnit) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for literal in unit.string_literals():
            diagnostic = self.classify(unit, literal)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def classify(self, unit: SourceUnit, literal: StringLiteralNode) -> Diagnostic | None:
        if _is_suppressed(unit, literal):
            return None
        capability = BaseClassAllowlist(self.options.widget_base_classes)
        if not is_widget_argument(literal, self.options.argument_scope, capability):
            return None

        value = literal.value
        if not value or utf16_length(value) < MIN_REPORTED_LENGTH:
            return None
        if is_map_key(literal):
            return None
        parent = literal.parent
        if isinstance(parent, NamedArgumentNode) and is_allowed_property(
            parent.label, self.options.allowed_properties
        ):
            return None
        if is_technical_string(value):
            return None

        return Diagnostic.from_spec(HARDCODED_STRING_IN_WIDGET, literal.range)


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units, the unit host editors count string length in."""
    return len(value.encode("utf-16-le")) // 2


def is_map_key(node: SyntaxNode) -> bool:
    parent = node.parent
    if parent is None or not parent.children:
        return False
    if parent.kind == SyntaxKind.INDEX_EXPRESSION:
        return parent.children[-1] is node and len(parent.children) > 1
    if parent.kind == SyntaxKind.MAP_ENTRY:
        return parent.children[0] is node
    return False


def _is_suppressed(unit: SourceUnit, node: SyntaxNode) -> bool:
    line_index = unit.line_index()
    return has_ignore_directive(
        line_index.line_number(node.start),
        line_index.lines,
        unit.profile.comment_prefix,
    )


def default_lint_rules(options: LintOptions | None = None) -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        HardcodedStringInWidgetRule(options=options or LintOptions()),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"i18n", "style", "heuristic"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected i18n/style/heuristic."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code:
            raise ValueError(f"Lint rule `{rule.name}` has an empty code.")
