"""Lint runner over one prepared source unit."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from hardcoded_strings_lint.diagnostics import Diagnostic, collect_diagnostics, sort_diagnostics
from hardcoded_strings_lint.lint.options import LintOptions
from hardcoded_strings_lint.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from hardcoded_strings_lint.syntax import SourceUnit

logger = logging.getLogger(__name__)


def lint_unit(
    unit: SourceUnit,
    *,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
) -> list[Diagnostic]:
    """Run every rule over `unit` and return its diagnostics in source order."""
    if rules is not None and options is not None:
        raise ValueError("Pass either rules or options, not both")
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    diagnostics = collect_diagnostics(*(rule.run(unit) for rule in resolved_rules))
    logger.debug(f"Linted unit (path={unit.path} rules={len(resolved_rules)} diagnostics={len(diagnostics)})")
    return sort_diagnostics(diagnostics)
