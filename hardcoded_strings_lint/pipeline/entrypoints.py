"""Entrypoints that build one source unit and run lint rules or fixes over it."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from hardcoded_strings_lint.diagnostics import Diagnostic
from hardcoded_strings_lint.fixes import FixProposal, compute_fixes
from hardcoded_strings_lint.frontends import load_exported_tree_json, parse_python_source
from hardcoded_strings_lint.lint import LintOptions, lint_unit
from hardcoded_strings_lint.pipeline.results import LintRunResult
from hardcoded_strings_lint.syntax import SourceUnit

if TYPE_CHECKING:
    from hardcoded_strings_lint.fixes import Fix
    from hardcoded_strings_lint.lint import LintRule

EXPORTED_TREE_SUFFIX = ".ast.json"


def load_unit(
    text: str,
    *,
    path: str | None = None,
    known_types: Mapping[str, str | None] | None = None,
) -> SourceUnit:
    """Pick a front end by file name: exported trees by suffix, Python otherwise."""
    if path is not None and path.endswith(EXPORTED_TREE_SUFFIX):
        if known_types is not None:
            raise ValueError("Known types apply to Python sources only")
        return load_exported_tree_json(text)
    return parse_python_source(text, known_types=known_types, path=path)


def run_lint(
    text: str,
    *,
    unit: SourceUnit | None = None,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    known_types: Mapping[str, str | None] | None = None,
    path: str | None = None,
) -> LintRunResult:
    """Run the lint rules over one source unit, parsing `text` unless `unit` is given."""
    resolved_unit = _resolve_unit(text, unit=unit, known_types=known_types, path=path)
    diagnostics = lint_unit(resolved_unit, options=options, rules=rules)
    return LintRunResult(unit=resolved_unit, diagnostics=diagnostics)


def run_fixes(
    diagnostic: Diagnostic,
    *,
    unit: SourceUnit,
    fixes: Sequence[Fix] | None = None,
) -> list[FixProposal]:
    """Proposals for one diagnostic of `unit`, highest priority first."""
    return compute_fixes(diagnostic, unit, fixes)


def _resolve_unit(
    text: str,
    *,
    unit: SourceUnit | None,
    known_types: Mapping[str, str | None] | None,
    path: str | None,
) -> SourceUnit:
    if unit is not None:
        if known_types is not None or path is not None:
            raise ValueError("Pass either unit or known_types/path, not both")
        return unit
    return load_unit(text, path=path, known_types=known_types)
