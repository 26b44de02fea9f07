"""Source-unit carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from hardcoded_strings_lint.pipeline.results import LintRunResult

if TYPE_CHECKING:
    from hardcoded_strings_lint.diagnostics import Diagnostic
    from hardcoded_strings_lint.fixes import Fix, FixProposal
    from hardcoded_strings_lint.lint import LintOptions, LintRule
    from hardcoded_strings_lint.syntax import SourceUnit


def run_lint(
    text: str,
    *,
    unit: SourceUnit | None = None,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    known_types: Mapping[str, str | None] | None = None,
    path: str | None = None,
) -> LintRunResult:
    from hardcoded_strings_lint.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(
        text,
        unit=unit,
        options=options,
        rules=rules,
        known_types=known_types,
        path=path,
    )


def run_fixes(
    diagnostic: Diagnostic,
    *,
    unit: SourceUnit,
    fixes: Sequence[Fix] | None = None,
) -> list[FixProposal]:
    from hardcoded_strings_lint.pipeline.entrypoints import run_fixes as _run_fixes

    return _run_fixes(diagnostic, unit=unit, fixes=fixes)


def load_unit(
    text: str,
    *,
    path: str | None = None,
    known_types: Mapping[str, str | None] | None = None,
) -> SourceUnit:
    from hardcoded_strings_lint.pipeline.entrypoints import load_unit as _load_unit

    return _load_unit(text, path=path, known_types=known_types)


__all__ = [
    "LintRunResult",
    "load_unit",
    "run_fixes",
    "run_lint",
]
