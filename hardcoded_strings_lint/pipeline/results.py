"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from hardcoded_strings_lint.diagnostics import Diagnostic
from hardcoded_strings_lint.syntax import SourceUnit


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one source unit."""

    unit: SourceUnit
    diagnostics: list[Diagnostic]

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)
