"""Fix lookup for one diagnostic."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from hardcoded_strings_lint.diagnostics import Diagnostic
from hardcoded_strings_lint.fixes.edits import FixProposal
from hardcoded_strings_lint.fixes.extract import ExtractToVariableFix
from hardcoded_strings_lint.fixes.ignore_comment import AddIgnoreCommentFix
from hardcoded_strings_lint.syntax import SourceUnit


class Fix(Protocol):
    """Fix contract: a pure function from (diagnostic, unit) to at most one proposal."""

    @property
    def name(self) -> str: ...

    @property
    def message(self) -> str: ...

    @property
    def priority(self) -> int: ...

    def compute(self, diagnostic: Diagnostic, unit: SourceUnit) -> FixProposal | None: ...


def default_fixes() -> tuple[Fix, ...]:
    return (AddIgnoreCommentFix(), ExtractToVariableFix())


def fixes_by_name(fixes: Sequence[Fix] | None = None) -> dict[str, Fix]:
    return {fix.name: fix for fix in (fixes if fixes is not None else default_fixes())}


def compute_fixes(
    diagnostic: Diagnostic,
    unit: SourceUnit,
    fixes: Sequence[Fix] | None = None,
) -> list[FixProposal]:
    """Every applicable proposal for `diagnostic`, highest priority first."""
    resolved = tuple(fixes) if fixes is not None else default_fixes()
    proposals: list[FixProposal] = []
    for fix in resolved:
        proposal = fix.compute(diagnostic, unit)
        if proposal is not None:
            proposals.append(proposal)
    return sorted(proposals, key=lambda proposal: (-proposal.priority, proposal.fix_name))
