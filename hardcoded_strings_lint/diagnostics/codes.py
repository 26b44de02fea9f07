"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


HARDCODED_STRING_IN_WIDGET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="avoid_hardcoded_strings_in_widgets",
    message="Hardcoded string detected in widget.",
    hint="Replace hardcoded string with a variable or localized string.",
    severity="warning",
    category="lint/i18n",
)
