"""Diagnostics core types."""

from dataclasses import dataclass

from hardcoded_strings_lint.diagnostics.codes import DiagnosticSpec, Severity
from hardcoded_strings_lint.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by lint rules."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
