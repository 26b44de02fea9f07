"""Diagnostics."""

from hardcoded_strings_lint.diagnostics.codes import HARDCODED_STRING_IN_WIDGET, DiagnosticSpec
from hardcoded_strings_lint.diagnostics.diagnostic import Diagnostic, Severity
from hardcoded_strings_lint.diagnostics.report import collect_diagnostics, sort_diagnostics

__all__ = [
    "HARDCODED_STRING_IN_WIDGET",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "sort_diagnostics",
]
