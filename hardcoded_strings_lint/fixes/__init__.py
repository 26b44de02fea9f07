"""Source-rewrite proposals for hardcoded-string diagnostics."""

from hardcoded_strings_lint.fixes.edits import FixProposal, TextEdit, apply_edits, apply_fix
from hardcoded_strings_lint.fixes.extract import ExtractToVariableFix
from hardcoded_strings_lint.fixes.ignore_comment import AddIgnoreCommentFix
from hardcoded_strings_lint.fixes.naming import disambiguate_identifier, generate_identifier
from hardcoded_strings_lint.fixes.runner import Fix, compute_fixes, default_fixes, fixes_by_name

__all__ = [
    "AddIgnoreCommentFix",
    "ExtractToVariableFix",
    "Fix",
    "FixProposal",
    "TextEdit",
    "apply_edits",
    "apply_fix",
    "compute_fixes",
    "default_fixes",
    "disambiguate_identifier",
    "fixes_by_name",
    "generate_identifier",
]
