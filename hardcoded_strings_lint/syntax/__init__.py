"""Generic syntax tree model shared by all front ends."""

from hardcoded_strings_lint.syntax.kind import BLOCK_KINDS, CALLABLE_BOUNDARY_KINDS, SyntaxKind
from hardcoded_strings_lint.syntax.node import (
    BlockNode,
    InstanceCreationNode,
    NamedArgumentNode,
    ResolvedType,
    StringLiteralNode,
    SyntaxNode,
    cover_children,
)
from hardcoded_strings_lint.syntax.profile import DART, PROFILES, PYTHON, LanguageProfile
from hardcoded_strings_lint.syntax.unit import SourceUnit

__all__ = [
    "BLOCK_KINDS",
    "CALLABLE_BOUNDARY_KINDS",
    "DART",
    "PROFILES",
    "PYTHON",
    "BlockNode",
    "InstanceCreationNode",
    "LanguageProfile",
    "NamedArgumentNode",
    "ResolvedType",
    "SourceUnit",
    "StringLiteralNode",
    "SyntaxKind",
    "SyntaxNode",
    "cover_children",
]
