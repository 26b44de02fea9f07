"""Front ends turning a source representation into a `SourceUnit`."""

from hardcoded_strings_lint.frontends.errors import SourceParseError
from hardcoded_strings_lint.frontends.exported_tree import load_exported_tree, load_exported_tree_json
from hardcoded_strings_lint.frontends.python_source import parse_python_source

__all__ = [
    "SourceParseError",
    "load_exported_tree",
    "load_exported_tree_json",
    "parse_python_source",
]
