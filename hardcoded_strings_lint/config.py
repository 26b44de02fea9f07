"""Configuration loading from `pyproject.toml` or a dedicated TOML file.

The tool reads the `[tool.hardcoded-strings-lint]` table of a
`pyproject.toml`; any other TOML file is read from its top level::

    [tool.hardcoded-strings-lint]
    argument-scope = "ancestor"
    extra-widget-base-classes = ["Frame"]
    extra-allowed-properties = ["testId"]
    exclude = ["build/", "*_generated.py"]

    [tool.hardcoded-strings-lint.known-types]
    Frame = "Widget"
    Label = "Frame"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from pathlib import Path
import tomllib
from typing import Any

from hardcoded_strings_lint.lint import ArgumentScope, LintOptions

logger = logging.getLogger(__name__)

PYPROJECT_NAME = "pyproject.toml"
TOOL_TABLE = "hardcoded-strings-lint"
KNOWN_KEYS = frozenset(
    {
        "argument-scope",
        "extra-widget-base-classes",
        "extra-allowed-properties",
        "exclude",
        "known-types",
    }
)


class ConfigError(ValueError):
    """Configuration file is unreadable or carries invalid settings."""


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Settings resolved from configuration, with built-in defaults."""

    options: LintOptions = field(default_factory=LintOptions)
    known_types: dict[str, str | None] = field(default_factory=dict)
    exclude: tuple[str, ...] = ()
    source: Path | None = None


def find_config(start: Path) -> Path | None:
    """Nearest `pyproject.toml` at or above `start` that carries the tool table."""
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_NAME
        if candidate.is_file() and _tool_table(_read_toml(candidate), candidate) is not None:
            return candidate
    return None


def load_config(path: Path | None = None) -> LintConfig:
    """Read settings from `path`; no path means defaults."""
    if path is None:
        return LintConfig()
    document = _read_toml(path)
    table = _tool_table(document, path) if path.name == PYPROJECT_NAME else document
    if table is None:
        logger.debug(f"No tool table in configuration (path={path})")
        return LintConfig(source=path)
    config = parse_config(table, source=path)
    logger.debug(
        f"Loaded configuration (path={path} scope={config.options.argument_scope} "
        f"known_types={len(config.known_types)} exclude={len(config.exclude)})"
    )
    return config


def parse_config(table: Mapping[str, Any], *, source: Path | None = None) -> LintConfig:
    unknown = sorted(set(table) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    scope_value = table.get("argument-scope", ArgumentScope.DIRECT.value)
    try:
        argument_scope = ArgumentScope(scope_value)
    except ValueError as exc:
        choices = ", ".join(scope.value for scope in ArgumentScope)
        raise ConfigError(f"`argument-scope` must be one of {choices}, got {scope_value!r}") from exc

    options = LintOptions.with_extras(
        argument_scope=argument_scope,
        widget_base_classes=_string_list(table, "extra-widget-base-classes"),
        allowed_properties=_string_list(table, "extra-allowed-properties"),
    )
    return LintConfig(
        options=options,
        known_types=_known_types(table),
        exclude=tuple(_string_list(table, "exclude")),
        source=source,
    )


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _tool_table(document: Mapping[str, Any], path: Path) -> Mapping[str, Any] | None:
    tool = document.get("tool", {})
    if not isinstance(tool, Mapping):
        raise ConfigError(f"[tool] in {path} must be a table")
    table = tool.get(TOOL_TABLE)
    if table is not None and not isinstance(table, Mapping):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {path} must be a table")
    return table


def _string_list(table: Mapping[str, Any], key: str) -> list[str]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"`{key}` must be a list of strings")
    return value


def _known_types(table: Mapping[str, Any]) -> dict[str, str | None]:
    value = table.get("known-types", {})
    if not isinstance(value, Mapping):
        raise ConfigError("`known-types` must be a table of type name -> supertype name")
    known: dict[str, str | None] = {}
    for name, supertype in value.items():
        if not isinstance(supertype, str):
            raise ConfigError(f"Supertype of known type `{name}` must be a string")
        # An empty supertype marks a root type.
        known[name] = supertype or None
    return known
