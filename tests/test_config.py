from pathlib import Path
import textwrap

from hardcoded_strings_lint.config import ConfigError, LintConfig, find_config, load_config
from hardcoded_strings_lint.lint import ALLOWED_PROPERTIES, WIDGET_BASE_CLASSES, ArgumentScope


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_defaults_without_configuration() -> None:
    config = load_config(None)

    assert config == LintConfig()
    assert config.options.argument_scope == ArgumentScope.DIRECT
    assert config.options.widget_base_classes == WIDGET_BASE_CLASSES
    assert config.options.allowed_properties == ALLOWED_PROPERTIES


def test_pyproject_tool_table_is_loaded(tmp_path: Path) -> None:
    pyproject = _write(
        tmp_path / "pyproject.toml",
        """\
        [project]
        name = "demo"

        [tool.hardcoded-strings-lint]
        argument-scope = "ancestor"
        extra-widget-base-classes = ["Frame"]
        extra-allowed-properties = ["testId"]
        exclude = ["build/"]

        [tool.hardcoded-strings-lint.known-types]
        Frame = ""
        Label = "Frame"
        """,
    )

    config = load_config(pyproject)

    assert config.options.argument_scope == ArgumentScope.ANCESTOR
    assert "Frame" in config.options.widget_base_classes
    assert WIDGET_BASE_CLASSES <= config.options.widget_base_classes
    assert "testId" in config.options.allowed_properties
    assert config.known_types == {"Frame": None, "Label": "Frame"}
    assert config.exclude == ("build/",)
    assert config.source == pyproject


def test_dedicated_file_is_read_from_top_level(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "lint.toml", 'exclude = ["generated/"]\n')

    assert load_config(config_path).exclude == ("generated/",)


def test_pyproject_without_table_gives_defaults(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')

    config = load_config(pyproject)

    assert config.options == LintConfig().options
    assert find_config(tmp_path) is None


def test_find_config_walks_up_from_nested_paths(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", "[tool.hardcoded-strings-lint]\n")
    nested = tmp_path / "src" / "app"
    nested.mkdir(parents=True)
    module = _write(nested / "screen.py", "x = 1\n")

    assert find_config(nested) == pyproject.resolve()
    assert find_config(module) == pyproject.resolve()


def test_invalid_settings_raise_config_error(tmp_path: Path) -> None:
    cases = {
        "unknown.toml": 'colour = "blue"\n',
        "scope.toml": 'argument-scope = "everywhere"\n',
        "list.toml": 'exclude = "build/"\n',
        "types.toml": "[known-types]\nLabel = 3\n",
        "syntax.toml": "exclude = [\n",
    }
    for name, text in cases.items():
        try:
            load_config(_write(tmp_path / name, text))
        except ConfigError:
            continue
        raise AssertionError(f"Expected ConfigError for {name}")


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    try:
        load_config(tmp_path / "missing.toml")
    except ConfigError as exc:
        assert "Cannot read configuration" in str(exc)
    else:
        raise AssertionError("Expected ConfigError for a missing file")


def test_non_table_tool_key_raises_config_error(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", 'tool = "hardcoded-strings-lint"\n')

    for load in (lambda: find_config(tmp_path), lambda: load_config(pyproject)):
        try:
            load()
        except ConfigError as exc:
            assert "[tool]" in str(exc)
        else:
            raise AssertionError("Expected ConfigError for a non-table `tool` key")
