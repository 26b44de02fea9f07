import json

from hardcoded_strings_lint.frontends import SourceParseError, parse_python_source
from hardcoded_strings_lint.lint import ArgumentScope, LintOptions
from hardcoded_strings_lint.pipeline import load_unit, run_fixes, run_lint
from hardcoded_strings_lint.syntax import DART, PYTHON
from tests._shared_cases import dart_build_payload, python_source


def test_run_lint_reuses_provided_unit() -> None:
    unit = parse_python_source(python_source('Label("Welcome to Our App")\n'))

    result = run_lint("ignored", unit=unit)

    assert result.unit is unit
    assert len(result.diagnostics) == 1
    assert result.has_diagnostics


def test_run_lint_rejects_unit_with_front_end_arguments() -> None:
    unit = parse_python_source("x = 1\n")

    try:
        run_lint("x = 1\n", unit=unit, known_types={"Label": "Widget"})
    except ValueError as exc:
        assert "Pass either unit or known_types/path, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing unit and known_types together")


def test_run_lint_parses_python_with_known_types_and_options() -> None:
    source = 'Entry(text="Type your name")\nLabel("Hello " + name)\n'

    plain = run_lint(source)
    typed = run_lint(source, known_types={"Entry": "Widget", "Label": "Widget"})
    loose = run_lint(
        source,
        known_types={"Entry": "Widget", "Label": "Widget"},
        options=LintOptions(argument_scope=ArgumentScope.ANCESTOR),
    )

    assert plain.diagnostics == []
    assert plain.unit.profile is PYTHON
    assert len(typed.diagnostics) == 1
    assert len(loose.diagnostics) == 2


def test_load_unit_picks_front_end_by_suffix() -> None:
    exported = load_unit(json.dumps(dart_build_payload()), path="lib/home_page.ast.json")
    python = load_unit("x = 1\n", path="app.py")

    assert exported.profile is DART
    assert python.profile is PYTHON


def test_run_lint_propagates_parse_errors() -> None:
    try:
        run_lint("def (:\n")
    except SourceParseError:
        pass
    else:
        raise AssertionError("Expected SourceParseError for invalid Python")


def test_run_fixes_returns_proposals_by_priority() -> None:
    result = run_lint(json.dumps(dart_build_payload()), path="home_page.ast.json")

    proposals = run_fixes(result.diagnostics[0], unit=result.unit)

    assert [proposal.priority for proposal in proposals] == [80, 70]
