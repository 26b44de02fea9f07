from io import StringIO
import json
from pathlib import Path

from hardcoded_strings_lint.cli import build_parser, run
from tests._shared_cases import PYTHON_WIDGETS, dart_build_payload

SCREEN = PYTHON_WIDGETS + 'def build():\n    return Label("Welcome to Our App")\n'


def _run(*argv: str) -> tuple[int, str, str]:
    stdout = StringIO()
    stderr = StringIO()
    exit_code = run(list(argv), stdout=stdout, stderr=stderr)
    return exit_code, stdout.getvalue(), stderr.getvalue()


def _project(tmp_path: Path) -> Path:
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "screen.py").write_text(SCREEN, encoding="utf-8")
    (tmp_path / "app" / "clean.py").write_text("x = 1\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text('Label("Not a source file")\n', encoding="utf-8")
    return tmp_path


def test_parser_exposes_check_options() -> None:
    args = build_parser().parse_args(
        ["check", "src", "--format", "json", "--argument-scope", "ancestor", "--exclude", "a/", "--exclude", "b/"]
    )

    assert args.command == "check"
    assert args.paths == ["src"]
    assert args.argument_scope == "ancestor"
    assert args.exclude == ["a/", "b/"]
    assert args.fix is None


def test_check_reports_json_and_exits_one(tmp_path: Path) -> None:
    root = _project(tmp_path)

    exit_code, stdout, _ = _run("check", str(root), "--format", "json")

    assert exit_code == 1
    records = json.loads(stdout)
    assert len(records) == 1
    record = records[0]
    assert record["path"].endswith("screen.py")
    assert record["code"] == "avoid_hardcoded_strings_in_widgets"
    assert record["severity"] == "warning"
    assert record["line"] == SCREEN.count("\n")
    assert record["column"] == len('    return Label(') + 1


def test_check_table_output_for_clean_tree(tmp_path: Path) -> None:
    (tmp_path / "clean.py").write_text("x = 1\n", encoding="utf-8")

    exit_code, stdout, _ = _run("check", str(tmp_path))

    assert exit_code == 0
    assert "No hardcoded strings found." in stdout


def test_check_table_lists_findings(tmp_path: Path) -> None:
    root = _project(tmp_path)

    exit_code, stdout, _ = _run("check", str(root))

    assert exit_code == 1
    assert "message" in stdout
    assert "No hardcoded strings found." not in stdout


def test_exclude_patterns_skip_files(tmp_path: Path) -> None:
    root = _project(tmp_path)

    exit_code, stdout, _ = _run("check", str(root), "--exclude", "app/screen.py", "--format", "json")

    assert exit_code == 0
    assert json.loads(stdout) == []


def test_config_file_sets_scope_and_excludes(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / "app" / "loose.py").write_text(PYTHON_WIDGETS + 'Label("Hello " + name)\n', encoding="utf-8")
    config = root / "lint.toml"
    config.write_text('argument-scope = "ancestor"\nexclude = ["screen.py"]\n', encoding="utf-8")

    exit_code, stdout, _ = _run("check", str(root / "app"), "--config", str(config), "--format", "json")

    assert exit_code == 1
    assert [Path(record["path"]).name for record in json.loads(stdout)] == ["loose.py"]

    exit_code, stdout, _ = _run(
        "check", str(root / "app"), "--config", str(config), "--argument-scope", "direct", "--format", "json"
    )
    assert exit_code == 0


def test_exported_trees_are_discovered(tmp_path: Path) -> None:
    (tmp_path / "home_page.ast.json").write_text(json.dumps(dart_build_payload()), encoding="utf-8")

    exit_code, stdout, _ = _run("check", str(tmp_path), "--format", "json")

    assert exit_code == 1
    assert json.loads(stdout)[0]["path"].endswith("home_page.ast.json")


def test_fix_add_ignore_comment_rewrites_file(tmp_path: Path) -> None:
    root = _project(tmp_path)
    screen = root / "app" / "screen.py"

    exit_code, _, _ = _run("check", str(root), "--fix", "add_ignore_comment", "--format", "json")

    assert exit_code == 0
    assert screen.read_text(encoding="utf-8") == SCREEN.replace(
        '    return Label(',
        "    # ignore: avoid_hardcoded_strings_in_widgets\n    return Label(",
    )
    assert _run("check", str(root))[0] == 0


def test_fix_extract_to_variable_rewrites_every_literal(tmp_path: Path) -> None:
    screen = tmp_path / "screen.py"
    screen.write_text(
        PYTHON_WIDGETS + 'def build():\n    return [Label("Sign in now"), Button("Create an account")]\n',
        encoding="utf-8",
    )

    exit_code, _, _ = _run("check", str(screen), "--fix", "extract_to_variable")

    assert exit_code == 0
    assert screen.read_text(encoding="utf-8") == PYTHON_WIDGETS + (
        "def build():\n"
        '    create_an_account_text = "Create an account"\n'
        '    sign_in_now_text = "Sign in now"\n'
        "    return [Label(sign_in_now_text), Button(create_an_account_text)]\n"
    )


def test_unfixable_literals_stay_reported(tmp_path: Path) -> None:
    screen = tmp_path / "screen.py"
    source = PYTHON_WIDGETS + 'Label("Welcome to Our App")\n'
    screen.write_text(source, encoding="utf-8")

    exit_code, _, _ = _run("check", str(screen), "--fix", "extract_to_variable")

    assert exit_code == 1
    assert screen.read_text(encoding="utf-8") == source


def test_errors_exit_two_and_keep_going(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / "app" / "broken.py").write_text("def broken(:\n", encoding="utf-8")

    exit_code, stdout, stderr = _run("check", str(root), str(root / "missing"), "--format", "json")

    assert exit_code == 2
    assert "broken.py" in stderr
    assert "Path does not exist" in stderr
    assert len(json.loads(stdout)) == 1


def test_bad_config_and_usage_exit_two(tmp_path: Path) -> None:
    config = tmp_path / "lint.toml"
    config.write_text('argument-scope = "everywhere"\n', encoding="utf-8")

    assert _run("check", str(tmp_path), "--config", str(config))[0] == 2
    assert _run("check", str(tmp_path), "--format", "xml")[0] == 2
    assert _run()[0] == 2


def test_help_exits_zero() -> None:
    assert _run("--help")[0] == 0
    assert _run("check", "--help")[0] == 0


def test_malformed_pyproject_tool_key_exits_two(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("tool = 1\n", encoding="utf-8")
    (tmp_path / "clean.py").write_text("x = 1\n", encoding="utf-8")

    exit_code, _, stderr = _run("check", str(tmp_path))

    assert exit_code == 2
    assert "must be a table" in stderr
