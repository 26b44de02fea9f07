"""Command-line host: discover files, lint them, report, optionally fix."""

import argparse
from dataclasses import dataclass, replace
import json
import logging
from pathlib import Path
import sys
from typing import TextIO

import pathspec
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from hardcoded_strings_lint.config import ConfigError, LintConfig, find_config, load_config
from hardcoded_strings_lint.diagnostics import Diagnostic
from hardcoded_strings_lint.fixes import Fix, FixProposal, apply_fix, fixes_by_name
from hardcoded_strings_lint.frontends import SourceParseError
from hardcoded_strings_lint.lint import ArgumentScope, LintOptions
from hardcoded_strings_lint.pipeline import LintRunResult, run_lint
from hardcoded_strings_lint.pipeline.entrypoints import EXPORTED_TREE_SUFFIX

logger = logging.getLogger(__name__)

PYTHON_SUFFIX = ".py"


@dataclass(frozen=True)
class FileReport:
    """Lint outcome of one file."""

    path: Path
    result: LintRunResult
    fixes_applied: int = 0


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="hardcoded-strings-lint")
    subparsers = parser.add_subparsers(dest="command", required=True)
    check_parser = subparsers.add_parser("check")
    check_parser.add_argument("paths", nargs="+", help="Files or directories to lint.")
    check_parser.add_argument(
        "--config",
        required=False,
        help="TOML configuration file; defaults to the nearest pyproject.toml with a tool table.",
    )
    check_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    check_parser.add_argument(
        "--argument-scope",
        choices=tuple(scope.value for scope in ArgumentScope),
        default=None,
        help="Report only direct widget arguments, or any literal inside a widget construction.",
    )
    check_parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Gitignore-style pattern of paths to skip; may be repeated.",
    )
    check_parser.add_argument(
        "--fix",
        choices=("add_ignore_comment", "extract_to_variable"),
        default=None,
        help="Apply this fix to every diagnostic in Python files and write them back.",
    )
    check_parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 when clean, 1 when diagnostics were reported, 2 on errors.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # --help exits cleanly.
        if exc.code == 0:
            return 0
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.command == "check":
        return _run_check(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_check(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run check command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    roots = [Path(path) for path in args.paths]
    try:
        config = _resolve_config(args.config, roots[0])
    except ConfigError as exc:
        logger.warning(f"Configuration failed (error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    options = config.options
    if args.argument_scope is not None:
        options = replace(options, argument_scope=ArgumentScope(args.argument_scope))
    exclude = pathspec.GitIgnoreSpec.from_lines([*config.exclude, *args.exclude])
    fix = fixes_by_name()[args.fix] if args.fix is not None else None

    files, failed = _discover_files(roots, exclude, stderr)
    reports: list[FileReport] = []
    for file_path in files:
        try:
            reports.append(_check_file(file_path, options=options, config=config, fix=fix))
        except (SourceParseError, OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Failed to check file (path={file_path} error={exc})")
            stderr.write(f"Failed to check {file_path}: {exc}\n")
            failed += 1

    diagnostic_count = sum(len(report.result.diagnostics) for report in reports)
    logger.info(
        f"Check completed (files={len(reports)} diagnostics={diagnostic_count} "
        f"fixes={sum(report.fixes_applied for report in reports)} errors={failed})"
    )
    if args.format == "json":
        _write_json(reports=reports, stdout=stdout)
    else:
        _write_table(reports=reports, stdout=stdout)

    if failed:
        return 2
    return 1 if diagnostic_count else 0


def _resolve_config(config_arg: str | None, first_root: Path) -> LintConfig:
    if config_arg is not None:
        return load_config(Path(config_arg))
    found = find_config(first_root) if first_root.exists() else None
    return load_config(found)


def _discover_files(
    roots: list[Path],
    exclude: pathspec.GitIgnoreSpec,
    stderr: TextIO,
) -> tuple[list[Path], int]:
    """Expand roots into lintable files.

    Explicitly named files are always kept; directories are walked for Python
    sources and exported trees, skipping excluded paths.

    Args:
        roots: Paths given on the command line.
        exclude: Compiled exclusion patterns.
        stderr: Standard error stream.

    Returns:
        Files in discovery order and the number of missing roots.
    """
    files: list[Path] = []
    missing = 0
    for root in roots:
        if root.is_file():
            files.append(root)
            continue
        if not root.is_dir():
            logger.warning(f"Path does not exist (path={root})")
            stderr.write(f"Path does not exist: {root}\n")
            missing += 1
            continue
        for candidate in sorted(root.rglob("*")):
            if not candidate.is_file() or not _is_lintable(candidate):
                continue
            relative = candidate.relative_to(root).as_posix()
            if exclude.match_file(relative):
                logger.debug(f"Skipping excluded file (path={candidate})")
                continue
            files.append(candidate)
    return files, missing


def _is_lintable(path: Path) -> bool:
    return path.name.endswith(EXPORTED_TREE_SUFFIX) or path.suffix == PYTHON_SUFFIX


def _check_file(
    file_path: Path,
    *,
    options: LintOptions,
    config: LintConfig,
    fix: Fix | None,
) -> FileReport:
    source = file_path.read_text(encoding="utf-8")
    exported = file_path.name.endswith(EXPORTED_TREE_SUFFIX)
    known_types = None if exported else config.known_types
    result = run_lint(source, options=options, known_types=known_types, path=str(file_path))
    if fix is None:
        return FileReport(path=file_path, result=result)
    if exported:
        logger.warning(f"Fixes apply to Python sources only (path={file_path})")
        return FileReport(path=file_path, result=result)

    applied = 0
    # Each applied proposal removes or suppresses at least one diagnostic.
    budget = len(result.diagnostics)
    while applied < budget:
        proposal = _first_proposal(result, fix)
        if proposal is None:
            break
        source = apply_fix(source, proposal)
        applied += 1
        result = run_lint(source, options=options, known_types=known_types, path=str(file_path))
    if applied:
        _write_source(file_path, source)
        logger.info(f"Applied fixes (path={file_path} fix={fix.name} count={applied})")
    return FileReport(path=file_path, result=result, fixes_applied=applied)


def _first_proposal(result: LintRunResult, fix: Fix) -> FixProposal | None:
    for diagnostic in result.diagnostics:
        proposal = fix.compute(diagnostic, result.unit)
        if proposal is not None:
            return proposal
    return None


def _write_source(file_path: Path, source: str) -> None:
    tmp_path = file_path.with_suffix(f"{file_path.suffix}.tmp")
    tmp_path.write_text(source, encoding="utf-8")
    tmp_path.replace(file_path)


def _diagnostic_record(report: FileReport, diagnostic: Diagnostic) -> dict[str, object]:
    line_index = report.result.unit.line_index()
    start = diagnostic.range.start.value
    return {
        "path": str(report.path),
        "line": line_index.line_number(start),
        "column": line_index.column(start),
        "start": start,
        "end": diagnostic.range.end.value,
        "code": diagnostic.code,
        "severity": diagnostic.severity,
        "message": diagnostic.message,
        "hint": diagnostic.hint,
    }


def _write_json(reports: list[FileReport], stdout: TextIO) -> None:
    """Write diagnostics as a JSON list.

    Args:
        reports: Per-file lint outcomes.
        stdout: Standard output stream.
    """
    payload = [
        _diagnostic_record(report, diagnostic) for report in reports for diagnostic in report.result.diagnostics
    ]
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(payload, indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_table(reports: list[FileReport], stdout: TextIO) -> None:
    """Write diagnostics as one table row per finding.

    Args:
        reports: Per-file lint outcomes.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    records = [
        _diagnostic_record(report, diagnostic) for report in reports for diagnostic in report.result.diagnostics
    ]
    if not records:
        console.print("No hardcoded strings found.", markup=False, highlight=False)
        return
    table = Table(show_header=True, expand=True)
    table.add_column("path", ratio=3, overflow="fold")
    table.add_column("line", justify="right")
    table.add_column("column", justify="right")
    table.add_column("code", ratio=2, overflow="fold")
    table.add_column("message", ratio=3, overflow="fold")
    for record in records:
        table.add_row(
            str(record["path"]),
            str(record["line"]),
            str(record["column"]),
            str(record["code"]),
            str(record["message"]),
        )
    console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
