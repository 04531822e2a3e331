"""stagegate CLI entry point.

Usage:
    stagegate check [PATH ...] [--config PATH] [--all] [--skip-format] [--skip-lint]
                    [--format text|json] [--output FILE]
    stagegate headers PATH ...
    stagegate init [--path DIR] [--no-hook] [--pre-commit-config]
    python -m stagegate check [options]
"""

from __future__ import annotations

import argparse
import sys

from stagegate.config import StageGateConfig
from stagegate.engine import StageGateEngine
from stagegate.header import HeaderValidator
from stagegate.init_command import init_command
from stagegate.models import StagedFile
from stagegate.reporters.json_reporter import JSONReporter
from stagegate.reporters.text_reporter import TextReporter
from stagegate.staged import iter_staged_files


def _load_config(path: str | None) -> StageGateConfig | None:
    """Load config, reporting problems instead of raising."""
    try:
        return StageGateConfig.load(path)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return None


def check_command(args: argparse.Namespace) -> int:
    """Execute the check command."""
    config = _load_config(args.config)
    if config is None:
        return 2

    if args.paths:
        paths = iter(args.paths)
    else:
        paths = iter_staged_files("all" if args.all else "staged")

    engine = StageGateEngine(config, check_format=not args.skip_format)
    exit_code, result = engine.execute(paths, lint=not args.skip_lint)

    if exit_code not in (0, result.exit_code):
        # A lint step failed; its own output is the explanation
        return exit_code

    if args.format == "json":
        reporter = JSONReporter()
        print(reporter.render(result))
    else:
        reporter = TextReporter()
        print(f"\n{reporter.render(result)}", file=sys.stderr)

    if args.output:
        reporter.write(result, args.output)
        print(f"📁 Report written to {args.output}", file=sys.stderr)

    return exit_code


def headers_command(args: argparse.Namespace) -> int:
    """Execute the headers command."""
    config = _load_config(args.config)
    if config is None:
        return 2

    validator = HeaderValidator.from_config(config)
    failed = 0
    checked = 0
    for path in args.paths:
        staged = StagedFile(path)
        if not config.is_source_file(staged.extension):
            print(f"ℹ️  Skipping {path}: not a .{config.extension} file", file=sys.stderr)
            continue
        if config.is_path_excluded(staged.path):
            print(f"ℹ️  Skipping {path}: excluded by configuration", file=sys.stderr)
            continue
        checked += 1
        if not validator.validate(path).passed:
            failed += 1

    if failed:
        print(f"\n🚫 {failed} of {checked} file(s) have an incorrect header", file=sys.stderr)
        return 1
    print(f"✅ {checked} file(s) have a correct header", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stagegate",
        description="stagegate — license header, formatting and lint gate for git commits",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check subcommand
    check_parser = subparsers.add_parser("check", help="Check the files staged for commit")
    check_parser.add_argument(
        "paths",
        nargs="*",
        help="Files to check instead of the staged files",
    )
    check_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .stagegate.yml config file",
    )
    check_parser.add_argument(
        "--all",
        action="store_true",
        help="Check every tracked file instead of only the staged ones",
    )
    check_parser.add_argument(
        "--skip-format",
        action="store_true",
        help="Do not run the formatter check",
    )
    check_parser.add_argument(
        "--skip-lint",
        action="store_true",
        help="Do not run the workspace lint steps",
    )
    check_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Summary format (json is written to stdout)",
    )
    check_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Also write the summary, in the chosen format, to this file",
    )

    # headers subcommand
    headers_parser = subparsers.add_parser("headers", help="Validate file headers only")
    headers_parser.add_argument("paths", nargs="+", help="Files to validate")
    headers_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .stagegate.yml config file",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write .stagegate.yml and install the git pre-commit hook",
    )
    init_parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Repository root to initialize (default: current directory)",
    )
    init_parser.add_argument(
        "--extension",
        type=str,
        default=None,
        help="Source file extension to check (default: rs)",
    )
    init_parser.add_argument(
        "--no-hook",
        action="store_true",
        default=False,
        help="Do not install .git/hooks/pre-commit",
    )
    init_parser.add_argument(
        "--pre-commit-config",
        action="store_true",
        default=False,
        help="Also write a .pre-commit-config.yaml entry",
    )

    return parser


def main() -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "check":
        sys.exit(check_command(args))
    elif args.command == "headers":
        sys.exit(headers_command(args))
    elif args.command == "init":
        sys.exit(init_command(args))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
