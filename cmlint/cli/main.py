"""CLI Main Entry Point"""

import sys
from pathlib import Path

from cmlint.config import load_config
from cmlint.git import GitAnalyzer, GitError
from cmlint.linter import LintReport, lint
from cmlint.output import format_report, print_error, print_success
from cmlint.rules import RuleConfigError

from cmlint.cli.args import parse_args
from cmlint.cli.commands import list_types, print_config, run_install_completion

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_STRICT_WARNINGS = 2
EXIT_STRICT_ERRORS = 3


def _handle_subcommands(args, config):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.print_config:
        return print_config(config), True
    if args.list_types:
        return list_types(config), True
    return EXIT_OK, False


def _read_messages(args) -> list[str]:
    """Collect the messages to lint from the selected input source.

    Precedence: --edit > --from/--to > --last > stdin
    """
    if args.edit is not None:
        path = Path(args.edit) if args.edit else GitAnalyzer().get_edit_message_path()
        with open(path, 'r', encoding='utf-8') as f:
            return [f.read()]

    if args.from_ref or args.to_ref:
        return GitAnalyzer().get_messages(args.from_ref, args.to_ref or 'HEAD')

    if args.last:
        return [GitAnalyzer().get_last_message()]

    if sys.stdin.isatty():
        raise ValueError("No input. Pipe a message in, or use --edit, --from or --last.")
    return [sys.stdin.read()]


def _exit_code(reports: list[LintReport], strict: bool) -> int:
    has_errors = any(r.errors for r in reports)
    has_warnings = any(r.warnings for r in reports)
    if strict:
        if has_errors:
            return EXIT_STRICT_ERRORS
        if has_warnings:
            return EXIT_STRICT_WARNINGS
        return EXIT_OK
    return EXIT_ERROR if has_errors else EXIT_OK


def _print_reports(reports, args, help_url):
    if args.quiet:
        return
    blocks = [format_report(r, verbose=args.verbose, help_url=help_url) for r in reports]
    blocks = [b for b in blocks if b]
    if blocks:
        print('\n\n'.join(blocks))
    if args.verbose and len(reports) > 1:
        failed = sum(1 for r in reports if not r.valid)
        print()
        if failed:
            print_error(f"Linted {len(reports)} messages, {failed} failed")
        else:
            print_success(f"Linted {len(reports)} messages, all valid")


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config.resolve()
    except RuleConfigError as e:
        print_error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args, config)
    if should_exit:
        return exit_code

    try:
        messages = _read_messages(args)
    except (GitError, OSError, ValueError) as e:
        print_error(str(e))
        return EXIT_ERROR

    reports = [lint(message, config) for message in messages]
    _print_reports(reports, args, args.help_url or config.help_url)
    return _exit_code(reports, args.strict)
