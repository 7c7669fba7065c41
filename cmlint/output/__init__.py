"""Terminal Output Formatting Package"""

import re
import sys
import os

from cmlint.rules import RuleOutcome, RuleSeverity


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✔' if UNICODE_ENABLED else '[OK]'
CROSS = '✖' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'
INPUT = '⧗' if UNICODE_ENABLED else '>'
INFO = 'ⓘ' if UNICODE_ENABLED else '[i]'
BULLET = '•' if UNICODE_ENABLED else '*'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}", file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
    'revert': Colors.RED,
    'wip': Colors.YELLOW,
    'instr': Colors.MAGENTA,
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    if not lines:
        return message
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        commit_type = match.group(1)
        color = COMMIT_TYPE_COLORS.get(commit_type)
        if color:
            prefix = match.group(0)
            lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


def _format_outcome(outcome: RuleOutcome) -> str:
    if outcome.level == RuleSeverity.ERROR:
        sign = error(CROSS)
    else:
        sign = warning(WARN)
    return f"{sign}   {outcome.message} {dim(f'[{outcome.name}]')}"


def format_report(report, verbose: bool = False, help_url: str = "") -> str:
    """Render a LintReport. Empty for a clean report unless verbose."""
    if not report.has_problems and not verbose:
        return ""

    lines = [f"{dim(INPUT)}   input: {bold(colorize_commit_type(report.input))}"]
    for outcome in report.errors + report.warnings:
        lines.append(_format_outcome(outcome))

    if report.errors:
        sign = error(CROSS)
    elif report.warnings:
        sign = warning(WARN)
    else:
        sign = success(CHECK)
    lines.append("")
    lines.append(f"{sign}   found {len(report.errors)} problems, {len(report.warnings)} warnings")

    if report.has_problems and help_url:
        lines.append(f"{info(INFO)}   Get help: {help_url}")

    return '\n'.join(lines)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN", "INPUT", "INFO", "BULLET",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
    "colorize_commit_type", "format_report", "COMMIT_TYPE_COLORS",
]
