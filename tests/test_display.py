"""
Tests for CLI output formatting and the command line entry point.

Shows sample output for each scenario. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import io
import json
import re
import subprocess

import pytest

import cmlint.config
from cmlint.cli.main import main
from cmlint.config import ConfigManager
from cmlint.git import GitAnalyzer, GitError
from cmlint.linter import LintReport, lint
from cmlint.output import format_report
from cmlint.rules import RuleOutcome, RuleSeverity

ANSI_RE = re.compile(r'\033\[[0-9;]*m')
HELP_URL = "https://example.com/commit-rules"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Fresh config manager, no rc files from the developer's machine."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    monkeypatch.setattr(cmlint.config, "_manager", ConfigManager())


@pytest.fixture
def stdin(monkeypatch):
    """Return a function that feeds text to sys.stdin."""
    def _feed(text: str):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _feed


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------

class TestFormatReport:
    """Output from format_report()."""

    def test_failed_report(self, strip_ansi):
        out = strip_ansi(format_report(lint("oops: add login"), help_url=HELP_URL))
        lines = out.split("\n")

        assert lines[0].endswith("input: oops: add login")
        assert "type must be one of [fix, build, revert, wip, feat" in lines[1]
        assert lines[1].endswith("[type-enum]")
        assert "found 1 problems, 0 warnings" in out
        assert f"Get help: {HELP_URL}" in out

    def test_valid_report_is_silent(self):
        assert format_report(lint("feat: add login"), help_url=HELP_URL) == ""

    def test_valid_report_verbose(self, strip_ansi):
        out = strip_ansi(format_report(lint("feat: add login"), verbose=True, help_url=HELP_URL))

        assert "input: feat: add login" in out
        assert "found 0 problems, 0 warnings" in out
        assert "Get help" not in out

    def test_errors_listed_before_warnings(self, strip_ansi):
        report = LintReport(
            input="feat: x",
            errors=[RuleOutcome("type-enum", RuleSeverity.ERROR, "type must be one of [fix]")],
            warnings=[RuleOutcome("body-leading-blank", RuleSeverity.WARNING, "body must have leading blank line")],
        )
        out = strip_ansi(format_report(report))

        assert out.index("[type-enum]") < out.index("[body-leading-blank]")
        assert "found 1 problems, 1 warnings" in out


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

class TestMain:
    """Exit codes and output of main()."""

    def test_valid_stdin_message(self, capsys, stdin):
        stdin("feat: add login\n")
        assert main([]) == 0
        assert capsys.readouterr().out == ""

    def test_invalid_stdin_message(self, capsys, stdin, strip_ansi):
        stdin("oops: add login\n")
        assert main([]) == 1
        out = strip_ansi(capsys.readouterr().out)
        assert "[type-enum]" in out

    def test_scoped_message_passes(self, stdin):
        stdin("feat(auth): add login\n")
        assert main([]) == 0

    def test_quiet_prints_nothing(self, capsys, stdin):
        stdin("oops: add login\n")
        assert main(["--quiet"]) == 1
        assert capsys.readouterr().out == ""

    def test_strict_exit_codes(self, stdin):
        stdin("feat: add login\nbody without blank line\n")
        assert main(["--strict"]) == 2
        stdin("oops: add login\n")
        assert main(["--strict"]) == 3

    def test_edit_file(self, tmp_path):
        msg = tmp_path / "COMMIT_EDITMSG"
        msg.write_text("fix: handle timeout\n# Please enter the commit message\n")
        assert main(["--edit", str(msg)]) == 0

    def test_edit_missing_file(self, tmp_path, capsys):
        assert main(["--edit", str(tmp_path / "missing")]) == 1
        assert capsys.readouterr().err

    def test_custom_help_url(self, capsys, stdin):
        stdin("oops: add login\n")
        main(["--help-url", HELP_URL])
        assert HELP_URL in capsys.readouterr().out

    def test_print_config(self, capsys):
        assert main(["--print-config"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["extends"] == ["@commitlint/config-conventional"]
        assert data["rules"]["scope-enum"] == [2, "always", []]
        assert data["rules"]["type-enum"][2][-1] == "instr"
        assert "subject-case" in data["rules"]

    def test_list_types(self, capsys, strip_ansi):
        assert main(["--list-types"]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "instr" in out
        assert "Instrumentation" in out

    def test_config_file_override(self, tmp_path, stdin):
        (tmp_path / ".commitlintrc.json").write_text(json.dumps({
            "rules": {"type-enum": [2, "always", ["feat"]]},
        }))
        stdin("fix: handle timeout\n")
        assert main([]) == 1

    def test_invalid_config_file(self, tmp_path, capsys, stdin):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"rules": {"type-enum": [5, "always", []]}}))
        stdin("feat: add login\n")
        assert main(["--config", str(path)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_length_rule_without_value(self, tmp_path, capsys):
        path = tmp_path / "lint.json"
        path.write_text(json.dumps({"rules": {"header-max-length": [2, "always"]}}))
        msg = tmp_path / "COMMIT_EDITMSG"
        msg.write_text("feat: add login\n")
        assert main(["-g", str(path), "-e", str(msg)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_non_string_type_enum(self, tmp_path, capsys, stdin):
        (tmp_path / ".commitlintrc.json").write_text(json.dumps({
            "rules": {"type-enum": [2, "always", [1, 2]]},
        }))
        stdin("feat: x\n")
        assert main(["--list-types"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_verbose_range_summary(self, monkeypatch, capsys, strip_ansi):
        monkeypatch.setattr(GitAnalyzer, "__init__", lambda self: None)
        monkeypatch.setattr(
            GitAnalyzer, "get_messages",
            lambda self, from_ref, to_ref='HEAD': ["feat: add login", "fix: handle timeout"],
        )
        assert main(["--from", "HEAD~2", "--verbose"]) == 0
        assert "Linted 2 messages, all valid" in strip_ansi(capsys.readouterr().out)

    def test_range_uses_git(self, monkeypatch, capsys):
        monkeypatch.setattr(GitAnalyzer, "__init__", lambda self: None)
        monkeypatch.setattr(
            GitAnalyzer, "get_messages",
            lambda self, from_ref, to_ref='HEAD': ["feat: add login", "oops: broken"],
        )
        assert main(["--from", "HEAD~2"]) == 1
        assert "oops: broken" in capsys.readouterr().out

    def test_git_failure(self, monkeypatch, capsys):
        def _fail(self):
            raise GitError("Not inside a git repository")
        monkeypatch.setattr(GitAnalyzer, "__init__", _fail)
        assert main(["--last"]) == 1
        assert "Not inside a git repository" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# GitAnalyzer
# ---------------------------------------------------------------------------

class TestGitAnalyzer:

    @pytest.fixture
    def analyzer(self):
        # Skip the repository checks in __init__
        return GitAnalyzer.__new__(GitAnalyzer)

    def test_split_messages(self, analyzer):
        output = "feat: add login\n\nbody\n\x00\nfix: typo\n\x00\n"
        assert analyzer._split_messages(output) == ["feat: add login\n\nbody", "fix: typo"]

    def test_get_messages_builds_range(self, analyzer, monkeypatch):
        calls = []

        def fake_run(*args):
            calls.append(args)
            return "chore: bump\n\x00\n"
        monkeypatch.setattr(analyzer, "_run_git", fake_run)

        assert analyzer.get_messages("v1.0.0") == ["chore: bump"]
        assert calls[0][-1] == "v1.0.0..HEAD"

    def test_edit_message_path(self, analyzer, monkeypatch):
        monkeypatch.setattr(analyzer, "_run_git", lambda *args: ".git\n")
        assert analyzer.get_edit_message_path().as_posix() == ".git/COMMIT_EDITMSG"

    def test_missing_git_raises(self, monkeypatch):
        def fake_run(*args, **kwargs):
            raise FileNotFoundError("git")
        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(GitError, match="not installed"):
            GitAnalyzer()
