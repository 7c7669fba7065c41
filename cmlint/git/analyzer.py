"""Git Analyzer - Read commit messages from git."""

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitAnalyzer:
    """Reads commit messages from the current repository."""

    # NUL can't appear in a commit message, so it separates them safely
    RECORD_SEPARATOR = '\x00'

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def get_edit_message_path(self) -> Path:
        """Path of the message file git hands to the commit-msg hook."""
        git_dir = self._run_git('rev-parse', '--git-dir').strip()
        return Path(git_dir) / 'COMMIT_EDITMSG'

    def get_last_message(self) -> str:
        return self._run_git('log', '-1', '--format=%B').strip('\n')

    def get_messages(self, from_ref: Optional[str], to_ref: str = 'HEAD') -> list[str]:
        """Messages in from_ref..to_ref, oldest first. Without from_ref, the whole history of to_ref."""
        revision = f"{from_ref}..{to_ref}" if from_ref else to_ref
        output = self._run_git('log', '--reverse', '--format=%B%x00', revision)
        return self._split_messages(output)

    def _split_messages(self, output: str) -> list[str]:
        """Split NUL-terminated `git log` output into messages."""
        messages = []
        for record in output.split(self.RECORD_SEPARATOR):
            message = record.strip('\n')
            if message:
                messages.append(message)
        return messages
