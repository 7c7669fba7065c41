"""Git Operations Package"""

from cmlint.git.analyzer import GitAnalyzer, GitError

__all__ = [
    "GitAnalyzer",
    "GitError",
]
