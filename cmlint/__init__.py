"""
Commit Message Linter

Conventional-commit linting for git commit messages.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: config (type-enum), output (type colors), cli (--list-types)
COMMIT_TYPES = {
    'fix': 'A bug fix',
    'build': 'Build system or external dependency changes',
    'revert': 'Reverts a previous commit',
    'wip': 'Work in progress, not ready for review',
    'feat': 'A new feature or capability',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'ci': 'CI/CD configuration changes',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'perf': 'Performance improvement',
    'test': 'Adding or updating tests',
    'instr': 'Instrumentation, tracing or metrics changes',
}

# Ordered list of type names, this is the type-enum allow-list
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Note on breaking changes: "feat!:" or a "BREAKING CHANGE:" footer marks a breaking commit
# Example: feat(api)!: remove deprecated endpoints
