"""Linter - Evaluate a commit message against a rule configuration."""

import re
from dataclasses import dataclass, field
from typing import Optional

from cmlint.config import DEFAULT_CONFIG, RuleConfiguration
from cmlint.parser import parse_commit, strip_comments
from cmlint.rules import RULES, RuleOutcome, RuleSeverity

# Messages git or hosting tools write on their own
DEFAULT_IGNORES = [
    re.compile(r'^((Merge pull request)|(Merge (.*?) into (.*?)|(Merge branch (.*?)))(?:\r?\n)*$)', re.MULTILINE),
    re.compile(r'^(Merge tag (.*?))(?:\r?\n)*$', re.MULTILINE),
    re.compile(r'^(R|r)evert (.*)'),
    re.compile(r'^(amend|fixup|squash)!'),
    re.compile(r'^(Merged (.*?)(in|into) (.*)|Merged PR (.*): (.*))'),
    re.compile(r'^Merge remote-tracking branch(\s*)(.*)'),
    re.compile(r'^Automatic merge(.*)'),
    re.compile(r'^Auto-merged (.*?) into (.*)'),
]


@dataclass
class LintReport:
    """Outcome of linting one message."""
    input: str
    errors: list[RuleOutcome] = field(default_factory=list)
    warnings: list[RuleOutcome] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def has_problems(self) -> bool:
        return bool(self.errors or self.warnings)


def is_ignored(message: str, default_ignores: bool = True) -> bool:
    """Check whether a message is exempt from linting."""
    if not default_ignores:
        return False
    return any(pattern.search(message) for pattern in DEFAULT_IGNORES)


def lint(message: str, config: Optional[RuleConfiguration] = None) -> LintReport:
    """Lint a raw commit message. Uses the project configuration when none is given."""
    resolved = (config or DEFAULT_CONFIG).resolve()
    text = strip_comments(message)
    header = text.split('\n')[0] if text else ""

    if is_ignored(text, resolved.default_ignores):
        return LintReport(input=header)

    if not text.strip():
        return LintReport(
            input=header,
            errors=[RuleOutcome('empty-message', RuleSeverity.ERROR, "message may not be empty")],
        )

    commit = parse_commit(text)
    report = LintReport(input=commit.header)

    for name in sorted(resolved.rules):
        rule = resolved.rules[name]
        if not rule.enabled:
            continue
        valid, detail = RULES[name](commit, rule.applicability, rule.value)
        if valid:
            continue
        outcome = RuleOutcome(name=name, level=rule.severity, message=detail)
        if rule.severity == RuleSeverity.ERROR:
            report.errors.append(outcome)
        else:
            report.warnings.append(outcome)

    return report
