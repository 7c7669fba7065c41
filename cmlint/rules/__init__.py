"""Lint Rules Package"""

from cmlint.rules.base import (
    ALWAYS,
    NEVER,
    RuleConfigError,
    RuleDefinition,
    RuleOutcome,
    RuleSeverity,
)
from cmlint.rules import builtin
from cmlint.rules.presets import CONFIG_CONVENTIONAL, PRESETS

RULES = {
    'body-empty': builtin.body_empty,
    'body-leading-blank': builtin.body_leading_blank,
    'body-max-length': builtin.body_max_length,
    'body-max-line-length': builtin.body_max_line_length,
    'footer-empty': builtin.footer_empty,
    'footer-leading-blank': builtin.footer_leading_blank,
    'footer-max-line-length': builtin.footer_max_line_length,
    'header-max-length': builtin.header_max_length,
    'header-min-length': builtin.header_min_length,
    'header-trim': builtin.header_trim,
    'scope-case': builtin.scope_case,
    'scope-empty': builtin.scope_empty,
    'scope-enum': builtin.scope_enum,
    'subject-case': builtin.subject_case,
    'subject-empty': builtin.subject_empty,
    'subject-full-stop': builtin.subject_full_stop,
    'subject-max-length': builtin.subject_max_length,
    'type-case': builtin.type_case,
    'type-empty': builtin.type_empty,
    'type-enum': builtin.type_enum,
}

CASES = (
    'lower-case', 'upper-case', 'camel-case', 'kebab-case',
    'pascal-case', 'sentence-case', 'snake-case', 'start-case',
)

LENGTH_RULES = {
    'body-max-length', 'body-max-line-length', 'footer-max-line-length',
    'header-max-length', 'header-min-length', 'subject-max-length',
}
ENUM_RULES = {'scope-enum', 'type-enum'}
CASE_RULES = {'scope-case', 'subject-case', 'type-case'}


def validate_rule_value(name: str, rule: RuleDefinition) -> None:
    """Raise RuleConfigError when an enabled rule's value has the wrong type."""
    if not rule.enabled:
        return
    value = rule.value
    if name in LENGTH_RULES:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise RuleConfigError(f"Rule '{name}' needs a non-negative integer length, got {value!r}")
    elif name in ENUM_RULES:
        # No value means no restriction
        entries = value if value is not None else ()
        if not isinstance(entries, tuple) or not all(isinstance(v, str) for v in entries):
            raise RuleConfigError(f"Rule '{name}' needs a list of strings, got {value!r}")
    elif name in CASE_RULES:
        cases = value if isinstance(value, tuple) else (value,)
        if not cases or not all(case in CASES for case in cases):
            raise RuleConfigError(
                f"Rule '{name}' needs one or more of {', '.join(CASES)}, got {value!r}"
            )
    elif name == 'subject-full-stop':
        if value is not None and not isinstance(value, str):
            raise RuleConfigError(f"Rule '{name}' needs a string, got {value!r}")


__all__ = [
    "ALWAYS",
    "NEVER",
    "RuleConfigError",
    "RuleDefinition",
    "RuleOutcome",
    "RuleSeverity",
    "RULES",
    "validate_rule_value",
    "PRESETS",
    "CONFIG_CONVENTIONAL",
]
