"""Built-in Rule Implementations

Every rule takes (commit, when, value) and returns (valid, message).
"""

import re
from typing import Any

from cmlint.parser import Commit
from cmlint.rules.base import NEVER

SCOPE_DELIMITERS = re.compile(r'/|\\|, ?')
QUOTED_SPANS = re.compile(r'`.*?`|".*?"|\'.*?\'')
WORDS = re.compile(r'[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+')
LEADING_LETTER = re.compile(r'^[a-z]', re.IGNORECASE)

RuleResult = tuple[bool, str]


def _message(*parts: str | None) -> str:
    return ' '.join(p for p in parts if p)


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


# ---------------------------------------------------------------------------
# Case handling
# ---------------------------------------------------------------------------

def _words(text: str) -> list[str]:
    return WORDS.findall(text)


def to_case(text: str, case: str) -> str:
    """Convert text to the named case."""
    words = _words(text)
    if case == 'lower-case':
        return text.lower()
    if case == 'upper-case':
        return text.upper()
    if case == 'camel-case':
        if not words:
            return ''
        return words[0].lower() + ''.join(w.capitalize() for w in words[1:])
    if case == 'kebab-case':
        return '-'.join(w.lower() for w in words)
    if case == 'snake-case':
        return '_'.join(w.lower() for w in words)
    if case == 'pascal-case':
        return ''.join(w.capitalize() for w in words)
    if case == 'start-case':
        return ' '.join(w[:1].upper() + w[1:] for w in words)
    if case == 'sentence-case':
        return text[:1].upper() + text[1:].lower()
    raise ValueError(f"Unknown case: {case}")


def ensure_case(text: str, case: str) -> bool:
    """True when text already is in the given case. Quoted spans are ignored."""
    stripped = QUOTED_SPANS.sub('', text).strip()
    transformed = to_case(stripped, case)
    if not transformed or transformed[0].isdigit():
        return True
    return transformed == stripped


def _case_rule(field: str, text: str | None, when: str, value: Any,
               split_scopes: bool = False, require_letter: bool = False) -> RuleResult:
    if not text:
        return True, ""
    # Subjects like "2fa support" have no case to check
    if require_letter and not LEADING_LETTER.match(text):
        return True, ""
    negated = when == NEVER
    cases = _as_list(value)
    parts = SCOPE_DELIMITERS.split(text) if split_scopes else [text]
    matched = all(any(ensure_case(part, case) for case in cases) for part in parts)
    return (
        not matched if negated else matched,
        _message(field, 'must', 'not' if negated else None, 'be', ', '.join(cases)),
    )


def type_case(commit: Commit, when: str, value: Any) -> RuleResult:
    return _case_rule('type', commit.type, when, value)


def scope_case(commit: Commit, when: str, value: Any) -> RuleResult:
    return _case_rule('scope', commit.scope, when, value, split_scopes=True)


def subject_case(commit: Commit, when: str, value: Any) -> RuleResult:
    return _case_rule('subject', commit.subject, when, value, require_letter=True)


# ---------------------------------------------------------------------------
# Allow-lists
# ---------------------------------------------------------------------------

def type_enum(commit: Commit, when: str, value: Any) -> RuleResult:
    """Commit type must be one of the allowed tags. An empty list allows anything."""
    if not commit.type:
        return True, ""
    allowed = _as_list(value)
    negated = when == NEVER
    result = not allowed or commit.type in allowed
    return (
        not result if negated else result,
        _message('type must', 'not' if negated else None, f"be one of [{', '.join(allowed)}]"),
    )


def scope_enum(commit: Commit, when: str, value: Any) -> RuleResult:
    """Every scope part must be allowed. An empty list allows any scope."""
    if not commit.scope:
        return True, ""
    allowed = _as_list(value)
    negated = when == NEVER
    scopes = SCOPE_DELIMITERS.split(commit.scope)
    result = not allowed or all(scope in allowed for scope in scopes)
    return (
        not result if negated else result,
        _message('scope must', 'not' if negated else None, f"be one of [{', '.join(allowed)}]"),
    )


# ---------------------------------------------------------------------------
# Emptiness
# ---------------------------------------------------------------------------

def _empty_rule(field: str, text: str | None, when: str) -> RuleResult:
    negated = when == NEVER
    not_empty = bool(text and text.strip())
    return (
        not_empty if negated else not not_empty,
        _message(field, 'may not' if negated else 'must', 'be empty'),
    )


def type_empty(commit: Commit, when: str, value: Any) -> RuleResult:
    return _empty_rule('type', commit.type, when)


def scope_empty(commit: Commit, when: str, value: Any) -> RuleResult:
    return _empty_rule('scope', commit.scope, when)


def subject_empty(commit: Commit, when: str, value: Any) -> RuleResult:
    return _empty_rule('subject', commit.subject, when)


def body_empty(commit: Commit, when: str, value: Any) -> RuleResult:
    return _empty_rule('body', commit.body, when)


def footer_empty(commit: Commit, when: str, value: Any) -> RuleResult:
    return _empty_rule('footer', commit.footer, when)


# ---------------------------------------------------------------------------
# Lengths (applicability is not used)
# ---------------------------------------------------------------------------

def header_max_length(commit: Commit, when: str, value: Any) -> RuleResult:
    length = len(commit.header)
    return (
        length <= value,
        f"header must not be longer than {value} characters, current length is {length}",
    )


def header_min_length(commit: Commit, when: str, value: Any) -> RuleResult:
    length = len(commit.header)
    return (
        length >= value,
        f"header must not be shorter than {value} characters, current length is {length}",
    )


def subject_max_length(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.subject:
        return True, ""
    return len(commit.subject) <= value, f"subject must not be longer than {value} characters"


def body_max_length(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.body:
        return True, ""
    return len(commit.body) <= value, f"body must not be longer than {value} characters"


def body_max_line_length(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.body:
        return True, ""
    valid = all(len(line) <= value for line in commit.body.split('\n'))
    return valid, f"body's lines must not be longer than {value} characters"


def footer_max_line_length(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.footer:
        return True, ""
    valid = all(len(line) <= value for line in commit.footer.split('\n'))
    return valid, f"footer's lines must not be longer than {value} characters"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def header_trim(commit: Commit, when: str, value: Any) -> RuleResult:
    header = commit.header
    starts = header != header.lstrip()
    ends = header != header.rstrip()
    if starts and ends:
        return False, "header must not be surrounded by whitespace"
    if starts:
        return False, "header must not start with whitespace"
    if ends:
        return False, "header must not end with whitespace"
    return True, ""


def subject_full_stop(commit: Commit, when: str, value: Any) -> RuleResult:
    header = commit.header
    if not header:
        return True, ""
    # A header ending in its own separator has no subject to check
    colon = header.find(':')
    if 0 < colon == len(header) - 1:
        return True, ""
    stop = value if value is not None else '.'
    negated = when == NEVER
    has_stop = header.endswith(stop)
    return (
        not has_stop if negated else has_stop,
        _message('subject', 'may not' if negated else 'must', 'end with full stop'),
    )


def body_leading_blank(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.body:
        return True, ""
    lines = commit.lines
    leading = lines[1] if len(lines) > 1 else ''
    negated = when == NEVER
    succeeds = leading == ''
    return (
        not succeeds if negated else succeeds,
        _message('body', 'may not' if negated else 'must', 'have leading blank line'),
    )


def footer_leading_blank(commit: Commit, when: str, value: Any) -> RuleResult:
    if not commit.footer or commit.footer_line is None:
        return True, ""
    succeeds = commit.lines[commit.footer_line - 1] == ''
    negated = when == NEVER
    return (
        not succeeds if negated else succeeds,
        _message('footer', 'may not' if negated else 'must', 'have leading blank line'),
    )
