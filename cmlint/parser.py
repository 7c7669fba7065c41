"""Commit Parser - Split a raw commit message into conventional-commit parts."""

import re
from dataclasses import dataclass
from typing import Optional

HEADER_PATTERN = re.compile(r'^(\w*)(?:\((.*)\))?(!)?: (.*)$')
SCISSORS_LINE = '# ------------------------ >8 ------------------------'
COMMENT_CHAR = '#'

BREAKING_PATTERN = re.compile(r'^BREAKING[ -]CHANGE: ')
REFERENCE_PATTERN = re.compile(
    r'^(close[sd]?|fix(?:e[sd])?|resolve[sd]?|refs?)\s+#\d+', re.IGNORECASE
)
TRAILER_PATTERN = re.compile(r'^[A-Za-z][\w-]*(?:: | #)')


@dataclass
class Commit:
    """A parsed commit message. Missing parts are None."""
    raw: str
    header: str = ""
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    footer_line: Optional[int] = None  # index into lines
    breaking: bool = False

    @property
    def lines(self) -> list[str]:
        return self.raw.split('\n')


def strip_comments(text: str) -> str:
    """Drop git comment lines and everything below the scissors line."""
    kept = []
    for line in text.replace('\r\n', '\n').split('\n'):
        if line == SCISSORS_LINE:
            break
        if line.startswith(COMMENT_CHAR):
            continue
        kept.append(line)
    return '\n'.join(kept).strip('\n')


def _starts_footer(line: str) -> bool:
    return bool(
        BREAKING_PATTERN.match(line)
        or REFERENCE_PATTERN.match(line)
        or TRAILER_PATTERN.match(line)
    )


def _split_paragraphs(lines: list[str], offset: int = 0) -> list[tuple[int, list[str]]]:
    """Group non-blank lines into (first line index, lines) paragraphs."""
    paragraphs: list[tuple[int, list[str]]] = []
    current: list[str] = []
    start = offset
    for i, line in enumerate(lines, offset):
        if line.strip():
            if not current:
                start = i
            current.append(line)
        elif current:
            paragraphs.append((start, current))
            current = []
    if current:
        paragraphs.append((start, current))
    return paragraphs


def parse_commit(raw: str) -> Commit:
    """Parse a commit message into header, type, scope, subject, body and footer."""
    text = strip_comments(raw)
    commit = Commit(raw=text)
    if not text.strip():
        return commit

    lines = text.split('\n')
    commit.header = lines[0]

    match = HEADER_PATTERN.match(commit.header)
    if match:
        commit.type = match.group(1) or None
        commit.scope = match.group(2) or None
        commit.breaking = match.group(3) == '!'
        commit.subject = match.group(4) or None

    paragraphs = _split_paragraphs(lines[1:], offset=1)
    footer_idx = len(paragraphs)
    for i, (start, paragraph) in enumerate(paragraphs):
        if _starts_footer(paragraph[0]):
            footer_idx = i
            commit.footer_line = start
            break

    body = '\n\n'.join('\n'.join(p) for _, p in paragraphs[:footer_idx])
    footer = '\n\n'.join('\n'.join(p) for _, p in paragraphs[footer_idx:])
    commit.body = body or None
    commit.footer = footer or None

    if footer and any(BREAKING_PATTERN.match(line) for line in footer.split('\n')):
        commit.breaking = True

    return commit
