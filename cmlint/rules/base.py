"""Rule Definitions and Shared Types"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

ALWAYS = "always"
NEVER = "never"
APPLICABILITIES = (ALWAYS, NEVER)


class RuleSeverity(IntEnum):
    """How a rule violation is reported."""
    OFF = 0
    WARNING = 1
    ERROR = 2


class RuleConfigError(Exception):
    """Raised when a rule configuration has an invalid shape."""
    pass


def _freeze(value: Any) -> Any:
    """Lists become tuples so definitions stay hashable and read-only."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class RuleDefinition:
    """A (severity, applicability, value) triple for one rule."""
    severity: RuleSeverity
    applicability: str = ALWAYS
    value: Any = None

    @property
    def enabled(self) -> bool:
        return self.severity != RuleSeverity.OFF

    def to_list(self) -> list:
        """JSON-compatible shape, the same one from_value() accepts."""
        result = [int(self.severity), self.applicability]
        if self.value is not None:
            result.append(_thaw(self.value))
        return result

    @classmethod
    def from_value(cls, name: str, raw: Any) -> 'RuleDefinition':
        """Parse [severity], [severity, when] or [severity, when, value]."""
        if isinstance(raw, RuleDefinition):
            return raw
        if not isinstance(raw, (list, tuple)):
            raise RuleConfigError(f"Rule '{name}' must be a list, got {type(raw).__name__}")
        if not 1 <= len(raw) <= 3:
            raise RuleConfigError(f"Rule '{name}' must have 1 to 3 entries, got {len(raw)}")

        level = raw[0]
        # bool is an int subclass, True must not pass as WARNING
        if isinstance(level, bool) or not isinstance(level, int):
            raise RuleConfigError(f"Rule '{name}' severity must be 0, 1 or 2, got {level!r}")
        try:
            severity = RuleSeverity(level)
        except ValueError:
            raise RuleConfigError(f"Rule '{name}' severity must be 0, 1 or 2, got {level!r}")

        applicability = raw[1] if len(raw) > 1 else ALWAYS
        if applicability not in APPLICABILITIES:
            raise RuleConfigError(
                f"Rule '{name}' applicability must be 'always' or 'never', got {applicability!r}"
            )

        value = _freeze(raw[2]) if len(raw) > 2 else None
        return cls(severity=severity, applicability=applicability, value=value)


@dataclass(frozen=True)
class RuleOutcome:
    """A failed rule as it appears in a lint report."""
    name: str
    level: RuleSeverity
    message: str
