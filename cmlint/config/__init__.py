"""Configuration Management Package"""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from cmlint import COMMIT_TYPE_NAMES
from cmlint.rules import (
    CONFIG_CONVENTIONAL,
    PRESETS,
    RULES,
    RuleConfigError,
    RuleDefinition,
    validate_rule_value,
)
from cmlint.output import print_warning

DEFAULT_HELP_URL = "https://github.com/conventional-changelog/commitlint/#what-is-commitlint"

# Accepted spellings for the optional top-level keys
_HELP_URL_KEYS = ("helpUrl", "help_url")
_DEFAULT_IGNORES_KEYS = ("defaultIgnores", "default_ignores")
_KNOWN_KEYS = {"extends", "rules", *_HELP_URL_KEYS, *_DEFAULT_IGNORES_KEYS}


def _freeze_rules(rules: Mapping) -> MappingProxyType:
    return MappingProxyType({
        name: RuleDefinition.from_value(name, raw) for name, raw in rules.items()
    })


@dataclass(frozen=True)
class RuleConfiguration:
    """Presets to inherit plus local rule overrides. Never mutated after construction."""
    extends: tuple[str, ...] = ()
    rules: Mapping[str, RuleDefinition] = field(default_factory=lambda: MappingProxyType({}))
    help_url: str = DEFAULT_HELP_URL
    default_ignores: bool = True

    def __post_init__(self):
        # Normalise whatever the caller passed into read-only containers
        object.__setattr__(self, 'extends', tuple(self.extends))
        if not isinstance(self.rules, MappingProxyType):
            object.__setattr__(self, 'rules', _freeze_rules(self.rules))

    def to_dict(self) -> dict:
        return {
            "extends": list(self.extends),
            "rules": {name: rule.to_list() for name, rule in self.rules.items()},
            "helpUrl": self.help_url,
            "defaultIgnores": self.default_ignores,
        }

    def resolve(self) -> 'RuleConfiguration':
        """Layer local rules over the inherited presets, in `extends` order."""
        merged: dict[str, RuleDefinition] = {}
        for preset in self.extends:
            if preset not in PRESETS:
                raise RuleConfigError(
                    f"Unknown preset '{preset}'. Available: {', '.join(sorted(PRESETS))}"
                )
            merged.update(PRESETS[preset])
        merged.update(self.rules)

        missing = sorted(name for name in merged if name not in RULES)
        if missing:
            raise RuleConfigError(f"Found rules without implementation: {', '.join(missing)}")
        for name, rule in merged.items():
            validate_rule_value(name, rule)

        return replace(self, extends=(), rules=MappingProxyType(merged))

    @classmethod
    def from_dict(cls, data: dict) -> 'RuleConfiguration':
        if not isinstance(data, dict):
            raise RuleConfigError(f"Configuration must be an object, got {type(data).__name__}")

        for key in data:
            if key not in _KNOWN_KEYS:
                print_warning(f"Config warning: Unknown key '{key}' ignored")

        extends = data.get("extends", [])
        if isinstance(extends, str):
            extends = [extends]
        if not isinstance(extends, list) or not all(isinstance(e, str) for e in extends):
            raise RuleConfigError("'extends' must be a string or a list of strings")

        rules = data.get("rules", {})
        if not isinstance(rules, dict):
            raise RuleConfigError("'rules' must be an object")

        kwargs = {"extends": tuple(extends), "rules": _freeze_rules(rules)}
        for key in _HELP_URL_KEYS:
            if key in data:
                kwargs["help_url"] = str(data[key])
        for key in _DEFAULT_IGNORES_KEYS:
            if key in data:
                kwargs["default_ignores"] = bool(data[key])
        return cls(**kwargs)


# The project's rule table
DEFAULT_CONFIG = RuleConfiguration.from_dict({
    "extends": [CONFIG_CONVENTIONAL],
    "rules": {
        "type-enum": [2, "always", COMMIT_TYPE_NAMES],
        "scope-enum": [2, "always", []],
    },
})


class ConfigManager:
    """Manages locating and loading the rule configuration."""

    CONFIG_FILENAME = ".commitlintrc.json"

    def __init__(self):
        self._config: Optional[RuleConfiguration] = None
        self._config_path: Optional[Path] = None

    def load(self, path: Optional[Path] = None) -> RuleConfiguration:
        if path is not None:
            self._config = self._load_from_file(Path(path))
            self._config_path = Path(path) if self._config is not DEFAULT_CONFIG else None
            return self._config

        if self._config is not None:
            return self._config

        for candidate in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if candidate.exists():
                self._config = self._load_from_file(candidate)
                if self._config is not DEFAULT_CONFIG:
                    self._config_path = candidate
                return self._config

        self._config = DEFAULT_CONFIG
        return self._config

    def _load_from_file(self, path: Path) -> RuleConfiguration:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print_warning(f"Could not load {path}: {e}")
            return DEFAULT_CONFIG
        return RuleConfiguration.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config(path: Optional[Path] = None) -> RuleConfiguration:
    return _manager.load(path)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "RuleConfiguration",
    "ConfigManager",
    "DEFAULT_CONFIG",
    "DEFAULT_HELP_URL",
    "load_config",
    "get_config_path",
]
