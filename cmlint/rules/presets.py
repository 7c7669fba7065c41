"""Built-in Presets

Static rule tables that a configuration can inherit through `extends`.
"""

from types import MappingProxyType

from cmlint.rules.base import RuleDefinition

CONFIG_CONVENTIONAL = "@commitlint/config-conventional"

_CONVENTIONAL_RULES = {
    'body-leading-blank': [1, 'always'],
    'body-max-line-length': [2, 'always', 100],
    'footer-leading-blank': [1, 'always'],
    'footer-max-line-length': [2, 'always', 100],
    'header-max-length': [2, 'always', 100],
    'header-trim': [2, 'always'],
    'subject-case': [2, 'never', ['sentence-case', 'start-case', 'pascal-case', 'upper-case']],
    'subject-empty': [2, 'never'],
    'subject-full-stop': [2, 'never', '.'],
    'type-case': [2, 'always', 'lower-case'],
    'type-empty': [2, 'never'],
    'type-enum': [2, 'always', [
        'build', 'chore', 'ci', 'docs', 'feat', 'fix', 'perf', 'refactor', 'revert', 'style', 'test',
    ]],
}


def _table(rules: dict) -> MappingProxyType:
    return MappingProxyType({
        name: RuleDefinition.from_value(name, raw) for name, raw in rules.items()
    })


PRESETS = MappingProxyType({
    CONFIG_CONVENTIONAL: _table(_CONVENTIONAL_RULES),
})
