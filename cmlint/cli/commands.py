"""CLI Commands"""

import json
import os
import sys

from cmlint import COMMIT_TYPES
from cmlint.config import RuleConfiguration, get_config_path
from cmlint.output import BULLET, bold, dim, info


def print_config(config: RuleConfiguration) -> int:
    """Print the resolved configuration as JSON."""
    resolved = config.resolve().to_dict()
    resolved["extends"] = list(config.extends)
    print(json.dumps(resolved, indent=2))
    return 0


def list_types(config: RuleConfiguration) -> int:
    """Show the commit types allowed by type-enum."""
    rule = config.resolve().rules.get('type-enum')
    config_path = get_config_path()

    print(f"\n{bold('Allowed commit types')}\n")
    print(f"  {dim('Loaded from:')} {config_path or 'defaults (no .commitlintrc.json found)'}\n")

    if rule is None or not rule.enabled or not rule.value:
        print(f"  {dim('Any type is allowed (type-enum is not restricting)')}\n")
        return 0

    width = max(len(name) for name in rule.value)
    for name in rule.value:
        description = COMMIT_TYPES.get(name, '')
        print(f"  {dim(BULLET)} {info(name.ljust(width))}  {description}".rstrip())
    print()
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell:
        rc_file = os.path.expanduser('~/.zshrc')
        line = 'eval "$(register-python-argcomplete cmlint)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.zshrc')}")
    elif 'bash' in shell:
        rc_file = os.path.expanduser('~/.bashrc')
        line = 'eval "$(register-python-argcomplete cmlint)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.bashrc')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell cmlint | Out-String | Invoke-Expression\n")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete cmlint)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish cmlint | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
