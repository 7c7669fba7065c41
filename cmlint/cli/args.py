"""CLI Argument Parsing"""

import argparse
from typing import Optional, Sequence

import argcomplete

from cmlint import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cmlint',
        description='Lint commit messages against conventional-commit rules',
        epilog='Example: echo "feat: add login" | cmlint'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Input sources
    parser.add_argument('-e', '--edit', type=str, nargs='?', const='', default=None, metavar='FILE',
                        help='Lint a message file (default: .git/COMMIT_EDITMSG)')
    parser.add_argument('-f', '--from', dest='from_ref', type=str, metavar='REF', help='Lower end of the commit range to lint')
    parser.add_argument('-t', '--to', dest='to_ref', type=str, metavar='REF', help='Upper end of the commit range (default: HEAD)')
    parser.add_argument('-l', '--last', action='store_true', help='Lint the last commit message')

    # Configuration
    parser.add_argument('-g', '--config', type=str, metavar='PATH', help='Path to a .commitlintrc.json file')
    parser.add_argument('-H', '--help-url', type=str, metavar='URL', help='Help link shown in the report')

    # Output options
    parser.add_argument('-q', '--quiet', action='store_true', help='Only set the exit code, print nothing')
    parser.add_argument('-V', '--verbose', action='store_true', help='Report valid messages too')
    parser.add_argument('-s', '--strict', action='store_true', help='Exit 2 on warnings, 3 on errors')

    # Info commands
    parser.add_argument('--print-config', action='store_true', help='Show the resolved configuration as JSON')
    parser.add_argument('--list-types', action='store_true', help='Show allowed commit types')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
