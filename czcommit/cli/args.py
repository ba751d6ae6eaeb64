"""CLI Argument Parsing"""

import argparse
import argcomplete

from czcommit import __version__
from czcommit.config import VALID_OUTPUT_MODES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cz',
        description='Write a Conventional Commit message step by step, then commit it',
        epilog='Example: cz --smart-commit (stages everything when nothing is staged)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-C', '--cwd', type=str, default='.', metavar='DIR', help='Run as if started in DIR (default: current directory)')

    # Commit options
    parser.add_argument('--dry-run', action='store_true', help='Print the message instead of committing')
    parser.add_argument('--smart-commit', action='store_true', default=None, help='Stage all changes when nothing is staged')
    parser.add_argument('--auto-sync', action='store_true', default=None, help='Pull and push after committing')
    parser.add_argument('--show-output', type=str, choices=sorted(VALID_OUTPUT_MODES), help='When to show git output')

    # Diagnostics
    parser.add_argument('--verbose', action='store_true', help='Log git invocations')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show settings and wizard configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
