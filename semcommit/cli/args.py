"""CLI Argument Parsing"""

import argparse
import argcomplete

from semcommit import __version__


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='semcommit',
        description='Build a conventional commit message interactively, after tests and lint pass',
        epilog='Example: semcommit (runs checks, asks for the fields, then commits)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
