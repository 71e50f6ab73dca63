#!/usr/bin/env python3
"""
pyhydat command line

Quick lookups against a local HYDAT database and the realtime station list.

Usage:
    pyhydat search-name cowichan
    pyhydat search-number 08HF --db-path /data/Hydat.sqlite3
    pyhydat version
    pyhydat dir
"""

import argparse
import logging
import sys

import pandas as pd

from .data.database.lookup_repository import (
    hy_agency_list, hy_datum_list, hy_reg_office_list, hy_version,
)
from .exceptions import HydatError
from .search import search_stn_name, search_stn_number
from .utils.paths import hy_dir

logger = logging.getLogger(__name__)

TABLE_COMMANDS = {
    'agencies': hy_agency_list,
    'offices': hy_reg_office_list,
    'datums': hy_datum_list,
    'version': hy_version,
}

SEARCH_COMMANDS = {
    'search-name': search_stn_name,
    'search-number': search_stn_number,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pyhydat',
        description='Look up hydrometric stations and HYDAT reference tables'
    )
    parser.add_argument(
        '--db-path',
        default=None,
        help='Path to the HYDAT database (default: the pyhydat data directory)'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    for name, func in SEARCH_COMMANDS.items():
        sub = subparsers.add_parser(name, help=func.__doc__.strip().splitlines()[0])
        sub.add_argument('term', help='Search term, matched case-insensitively')

    for name in TABLE_COMMANDS:
        subparsers.add_parser(name, help=f'Print the HYDAT {name} table')

    subparsers.add_parser('dir', help='Print the pyhydat data directory')

    return parser


def print_table(table: pd.DataFrame):
    if table.empty:
        print("No results")
    else:
        print(table.to_string(index=False))


def main(argv=None) -> int:
    """Main command line function."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.command == 'dir':
        print(hy_dir())
        return 0

    try:
        if args.command in SEARCH_COMMANDS:
            table = SEARCH_COMMANDS[args.command](args.term, hydat_path=args.db_path)
        else:
            table = TABLE_COMMANDS[args.command](hydat_path=args.db_path)
    except HydatError as e:
        logger.error("%s", e)
        return 2

    print_table(table)
    return 0


if __name__ == '__main__':
    sys.exit(main())
