"""Main CLI entry point for dbfstream."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file, dump_records
from ..exceptions import DbfStreamError


def main() -> int:
    """Main entry point for the dbfstream CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="dbfstream: dBase table decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dbfstream --header people.dbf          Show header and field layout
  dbfstream --dump people.dbf --limit 5  Print the first 5 records as JSON lines
  dbfstream --version                    Show version
        """,
    )

    parser.add_argument(
        "--header",
        metavar="FILE",
        type=str,
        help="Show the header and record layout of a table",
    )

    parser.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Print the records of a table as JSON lines",
    )

    parser.add_argument(
        "--raw-types",
        action="store_true",
        help="Keep numeric fields as text when dumping",
    )

    parser.add_argument(
        "--limit",
        metavar="N",
        type=int,
        help="Maximum number of records to dump",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoding details to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dbfstream {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    target = args.header or args.dump
    if target is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(target)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.header:
            analyze_file(file_path)
        else:
            dump_records(file_path, parse_types=not args.raw_types, limit=args.limit)
        return 0
    except (DbfStreamError, OSError) as e:
        print(f"Error reading {file_path}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
