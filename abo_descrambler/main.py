"""Command line entry point.

Usage:
  abo-descrambler account 000000-0123456789        # Descramble one account number
  abo-descrambler files a.gpc b.gpc                # Parse ABO files, print tables
  abo-descrambler files a.gpc --format json        # Parse ABO files, print JSON
"""

import argparse
import sys
from pathlib import Path

from abo_descrambler.config.settings import Settings
from abo_descrambler.formatters import format_batch_json, format_batch_table
from abo_descrambler.logging.logger import Log
from abo_descrambler.parser import descramble_for_display
from abo_descrambler.processor.models import UploadedFile
from abo_descrambler.processor.processor import build_processor
from abo_descrambler.worker.batch import BatchOrchestrator


def account_command(account: str) -> int:
    print(descramble_for_display(account))
    return 0


def files_command(paths: list[Path], output_format: str, settings: Settings) -> int:
    orchestrator = BatchOrchestrator(build_processor(settings), settings)
    results = orchestrator.process_batch([UploadedFile.from_path(p) for p in paths])
    if output_format == "json":
        print(format_batch_json(results))
    else:
        print(format_batch_table(results))
    return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abo-descrambler",
        description="Descramble Česká spořitelna account numbers and ABO statements",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    account_parser = subparsers.add_parser("account", help="Descramble one account number")
    account_parser.add_argument("account", help="Scrambled account, '/' and '-' allowed")

    files_parser = subparsers.add_parser("files", help="Parse ABO statement files")
    files_parser.add_argument("paths", nargs="+", type=Path, help="ABO files, in order")
    files_parser.add_argument(
        "--format",
        dest="output_format",
        choices=["table", "json"],
        default=settings.output_format,
        help=f"Output format (default: {settings.output_format})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> dispatch command."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = build_parser(settings).parse_args(argv)

    if args.command == "account":
        return account_command(args.account)
    return files_command(args.paths, args.output_format, settings)


if __name__ == "__main__":
    sys.exit(main())
