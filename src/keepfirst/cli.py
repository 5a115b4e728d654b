#!/usr/bin/env python3
"""
keepfirst CLI — removes exact duplicate files from a single directory.
The first file seen with a given content is kept; later identical copies are removed.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import NoReturn, Optional, List
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from keepfirst.core.models import (
    DeduplicationParams, DedupConfig, DeletionMode, KeyScheme, ListingFailed, ScanCounters,
)
from keepfirst.core.progress import ProgressReporter
from keepfirst.commands import DeduplicationCommand
from keepfirst.utils.convert_utils import ConvertUtils
from keepfirst.aliases import (
    KEY_SCHEME_ALIASES, KEY_SCHEME_CHOICES, KEY_SCHEME_HELP_TEXT, EPILOG_TEXT,
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        # Status lines and summary carry non-ASCII symbols
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="keepfirst",
            description="keepfirst — remove exact duplicate files from a directory",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directory",
            nargs="?",
            default="",
            type=str,
            help="Directory whose files are deduplicated (not recursive)"
        )

        # Grouping options
        parser.add_argument(
            "--key-width", "-w",
            default=DedupConfig.DEFAULT_KEY_WIDTH,
            type=int,
            metavar='',
            help=f"Number of leading bytes used as grouping key. Default: {DedupConfig.DEFAULT_KEY_WIDTH}"
        )
        parser.add_argument(
            "--key-scheme",
            choices=KEY_SCHEME_CHOICES,
            default="prefix",
            type=str,
            help=KEY_SCHEME_HELP_TEXT
        )
        parser.add_argument(
            "--unsorted",
            action="store_true",
            help="Process files in file-system order instead of name order"
        )

        # Actions
        action = parser.add_mutually_exclusive_group()
        action.add_argument(
            "--trash",
            action="store_true",
            help="Move duplicates to the system trash instead of deleting them"
        )
        action.add_argument(
            "--dry-run", "-n",
            action="store_true",
            help="Only count duplicates, do not remove anything"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress output (deletion errors are still shown)"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and a summary of reclaimed space"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        if args.dry_run:
            deletion_mode = DeletionMode.DRY_RUN
        elif args.trash:
            deletion_mode = DeletionMode.TRASH
        else:
            deletion_mode = DeletionMode.DELETE

        try:
            return DeduplicationParams(
                root_dir=args.directory,
                key_width=args.key_width,
                key_scheme=KEY_SCHEME_ALIASES.get(args.key_scheme, KeyScheme.PREFIX),
                deletion_mode=deletion_mode,
                sort_entries=not args.unsorted
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_deduplication(self, params: DeduplicationParams) -> ScanCounters:
        """Execute the deduplication pass with console progress."""
        reporter = ProgressReporter(
            quiet=self.quiet,
            final_suffix=" (dry run)" if params.dry_run else ""
        )
        try:
            return DeduplicationCommand().execute(params, progress=reporter)
        except ListingFailed as e:
            self.error_exit(str(e))

    def output_summary(self, counters: ScanCounters, params: DeduplicationParams) -> None:
        if not self.verbose or self.quiet:
            return
        verb = "Would free" if params.dry_run else "Freed"
        print(f"{verb} {ConvertUtils.bytes_to_human(counters.bytes_freed)} "
              f"({params.deletion_mode.display_name})")
        elapsed = time.time() - self.start_time
        print(f"✅ Completed in {elapsed:.2f} seconds")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> ScanCounters:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = self.create_params(args)
        counters = self.run_deduplication(params)
        self.output_summary(counters, params)
        return counters


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
