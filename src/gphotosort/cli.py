#!/usr/bin/env python3
"""
gphotosort CLI — moves photos from a Google Takeout export into a
Google Photos style <year>/<month> directory tree.
Every move, delete and rename is announced; --dry-run announces without acting.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import NoReturn, Optional
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    from send2trash import send2trash
except ImportError:
    _MISSING_DEPS.append("send2trash")

try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install gphotosort", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from gphotosort import __version__
from gphotosort.commands import MergeCommand
from gphotosort.core.errors import DirectoryCreationError, ValidationError
from gphotosort.core.models import HashAlgorithmName, MergeParams, MergeStats
from gphotosort.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="gphotosort",
            description="GPhoto-Sort: Moves photos from Google Takeout structure into "
                        "Google Drive/Google Photos directory structure",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "source_takeout_dir",
            type=str,
            help="Takeout directory containing the files to be moved"
        )
        parser.add_argument(
            "dest_gphotos_dir",
            type=str,
            help="Destination Google Photos directory organized by <year>/<month>"
        )

        # Actions
        parser.add_argument(
            "--dry-run", "-n",
            action="store_true",
            dest="dry_run",
            help="Report actions to be taken, but don't do anything"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move duplicate files to the system trash instead of deleting them"
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="xxhash",
            type=str,
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--strict-months",
            action="store_true",
            dest="strict_months",
            help="Ignore dates whose month is outside 01-12 instead of creating such folders"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only print errors and the final summary"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and detailed statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> MergeParams:
        """Create MergeParams from CLI arguments."""
        try:
            return MergeParams(
                source_root=Path(args.source_takeout_dir).expanduser(),
                dest_root=Path(args.dest_gphotos_dir).expanduser(),
                dry_run=args.dry_run,
                use_trash=args.trash,
                strict_months=args.strict_months,
                hash_algorithm=HASH_ALIASES.get(args.hash, HashAlgorithmName.XXHASH),
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def display(value: object) -> str:
        """
        Lossy printable form of a path or message.
        Undecodable bytes in file names (surrogate escapes from os.walk) become U+FFFD.
        """
        text = str(value)
        try:
            return text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')
        except UnicodeEncodeError:
            return text.encode('utf-8', 'backslashreplace').decode('utf-8')

    def progress_callback(self, event: str, source: Path, target: Optional[object]) -> None:
        """Announces each decision as it happens."""
        source = self.display(source)
        target = self.display(target)
        if event == "error":
            self.warning(f"Error on file {source}: {target}")
            return
        if self.quiet:
            return

        if event == "move":
            print(f"Moving {source} to {target}")
        elif event == "delete":
            print(f"{source} is duplicate - delete")
        elif event == "uniquify":
            print(f"Duplicate found at {target}, uniquifying...")

    def run_merge(self, params: MergeParams) -> MergeStats:
        """Execute the merge workflow."""
        command = MergeCommand()
        try:
            return command.execute(params, progress_callback=self.progress_callback)
        except ValidationError as e:
            self.error_exit(str(e))
        except DirectoryCreationError as e:
            self.error_exit(f"Merge aborted: {e}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"⚠️  {CLIApplication.display(message)}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {CLIApplication.display(message)}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> MergeStats:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(args)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = self.create_params(args)

        if params.dry_run and not self.quiet:
            print("Dry run: reporting actions only, nothing will be moved or deleted")

        stats = self.run_merge(params)
        print(stats.summary())

        if self.verbose:
            print()
            print(stats.print_summary())
            print(f"Hash algorithm: {params.hash_algorithm.display_name}")
            elapsed = time.time() - self.start_time
            print(f"\n✅ Completed in {elapsed:.2f} seconds")
        return stats


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
