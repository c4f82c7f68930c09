"""
Unified command orchestrator for a merge run.
Validates the roots, wires the engine from MergeParams and executes it.
No CLI dependencies — pure Python.
"""
from pathlib import Path
from typing import Callable, Optional
import logging

from gphotosort.core.engine import MergeEngine
from gphotosort.core.errors import ValidationError
from gphotosort.core.hasher import HasherImpl
from gphotosort.core.models import MergeParams, MergeStats

logger = logging.getLogger(__name__)


def validate_export_root(source_root: Path, export_subfolder: str) -> None:
    """Checks that the export root exists and holds the expected subfolder."""
    if not source_root.exists() or not source_root.is_dir():
        raise ValidationError(
            f"Google takeout source directory '{source_root}' does not exist or is not readable",
            source_root
        )
    if not (source_root / export_subfolder).is_dir():
        raise ValidationError(
            f"Expected to find directory '{export_subfolder}' under Takeout directory, path may be incorrect",
            source_root / export_subfolder
        )


def validate_destination_root(dest_root: Path) -> None:
    if not dest_root.exists() or not dest_root.is_dir():
        raise ValidationError(
            f"Google Photos destination directory '{dest_root}' does not exist or is not writable",
            dest_root
        )


class MergeCommand:
    """
    Orchestrates the merge workflow:
    1. Validate source and destination roots
    2. Build the engine (walker, hasher, mover settings) from params
    3. Run the pass and return its statistics

    Usage:
        params = MergeParams(source_root="~/Takeout", dest_root="~/Google Photos", dry_run=True)
        stats = MergeCommand().execute(params, progress_callback=cli_printer)
    """

    def execute(
            self,
            params: MergeParams,
            progress_callback: Optional[Callable[[str, Path, Optional[object]], None]] = None
    ) -> MergeStats:
        """
        Execute a merge with given parameters.

        Raises:
            ValidationError: If either root is missing or malformed (nothing is touched)
            DirectoryCreationError: If a bucket directory cannot be created
        """
        validate_export_root(params.source_root, params.export_subfolder)
        validate_destination_root(params.dest_root)

        engine = MergeEngine(
            hasher=HasherImpl.for_name(params.hash_algorithm),
            export_subfolder=params.export_subfolder,
            excluded_prefixes=params.excluded_prefixes,
            strict_months=params.strict_months,
            use_trash=params.use_trash,
            progress_callback=progress_callback
        )
        logger.debug(f"Running merge with {params}")
        return engine.run(params.source_root, params.dest_root, dry_run=params.dry_run)
