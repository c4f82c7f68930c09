"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/engine.py
Merge pipeline orchestrator.

Walks the export subfolder, keeps media files, buckets each by year/month and
hands it to DedupMover. Per-file I/O problems and variant exhaustion are
logged and counted as errors; a bucket directory that cannot be created stops
the whole run.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional, Union
import logging

logger = logging.getLogger(__name__)

from gphotosort.core.classifier import is_of_interest
from gphotosort.core.dates import extract_bucket
from gphotosort.core.errors import InvariantViolation
from gphotosort.core.interfaces import ContentHasher, DirectoryWalker
from gphotosort.core.models import (
    CandidatePath, Disposition, MergeStats, EXPORT_SUBFOLDER, EXCLUDED_DIR_PREFIXES)
from gphotosort.core.mover import DedupMover
from gphotosort.core.scanner import FileScannerImpl

# (event, source, target); adds "error" to the DedupMover events
ProgressCallback = Callable[[str, Path, Optional[object]], None]


class MergeEngine:
    """
    Folds every file under <source_root>/<export_subfolder> into <dest_root>/<year>/<month>/.

    Usage:
        engine = MergeEngine()
        stats = engine.run(Path("~/Takeout"), Path("~/Google Photos"), dry_run=True)
        print(stats.summary())
    """

    def __init__(
            self,
            walker: Optional[DirectoryWalker] = None,
            hasher: Optional[ContentHasher] = None,
            export_subfolder: str = EXPORT_SUBFOLDER,
            excluded_prefixes: Iterable[str] = EXCLUDED_DIR_PREFIXES,
            strict_months: bool = False,
            use_trash: bool = False,
            progress_callback: Optional[ProgressCallback] = None
    ):
        self.walker = walker if walker is not None else FileScannerImpl(excluded_prefixes)
        self.hasher = hasher
        self.export_subfolder = export_subfolder
        self.strict_months = strict_months
        self.use_trash = use_trash
        self.progress_callback = progress_callback

    def run(self, source_root: Union[str, Path], dest_root: Union[str, Path],
            dry_run: bool = False) -> MergeStats:
        """
        Processes the whole export and returns the tally.
        stats.counts gives the (moved, deleted) pair.

        Raises:
            DirectoryCreationError: a bucket directory could not be created
        """
        dest_root = Path(dest_root)
        export_root = Path(source_root) / self.export_subfolder
        mover = DedupMover(
            hasher=self.hasher,
            dry_run=dry_run,
            use_trash=self.use_trash,
            progress_callback=self.progress_callback
        )

        logger.info(f"Merging {export_root} into {dest_root} (dry_run={dry_run})")
        stats = MergeStats()
        for path in self.walker.walk(export_root):
            if path.is_dir() or not is_of_interest(path):
                continue
            try:
                stats = stats.record(self.process_file(path, dest_root, mover))
            except (OSError, InvariantViolation) as e:
                logger.warning(f"Error on file {path}: {e}")
                if self.progress_callback:
                    self.progress_callback("error", path, e)
                stats = stats.record_error()

        logger.info(stats.summary())
        return stats

    def process_file(self, path: Path, dest_root: Path, mover: DedupMover) -> Disposition:
        """Buckets a single media file and resolves it; SKIPPED when no date can be found."""
        candidate = CandidatePath(path)
        bucket = extract_bucket(candidate.containing_dir, candidate.stem, self.strict_months)
        if bucket is None:
            logger.debug(f"No date found for {path}, skipping")
            return Disposition.SKIPPED

        logger.debug(f"Bucket {bucket} for {path}")
        base_destination = dest_root / bucket.relative_dir() / candidate.name
        return mover.resolve(candidate.path, base_destination)
