"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Lazy directory walker for export trees.
Features:
- Uses os.walk for fast traversal and pathlib.Path for the yielded paths
- Prunes excluded subtrees (by folder-name prefix) before descending into them
- Drops unreadable directories and symlinks instead of aborting the walk
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

# Local imports
from gphotosort.core.interfaces import DirectoryWalker


class FileScannerImpl(DirectoryWalker):
    """
    Walks a directory tree and yields every regular file below it.

    Attributes:
        excluded_prefixes: Folder-name prefixes whose subtrees are never entered
            (e.g. ["Hangout"] for chat exports)
    """

    def __init__(self, excluded_prefixes: Optional[Iterable[str]] = None):
        self.excluded_prefixes: List[str] = [p for p in (excluded_prefixes or []) if p]

    def walk(self, root: Union[str, Path]) -> Iterator[Path]:
        """
        Single-pass generator over the files under root.
        The walk is lazy: nothing is read until the caller iterates.
        """
        root_path = Path(root)
        logger.debug(f"Walking directory: {root_path}")
        logger.debug(f"Excluded prefixes: {self.excluded_prefixes}")

        # The root itself is subject to the same exclusion rule
        if self._is_excluded_name(root_path.name):
            logger.debug(f"Root is excluded: {root_path}")
            return

        processed_files = 0
        for current, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            # Pre-filter subdirectories BEFORE os.walk enters them
            dirs[:] = [d for d in dirs if self._prefilter_dirs(Path(current) / d)]
            dirs.sort()

            for filename in sorted(files):
                path = Path(current) / filename
                if self._is_symlink(path):
                    continue
                processed_files += 1
                yield path

        logger.debug(f"Walk completed. Yielded {processed_files} files.")

    def _is_excluded_name(self, name: str) -> bool:
        return any(name.startswith(prefix) for prefix in self.excluded_prefixes)

    def _prefilter_dirs(self, path: Path) -> bool:
        """Pre-filter directories: skip excluded subtrees."""
        if self._is_excluded_name(path.name):
            logger.debug(f"Skipping excluded directory: {path}")
            return False
        return True

    @staticmethod
    def _is_symlink(path: Path) -> bool:
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return True
        except OSError as e:
            logger.debug(f"Could not check symlink status for {path}: {e}")
            return True
        return False

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable entry {error.filename}: {error.strerror}")
