"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/mover.py
Decides what happens to one source file whose destination slot is known.

For variant index 0, 1, 2, ... the candidate slot is checked:
- empty slot: the source is moved there
- slot holding identical content: the source is a duplicate and is deleted
- slot holding different content: the next variant (IMG_1234-1.jpg, ...) is tried

The loop stops at MAX_VARIANTS. Dry run computes the same decisions but
leaves the filesystem untouched.
"""

from pathlib import Path
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

from gphotosort.core.errors import DirectoryCreationError, VariantLimitExceeded
from gphotosort.core.hasher import HasherImpl
from gphotosort.core.interfaces import ContentHasher
from gphotosort.core.models import Disposition, MAX_VARIANTS
from gphotosort.services.file_service import FileService

# (event, source, target) with event in {"move", "delete", "uniquify"}
ProgressCallback = Callable[[str, Path, Optional[Path]], None]


def variant_path(base: Path, index: int) -> Path:
    """
    Returns base for index 0, otherwise base with "-<index>" inserted before the extension.
    e.g. /a/b/IMG_1234.jpg -> /a/b/IMG_1234-1.jpg for index 1
    """
    if index == 0:
        return base
    return base.with_name(f"{base.stem}-{index}{base.suffix}")


class DedupMover:
    """Resolves a source file against its destination slot: move, delete as duplicate, or uniquify."""

    def __init__(
            self,
            hasher: Optional[ContentHasher] = None,
            dry_run: bool = False,
            use_trash: bool = False,
            max_variants: int = MAX_VARIANTS,
            progress_callback: Optional[ProgressCallback] = None
    ):
        self.hasher = hasher if hasher is not None else HasherImpl()
        self.dry_run = dry_run
        self.use_trash = use_trash
        self.max_variants = max_variants
        self.progress_callback = progress_callback

    def resolve(self, source: Path, base_destination: Path) -> Disposition:
        """
        Moves source to the first free variant of base_destination, or deletes it
        when a variant already holds the same content.

        Raises:
            OSError: reading, moving or deleting failed; source is left in place
            DirectoryCreationError: the destination directory could not be created
            VariantLimitExceeded: every variant up to the ceiling holds other content
        """
        source = Path(source)
        base_destination = Path(base_destination)
        source_hash: Optional[bytes] = None

        for index in range(self.max_variants):
            target = variant_path(base_destination, index)

            if not target.exists():
                self._commit_move(source, target)
                return Disposition.MOVED

            if source_hash is None:
                source_hash = self.hasher.compute_full_hash(source)
            if self.hasher.compute_full_hash(target) == source_hash:
                self._commit_delete(source, target)
                return Disposition.DELETED

            logger.debug(f"Different file already at {target}")
            self._notify("uniquify", source, target)

        raise VariantLimitExceeded(source, base_destination, self.max_variants)

    def _commit_move(self, source: Path, target: Path) -> None:
        logger.info(f"Moving {source} to {target}")
        self._notify("move", source, target)
        if self.dry_run:
            return
        try:
            FileService.ensure_directory(target.parent)
        except OSError as e:
            raise DirectoryCreationError(target.parent, e) from e
        FileService.move_file(source, target)

    def _commit_delete(self, source: Path, existing: Path) -> None:
        logger.info(f"{source} is duplicate of {existing} - delete")
        self._notify("delete", source, existing)
        if self.dry_run:
            return
        FileService.remove_file(source, use_trash=self.use_trash)

    def _notify(self, event: str, source: Path, target: Optional[Path]) -> None:
        if self.progress_callback:
            self.progress_callback(event, source, target)
