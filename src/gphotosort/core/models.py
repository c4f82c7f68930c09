"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the export merge: candidate paths, date buckets,
per-file dispositions, run statistics and run parameters.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union


# =============================
# Constants
# =============================

EXPORT_SUBFOLDER = "Google Photos"
EXCLUDED_DIR_PREFIXES = ("Hangout",)
HASH_BUFFER_SIZE = 1024 * 1024
MAX_VARIANTS = 1000


# =============================
# Enums
# =============================

class Disposition(Enum):
    """Final outcome for a single source file."""
    MOVED = "moved"
    DELETED = "deleted"
    SKIPPED = "skipped"

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    XXHASH = "xxhash"
    MD5 = "md5"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.XXHASH: "xxHash64",
            HashAlgorithmName.MD5: "MD5",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithmName.XXHASH: "Non-cryptographic xxHash64 (fastest)",
            HashAlgorithmName.MD5: "MD5 digest (compatible with older runs of the tool)",
        }
        return mapping.get(self, self.value)


# ======================
#  Core Data Models
# ======================

@dataclass
class CandidatePath:
    """
    A file discovered during traversal.
    Stem, extension and containing folder are derived from the path if not provided.
    """
    path: Path
    stem: Optional[str] = None
    extension: Optional[str] = None
    containing_dir: Optional[str] = None

    def __post_init__(self):
        self.path = Path(self.path)
        if self.stem is None:
            self.stem = self.path.stem
        if self.extension is None:
            self.extension = self.path.suffix[1:]  # ".JPG" → "JPG", case kept for the destination name
        if self.containing_dir is None:
            self.containing_dir = self.path.parent.name or "_"

    @property
    def name(self) -> str:
        return self.path.name

    def __repr__(self):
        return f"<CandidatePath path={self.path}>"


@dataclass(frozen=True)
class DateBucket:
    """(year, month) pair exactly as captured from a name; used only as path segments."""
    year: str
    month: str

    def relative_dir(self) -> Path:
        return Path(self.year) / self.month

    def __str__(self):
        return f"{self.year}/{self.month}"


@dataclass(frozen=True)
class MergeStats:
    """
    Running tally of a merge pass.
    Immutable: record() and record_error() return a new value so the counters
    are threaded through the processing loop instead of shared.
    """
    moved: int = 0
    deleted: int = 0
    skipped: int = 0
    errors: int = 0

    def record(self, disposition: Disposition) -> "MergeStats":
        if disposition is Disposition.MOVED:
            return replace(self, moved=self.moved + 1)
        if disposition is Disposition.DELETED:
            return replace(self, deleted=self.deleted + 1)
        return replace(self, skipped=self.skipped + 1)

    def record_error(self) -> "MergeStats":
        return replace(self, errors=self.errors + 1)

    @property
    def counts(self):
        """(moved, deleted) — the two numbers reported at the end of a run."""
        return self.moved, self.deleted

    def summary(self) -> str:
        return f"Moved {self.moved} new files into place, deleted {self.deleted} duplicate files"

    def print_summary(self) -> str:
        lines = [
            "Merge Statistics:",
            f"Moved:   {self.moved}",
            f"Deleted: {self.deleted}",
            f"Skipped: {self.skipped}",
            f"Errors:  {self.errors}",
        ]
        return "\n".join(lines)


"""
DTO for merge parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

@dataclass
class MergeParams:
    """Parameters for a merge run with validation."""
    source_root: Union[str, Path]
    dest_root: Union[str, Path]
    dry_run: bool = False
    use_trash: bool = False
    strict_months: bool = False
    hash_algorithm: HashAlgorithmName = HashAlgorithmName.XXHASH
    export_subfolder: str = EXPORT_SUBFOLDER
    excluded_prefixes: List[str] = field(default_factory=lambda: list(EXCLUDED_DIR_PREFIXES))

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not str(self.source_root).strip():
            raise ValueError("Source directory cannot be empty")
        if not str(self.dest_root).strip():
            raise ValueError("Destination directory cannot be empty")
        if not self.export_subfolder.strip():
            raise ValueError("Export subfolder cannot be empty")

        self.source_root = Path(self.source_root)
        self.dest_root = Path(self.dest_root)
        self.excluded_prefixes = [p for p in (s.strip() for s in self.excluded_prefixes) if p]

    @property
    def export_root(self) -> Path:
        return self.source_root / self.export_subfolder
