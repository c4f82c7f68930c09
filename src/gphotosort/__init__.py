"""
gphotosort — merges a Google Takeout photo export into a <year>/<month> library.

Core features:
- Year/month buckets from file names (IMG_20130402_..., VID_2014_05_02...) or album folders
- Duplicate detection by full content hash (xxHash64 or MD5)
- Name collisions resolved with -1, -2, ... variants; identical files deleted (or trashed)
- Dry-run mode that reports every decision without touching the filesystem
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("gphotosort")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from gphotosort.commands import MergeCommand
from gphotosort.core import (
    MergeEngine, MergeParams, MergeStats, Disposition, DateBucket, HashAlgorithmName,
    extract_bucket, is_of_interest)
from gphotosort.services.file_service import FileService

__all__ = [
    "MergeCommand",
    "MergeEngine",
    "MergeParams",
    "MergeStats",
    "Disposition",
    "DateBucket",
    "HashAlgorithmName",
    "extract_bucket",
    "is_of_interest",
    "FileService",
    "__version__",
]
