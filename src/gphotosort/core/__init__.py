"""
Core merge engine — walker, classifier, date extraction, hasher and mover.

This package contains the whole decision logic of gphotosort:
- FileScannerImpl: lazy directory walk with excluded-subtree pruning
- is_of_interest: media extension filter
- extract_bucket: (year, month) from a file name or its album folder
- HasherImpl + XXHashAlgorithmImpl / Md5AlgorithmImpl: streaming content hashes
- DedupMover: move / delete-duplicate / uniquify decision for one file
- MergeEngine: the full pass over an export
- Models: CandidatePath, DateBucket, Disposition, MergeStats, MergeParams

No CLI dependencies — suitable for library usage.
"""

from .scanner import FileScannerImpl
from .classifier import is_of_interest, MEDIA_EXTENSIONS
from .dates import extract_bucket, YEAR_DATE_RE
from .hasher import HasherImpl, XXHashAlgorithmImpl, Md5AlgorithmImpl
from .mover import DedupMover, variant_path
from .engine import MergeEngine
from .errors import (
    GPhotoSortError, ValidationError, DirectoryCreationError,
    InvariantViolation, VariantLimitExceeded)
from .models import (
    CandidatePath, DateBucket, Disposition, MergeStats, MergeParams,
    HashAlgorithmName, MAX_VARIANTS)

__all__ = [
    "FileScannerImpl",
    "is_of_interest",
    "MEDIA_EXTENSIONS",
    "extract_bucket",
    "YEAR_DATE_RE",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "Md5AlgorithmImpl",
    "DedupMover",
    "variant_path",
    "MergeEngine",
    "GPhotoSortError",
    "ValidationError",
    "DirectoryCreationError",
    "InvariantViolation",
    "VariantLimitExceeded",
    "CandidatePath",
    "DateBucket",
    "Disposition",
    "MergeStats",
    "MergeParams",
    "HashAlgorithmName",
    "MAX_VARIANTS",
]
