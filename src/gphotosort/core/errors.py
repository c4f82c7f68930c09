"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for the merge pipeline.

Per-file read/rename/remove failures are left as built-in OSError so callers
can tell them apart from the fatal conditions declared here.
"""


class GPhotoSortError(Exception):
    """Base error for the project."""


class ValidationError(GPhotoSortError):
    """Source or destination root is missing or has the wrong structure."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class DirectoryCreationError(GPhotoSortError):
    """A destination bucket directory could not be created."""

    def __init__(self, path, cause: Exception):
        super().__init__(f"Unable to create directory {path}: {cause}")
        self.path = path
        self.cause = cause


class InvariantViolation(GPhotoSortError):
    pass


class VariantLimitExceeded(InvariantViolation):
    """
    No free or identical slot was found within the variant ceiling.
    Variants 0..limit-1 are checked: with the default of 1000 that is the base
    name plus "-1" through "-999". No slot past the ceiling is looked at.
    """

    def __init__(self, source, base_destination, limit: int):
        super().__init__(
            f"Gave up on {source}: {limit} differing files already occupy variants of {base_destination}"
        )
        self.source = source
        self.base_destination = base_destination
        self.limit = limit
