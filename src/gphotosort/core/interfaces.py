"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the merge pipeline.
These protocols rely on structural typing via `typing.Protocol`, so tests and
callers can substitute their own walker or hash function.

Key Components:
---------------
- HashState / HashAlgorithm: incremental hash functions (xxHash64, MD5).
- ContentHasher: computes a digest for a whole file.
- DirectoryWalker: yields candidate file paths under a root.
"""

from pathlib import Path
from typing import Protocol, Iterator


# ===== Interfaces =====

class HashState(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for incremental hash algorithms.

    Allows plugging in different hashing functions like MD5 or xxHash
    without affecting the rest of the merge logic.
    """

    @staticmethod
    def new() -> HashState:
        """Returns a fresh hash state ready to receive data."""
        ...


class ContentHasher(Protocol):
    """Interface for hashing whole files."""
    def compute_full_hash(self, path: Path) -> bytes: ...


class DirectoryWalker(Protocol):
    """
    Interface for enumerating files below a root.

    Methods:
        walk: Lazily yields regular-file paths, pruning excluded subtrees.
    """
    def walk(self, root: Path) -> Iterator[Path]:
        ...
