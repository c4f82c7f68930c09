"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file content hashing with pluggable hash algorithms.

Files are streamed through a fixed-size buffer so large videos never have to
fit in memory. Read errors are not swallowed: OSError reaches the caller,
which decides whether the file is skipped.
"""

import hashlib
from pathlib import Path
from typing import Union

import xxhash

from gphotosort.core.interfaces import HashAlgorithm, HashState
from gphotosort.core.models import HASH_BUFFER_SIZE, HashAlgorithmName


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return xxhash.xxh64()


class Md5AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return hashlib.md5()


ALGORITHMS = {
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
    HashAlgorithmName.MD5: Md5AlgorithmImpl,
}


class HasherImpl:
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, buffer_size: int = HASH_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("Buffer size must be positive")
        self.algorithm = algorithm if algorithm is not None else XXHashAlgorithmImpl()
        self.buffer_size = buffer_size

    @classmethod
    def for_name(cls, name: HashAlgorithmName) -> "HasherImpl":
        return cls(ALGORITHMS[name]())

    def compute_full_hash(self, path: Union[str, Path]) -> bytes:
        """Streams the whole file into the configured algorithm and returns the digest."""
        state = self.algorithm.new()
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(self.buffer_size), b""):
                state.update(chunk)
        return state.digest()
