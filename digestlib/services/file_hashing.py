"""
File hashing service.

Reads a file or stream once, in fixed-size chunks, and feeds every requested
algorithm from the same chunk.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from ..hashing import HashObject, new
from .logging import get_logger

DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB


class FileHashingService:
    """
    Compute one or more digests over files and binary streams.

    Unknown algorithm names raise UnsupportedAlgorithmError before any I/O;
    read errors propagate as OSError to the caller.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize hashing service.

        Args:
            chunk_size: Number of bytes read per chunk
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        """Number of bytes read per chunk."""
        return self._chunk_size

    def hash_stream(self, stream: BinaryIO, algorithms: list[str]) -> dict[str, HashObject]:
        """
        Compute multiple hashes over a binary stream in a single pass.

        Args:
            stream: Readable binary stream (left open)
            algorithms: Algorithm names; duplicates are collapsed

        Returns:
            Dict of {algorithm: HashObject}, in the order requested.
        """
        hashers = {algo: new(algo) for algo in dict.fromkeys(algorithms)}
        for chunk in iter(lambda: stream.read(self._chunk_size), b""):
            for hasher in hashers.values():
                hasher.update(chunk)
        return hashers

    def hash_file(self, path: str | Path, algorithms: list[str]) -> dict[str, str]:
        """
        Compute multiple hex digests for a file in a single pass.

        Args:
            path: File path
            algorithms: Algorithm names

        Returns:
            Dict of {algorithm: hexdigest}.

        Raises:
            UnsupportedAlgorithmError: An algorithm name is not supported
            OSError: The file cannot be opened or read
        """
        # Validate names before touching the filesystem
        for algo in algorithms:
            new(algo)

        get_logger().debug("Hashing %s with %s", path, ", ".join(algorithms))
        with open(path, "rb") as f:
            hashers = self.hash_stream(f, algorithms)
        return {algo: h.hexdigest() for algo, h in hashers.items()}

    def compute_file_hash(self, path: str | Path, algorithm: str) -> str:
        """Compute a single hex digest for a file."""
        return self.hash_file(path, [algorithm])[algorithm]
