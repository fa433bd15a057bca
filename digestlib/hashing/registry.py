"""
Hash algorithm registry.

Maps an exact, case-sensitive algorithm name to its strategy. The table is
built once from DEFAULT_STRATEGIES; adding an algorithm means adding a
strategy to that tuple.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.exceptions import UnsupportedAlgorithmError
from .strategies import DEFAULT_STRATEGIES, HashStrategy


class HashAlgorithmRegistry:
    """
    Closed lookup table of hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()
        hasher = registry.create_hasher("sha256")
        registry.compute_hash("md5", b"")  # 'd41d8cd98f00b204e9800998ecf8427e'
    """

    def __init__(self, strategies: Iterable[HashStrategy] = DEFAULT_STRATEGIES):
        """
        Initialize the registry.

        Args:
            strategies: Strategies making up the table (defaults to the six
                built-in algorithms)
        """
        self._strategies: dict[str, HashStrategy] = {}
        for strategy in strategies:
            if strategy.algorithm_name in self._strategies:
                raise ValueError(f"Duplicate hash algorithm: {strategy.algorithm_name}")
            self._strategies[strategy.algorithm_name] = strategy

    def get(self, algorithm: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        Args:
            algorithm: Algorithm name (e.g., 'sha256')

        Returns:
            HashStrategy or None if not found
        """
        if not isinstance(algorithm, str):
            return None
        return self._strategies.get(algorithm)

    def resolve(self, algorithm: str) -> HashStrategy:
        """
        Get strategy by algorithm name, failing loudly for unknown names.

        Raises:
            UnsupportedAlgorithmError: If algorithm is not in the table
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnsupportedAlgorithmError(algorithm)
        return strategy

    def create_hasher(self, algorithm: str) -> Any:
        """
        Create a fresh, zero-state hasher for the given algorithm.

        Raises:
            UnsupportedAlgorithmError: If algorithm is not in the table
        """
        return self.resolve(algorithm).create_hasher()

    def compute_hash(self, algorithm: str, data: bytes) -> str:
        """
        Compute hash of data using the specified algorithm.

        Args:
            algorithm: Algorithm name
            data: Data to hash

        Returns:
            Hex-encoded hash digest
        """
        strategy = self.resolve(algorithm)
        hasher = strategy.create_hasher()
        strategy.update(hasher, data)
        return strategy.hexdigest(hasher)

    def algorithm_for_digest_size(self, size: int) -> str | None:
        """Return the single algorithm producing digests of size bytes, if unique."""
        matches = [name for name, s in self._strategies.items() if s.digest_size == size]
        return matches[0] if len(matches) == 1 else None

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return list(self._strategies.keys())

    def __contains__(self, algorithm: object) -> bool:
        """Check if algorithm is in the table."""
        return isinstance(algorithm, str) and algorithm in self._strategies

    def __iter__(self):
        return iter(self._strategies.values())

    def __len__(self) -> int:
        return len(self._strategies)


default_registry = HashAlgorithmRegistry()
