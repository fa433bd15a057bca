"""
Hash algorithm strategy implementations.

Each strategy wraps one incremental hash primitive from the standard hashlib
module and knows its name and sizes. The set of strategies is closed: the
registry builds its table from DEFAULT_STRATEGIES and nothing else.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - digest_size / block_size: Sizes in bytes
    - create_hasher(): Factory method for zero-state hasher instances
    """

    # Set on primitives whose digest() consumes internal state.
    destructive_finalize: bool = False

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha256')."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Size of the binary digest in bytes."""
        pass

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Internal block size of the primitive in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def clone(self, hasher: Any) -> Any:
        """Return an independent duplicate of hasher's current state."""
        return hasher.copy()

    def snapshot_digest(self, hasher: Any) -> bytes:
        """
        Return the digest of everything fed so far without consuming hasher.

        Primitives that finalize destructively are cloned first, so the
        caller can keep updating the original afterwards.
        """
        if self.destructive_finalize:
            hasher = self.clone(hasher)
        return hasher.digest()

    def hexdigest(self, hasher: Any) -> str:
        """Lowercase hex form of snapshot_digest()."""
        return self.snapshot_digest(hasher).hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "md5"

    @property
    def digest_size(self) -> int:
        return 16

    @property
    def block_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.md5()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy - collision-weak, kept for interoperability."""

    @property
    def algorithm_name(self) -> str:
        return "sha1"

    @property
    def digest_size(self) -> int:
        return 20

    @property
    def block_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha1()


class SHA224Strategy(HashStrategy):
    """SHA-224 hashing strategy - truncated SHA-256."""

    @property
    def algorithm_name(self) -> str:
        return "sha224"

    @property
    def digest_size(self) -> int:
        return 28

    @property
    def block_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha224()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm_name(self) -> str:
        return "sha256"

    @property
    def digest_size(self) -> int:
        return 32

    @property
    def block_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    @property
    def algorithm_name(self) -> str:
        return "sha384"

    @property
    def digest_size(self) -> int:
        return 48

    @property
    def block_size(self) -> int:
        return 128

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "sha512"

    @property
    def digest_size(self) -> int:
        return 64

    @property
    def block_size(self) -> int:
        return 128

    def create_hasher(self) -> Any:
        return hashlib.sha512()


# The closed set of supported algorithms, in presentation order.
DEFAULT_STRATEGIES: tuple[HashStrategy, ...] = (
    MD5Strategy(),
    SHA1Strategy(),
    SHA224Strategy(),
    SHA256Strategy(),
    SHA384Strategy(),
    SHA512Strategy(),
)
