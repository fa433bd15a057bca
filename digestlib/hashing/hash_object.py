"""
The hash object handed out by new() and the named constructors.
"""

from __future__ import annotations

from typing import Any

from .normalize import as_bytes
from .strategies import HashStrategy


class HashObject:
    """
    Stateful, algorithm-agnostic wrapper around one incremental hash primitive.

    The primitive is owned exclusively by this object. update() mutates it in
    call order; digest() and hexdigest() only read it and may be called any
    number of times; copy() is the way to get a second, independent state.

    Not safe for concurrent update() calls from several threads; give each
    task its own object (copy() is cheap) or serialize access externally.
    """

    __slots__ = ("_encoding", "_hasher", "_strategy")

    def __init__(self, strategy: HashStrategy, hasher: Any, encoding: str | None = None) -> None:
        """
        Args:
            strategy: Strategy describing the algorithm
            hasher: Primitive created by strategy.create_hasher() (or a clone)
            encoding: Text encoding for str passed to update(); None means
                the process default (utf-8)
        """
        self._strategy = strategy
        self._hasher = hasher
        self._encoding = encoding

    @property
    def name(self) -> str:
        """Algorithm identifier, fixed at creation."""
        return self._strategy.algorithm_name

    @property
    def digest_size(self) -> int:
        return self._strategy.digest_size

    @property
    def block_size(self) -> int:
        return self._strategy.block_size

    def update(self, data: Any) -> None:
        """
        Feed more bytes into the hash.

        Repeated calls are equivalent to a single call with the
        concatenation of all the arguments.

        Raises:
            TypeMismatchError: data is not bytes-like; state is left unchanged
        """
        payload = as_bytes(data, self._encoding)
        self._strategy.update(self._hasher, payload)

    def digest(self) -> bytes:
        """Return the digest of the bytes passed to update() so far."""
        return self._strategy.snapshot_digest(self._hasher)

    def hexdigest(self) -> str:
        """Like digest() but as a lowercase hex string of double length."""
        return self.digest().hex()

    def copy(self) -> HashObject:
        """Return an independent clone sharing no state with this object."""
        return HashObject(self._strategy, self._strategy.clone(self._hasher), self._encoding)

    def __repr__(self) -> str:
        return f"<digestlib.HashObject name={self.name!r} at {id(self):#x}>"
