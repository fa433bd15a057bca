"""
Constructors for hash objects.

new(name, data) is the generic entry point; md5() ... sha512() are thin
shortcuts that route through it with the algorithm name fixed, so every
constructor shares one resolution path and one data-normalization policy.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import TypeMismatchError
from .hash_object import HashObject
from .normalize import as_bytes
from .registry import default_registry

algorithms_guaranteed: frozenset[str] = frozenset(default_registry.available_algorithms)
algorithms_available: frozenset[str] = algorithms_guaranteed


def new(name: str, data: Any = None, *, encoding: str | None = None) -> HashObject:
    """
    Return a new hash object implementing the named hash function.

    Args:
        name: One of md5, sha1, sha224, sha256, sha384, sha512 (exact match)
        data: Optional initial bytes-like or str data
        encoding: Text encoding for str data (default: utf-8)

    Raises:
        UnsupportedAlgorithmError: name is not a supported algorithm
        TypeMismatchError: name is not a str, or data is not bytes-like
    """
    if not isinstance(name, str):
        raise TypeMismatchError(
            f"algorithm name must be str, not {type(name).__name__!r}",
            type_name=type(name).__name__,
        )

    # Resolve before looking at data: unknown names never consume it.
    strategy = default_registry.resolve(name)
    payload = as_bytes(data, encoding) if data is not None else b""

    hasher = strategy.create_hasher()
    if payload:
        strategy.update(hasher, payload)
    return HashObject(strategy, hasher, encoding)


def md5(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return an md5 hash object, optionally initialized with data."""
    return new("md5", data, encoding=encoding)


def sha1(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return a sha1 hash object, optionally initialized with data."""
    return new("sha1", data, encoding=encoding)


def sha224(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return a sha224 hash object, optionally initialized with data."""
    return new("sha224", data, encoding=encoding)


def sha256(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return a sha256 hash object, optionally initialized with data."""
    return new("sha256", data, encoding=encoding)


def sha384(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return a sha384 hash object, optionally initialized with data."""
    return new("sha384", data, encoding=encoding)


def sha512(data: Any = None, *, encoding: str | None = None) -> HashObject:
    """Return a sha512 hash object, optionally initialized with data."""
    return new("sha512", data, encoding=encoding)
