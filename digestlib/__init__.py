"""
digestlib - a common interface to the MD5, SHA-1 and SHA-2 hash functions.

    >>> import digestlib
    >>> m = digestlib.md5()
    >>> m.update(b"Nobody inspects")
    >>> m.update(b" the spammish repetition")
    >>> m.hexdigest()
    'bb649c83dd1ea5c9d9dec9a18df0ffe9'
    >>> digestlib.sha224(b"Nobody inspects the spammish repetition").hexdigest()
    'a4337bc45a8fc544c03f52dc550cd6e1e87021bc896588bd79e901e2'

new(name, data) accepts any name in algorithms_guaranteed. Hash objects
support update(), digest(), hexdigest() and copy(); digest() does not
finalize, so updates may continue afterwards.
"""

from .core.exceptions import DigestlibException, TypeMismatchError, UnsupportedAlgorithmError
from .hashing import (
    HashObject,
    algorithms_available,
    algorithms_guaranteed,
    md5,
    new,
    sha1,
    sha224,
    sha256,
    sha384,
    sha512,
)

__all__ = [
    "DigestlibException",
    "HashObject",
    "TypeMismatchError",
    "UnsupportedAlgorithmError",
    "algorithms_available",
    "algorithms_guaranteed",
    "md5",
    "new",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
]
