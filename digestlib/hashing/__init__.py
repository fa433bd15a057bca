"""
Hash algorithm strategies, registry, and the hash object API.

The Strategy pattern keeps HashObject algorithm-agnostic; the registry is a
closed table of the six supported algorithms.
"""

from .constructors import (
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
from .hash_object import HashObject
from .normalize import as_bytes
from .registry import HashAlgorithmRegistry, default_registry
from .strategies import (
    DEFAULT_STRATEGIES,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA224Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "HashAlgorithmRegistry",
    "HashObject",
    "HashStrategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA224Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "algorithms_available",
    "algorithms_guaranteed",
    "as_bytes",
    "default_registry",
    "md5",
    "new",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
]
