"""Services built on top of the hashing core: logging, file hashing, checksum lists."""

from .checksums import ChecksumEntry, format_line, parse_line
from .file_hashing import DEFAULT_CHUNK_SIZE, FileHashingService
from .logging import DigestlibLogger, NullLogger, configure_logging, get_logger, reset_logging

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ChecksumEntry",
    "DigestlibLogger",
    "FileHashingService",
    "NullLogger",
    "configure_logging",
    "format_line",
    "get_logger",
    "parse_line",
    "reset_logging",
]
