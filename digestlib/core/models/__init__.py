"""Pydantic models for digestlib."""

from .base import DigestlibBaseModel
from .config import (
    ConfigBaseModel,
    DigestlibConfig,
    HashAlgorithm,
    HashConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "ConfigBaseModel",
    "DigestlibBaseModel",
    "DigestlibConfig",
    "HashAlgorithm",
    "HashConfig",
    "LogLevel",
    "LoggingConfig",
]
