"""
Configuration models.

Provides Pydantic models for digestlib configuration with validation.
"""

from __future__ import annotations

import codecs
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import DigestlibBaseModel

# Type aliases
HashAlgorithm = Literal["md5", "sha1", "sha224", "sha256", "sha384", "sha512"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(DigestlibBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash configuration section."""

    encoding: str = "utf-8"
    default_algorithm: HashAlgorithm = "sha256"
    chunk_size: int = Field(default=1024 * 1024, gt=0)

    @field_validator("encoding", mode="before")
    @classmethod
    def validate_encoding(cls, v: Any) -> str:
        """Normalize the encoding name and reject unknown codecs."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("encoding must be a non-empty string")
        try:
            return codecs.lookup(v.strip()).name
        except LookupError as e:
            raise ValueError(f"unknown text encoding: {v}") from e


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class DigestlibConfig(ConfigBaseModel):
    """Complete digestlib configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    hash: HashConfig = Field(default_factory=HashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'hash.encoding')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        parts = key.split(".")
        obj: Any = self
        for part in parts:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def set(self, key: str, value: Any) -> None:
        """Set config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'logging.level')
            value: Value to set

        Raises:
            ValueError: If key path is invalid
        """
        parts = key.split(".")
        if len(parts) < 2:
            raise ValueError(f"Invalid config key: {key}")

        obj: Any = self
        for part in parts[:-1]:
            if not hasattr(obj, part):
                raise ValueError(f"Unknown config path: {key}")
            obj = getattr(obj, part)

        field = parts[-1]
        if not hasattr(obj, field):
            raise ValueError(f"Unknown config field: {key}")

        setattr(obj, field, value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DigestlibConfig:
        """Create config from dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return self.model_dump()
