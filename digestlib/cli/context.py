"""
Click context extension for the digestlib CLI.

Provides DigestlibContext dataclass that holds the loaded settings and the
services commands need, passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.settings import DigestlibSettings, load_settings
from ..services.file_hashing import FileHashingService
from ..services.logging import configure_logging


@dataclass
class DigestlibContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Merged settings (init, env, TOML, defaults)
        logger: Diagnostic logger configured from settings
        hashing: File hashing service using the configured chunk size
    """

    settings: DigestlibSettings
    logger: ILogger
    hashing: FileHashingService = field(default_factory=FileHashingService)

    @classmethod
    def create(cls, cwd: Path | None = None) -> DigestlibContext:
        """Create a DigestlibContext for the current environment.

        Args:
            cwd: Directory the config file search starts from (defaults to
                Path.cwd())

        Raises:
            ConfigValidationError: The config file or environment holds an
                invalid value
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        logger = configure_logging(settings.logging)
        if settings.config_file:
            logger.debug("Loaded config from %s", settings.config_file)
        if settings.config_error:
            logger.warning("%s", settings.config_error)

        return cls(
            settings=settings,
            logger=logger,
            hashing=FileHashingService(chunk_size=settings.hash.chunk_size),
        )

    @property
    def default_algorithm(self) -> str:
        """Algorithm used when the user does not pass -a."""
        return self.settings.hash.default_algorithm
