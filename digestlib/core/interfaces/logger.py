"""
Logger interface for digestlib diagnostics.

Only the CLI and the settings loader log. The hashing core stays silent and
reports every failure by raising.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Interface for internal diagnostic logging.

    Not for user-facing output: CLI results go through click.echo.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Change the threshold of every attached handler.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
        pass
