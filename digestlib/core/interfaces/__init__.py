"""Abstract interfaces for digestlib services."""

from .logger import ILogger

__all__ = ["ILogger"]
