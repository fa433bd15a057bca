"""
Custom exception hierarchy for digestlib.

Every failure surfaced by the hashing core is a typed exception that also
inherits from the matching builtin (ValueError, TypeError) so callers written
against the standard hashlib contract keep working.
"""

from __future__ import annotations


class DigestlibException(Exception):
    """
    Base exception for all digestlib errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm name, file path, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Hashing Errors
# =============================================================================


class UnsupportedAlgorithmError(DigestlibException, ValueError):
    """
    Requested algorithm name is not one of the supported identifiers.

    Inherits from ValueError to match the "unsupported hash type" error
    raised by the standard hashlib.new().
    """

    recoverable: bool = False

    def __init__(
        self,
        name: object,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.name = name
        ctx = context or {}
        ctx["name"] = name
        super().__init__(f"unsupported hash type {name}", context=ctx, cause=cause)


class TypeMismatchError(DigestlibException, TypeError):
    """
    Supplied data cannot be interpreted as a byte sequence.

    Raised before any hash primitive is constructed or fed, so no partial
    mutation happens on this path.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.type_name = type_name
        ctx = context or {}
        if type_name:
            ctx["type"] = type_name
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class DigestlibConfigError(DigestlibException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(DigestlibConfigError):
    """
    Error reading or writing a configuration file.

    Raised for permission errors, unwritable directories, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(DigestlibConfigError, ValueError):
    """
    Invalid or unknown configuration value.

    Inherits from ValueError so `config set` callers can catch it generically.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
