"""
Normalization of caller-supplied data into bytes.

This is the single place where "bytes-like" input is interpreted. Every
constructor and HashObject.update() goes through as_bytes(), so all entry
points share one strict conversion policy.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import TypeMismatchError

DEFAULT_ENCODING = "utf-8"

_default_encoding: str = DEFAULT_ENCODING


def get_default_encoding() -> str:
    """Return the text encoding used for str input when none is given."""
    return _default_encoding


def set_default_encoding(encoding: str) -> None:
    """Override the process-wide default text encoding."""
    global _default_encoding
    _default_encoding = encoding


def reset_default_encoding() -> None:
    """Restore the default text encoding to utf-8."""
    global _default_encoding
    _default_encoding = DEFAULT_ENCODING


def as_bytes(data: Any, encoding: str | None = None) -> bytes:
    """
    Convert data to a canonical bytes object.

    Accepts bytes, any object exposing the buffer protocol (bytearray,
    memoryview, array.array, ...) and str. Text is encoded with `encoding`,
    or the process default (utf-8) when None, using strict error handling.

    Raises:
        TypeMismatchError: data is of an unsupported type, or text that the
            encoding cannot represent
    """
    if isinstance(data, bytes):
        return data

    if isinstance(data, str):
        codec = encoding or get_default_encoding()
        try:
            return data.encode(codec)
        except UnicodeEncodeError as e:
            raise TypeMismatchError(
                f"text cannot be encoded as {codec}",
                type_name="str",
                context={"encoding": codec},
                cause=e,
            ) from e
        except LookupError as e:
            raise TypeMismatchError(
                f"unknown text encoding: {codec}",
                type_name="str",
                cause=e,
            ) from e

    try:
        view = memoryview(data)
    except TypeError as e:
        type_name = type(data).__name__
        raise TypeMismatchError(
            f"object of type {type_name!r} cannot be interpreted as bytes",
            type_name=type_name,
            cause=e,
        ) from e

    # tobytes() flattens any shape/format in C order
    with view:
        return view.tobytes()
