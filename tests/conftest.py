"""
Shared pytest fixtures for digestlib tests.

This module provides:
- isolated_env (autouse): runs every test in an empty temp cwd with no
  DIGESTLIB_* environment variables, the default encoding and an empty
  service container
- empty_digests, abc_digests, hex_lengths: published known-answer vectors
- run_digestlib: helper to run the CLI via `python -m digestlib`
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from digestlib.core.container import ServiceContainer
from digestlib.hashing.normalize import reset_default_encoding
from digestlib.services.logging import reset_logging

EMPTY_DIGESTS = {
    "md5": "d41d8cd98f00b204e9800998ecf8427e",
    "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    "sha224": "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    "sha256": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    "sha384": (
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da"
        "274edebfe76f65fbd51ad2f14898b95b"
    ),
    "sha512": (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
}

ABC_DIGESTS = {
    "md5": "900150983cd24fb0d6963f7d28e17f72",
    "sha1": "a9993e364706816aba3e25717850c26c9cd0d89d",
    "sha224": "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
    "sha256": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    "sha384": (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
        "8086072ba1e7cc2358baeca134c825a7"
    ),
    "sha512": (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
}

HEX_LENGTHS = {
    "md5": 32,
    "sha1": 40,
    "sha224": 56,
    "sha256": 64,
    "sha384": 96,
    "sha512": 128,
}


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run each test in a fresh working directory with no ambient config.

    Returns:
        The temporary working directory
    """
    for name in list(os.environ):
        if name.startswith("DIGESTLIB_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_default_encoding()
    reset_logging()
    ServiceContainer.reset()
    yield tmp_path
    reset_default_encoding()
    reset_logging()
    ServiceContainer.reset()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Provide a helper that writes .digestlib/config.toml in the temp cwd."""

    def write(content: str) -> Path:
        config_path = tmp_path / ".digestlib" / "config.toml"
        config_path.parent.mkdir(exist_ok=True)
        config_path.write_text(content)
        return config_path

    return write


def _run_digestlib_cmd(*args: str, cwd: Path, input_bytes: bytes | None = None) -> subprocess.CompletedProcess:
    """Run a digestlib command using the current Python interpreter."""
    return subprocess.run(
        [sys.executable, "-m", "digestlib", *args],
        cwd=cwd,
        input=input_bytes,
        capture_output=True,
    )


@pytest.fixture
def run_digestlib(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Provide a helper function to run digestlib CLI commands in a subprocess.

    Returns:
        A callable that runs digestlib and returns CompletedProcess (bytes output)
    """

    def run(*args: str, input_bytes: bytes | None = None) -> subprocess.CompletedProcess:
        return _run_digestlib_cmd(*args, cwd=tmp_path, input_bytes=input_bytes)

    return run


@pytest.fixture
def empty_digests() -> dict[str, str]:
    """Published hexdigests of the empty input."""
    return dict(EMPTY_DIGESTS)


@pytest.fixture
def abc_digests() -> dict[str, str]:
    """Published hexdigests of b"abc" (FIPS 180 / RFC 1321 test vectors)."""
    return dict(ABC_DIGESTS)


@pytest.fixture
def hex_lengths() -> dict[str, int]:
    """Hex digest length per algorithm."""
    return dict(HEX_LENGTHS)
