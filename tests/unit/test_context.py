"""
Unit tests for DigestlibContext.
"""

from dataclasses import fields

import pytest

from digestlib.cli.context import DigestlibContext
from digestlib.core.exceptions import ConfigValidationError
from digestlib.services.logging import get_logger


class TestDigestlibContext:
    """Tests for DigestlibContext.create()."""

    def test_fields(self):
        """The context carries only what commands use."""
        assert [f.name for f in fields(DigestlibContext)] == ["settings", "logger", "hashing"]

    def test_config_searched_from_cwd_argument(self, tmp_path):
        """create(cwd=...) starts the config search at that directory."""
        project = tmp_path / "project"
        (project / ".digestlib").mkdir(parents=True)
        (project / ".digestlib" / "config.toml").write_text(
            '[hash]\ndefault_algorithm = "sha384"\nchunk_size = 4096\n'
        )

        ctx = DigestlibContext.create(cwd=project)

        assert ctx.default_algorithm == "sha384"
        assert ctx.hashing.chunk_size == 4096

    def test_defaults_without_config(self, tmp_path):
        """With no config file, sha256 and the 1MB chunk size apply."""
        ctx = DigestlibContext.create()

        assert ctx.default_algorithm == "sha256"
        assert ctx.hashing.chunk_size == 1024 * 1024
        assert ctx.settings.config_file is None

    def test_logger_is_registered(self):
        """The context logger is the process-wide logger."""
        ctx = DigestlibContext.create()
        assert get_logger() is ctx.logger

    def test_invalid_config_raises(self, write_config):
        """Invalid values surface as ConfigValidationError."""
        write_config("[hash]\nchunk_size = -5\n")
        with pytest.raises(ConfigValidationError):
            DigestlibContext.create()
