"""Configuration loading and management for digestlib."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .core.exceptions import ConfigFileError, ConfigValidationError
from .core.settings import CONFIG_DIR_NAME, CONFIG_FILE_NAME, find_config_file, load_settings
from .hashing import algorithms_guaranteed

# Valid hash algorithms
VALID_HASH_ALGORITHMS = set(algorithms_guaranteed)

# Config keys that can be set via `digestlib config`
CONFIGURABLE_KEYS = {
    "hash.encoding": {
        "type": str,
        "default": "utf-8",
        "description": "Text encoding used to turn str input into bytes",
    },
    "hash.default_algorithm": {
        "type": str,
        "default": "sha256",
        "description": "Algorithm used by `digestlib sum` when -a is not given",
    },
    "hash.chunk_size": {
        "type": int,
        "default": 1024 * 1024,
        "description": "Bytes read per chunk when hashing files",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.digestlib/digestlib.log",
    },
}

_SECTIONS = ("hash", "logging")


def _get_default_config() -> dict:
    """Get default config from Pydantic models."""
    from .core.models.config import DigestlibConfig

    return DigestlibConfig().to_dict()


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'hash.encoding'."""
    parts = key.split(".")
    for part in parts:
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    return settings.to_dict()


def get_config_path_for_write(start_dir: str | None = None) -> Path:
    """
    Get the path where config should be written.

    Prefers an existing .digestlib/config.toml, otherwise creates one in
    start_dir or cwd.
    """
    existing = find_config_file(start_dir)
    if existing and existing.name == CONFIG_FILE_NAME:
        return existing

    base = Path(start_dir) if start_dir else Path.cwd()
    config_dir = base / CONFIG_DIR_NAME
    try:
        config_dir.mkdir(exist_ok=True)
    except OSError as e:
        raise ConfigFileError(
            "Cannot create config directory", file_path=str(config_dir), cause=e
        ) from e
    return config_dir / CONFIG_FILE_NAME


def _format_toml_value(val: Any) -> str:
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, str):
        escaped = val.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(val)


def save_config(config: dict, config_path: Path) -> None:
    """
    Save configuration to a TOML file.

    Only saves non-default values.
    """
    lines = []
    defaults = _get_default_config()

    for section in _SECTIONS:
        section_lines = []
        for key, val in config.get(section, {}).items():
            if val != defaults.get(section, {}).get(key):
                section_lines.append(f"{key} = {_format_toml_value(val)}")

        if section_lines:
            lines.append(f"[{section}]")
            lines.extend(section_lines)
            lines.append("")

    try:
        config_path.write_text("\n".join(lines))
    except OSError as e:
        raise ConfigFileError("Cannot write config file", file_path=str(config_path), cause=e) from e


def config_get(key: str, start_dir: str | None = None):
    """Get a config value."""
    config = load_config(start_dir=start_dir)
    return _get_nested(config, key)


def _parse_value(key: str, value: str) -> Any:
    """Parse a command-line string into the type declared for key."""
    key_type = CONFIGURABLE_KEYS[key]["type"]

    if key_type is bool:
        if value.lower() in ("true", "1", "yes", "on"):
            return True
        if value.lower() in ("false", "0", "no", "off"):
            return False
        raise ConfigValidationError(f"Invalid boolean value: {value}", key=key, value=value)

    if key_type is int:
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid integer value: {value}", key=key, value=value, cause=e
            ) from e

    if key == "hash.default_algorithm" and value not in VALID_HASH_ALGORITHMS:
        raise ConfigValidationError(
            f"Invalid hash algorithm: {value}. "
            f"Valid algorithms: {', '.join(sorted(VALID_HASH_ALGORITHMS))}",
            key=key,
            value=value,
        )
    return value


def config_set(key: str, value: str, start_dir: str | None = None):
    """Set a config value and save to .digestlib/config.toml."""
    from .core.models.config import DigestlibConfig

    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS.keys())}",
            key=key,
        )

    typed_value = _parse_value(key, value)

    # Round-trip through the model so field validators run
    config = load_config(start_dir=start_dir)
    model = DigestlibConfig.from_dict({s: config.get(s, {}) for s in _SECTIONS})
    try:
        model.set(key, typed_value)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid value for {key}: {value}", key=key, value=value, cause=e
        ) from e

    config_path = get_config_path_for_write(start_dir)
    save_config(model.to_dict(), config_path)

    return config_path, model.get(key)


def config_list():
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS
