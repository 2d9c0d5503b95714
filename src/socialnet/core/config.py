"""Configuration utilities for SocialNet.

Provides XDG-compliant config path handling and configuration loading.
Configuration is stored in ~/.config/socialnet/ by default, respecting
the XDG_CONFIG_HOME environment variable when set. Only settings live
there; the network itself is never written to disk.
"""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from socialnet.core.constants import (
    DEFAULT_TOP_K,
    FUZZY_THRESHOLD,
    MAX_NODES_FOR_DRAWING,
    MAX_SUGGESTIONS,
)
from socialnet.core.exceptions import ConfigError

__all__ = [
    "SocialNetConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_TOML",
    "ConfigError",
    "get_xdg_config_home",
    "get_config_path",
    "ensure_config_directory",
    "load_config",
    "write_default_config",
    "get_config_display",
]


def get_xdg_config_home() -> Path:
    """Get XDG config home directory for SocialNet.

    Returns ~/.config/socialnet/ by default.
    Respects XDG_CONFIG_HOME environment variable when set.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "socialnet"


def get_config_path() -> Path:
    """Get path to config.toml within SocialNet's config directory."""
    return get_xdg_config_home() / "config.toml"


def ensure_config_directory(config_dir: Path | None = None) -> Path:
    """Ensure config directory exists with owner-only permissions.

    Creates the directory with mkdir -p behavior if it doesn't exist.
    Uses umask so the directory is never briefly accessible to others.

    Args:
        config_dir: Optional directory override. Defaults to XDG location.

    Returns:
        Path to the created/existing config directory.
    """
    if config_dir is None:
        config_dir = get_xdg_config_home()

    config_dir.parent.mkdir(parents=True, exist_ok=True)

    if not config_dir.exists():
        old_umask = os.umask(0o077)
        try:
            config_dir.mkdir(mode=0o700, exist_ok=True)
        finally:
            os.umask(old_umask)

    config_dir.chmod(0o700)
    return config_dir


@dataclass(frozen=True)
class SocialNetConfig:
    """SocialNet configuration settings.

    All fields have sensible defaults. Config file can be partial.
    """

    # Recommendations
    default_top_k: int = DEFAULT_TOP_K

    # Name suggestions
    fuzzy_threshold: int = FUZZY_THRESHOLD
    max_suggestions: int = MAX_SUGGESTIONS

    # Output
    draw_max_nodes: int = MAX_NODES_FOR_DRAWING


DEFAULT_CONFIG = SocialNetConfig()


def _require_int(data: dict[str, object], key: str, low: int, high: int | None = None) -> None:
    if key not in data:
        return
    value = data[key]
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"Invalid {key} {value!r}. Must be an integer.")
    if value < low or (high is not None and value > high):
        bounds = f">= {low}" if high is None else f"between {low} and {high}"
        raise ConfigError(f"Invalid {key} {value}. Must be {bounds}.")


def _validate_config_values(data: dict[str, object]) -> None:
    """Validate config values against their allowed ranges.

    Raises:
        ConfigError: If any value is out of range or of the wrong type.
    """
    _require_int(data, "default_top_k", 1)
    _require_int(data, "fuzzy_threshold", 0, 100)
    _require_int(data, "max_suggestions", 0)
    _require_int(data, "draw_max_nodes", 1)


# Default config TOML template with documentation comments
DEFAULT_CONFIG_TOML = f"""\
# SocialNet Configuration
# Location: ~/.config/socialnet/config.toml

# Number of friend recommendations when none is requested
default_top_k = {DEFAULT_TOP_K}

# Suggest close names for unknown people (0-100, higher is stricter)
fuzzy_threshold = {FUZZY_THRESHOLD}
max_suggestions = {MAX_SUGGESTIONS}

# Networks larger than this are listed instead of drawn
draw_max_nodes = {MAX_NODES_FOR_DRAWING}
"""


def load_config(config_path: Path | None = None) -> SocialNetConfig:
    """Load configuration from TOML file.

    Args:
        config_path: Optional path override. Defaults to XDG config path.

    Returns:
        SocialNetConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If TOML parsing fails or a value is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return DEFAULT_CONFIG

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Configuration file is invalid: {e}") from e

    _validate_config_values(data)

    # Merge with defaults - only use keys that are valid SocialNetConfig fields
    valid_fields = {f.name for f in fields(SocialNetConfig)}
    filtered_data = {k: v for k, v in data.items() if k in valid_fields}

    return SocialNetConfig(**{**DEFAULT_CONFIG.__dict__, **filtered_data})


def write_default_config(config_path: Path | None = None) -> Path:
    """Write default configuration file with documented settings.

    Uses atomic write pattern (temp file + rename) and sets file
    permissions to 600 (owner read/write only).

    Args:
        config_path: Optional path override. Defaults to XDG config path.

    Returns:
        Path of the written file.
    """
    if config_path is None:
        config_path = get_config_path()
    ensure_config_directory(config_path.parent)

    temp_path = config_path.with_suffix(".tmp")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_TOML)

        temp_path.chmod(0o600)
        temp_path.replace(config_path)
    finally:
        try:
            if temp_path.exists():
                temp_path.unlink()
        except OSError:
            pass
    return config_path


def get_config_display(config: SocialNetConfig) -> str:
    """Format all configuration for display, one `key: value` per line."""
    return "\n".join(f"{f.name}: {getattr(config, f.name)}" for f in fields(config))
