"""
Configuration management for swamp.

The configuration is an optional TOML file. Nothing about the item
collection is persisted; the file only tunes how a run behaves.

    [swamp]
    version = 1

    [index]
    max_precompute_length = 10

    [output]
    flush_interval = 1.0
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import tomli_w

from .fuzzy import DEFAULT_MAX_PRECOMPUTE_LENGTH
from .runner import DEFAULT_FLUSH_INTERVAL

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "swamp.toml"
CONFIG_VERSION = 1

# Precomputing subsequences costs 2^n per token
MAX_PRECOMPUTE_LIMIT = 20


def get_config_path(override: Optional[Path] = None) -> Path:
    """
    Resolve the config file location.

    Priority:
    1. Explicit override (--config)
    2. SWAMP_CONFIG environment variable
    3. ~/.swamp/swamp.toml
    """
    if override is not None:
        return Path(override).expanduser()
    env_path = os.environ.get("SWAMP_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".swamp" / CONFIG_FILENAME


@dataclass
class SwampConfig:
    """Complete run configuration."""
    path: Path = field(default_factory=get_config_path)
    version: int = CONFIG_VERSION
    max_precompute_length: int = DEFAULT_MAX_PRECOMPUTE_LENGTH
    flush_interval: float = DEFAULT_FLUSH_INTERVAL

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.path.exists()

    def validate(self) -> None:
        """
        Raises:
            ValueError: If a value is out of range
        """
        if not 0 <= self.max_precompute_length <= MAX_PRECOMPUTE_LIMIT:
            raise ValueError(
                f"max_precompute_length must be 0-{MAX_PRECOMPUTE_LIMIT}: "
                f"{self.max_precompute_length}"
            )
        if self.flush_interval < 0:
            raise ValueError(f"flush_interval must be >= 0: {self.flush_interval}")

    def to_dict(self) -> dict[str, Any]:
        """TOML structure, as written by save_config()."""
        return {
            "swamp": {"version": self.version},
            "index": {"max_precompute_length": self.max_precompute_length},
            "output": {"flush_interval": self.flush_interval},
        }


def _apply_env_overrides(config: SwampConfig) -> None:
    value = os.environ.get("SWAMP_FLUSH_INTERVAL")
    if value:
        try:
            config.flush_interval = float(value)
        except ValueError:
            raise ValueError(f"SWAMP_FLUSH_INTERVAL must be a number: {value!r}") from None
    value = os.environ.get("SWAMP_MAX_PRECOMPUTE_LENGTH")
    if value:
        try:
            config.max_precompute_length = int(value)
        except ValueError:
            raise ValueError(f"SWAMP_MAX_PRECOMPUTE_LENGTH must be an integer: {value!r}") from None


def _section(data: dict, name: str, config_path: Path) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"Invalid config {config_path}: [{name}] must be a table")
    return section


def _typed(section: dict, key: str, default: Any, types: tuple, config_path: Path) -> Any:
    """Value of ``key`` in ``section``; bool is rejected where int is expected."""
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, types):
        expected = " or ".join(t.__name__ for t in types)
        raise ValueError(
            f"Invalid config {config_path}: {key} must be {expected}, got {value!r}"
        )
    return value


def load_config(path: Optional[Path] = None) -> SwampConfig:
    """
    Load configuration, falling back to defaults if the file is absent.

    Environment overrides are applied on top of the file.

    Raises:
        ValueError: If config is invalid or newer than supported
    """
    config_path = get_config_path(path)
    config = SwampConfig(path=config_path)

    if config_path.exists():
        with open(config_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid config {config_path}: {e}") from None

        swamp = _section(data, "swamp", config_path)
        index = _section(data, "index", config_path)
        output = _section(data, "output", config_path)

        version = _typed(swamp, "version", 1, (int,), config_path)
        if version > CONFIG_VERSION:
            raise ValueError(f"Config version {version} is newer than supported ({CONFIG_VERSION})")
        config.version = version

        config.max_precompute_length = _typed(
            index, "max_precompute_length", DEFAULT_MAX_PRECOMPUTE_LENGTH, (int,), config_path
        )
        config.flush_interval = float(_typed(
            output, "flush_interval", DEFAULT_FLUSH_INTERVAL, (int, float), config_path
        ))
        logger.debug("Loaded config from %s", config_path)
    else:
        logger.debug("No config at %s, using defaults", config_path)

    _apply_env_overrides(config)
    config.validate()
    return config


def save_config(config: SwampConfig) -> None:
    """
    Save configuration to its path.

    Creates the directory if it doesn't exist.
    """
    config.validate()
    config.path.parent.mkdir(parents=True, exist_ok=True)
    with open(config.path, "wb") as f:
        tomli_w.dump(config.to_dict(), f)
