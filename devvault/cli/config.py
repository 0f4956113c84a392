"""Configuration management for the CLI.

Configuration only affects presentation. The store location is fixed and
is never read from here.
"""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "color": True,
    "banner": True,
    "width": None,
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        return [xdg_config_home / "dev-vault" / "config.yaml"]

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration, falling back to defaults.

    An explicit ``path`` must be readable; default locations are skipped
    when absent.
    """
    if path is not None:
        return Config.merge_configs(DEFAULTS, Config.from_file(path))

    config = dict(DEFAULTS)
    for candidate in Config.get_config_paths():
        if candidate.exists():
            config = Config.merge_configs(config, Config.from_file(candidate))
    return config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
