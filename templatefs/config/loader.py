"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any

SECTION = "templatefs"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Overridden with TEMPLATEFS_CONFIG_DIR; defaults to 'config/' in the
    current working directory.
    """
    config_dir_env = os.environ.get("TEMPLATEFS_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path
    return Path.cwd() / "config"


def get_environment() -> str:
    """Get the current environment from TEMPLATEFS_ENV (default 'development')."""
    return os.environ.get("TEMPLATEFS_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file, returning its templatefs section.

    A ``[templatefs]`` table is used when present so the settings can live
    in a shared application config file. Otherwise the top-level keys are
    returned.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        data = tomllib.load(f)

    section = data.get(SECTION)
    if isinstance(section, dict):
        return section
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Loading order (both optional):
    1. config/default.toml
    2. config/{TEMPLATEFS_ENV}.toml

    Returns:
        Merged configuration dictionary
    """
    config_dir = get_config_dir()
    config: dict[str, Any] = {}

    for file_name in ("default.toml", f"{get_environment()}.toml"):
        path = config_dir / file_name
        if path.exists():
            config = deep_merge(config, load_toml(path))

    return config
