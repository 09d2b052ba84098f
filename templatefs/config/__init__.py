"""Configuration loading for templatefs.

Configuration is loaded from optional TOML files with environment
variable overrides.

Usage:
    from templatefs.config import get_settings

    settings = get_settings()
    prefix = settings.template_path
"""

from functools import lru_cache

from templatefs.config.loader import load_config
from templatefs.config.settings import LoaderSettings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> LoaderSettings:
    """Get the cached settings instance.

    Call `get_settings.cache_clear()` or `reload_settings()` to reload.
    """
    set_toml_config(load_config())
    return LoaderSettings()


def reload_settings() -> LoaderSettings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "LoaderSettings"]
