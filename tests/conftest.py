"""Shared test fixtures for the templatefs test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from tests.factories import MemoryFilesystem


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Empty in-memory filesystem."""
    return MemoryFilesystem()


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "template_path = 'templates'",
                "development.toml": "encoding = 'latin-1'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            original = self.original_env[key]
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


@pytest.fixture
def env_override() -> Callable[[dict[str, str]], EnvOverrideContext]:
    """Temporarily set environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"TEMPLATEFS_TEMPLATE_PATH": "views"}):
                ...
    """
    return EnvOverrideContext


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Isolate every test from ambient configuration.

    Clears TEMPLATEFS_* variables, points the config directory at an empty
    temp dir, and resets the settings cache and structlog configuration.
    """
    import structlog

    from templatefs.config import get_settings
    from templatefs.config.settings import set_toml_config

    for key in list(os.environ):
        if key.startswith("TEMPLATEFS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    set_toml_config({})
    get_settings.cache_clear()
    yield
    set_toml_config({})
    get_settings.cache_clear()
    structlog.reset_defaults()
