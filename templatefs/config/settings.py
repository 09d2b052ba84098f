"""Settings model for templatefs."""

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by LoaderSettings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads from the loaded TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class LoaderSettings(BaseSettings):
    """Loader configuration.

    Priority order (highest to lowest):
    1. Constructor arguments
    2. TEMPLATEFS_* environment variables
    3. config/*.toml files
    4. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATEFS_",
        case_sensitive=False,
        extra="ignore",
    )

    template_path: str = Field(
        default="",
        description="Prefix prepended to every template name",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode template bytes for Jinja2",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="console", description="Log output format")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
