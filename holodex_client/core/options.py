"""ClientOptions settings model for holodex-client."""

from __future__ import annotations

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource
from pydantic_settings import YamlConfigSettingsSource

DEFAULT_BASE_URL = "https://holodex.net/api/v2/"


class ClientOptions(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HOLODEX_",
        yaml_file="holodex.yaml",
        yaml_file_encoding="utf-8",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    api_key: SecretStr | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    verbose: bool = False

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        # relative endpoint paths are joined onto the base URL
        return value if value.endswith("/") else value + "/"
