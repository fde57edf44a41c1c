"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - ui_culture is normalized ("de-de" → "de-DE"); metadata_country_code is upper-case
    - Settings satisfies core.repository_protocols.LocalizationConfig

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with the packaged data
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from locale_catalog.core.domain_types import (
    DEFAULT_COUNTRY, FALLBACK_CULTURE, normalize_country_code,
    normalize_culture_name,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Localization
    ui_culture: str = FALLBACK_CULTURE
    metadata_country_code: str = DEFAULT_COUNTRY

    @field_validator("ui_culture", mode="before")
    @classmethod
    def normalize_ui_culture(cls, v: str | None) -> str:
        return normalize_culture_name(v)

    @field_validator("metadata_country_code", mode="before")
    @classmethod
    def normalize_country(cls, v: str | None) -> str:
        return normalize_country_code(v)

    # Reference data (None: data shipped inside the package)
    data_dir: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
