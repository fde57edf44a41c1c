"""Localization Service — binds a Catalog to the active configuration.

Invariants:
    - Configuration is read, never written
    - Explicit arguments win over configuration defaults
      (country_code over metadata_country_code, culture over ui_culture)
    - All reads delegate to pure core functions over the catalog snapshot
"""

import logging

from locale_catalog.core.domain_types import RatingLevel
from locale_catalog.core.localize_strings import (
    LocalizationOption, get_localization_options, get_localized_string,
)
from locale_catalog.core.records import (
    CountryRecord, CultureRecord, ParentalRatingRecord,
)
from locale_catalog.core.repository_protocols import (
    LocalizationConfig, RecordProvider,
)
from locale_catalog.core.resolve_language import find_language_info
from locale_catalog.core.resolve_rating import get_rating_level
from locale_catalog.services.catalog import Catalog

logger = logging.getLogger(__name__)


class LocalizationService:
    def __init__(self, catalog: Catalog, config: LocalizationConfig):
        self.catalog = catalog
        self.config = config

    async def load_all(self) -> None:
        await self.catalog.load_all()

    @property
    def is_ready(self) -> bool:
        return self.catalog.is_loaded

    def get_countries(self) -> list[CountryRecord]:
        return self.catalog.get_countries()

    def get_cultures(self) -> list[CultureRecord]:
        return self.catalog.get_cultures()

    def find_language_info(self, identifier: str | None) -> CultureRecord | None:
        culture = find_language_info(self.catalog.snapshot.cultures, identifier)
        if culture is None:
            logger.debug(f"No culture matches {identifier!r}")
        return culture

    def get_parental_ratings(
        self, country_code: str | None = None,
    ) -> list[ParentalRatingRecord]:
        return self.catalog.get_parental_ratings(
            country_code or self.config.metadata_country_code,
        )

    def get_rating_level(
        self, value: str | None, country_code: str | None = None,
    ) -> RatingLevel | None:
        return get_rating_level(
            self.catalog.snapshot, value,
            country_code or self.config.metadata_country_code,
        )

    def get_localized_string(self, key: str, culture: str | None = None) -> str:
        return get_localized_string(
            self.catalog.snapshot.string_tables, key,
            culture or self.config.ui_culture,
        )

    def get_localization_options(self) -> list[LocalizationOption]:
        snapshot = self.catalog.snapshot
        display_names: dict[str, str] = {}
        for culture in snapshot.cultures:
            display_names.setdefault(culture.two_letter_language_code, culture.display_name)
        return get_localization_options(snapshot.string_tables, display_names)


# Singleton (initialized on startup)
localization_service: LocalizationService | None = None


def init_localization(
    config: LocalizationConfig, provider: RecordProvider,
) -> LocalizationService:
    global localization_service
    localization_service = LocalizationService(Catalog(provider), config)
    return localization_service


def get_localization() -> LocalizationService:
    """FastAPI dependency for the localization service."""
    if not localization_service:
        raise RuntimeError("Localization service not initialized")
    return localization_service
