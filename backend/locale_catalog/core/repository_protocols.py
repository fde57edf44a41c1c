"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in RecordProvider: implementations do IO, but the core functions
      that consume the loaded records are never async themselves; the
      Catalog (services/) orchestrates the async calls around the pure logic
"""

from typing import Protocol

from locale_catalog.core.records import (
    CountryRecord, CultureRecord, LocalizedStringTable, ParentalRatingRecord,
)


class RecordProvider(Protocol):
    """Contract for bulk reference-data reads — implemented by shell."""
    async def get_countries(self) -> list[CountryRecord]: ...
    async def get_cultures(self) -> list[CultureRecord]: ...
    async def get_parental_ratings(self) -> list[ParentalRatingRecord]: ...
    async def get_string_tables(self) -> list[LocalizedStringTable]: ...


class LocalizationConfig(Protocol):
    """Structural contract for the active configuration.

    Satisfied by config.Settings; tests pass any object with these attributes.
    """
    ui_culture: str
    metadata_country_code: str
