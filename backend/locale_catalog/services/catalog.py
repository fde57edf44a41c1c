"""Catalog — load-once, read-many store of all reference records.

Invariants:
    - load_all() is single-flight: one fetch per record kind no matter how many
      concurrent callers, and every caller observes that one outcome
    - Readers see either no snapshot or a complete one (single reference swap)
    - A failed load leaves the catalog unloaded; the next load_all() retries
    - A cancelled load resets the state to UNLOADED and clears the in-flight task
    - Reads before load raise CatalogNotLoadedError; reads after load take no lock

Design Decisions:
    - Shared asyncio.Task over a lock + flag: waiters join the in-flight load,
      and a failure is raised to every waiter of that load
    - asyncio.shield() around the shared task: a cancelled waiter leaves the
      load running for the others
    - Provider errors and duplicate-record errors both surface as RecordProviderError
"""

import asyncio
import logging
import time

from locale_catalog.core.catalog_snapshot import (
    CatalogSnapshot, DuplicateRecordError, build_snapshot, rating_sort_key,
)
from locale_catalog.core.domain_types import (
    CultureName, LoadState, RecordKind, normalize_country_code,
    normalize_culture_name,
)
from locale_catalog.core.errors import (
    CatalogNotLoadedError, ErrorContext, RecordProviderError,
)
from locale_catalog.core.records import (
    CountryRecord, CultureRecord, LocalizedStringTable, ParentalRatingRecord,
)
from locale_catalog.core.repository_protocols import RecordProvider

logger = logging.getLogger(__name__)


class Catalog:
    """In-memory reference catalog backed by a RecordProvider."""

    def __init__(self, provider: RecordProvider):
        self._provider = provider
        self._state = LoadState.UNLOADED
        self._snapshot: CatalogSnapshot | None = None
        self._inflight: asyncio.Task | None = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    async def load_all(self) -> None:
        """Fetch and index every record kind exactly once."""
        if self._snapshot is not None:
            return
        if self._inflight is None:
            self._state = LoadState.LOADING
            self._inflight = asyncio.ensure_future(self._load())
        await asyncio.shield(self._inflight)

    async def _load(self) -> None:
        started = time.monotonic()
        logger.info("Loading reference catalog")
        try:
            snapshot = await self._fetch_and_index()
        except RecordProviderError as e:
            self._fail(e)
            raise
        except Exception as e:
            error = RecordProviderError(str(e), "catalog")
            self._fail(error)
            raise error from e
        except asyncio.CancelledError:
            # The shared load itself was cancelled; the next load_all() starts over
            self._state = LoadState.UNLOADED
            self._inflight = None
            logger.warning("Reference catalog load cancelled")
            raise

        self._snapshot = snapshot
        self._state = LoadState.LOADED
        self._inflight = None
        logger.info(
            f"Reference catalog loaded: {len(snapshot.countries)} countries, "
            f"{len(snapshot.cultures)} cultures, {len(snapshot.ratings)} ratings, "
            f"{len(snapshot.string_tables)} string tables",
            extra={
                "record_count": (
                    len(snapshot.countries) + len(snapshot.cultures)
                    + len(snapshot.ratings) + len(snapshot.string_tables)
                ),
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )

    def _fail(self, error: RecordProviderError) -> None:
        self._state = LoadState.FAILED
        self._inflight = None
        error.context.debug_info = {
            **(error.context.debug_info or {}), "state": self._state.value,
        }
        logger.error(
            f"Reference catalog load failed: {error}",
            extra={
                "error_code": error.code, "record_kind": error.record_kind,
                "catalog_state": self._state,
            },
        )

    async def _fetch_and_index(self) -> CatalogSnapshot:
        countries = await self._fetch(RecordKind.COUNTRY, self._provider.get_countries)
        cultures = await self._fetch(RecordKind.CULTURE, self._provider.get_cultures)
        ratings = await self._fetch(
            RecordKind.PARENTAL_RATING, self._provider.get_parental_ratings,
        )
        tables = await self._fetch(
            RecordKind.STRING_TABLE, self._provider.get_string_tables,
        )
        try:
            return build_snapshot(countries, cultures, ratings, tables)
        except DuplicateRecordError as e:
            raise RecordProviderError(str(e), e.record_kind) from e

    @staticmethod
    async def _fetch(kind: RecordKind, fetch) -> list:
        try:
            records = await fetch()
        except Exception as e:
            raise RecordProviderError(
                f"{type(e).__name__}: {e}", kind.value,
            ) from e
        logger.debug(
            f"Fetched {len(records)} {kind.value} records",
            extra={"record_kind": kind.value, "record_count": len(records)},
        )
        return list(records)

    # ─── Reads ───────────────────────────────────────────────────

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._require("snapshot")

    def get_countries(self) -> list[CountryRecord]:
        return list(self._require("get_countries").countries)

    def get_country(self, code: str | None) -> CountryRecord | None:
        """Look up a country by two- or three-letter code."""
        snapshot = self._require("get_country")
        return snapshot.countries_by_code.get(normalize_country_code(code))

    def get_cultures(self) -> list[CultureRecord]:
        return list(self._require("get_cultures").cultures)

    def get_parental_ratings(
        self, country_code: str | None = None,
    ) -> list[ParentalRatingRecord]:
        """Ratings visible for a country: its own plus unshadowed agnostic ones."""
        scoped = self._require("get_parental_ratings").ratings_in_scope(country_code)
        return sorted(scoped.values(), key=rating_sort_key)

    def get_all_parental_ratings(self) -> list[ParentalRatingRecord]:
        return list(self._require("get_all_parental_ratings").ratings)

    def get_string_table(self, culture: str | None) -> LocalizedStringTable | None:
        snapshot = self._require("get_string_table")
        return snapshot.string_tables.get(normalize_culture_name(culture))

    def get_string_cultures(self) -> list[CultureName]:
        return sorted(self._require("get_string_cultures").string_tables)

    def _require(self, operation: str) -> CatalogSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise CatalogNotLoadedError(operation, ErrorContext(
                debug_info={"state": self._state.value},
            ))
        return snapshot
