"""Catalog Snapshot — pure indexing of raw reference records into a frozen view.

Invariants:
    - build_snapshot() is all-or-nothing: returns a complete snapshot or raises
      DuplicateRecordError, never a partially indexed one
    - Country codes unique (two-letter); culture names unique;
      (rating name, country) unique case-insensitively
    - Country-scoped rating overrides the agnostic rating of the same name
    - Every mapping on the snapshot is read-only (MappingProxyType)

Design Decisions:
    - Scoped rating views precomputed per country at build time: the read path
      is a dict lookup, no merging per request
    - Shadowing is a plain precedence rule (agnostic first, country on top)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from locale_catalog.core.domain_types import (
    AGNOSTIC_COUNTRY, CountryCode, CultureName, normalize_country_code,
    normalize_culture_name,
)
from locale_catalog.core.records import (
    CountryRecord, CultureRecord, LocalizedStringTable, ParentalRatingRecord,
)

RatingIndex = Mapping[str, ParentalRatingRecord]

_EMPTY_INDEX: RatingIndex = MappingProxyType({})


class DuplicateRecordError(ValueError):
    """Raised when raw records violate a uniqueness invariant."""
    def __init__(self, record_kind: str, key: str):
        super().__init__(f"duplicate {record_kind} record: {key!r}")
        self.record_kind = record_kind
        self.key = key


@dataclass(frozen=True)
class CatalogSnapshot:
    countries: tuple[CountryRecord, ...]
    countries_by_code: Mapping[str, CountryRecord]
    cultures: tuple[CultureRecord, ...]
    ratings: tuple[ParentalRatingRecord, ...]
    ratings_by_country: Mapping[CountryCode, RatingIndex]
    scoped_ratings: Mapping[CountryCode, RatingIndex]
    string_tables: Mapping[CultureName, LocalizedStringTable]

    def ratings_in_scope(self, country_code: str | None) -> RatingIndex:
        """Casefolded name → record visible for a country.

        Unknown or blank country → agnostic records only.
        """
        code = normalize_country_code(country_code)
        scoped = self.scoped_ratings.get(code)
        if scoped is not None:
            return scoped
        return self.scoped_ratings.get(AGNOSTIC_COUNTRY, _EMPTY_INDEX)


def rating_sort_key(record: ParentalRatingRecord) -> tuple[int, str]:
    return (-1 if record.value is None else record.value, record.name)


def build_snapshot(
    countries: Iterable[CountryRecord],
    cultures: Iterable[CultureRecord],
    ratings: Iterable[ParentalRatingRecord],
    string_tables: Iterable[LocalizedStringTable],
) -> CatalogSnapshot:
    """Index raw records. Raises DuplicateRecordError on uniqueness violations."""
    country_list = _index_countries(countries)
    by_code: dict[str, CountryRecord] = {}
    for country in country_list:
        by_code[normalize_country_code(country.two_letter_code)] = country
        if country.three_letter_code:
            by_code.setdefault(country.three_letter_code.upper(), country)

    culture_list = sorted(_unique_cultures(cultures), key=lambda c: c.name)
    rating_list = list(ratings)
    by_country = _index_ratings(rating_list)

    agnostic = by_country.get(AGNOSTIC_COUNTRY, {})
    scoped: dict[CountryCode, RatingIndex] = {
        AGNOSTIC_COUNTRY: MappingProxyType(dict(agnostic)),
    }
    for code, index in by_country.items():
        if code != AGNOSTIC_COUNTRY:
            scoped[code] = MappingProxyType({**agnostic, **index})

    tables: dict[CultureName, LocalizedStringTable] = {}
    for table in string_tables:
        culture = normalize_culture_name(table.culture)
        if culture in tables:
            raise DuplicateRecordError("string_table", culture)
        tables[culture] = table

    return CatalogSnapshot(
        countries=tuple(country_list),
        countries_by_code=MappingProxyType(by_code),
        cultures=tuple(culture_list),
        ratings=tuple(sorted(
            rating_list, key=lambda r: (r.country_code, *rating_sort_key(r)),
        )),
        ratings_by_country=MappingProxyType({
            code: MappingProxyType(index) for code, index in by_country.items()
        }),
        scoped_ratings=MappingProxyType(scoped),
        string_tables=MappingProxyType(tables),
    )


def _index_countries(countries: Iterable[CountryRecord]) -> list[CountryRecord]:
    seen: dict[str, CountryRecord] = {}
    for country in countries:
        code = normalize_country_code(country.two_letter_code)
        if code in seen:
            raise DuplicateRecordError("country", code)
        seen[code] = country
    return [seen[code] for code in sorted(seen)]


def _unique_cultures(cultures: Iterable[CultureRecord]) -> list[CultureRecord]:
    seen: dict[str, CultureRecord] = {}
    for culture in cultures:
        if culture.name in seen:
            raise DuplicateRecordError("culture", culture.name)
        seen[culture.name] = culture
    return list(seen.values())


def _index_ratings(
    ratings: list[ParentalRatingRecord],
) -> dict[CountryCode, dict[str, ParentalRatingRecord]]:
    by_country: dict[CountryCode, dict[str, ParentalRatingRecord]] = {}
    for rating in ratings:
        code = normalize_country_code(rating.country_code)
        index = by_country.setdefault(code, {})
        key = rating.name.strip().casefold()
        if key in index:
            raise DuplicateRecordError("parental_rating", f"{code or '*'}:{rating.name}")
        index[key] = rating
    return by_country
