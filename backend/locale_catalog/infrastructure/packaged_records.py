"""Packaged Record Provider — reads reference data shipped inside the package.

Invariants:
    - Read-only: never writes to the data directory
    - File IO runs off the event loop (asyncio.to_thread)
    - Malformed files raise ValueError; the Catalog reports them as provider failures

Layout (under data_dir):
    countries.json            list of {two_letter_code, three_letter_code,
                              english_name, display_name}
    iso6392.txt               alpha3-b|alpha3-t|alpha2|English name|French name
    ratings/<cc>.csv          name,value, one file per country
    ratings/universal.csv     country-agnostic ratings
    strings/<culture>.json    flat {key: text}
"""

import asyncio
import csv
import json
import logging
from importlib.resources import files
from pathlib import Path

from locale_catalog.core.domain_types import (
    AGNOSTIC_COUNTRY, CountryCode, RatingLevel,
    normalize_country_code, normalize_culture_name,
)
from locale_catalog.core.records import (
    CountryRecord, CultureRecord, LocalizedStringTable, ParentalRatingRecord,
)

logger = logging.getLogger(__name__)

UNIVERSAL_RATINGS = "universal"


def default_data_dir() -> Path:
    return Path(str(files("locale_catalog") / "data"))


class PackagedRecordProvider:
    """RecordProvider over a directory of data files."""

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir else default_data_dir()

    async def get_countries(self) -> list[CountryRecord]:
        return await asyncio.to_thread(self._read_countries)

    async def get_cultures(self) -> list[CultureRecord]:
        return await asyncio.to_thread(self._read_cultures)

    async def get_parental_ratings(self) -> list[ParentalRatingRecord]:
        return await asyncio.to_thread(self._read_ratings)

    async def get_string_tables(self) -> list[LocalizedStringTable]:
        return await asyncio.to_thread(self._read_string_tables)

    # ─── File readers ────────────────────────────────────────────

    def _read_countries(self) -> list[CountryRecord]:
        path = self.data_dir / "countries.json"
        with open(path, encoding="utf-8") as fp:
            entries = json.load(fp)
        if not isinstance(entries, list):
            raise ValueError(f"{path.name}: expected a list of countries")
        return [
            CountryRecord(
                two_letter_code=normalize_country_code(entry["two_letter_code"]),
                three_letter_code=entry["three_letter_code"].strip().upper(),
                english_name=entry["english_name"].strip(),
                display_name=(entry.get("display_name") or entry["english_name"]).strip(),
            )
            for entry in entries
        ]

    def _read_cultures(self) -> list[CultureRecord]:
        path = self.data_dir / "iso6392.txt"
        cultures = []
        with open(path, encoding="utf-8") as fp:
            for line in fp:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                culture = parse_iso6392_line(line)
                if culture is None:
                    continue
                cultures.append(culture)
        logger.debug(f"Parsed {len(cultures)} cultures from {path.name}")
        return cultures

    def _read_ratings(self) -> list[ParentalRatingRecord]:
        ratings = []
        for path in sorted((self.data_dir / "ratings").glob("*.csv")):
            country = (
                AGNOSTIC_COUNTRY if path.stem.lower() == UNIVERSAL_RATINGS
                else normalize_country_code(path.stem)
            )
            ratings.extend(read_ratings_csv(path, country))
        return ratings

    def _read_string_tables(self) -> list[LocalizedStringTable]:
        tables = []
        for path in sorted((self.data_dir / "strings").glob("*.json")):
            with open(path, encoding="utf-8") as fp:
                strings = json.load(fp)
            if not isinstance(strings, dict):
                raise ValueError(f"{path.name}: expected a JSON object")
            tables.append(LocalizedStringTable(
                culture=normalize_culture_name(path.stem),
                strings={str(k): str(v) for k, v in strings.items()},
            ))
        return tables


def parse_iso6392_line(line: str) -> CultureRecord | None:
    """Parse one ISO 639-2 line. Entries without a two-letter code yield None."""
    parts = line.split("|")
    if len(parts) != 5:
        raise ValueError(f"iso6392 line has {len(parts)} fields, expected 5: {line!r}")
    bibliographic, terminology, two_letter, english, _french = (p.strip() for p in parts)
    if not two_letter or not english:
        return None
    codes = frozenset(code for code in (bibliographic, terminology) if code)
    return CultureRecord(
        name=english,
        display_name=english.split(";", 1)[0].strip(),
        two_letter_language_code=two_letter,
        three_letter_language_code=bibliographic,
        three_letter_language_codes=codes,
    )


def read_ratings_csv(path: Path, country: CountryCode) -> list[ParentalRatingRecord]:
    ratings = []
    with open(path, encoding="utf-8", newline="") as fp:
        for row in csv.reader(fp):
            if not row or not row[0].strip() or row[0].startswith("#"):
                continue
            if len(row) != 2:
                raise ValueError(f"{path.name}: expected 'name,value', got {row!r}")
            name, raw_value = row[0].strip(), row[1].strip()
            value = RatingLevel(int(raw_value)) if raw_value else None
            ratings.append(ParentalRatingRecord(name=name, value=value, country_code=country))
    return ratings

