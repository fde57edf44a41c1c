"""Rating Resolution — free-form content-rating string to an ordinal severity level.

Invariants:
    - Only the explicit unrated tokens ("n/a", "unrated", "not rated") and
      records stored as unrated return None
    - Any other non-blank input returns an int; unrecognized ratings resolve to
      MAX_RATING_LEVEL so they never pass a restrictive filter
    - Blank input raises InvalidRatingError
    - Same rating name in two countries resolves per scope (qualifier > caller country)

Lookup order for a normalized name:
    1. "<country>: <rating>" qualifier → scope = resolved country
    2. name within scope (country table over agnostic table)
    3. leading country-code token stripped ("us-tv-ma") → scope = that country
    4. bare integer → that integer
    5. every country table in code order (cross-reference, "FSK-18" under "US")
    6. MAX_RATING_LEVEL
"""

import logging
import re

from locale_catalog.core.catalog_snapshot import CatalogSnapshot
from locale_catalog.core.domain_types import (
    AGNOSTIC_COUNTRY, MAX_RATING_LEVEL, UNRATED_TOKENS, RatingLevel,
    normalize_country_code,
)
from locale_catalog.core.errors import ErrorContext, InvalidRatingError
from locale_catalog.core.records import CountryRecord, ParentalRatingRecord

logger = logging.getLogger(__name__)

_QUALIFIER_SEPARATOR = ":"
_RATED_PREFIX = "rated "
_COUNTRY_PREFIX = re.compile(r"^([a-z]{2})[\s\-_/]+(\S.*)$")
# Shorter hints only match codes or a whole country name
_MIN_HINT_PREFIX = 3


def get_rating_level(
    snapshot: CatalogSnapshot, value: str | None, country_code: str | None = None,
) -> RatingLevel | None:
    """Resolve a rating string to its level under the given country scope."""
    rating = _normalize(value)
    if not rating:
        raise InvalidRatingError(ErrorContext(country_code=country_code))
    if rating in UNRATED_TOKENS:
        return None

    scope = normalize_country_code(country_code)
    if _QUALIFIER_SEPARATOR in rating:
        hint, _, name = rating.partition(_QUALIFIER_SEPARATOR)
        name = _strip_rated(name.strip())
        if not name:
            # "Germany:" carries no rating name
            return MAX_RATING_LEVEL
        if name in UNRATED_TOKENS:
            return None
        country = resolve_country_hint(snapshot, hint)
        if country is not None:
            scope = country.two_letter_code
        rating = name

    record = _lookup(snapshot, rating, scope)
    if record is not None:
        return record.value

    record = _lookup_country_prefixed(snapshot, rating)
    if record is not None:
        return record.value

    if rating.isascii() and rating.isdecimal():
        return RatingLevel(int(rating))

    record = _cross_reference(snapshot, rating)
    if record is not None:
        return record.value

    logger.debug(
        f"Unrecognized rating {rating!r}, assuming most restrictive",
        extra={"country_code": scope or None},
    )
    return MAX_RATING_LEVEL


def resolve_country_hint(
    snapshot: CatalogSnapshot, hint: str | None,
) -> CountryRecord | None:
    """Match a country hint by code, exact name, or name prefix in either direction.

    Prefix matches prefer the longest country name so "Germany (FRG)" maps to
    Germany and never to a shorter name that happens to share its start. Hints
    shorter than three characters never match the start of a longer name.
    """
    key = (hint or "").strip().casefold()
    if not key:
        return None

    if len(key) in (2, 3):
        country = snapshot.countries_by_code.get(key.upper())
        if country is not None:
            return country

    for country in snapshot.countries:
        if key in (country.english_name.casefold(), country.display_name.casefold()):
            return country

    best: CountryRecord | None = None
    best_length = 0
    for country in snapshot.countries:
        for name in (country.english_name.casefold(), country.display_name.casefold()):
            if not name:
                continue
            if key.startswith(name) or (
                len(key) >= _MIN_HINT_PREFIX and name.startswith(key)
            ):
                if len(name) > best_length:
                    best, best_length = country, len(name)
    return best


def _normalize(value: str | None) -> str:
    return _strip_rated((value or "").strip().casefold())


def _strip_rated(rating: str) -> str:
    if rating.startswith(_RATED_PREFIX):
        return rating[len(_RATED_PREFIX):].strip()
    return rating


def _lookup(
    snapshot: CatalogSnapshot, name: str, scope: str,
) -> ParentalRatingRecord | None:
    return snapshot.ratings_in_scope(scope).get(name)


def _lookup_country_prefixed(
    snapshot: CatalogSnapshot, rating: str,
) -> ParentalRatingRecord | None:
    match = _COUNTRY_PREFIX.match(rating)
    if match is None:
        return None
    code = normalize_country_code(match.group(1))
    if code not in snapshot.countries_by_code:
        return None
    return _lookup(snapshot, match.group(2).strip(), code)


def _cross_reference(
    snapshot: CatalogSnapshot, name: str,
) -> ParentalRatingRecord | None:
    for code in sorted(snapshot.ratings_by_country):
        if code == AGNOSTIC_COUNTRY:
            continue
        record = snapshot.ratings_by_country[code].get(name)
        if record is not None:
            return record
    return None
