"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CountryCode is always upper-case ISO 3166-1 alpha-2 ("" = country-agnostic)
    - CultureName is always normalized ("de-DE", "de", "pt-BR")
    - RatingLevel is an ordinal severity: higher = more restrictive
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CountryCode = NewType("CountryCode", str)
CultureName = NewType("CultureName", str)


# ─── Value Types ─────────────────────────────────────────────────

RatingLevel = NewType("RatingLevel", int)


# ─── Constants ───────────────────────────────────────────────────

AGNOSTIC_COUNTRY = CountryCode("")
FALLBACK_CULTURE = CultureName("en-US")
DEFAULT_COUNTRY = CountryCode("US")

# Unrecognized ratings resolve here: treated as most restrictive
MAX_RATING_LEVEL = RatingLevel(100)

UNRATED_TOKENS: frozenset[str] = frozenset({"n/a", "unrated", "not rated"})


# ─── Enums ───────────────────────────────────────────────────────

class LoadState(str, Enum):
    """Catalog lifecycle states."""
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class RecordKind(str, Enum):
    """The four reference record kinds supplied by a RecordProvider."""
    COUNTRY = "country"
    CULTURE = "culture"
    PARENTAL_RATING = "parental_rating"
    STRING_TABLE = "string_table"


def normalize_country_code(code: str | None) -> CountryCode:
    """Upper-case and strip a country code. None/blank → agnostic."""
    return CountryCode((code or "").strip().upper())


def normalize_culture_name(culture: str | None) -> CultureName:
    """Normalize a culture name: "de-de" → "de-DE", "DE" → "de", "_" → "-".

    Blank input normalizes to the fallback culture.
    """
    value = (culture or "").strip().replace("_", "-")
    if not value:
        return FALLBACK_CULTURE
    parts = value.split("-")
    if len(parts) == 2 and parts[1]:
        return CultureName(f"{parts[0].lower()}-{parts[1].upper()}")
    return CultureName(value.lower())
