"""Language Resolution — free-form language identifier to canonical CultureRecord.

Invariants:
    - Matching is exact and case-insensitive: "german" never matches "Germanic"
    - Resolution order: two-letter code → three-letter code/alias → display name/name
    - Ties resolve to the first culture in the given order (catalog order by name)
    - Returns None for no match
"""

from typing import Iterable

from locale_catalog.core.records import CultureRecord


def find_language_info(
    cultures: Iterable[CultureRecord], identifier: str | None,
) -> CultureRecord | None:
    """Resolve a two-letter code, three-letter code or English name."""
    key = (identifier or "").strip().casefold()
    if not key:
        return None
    candidates = list(cultures)

    for culture in candidates:
        if culture.two_letter_language_code.casefold() == key:
            return culture

    for culture in candidates:
        if culture.three_letter_language_code.casefold() == key:
            return culture
        if any(code.casefold() == key for code in culture.three_letter_language_codes):
            return culture

    for culture in candidates:
        if culture.display_name.casefold() == key or culture.name.casefold() == key:
            return culture

    return None
