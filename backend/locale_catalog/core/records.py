"""Reference Records — immutable value types for the four record kinds.

Invariants:
    - All records are frozen dataclasses, safe to share across readers
      (LocalizedStringTable is not hashable: its strings are a mapping proxy)
    - CultureRecord.three_letter_language_codes always contains the primary code
    - ParentalRatingRecord.value is None only for unrated entries
    - LocalizedStringTable.strings is read-only after construction

Design Decisions:
    - dataclass over Pydantic in core: no validation overhead on the read path,
      Pydantic stays at the API boundary (schemas/)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from locale_catalog.core.domain_types import (
    AGNOSTIC_COUNTRY, CountryCode, CultureName, RatingLevel,
)


@dataclass(frozen=True)
class CountryRecord:
    two_letter_code: CountryCode
    three_letter_code: str
    english_name: str
    display_name: str


@dataclass(frozen=True)
class CultureRecord:
    name: str
    display_name: str
    two_letter_language_code: str
    three_letter_language_code: str
    three_letter_language_codes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.three_letter_language_code not in self.three_letter_language_codes:
            object.__setattr__(
                self,
                "three_letter_language_codes",
                self.three_letter_language_codes | {self.three_letter_language_code},
            )


@dataclass(frozen=True)
class ParentalRatingRecord:
    name: str
    value: RatingLevel | None
    country_code: CountryCode = AGNOSTIC_COUNTRY

    @property
    def is_agnostic(self) -> bool:
        return self.country_code == AGNOSTIC_COUNTRY


@dataclass(frozen=True)
class LocalizedStringTable:
    """Flat key → text mapping for one culture."""
    culture: CultureName
    strings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "strings", MappingProxyType(dict(self.strings)))
