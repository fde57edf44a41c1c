"""Localization Schemas — Pydantic response models for the localization endpoints.

Invariants:
    - Response models mirror core records field-for-field (no derived data)
    - three_letter_language_codes serialized as a sorted list (deterministic JSON)
    - RatingLevelResponse.level is None only for unrated input
"""

from pydantic import BaseModel

from locale_catalog.core.localize_strings import LocalizationOption
from locale_catalog.core.records import (
    CountryRecord, CultureRecord, ParentalRatingRecord,
)


class CountryInfo(BaseModel):
    two_letter_code: str
    three_letter_code: str
    english_name: str
    display_name: str

    @classmethod
    def from_record(cls, record: CountryRecord) -> "CountryInfo":
        return cls(
            two_letter_code=record.two_letter_code,
            three_letter_code=record.three_letter_code,
            english_name=record.english_name,
            display_name=record.display_name,
        )


class CultureInfo(BaseModel):
    name: str
    display_name: str
    two_letter_language_code: str
    three_letter_language_code: str
    three_letter_language_codes: list[str]

    @classmethod
    def from_record(cls, record: CultureRecord) -> "CultureInfo":
        return cls(
            name=record.name,
            display_name=record.display_name,
            two_letter_language_code=record.two_letter_language_code,
            three_letter_language_code=record.three_letter_language_code,
            three_letter_language_codes=sorted(record.three_letter_language_codes),
        )


class ParentalRatingInfo(BaseModel):
    name: str
    value: int | None
    country_code: str

    @classmethod
    def from_record(cls, record: ParentalRatingRecord) -> "ParentalRatingInfo":
        return cls(
            name=record.name, value=record.value, country_code=record.country_code,
        )


class RatingLevelResponse(BaseModel):
    """Resolved level for a rating string under a country scope."""
    value: str
    country_code: str
    level: int | None


class LocalizedStringResponse(BaseModel):
    key: str
    culture: str
    text: str


class LocalizationOptionInfo(BaseModel):
    name: str
    value: str

    @classmethod
    def from_option(cls, option: LocalizationOption) -> "LocalizationOptionInfo":
        return cls(name=option.name, value=option.value)
