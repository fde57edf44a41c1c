"""Localization Routes — read-only endpoints over the reference catalog.

Invariants:
    - Routes never contain resolution logic (delegate to LocalizationService)
    - Omitted country_code / culture fall back to the configured defaults
    - A language miss is the only 404; rating and string misses return their fallbacks
"""

import logging

from fastapi import APIRouter, Depends, Query

from locale_catalog.core.errors import ResourceNotFoundError
from locale_catalog.schemas.localization import (
    CountryInfo, CultureInfo, LocalizationOptionInfo, LocalizedStringResponse,
    ParentalRatingInfo, RatingLevelResponse,
)
from locale_catalog.services.localization_service import (
    LocalizationService, get_localization,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/localization", tags=["localization"])


@router.get("/countries", response_model=list[CountryInfo])
async def list_countries(service: LocalizationService = Depends(get_localization)):
    return [CountryInfo.from_record(c) for c in service.get_countries()]


@router.get("/cultures", response_model=list[CultureInfo])
async def list_cultures(service: LocalizationService = Depends(get_localization)):
    return [CultureInfo.from_record(c) for c in service.get_cultures()]


@router.get("/cultures/{identifier}", response_model=CultureInfo)
async def find_culture(
    identifier: str, service: LocalizationService = Depends(get_localization),
):
    """Resolve a two-letter code, three-letter code or English name."""
    culture = service.find_language_info(identifier)
    if culture is None:
        raise ResourceNotFoundError("Culture", identifier)
    return CultureInfo.from_record(culture)


@router.get("/parental-ratings", response_model=list[ParentalRatingInfo])
async def list_parental_ratings(
    country_code: str | None = Query(None, max_length=3),
    service: LocalizationService = Depends(get_localization),
):
    return [
        ParentalRatingInfo.from_record(r)
        for r in service.get_parental_ratings(country_code)
    ]


@router.get("/rating-level", response_model=RatingLevelResponse)
async def resolve_rating_level(
    value: str = Query(min_length=1, max_length=200),
    country_code: str | None = Query(None, max_length=16),
    service: LocalizationService = Depends(get_localization),
):
    """Resolve a free-form rating string to its level."""
    scope = country_code or service.config.metadata_country_code
    return RatingLevelResponse(
        value=value,
        country_code=scope,
        level=service.get_rating_level(value, scope),
    )


@router.get("/strings/{key}", response_model=LocalizedStringResponse)
async def localized_string(
    key: str,
    culture: str | None = Query(None, max_length=16),
    service: LocalizationService = Depends(get_localization),
):
    requested = culture or service.config.ui_culture
    return LocalizedStringResponse(
        key=key,
        culture=requested,
        text=service.get_localized_string(key, requested),
    )


@router.get("/options", response_model=list[LocalizationOptionInfo])
async def localization_options(
    service: LocalizationService = Depends(get_localization),
):
    """UI cultures that ship a string table."""
    return [
        LocalizationOptionInfo.from_option(o)
        for o in service.get_localization_options()
    ]
