"""Localization service tests — configuration defaults over the packaged data.

Tests cover:
    - Country and culture counts and uniqueness in the shipped data
    - Alias convergence for language lookup
    - Rating levels per configured country, qualifier equivalence, sentinel
    - Country-filtered parental ratings with shadowing
    - Localized strings for the configured UI culture, fallbacks
    - Localization options
"""

import pytest

from locale_catalog.core.domain_types import MAX_RATING_LEVEL


@pytest.mark.asyncio
async def test_countries_unique_by_code(make_service):
    service = await make_service()
    countries = service.get_countries()
    assert len(countries) == 48
    codes = [c.two_letter_code for c in countries]
    assert len(codes) == len(set(codes))

    germany = next(c for c in countries if c.two_letter_code == "DE")
    assert germany.english_name == "Germany"
    assert germany.three_letter_code == "DEU"


@pytest.mark.asyncio
async def test_cultures_loaded_from_iso6392(make_service):
    service = await make_service()
    cultures = service.get_cultures()
    # entries without a two-letter code are skipped
    assert len(cultures) == 82

    german = next(c for c in cultures if c.two_letter_language_code == "de")
    assert german.three_letter_language_code == "ger"
    assert german.display_name == "German"
    assert german.name == "German"
    assert {"deu", "ger"} <= german.three_letter_language_codes


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier", ["de", "ger", "german"])
async def test_find_language_info_converges(make_service, identifier):
    service = await make_service()
    german = service.find_language_info(identifier)
    assert german is not None
    assert german.three_letter_language_code == "ger"
    assert german.name == "German"


@pytest.mark.asyncio
async def test_find_language_info_display_name_of_compound_name(make_service):
    service = await make_service()
    spanish = service.find_language_info("spanish")
    assert spanish.name == "Spanish; Castilian"
    assert service.find_language_info("castilian") is None


@pytest.mark.asyncio
async def test_find_language_info_miss(make_service):
    service = await make_service()
    assert service.find_language_info("klingon") is None


@pytest.mark.asyncio
async def test_default_country_parental_ratings(make_service):
    service = await make_service(country_code="US")
    ratings = service.get_parental_ratings()
    assert len(ratings) == 31
    tvma = next(r for r in ratings if r.name == "TV-MA")
    assert tvma.value == 9


@pytest.mark.asyncio
async def test_configured_country_parental_ratings(make_service):
    service = await make_service(country_code="DE")
    ratings = service.get_parental_ratings()
    names = [r.name for r in ratings]
    assert len(names) == len(set(names))
    assert len(ratings) == 19
    fsk = next(r for r in ratings if r.name == "FSK-12")
    assert fsk.value == 7
    assert len(ratings) <= len(service.catalog.get_all_parental_ratings())


@pytest.mark.asyncio
async def test_russian_ratings_shadow_agnostic(make_service):
    service = await make_service(country_code="RU")
    ratings = {r.name: r for r in service.get_parental_ratings()}
    assert len(ratings) == 9
    assert ratings["6+"].value == 4
    assert ratings["6+"].country_code == "RU"
    assert ratings["13+"].country_code == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("value,country_code,expected", [
    ("CA-R", "CA", 10),
    ("FSK-16", "DE", 8),
    ("FSK-18", "DE", 9),
    ("FSK-18", "US", 9),
    ("TV-MA", "US", 9),
    ("XXX", "asdf", 100),
    ("Germany: FSK-18", "DE", 9),
    ("R", "CA", 10),
    ("R", "US", 9),
    ("Russia: 6+", "US", 4),
])
async def test_rating_level_for_configured_country(
    make_service, value, country_code, expected,
):
    service = await make_service(country_code=country_code)
    level = service.get_rating_level(value)
    assert level is not None
    assert level == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("country_code", ["US", "DE", "asdf"])
async def test_unrated_is_none_for_any_country(make_service, country_code):
    service = await make_service(country_code=country_code)
    assert service.get_rating_level("n/a") is None


@pytest.mark.asyncio
async def test_qualifier_prefix_equivalence(make_service):
    service = await make_service(country_code="US")
    assert service.get_rating_level("Germany: FSK-18") == service.get_rating_level(
        "FSK-18", country_code="DE",
    )


@pytest.mark.asyncio
async def test_explicit_country_overrides_configuration(make_service):
    service = await make_service(country_code="US")
    assert service.get_rating_level("R") == 9
    assert service.get_rating_level("R", country_code="CA") == 10


@pytest.mark.asyncio
async def test_unknown_rating_is_sentinel(make_service):
    service = await make_service(country_code="asdf")
    assert service.get_rating_level("XXX") == MAX_RATING_LEVEL


@pytest.mark.asyncio
@pytest.mark.parametrize("key,expected", [
    ("Default", "Default"),
    ("HeaderLiveTV", "Live TV"),
])
async def test_localized_string_en_us(make_service, key, expected):
    service = await make_service(ui_culture="en-US")
    assert service.get_localized_string(key) == expected


@pytest.mark.asyncio
async def test_localized_string_configured_culture(make_service):
    service = await make_service(ui_culture="de-DE")
    assert service.get_localized_string("Default") == "Standard"
    assert service.get_localized_string("HeaderLiveTV") == "Live-TV"
    # not translated in de.json
    assert service.get_localized_string("Plugin") == "Plugin"


@pytest.mark.asyncio
async def test_localized_string_explicit_culture(make_service):
    service = await make_service(ui_culture="de-DE")
    assert service.get_localized_string("Default", "pt-BR") == "Padrão"
    assert service.get_localized_string("Default", "fr-FR") == "Par défaut"


@pytest.mark.asyncio
async def test_localized_string_missing_key(make_service):
    service = await make_service(ui_culture="en-US")
    key = "SuperInvalidTranslationKeyThatWillNeverBeAdded"
    assert service.get_localized_string(key) == key


@pytest.mark.asyncio
async def test_localization_options(make_service):
    service = await make_service()
    options = [(o.name, o.value) for o in service.get_localization_options()]
    assert options == [
        ("English (US)", "en-US"),
        ("French", "fr"),
        ("German", "de"),
        ("Portuguese (BR)", "pt-BR"),
        ("Spanish", "es"),
    ]
