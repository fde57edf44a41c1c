"""Rating resolution tests — pure tests for get_rating_level and resolve_country_hint.

Tests cover:
    - Bare names resolve within the caller's country scope
    - Same name resolves per country ("R" in US vs CA)
    - "<Country>: <rating>" qualifier overrides the caller's scope
    - Unrated tokens return None; blank input raises InvalidRatingError
    - Country-code prefixed names ("us-tv-ma") and "Rated X" forms
    - Cross-reference into other countries' tables
    - Unrecognized ratings resolve to MAX_RATING_LEVEL (fail closed)
"""

import pytest

from locale_catalog.core.domain_types import MAX_RATING_LEVEL
from locale_catalog.core.errors import InvalidRatingError
from locale_catalog.core.resolve_rating import get_rating_level, resolve_country_hint
from tests.fake_records import make_snapshot


@pytest.fixture
def snapshot():
    return make_snapshot()


@pytest.mark.parametrize("value,country,expected", [
    ("CA-R", "CA", 10),
    ("FSK-16", "DE", 8),
    ("FSK-18", "DE", 9),
    ("FSK-18", "US", 9),
    ("TV-MA", "US", 9),
    ("XXX", "asdf", 100),
    ("Germany: FSK-18", "DE", 9),
])
def test_rating_levels(snapshot, value, country, expected):
    assert get_rating_level(snapshot, value, country) == expected


def test_case_and_whitespace_insensitive(snapshot):
    assert get_rating_level(snapshot, "  tv-ma ", "us") == 9
    assert get_rating_level(snapshot, "fsk-12", "DE") == 7


def test_same_name_resolves_per_country(snapshot):
    assert get_rating_level(snapshot, "R", "US") == 9
    assert get_rating_level(snapshot, "R", "CA") == 10


def test_country_rating_shadows_agnostic(snapshot):
    assert get_rating_level(snapshot, "6+", "RU") == 4
    assert get_rating_level(snapshot, "6+", "US") == 5
    assert get_rating_level(snapshot, "6+") == 5


def test_qualifier_equivalent_to_country_scope(snapshot):
    qualified = get_rating_level(snapshot, "Germany: FSK-18")
    scoped = get_rating_level(snapshot, "FSK-18", "DE")
    assert qualified == scoped == 9


def test_qualifier_overrides_caller_country(snapshot):
    assert get_rating_level(snapshot, "Canada: R", "US") == 10
    assert get_rating_level(snapshot, "United States: R", "CA") == 9


def test_qualifier_by_code_and_display_name(snapshot):
    assert get_rating_level(snapshot, "US:TV-MA", "DE") == 9
    assert get_rating_level(snapshot, "Russia: 6+", "US") == 4
    assert get_rating_level(snapshot, "RUS: 6+") == 4


def test_unresolvable_qualifier_keeps_caller_scope(snapshot):
    assert get_rating_level(snapshot, "Atlantis: R", "CA") == 10
    assert get_rating_level(snapshot, "Rating: R", "US") == 9


@pytest.mark.parametrize("value", ["n/a", "N/A", "Unrated", " not rated ", "Germany: unrated"])
@pytest.mark.parametrize("country", ["US", "DE", None, "asdf"])
def test_unrated_tokens_return_none(snapshot, value, country):
    assert get_rating_level(snapshot, value, country) is None


def test_stored_unrated_record_returns_none(snapshot):
    assert get_rating_level(snapshot, "Exempt", "GB") is None


@pytest.mark.parametrize("value", ["", "   ", None])
def test_blank_rating_raises(snapshot, value):
    with pytest.raises(InvalidRatingError) as exc_info:
        get_rating_level(snapshot, value, "US")
    assert exc_info.value.http_status == 400


def test_rated_prefix_dropped(snapshot):
    assert get_rating_level(snapshot, "Rated R", "US") == 9
    assert get_rating_level(snapshot, "rated PG-13", "US") == 7


def test_country_code_prefix_stripped(snapshot):
    assert get_rating_level(snapshot, "us-TV-MA", "DE") == 9
    assert get_rating_level(snapshot, "DE FSK-16", "US") == 8
    assert get_rating_level(snapshot, "ca-r", "US") == 10


def test_unknown_country_prefix_not_stripped(snapshot):
    # "zz" is not a known country: falls through to the sentinel
    assert get_rating_level(snapshot, "zz-R", "US") == MAX_RATING_LEVEL


def test_bare_integer_returns_value_when_no_table_match(snapshot):
    assert get_rating_level(snapshot, "15", "US") == 15
    # a table entry named "12" wins within its scope
    assert get_rating_level(snapshot, "12", "GB") == 7


def test_cross_reference_finds_rating_in_other_country(snapshot):
    assert get_rating_level(snapshot, "FSK-0", "US") == 1
    assert get_rating_level(snapshot, "TV-MA", None) == 9


@pytest.mark.parametrize("value,country", [
    ("XXX", "asdf"),
    ("XXX", None),
    ("Atlantis: XXX", "US"),
    ("Germany:", "DE"),
    ("Nonexistent-Rating", "DE"),
])
def test_unrecognized_rating_is_max_sentinel(snapshot, value, country):
    level = get_rating_level(snapshot, value, country)
    assert level is not None
    assert level == MAX_RATING_LEVEL


def test_resolve_country_hint_variants(snapshot):
    assert resolve_country_hint(snapshot, "germany").two_letter_code == "DE"
    assert resolve_country_hint(snapshot, "DE").two_letter_code == "DE"
    assert resolve_country_hint(snapshot, "deu").two_letter_code == "DE"
    assert resolve_country_hint(snapshot, "Germany (FRG)").two_letter_code == "DE"
    assert resolve_country_hint(snapshot, "Russia").two_letter_code == "RU"


def test_resolve_country_hint_prefers_longest_name(snapshot):
    # both "United Kingdom" and "United States" start with "united"
    assert resolve_country_hint(snapshot, "United").two_letter_code == "GB"
    assert resolve_country_hint(snapshot, "United States of America").two_letter_code == "US"


def test_resolve_country_hint_miss(snapshot):
    assert resolve_country_hint(snapshot, "Atlantis") is None
    assert resolve_country_hint(snapshot, "") is None


@pytest.mark.parametrize("value", ["²", "Germany: ²", "¹²"])
def test_non_ascii_digits_are_unrecognized(snapshot, value):
    assert get_rating_level(snapshot, value, "US") == MAX_RATING_LEVEL


def test_resolve_country_hint_short_prefix_ignored(snapshot):
    assert resolve_country_hint(snapshot, "u") is None
    assert resolve_country_hint(snapshot, "ge") is None
    assert resolve_country_hint(snapshot, "ger").two_letter_code == "DE"


def test_short_hint_keeps_caller_scope(snapshot):
    # US "R" is 9; a re-scope to GB would cross-reference CA "R" (10)
    assert get_rating_level(snapshot, "u: R", "US") == 9
