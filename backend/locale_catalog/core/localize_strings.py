"""String Localization — key to display text for a culture, with fallback chain.

Invariants:
    - Lookup chain: requested culture → its neutral parent ("de-DE" → "de") →
      FALLBACK_CULTURE → the key itself
    - Never raises and never returns an empty string for a non-empty key
    - Flat key → text substitution only (no plural or grammar rules)
"""

from dataclasses import dataclass
from typing import Mapping

from locale_catalog.core.domain_types import (
    FALLBACK_CULTURE, CultureName, normalize_culture_name,
)
from locale_catalog.core.records import LocalizedStringTable


@dataclass(frozen=True)
class LocalizationOption:
    """One selectable UI culture."""
    name: str
    value: CultureName


def culture_chain(culture: str | None) -> list[CultureName]:
    """Cultures to consult in order, de-duplicated."""
    requested = normalize_culture_name(culture)
    chain = [requested]
    neutral = CultureName(requested.split("-", 1)[0])
    if neutral != requested:
        chain.append(neutral)
    if FALLBACK_CULTURE not in chain:
        chain.append(FALLBACK_CULTURE)
    return chain


def get_localized_string(
    tables: Mapping[CultureName, LocalizedStringTable], key: str, culture: str | None,
) -> str:
    """Translate a key, degrading to the raw key when no table has it."""
    for name in culture_chain(culture):
        table = tables.get(name)
        if table is None:
            continue
        text = table.strings.get(key)
        if text:
            return text
    return key


def get_localization_options(
    tables: Mapping[CultureName, LocalizedStringTable],
    display_names: Mapping[str, str],
) -> list[LocalizationOption]:
    """List every culture that ships a string table, sorted by display name.

    display_names maps a two-letter language code to its English name; cultures
    with a region get it appended ("Portuguese (BR)").
    """
    options = []
    for culture in tables:
        language, _, region = culture.partition("-")
        name = display_names.get(language, language)
        if region:
            name = f"{name} ({region})"
        options.append(LocalizationOption(name=name, value=culture))
    return sorted(options, key=lambda o: (o.name.casefold(), o.value))
