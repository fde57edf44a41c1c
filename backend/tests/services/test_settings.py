"""Settings tests — environment overrides and normalization."""

from locale_catalog.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.ui_culture == "en-US"
    assert settings.metadata_country_code == "US"
    assert settings.data_dir is None


def test_environment_values_normalized(monkeypatch):
    monkeypatch.setenv("UI_CULTURE", "de_de")
    monkeypatch.setenv("METADATA_COUNTRY_CODE", " de ")
    settings = Settings(_env_file=None)
    assert settings.ui_culture == "de-DE"
    assert settings.metadata_country_code == "DE"


def test_blank_culture_falls_back(monkeypatch):
    monkeypatch.setenv("UI_CULTURE", "")
    assert Settings(_env_file=None).ui_culture == "en-US"
