"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's .env overrides
os.environ.setdefault("UI_CULTURE", "en-US")
os.environ.setdefault("METADATA_COUNTRY_CODE", "US")
os.environ.setdefault("LOG_FORMAT", "text")
