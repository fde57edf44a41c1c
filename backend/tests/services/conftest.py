"""Service test fixtures — packaged-data service and FastAPI test client.

Invariants:
    - Every test gets a fresh Catalog (no state shared between tests)
    - The client fixture installs its service as the app singleton and restores
      the previous one afterwards
"""

import pytest
from httpx import ASGITransport, AsyncClient

from locale_catalog.infrastructure.packaged_records import PackagedRecordProvider
from locale_catalog.services import localization_service as service_module
from locale_catalog.services.catalog import Catalog
from locale_catalog.services.localization_service import LocalizationService
from locale_catalog.main import app
from tests.fake_records import StubConfig


@pytest.fixture
def make_service():
    """Factory: loaded LocalizationService over the packaged data."""
    async def _make(ui_culture: str = "en-US", country_code: str = "US"):
        service = LocalizationService(
            Catalog(PackagedRecordProvider()),
            StubConfig(ui_culture=ui_culture, metadata_country_code=country_code),
        )
        await service.load_all()
        return service
    return _make


@pytest.fixture
async def client(make_service):
    """FastAPI test client over a loaded de-DE / DE service."""
    service = await make_service(ui_culture="de-DE", country_code="DE")
    original = service_module.localization_service
    service_module.localization_service = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    service_module.localization_service = original
