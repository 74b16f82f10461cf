"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from propimport.application.use_cases.property.import_property import ImportPropertyUseCase
from propimport.interfaces.api.app import create_app
from propimport.interfaces.api.resources.import_property import ImportPropertyResource

from tests.conftest import FakeIdentityProvider


@pytest.fixture
def import_use_case(uow_factory, mock_pdf_fetcher, mock_text_extractor, mock_completion_provider):
    return ImportPropertyUseCase(
        unit_of_work_factory=uow_factory,
        pdf_fetcher=mock_pdf_fetcher,
        text_extractor=mock_text_extractor,
        completion_provider=mock_completion_provider,
    )


@pytest.fixture
def app(import_use_case):
    """Falcon ASGI app with fake identity provider."""
    return create_app(
        ImportPropertyResource(import_use_case),
        identity_provider=FakeIdentityProvider({"valid-token": "user-1", "other-token": "user-2"}),
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer valid-token"}
