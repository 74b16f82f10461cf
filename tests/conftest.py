"""Pytest fixtures for propimport tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

import pytest

from propimport.application.dto.upload_dto import ClientSession, SelectedFile
from propimport.application.ports.identity_provider import OIDCUser
from propimport.domain.entities import PropertyRecord
from propimport.domain.exceptions import PersistenceError

LISTING = {
    "address": "12 Example Street, Springfield",
    "price": 850000,
    "bedrooms": 4,
    "bathrooms": 2,
    "car_spaces": 2,
    "land_area_sqm": 612,
    "house_area_sqm": 240.5,
    "description": "Family home close to schools.",
    "features": ["Pool", "Solar panels", "Ducted air"],
}


# --- Fake repositories ---


class FakePropertyRepository:
    """In-memory property repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, PropertyRecord] = {}
        self.fail_with: str | None = None

    async def create(self, record: PropertyRecord) -> PropertyRecord:
        if self.fail_with:
            raise PersistenceError(f"Database insert error: {self.fail_with}")
        self._by_id[record.id] = record
        return record

    def all(self) -> list[PropertyRecord]:
        return list(self._by_id.values())


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.properties = FakePropertyRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class FakeIdentityProvider:
    """Resolves a fixed set of tokens to users."""

    def __init__(self, users: dict[str, str] | None = None) -> None:
        self._users = users or {"valid-token": "user-1"}

    def decode_token(self, token: str) -> OIDCUser | None:
        user_id = self._users.get(token)
        return OIDCUser(user_id=user_id) if user_id else None


class FakeSessionProvider:
    """Session provider holding an optional fixed session."""

    def __init__(self, session: ClientSession | None = None) -> None:
        self.session = session
        self.signed_out = False

    def get_session(self) -> ClientSession | None:
        return self.session

    def sign_out(self) -> None:
        self.session = None
        self.signed_out = True


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory yielding the same FakeUnitOfWork, so tests can inspect stored records."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def mock_pdf_fetcher():
    """AsyncMock for PdfFetcher - returns placeholder bytes."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.fetch.return_value = b"%PDF-1.4 listing"
    return mock


@pytest.fixture
def mock_text_extractor():
    """Mock for TextExtractor - returns fixed listing text."""
    from unittest.mock import Mock

    mock = Mock()
    mock.extract.return_value = "12 Example Street 4 bed 2 bath $850,000"
    return mock


@pytest.fixture
def mock_completion_provider():
    """AsyncMock for CompletionProvider - returns LISTING as JSON."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.complete_json.return_value = json.dumps(LISTING)
    return mock


@pytest.fixture
def pdf_file() -> SelectedFile:
    return SelectedFile(name="listing.pdf", content_type="application/pdf", data=b"%PDF-1.4 data")


@pytest.fixture
def client_session() -> ClientSession:
    return ClientSession(user_id="user-1", access_token="valid-token", refresh_token="refresh")
