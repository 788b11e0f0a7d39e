"""Pytest configuration and fixtures."""

from typing import AsyncGenerator, Iterable

import pytest
from httpx import ASGITransport, AsyncClient

from configs.settings import Settings
from infrastructure.databases.postgres import DatabaseConnector, create_database_connector
from interfaces.generate_link_id_interface import IGenerateLinkId
from interfaces.link_store_interface import ILinkStore
from main import create_app
from repository.in_memory_link_repository import InMemoryLinkStore
from repository.link_repository import LinkRepository
from services.link.link_service import LinkService

BASE_URL = "http://testserver"


class SequenceIdGenerator(IGenerateLinkId):
    """Hands out a fixed sequence of ids."""

    def __init__(self, ids: Iterable[str]):
        self._ids = iter(ids)

    def generate(self) -> str:
        return next(self._ids)


class FailingLinkStore(ILinkStore):
    """Store whose every operation fails with the given error."""

    def __init__(self, error: Exception):
        self.error = error

    async def ensure_schema(self) -> None:
        raise self.error

    async def put(self, url: str) -> str:
        raise self.error

    async def get(self, link_id: str) -> str:
        raise self.error


@pytest.fixture
def failing_link_store():
    return FailingLinkStore


@pytest.fixture
def sequence_id_generator():
    """Factory for id generators that return the given ids in order."""
    return SequenceIdGenerator


@pytest.fixture
async def db_connector(tmp_path) -> AsyncGenerator[DatabaseConnector, None]:
    """File-backed SQLite connector, one database per test."""
    connector = create_database_connector(
        backend="sqlite",
        database=str(tmp_path / "links.db"),
    )

    yield connector

    await connector.close_async()


@pytest.fixture
async def link_repository(db_connector) -> LinkRepository:
    repository = LinkRepository(db_connector)
    await repository.ensure_schema()
    return repository


@pytest.fixture
def in_memory_store() -> InMemoryLinkStore:
    return InMemoryLinkStore()


@pytest.fixture
def service(link_repository) -> LinkService:
    return LinkService(link_store=link_repository, base_url=BASE_URL)


@pytest.fixture
def settings() -> Settings:
    return Settings(BASE_URL=BASE_URL)


@pytest.fixture
def app(settings, db_connector, link_repository):
    """App wired to the test database; lifespan is not run."""
    app = create_app(settings)
    app.state.db_connection = db_connector
    app.state.link_store = link_repository
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/a",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
