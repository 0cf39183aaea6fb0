"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from redirector.database.base import MappingStoreBase
from redirector.database.memory import InMemoryMappingStore
from redirector.database.models import LookupFailed, InsertFailed
from redirector.resolver import SlugResolver
from redirector.registrar import SlugRegistrar
from redirector.common.logging_config import setup_logging
from web_app import create_app


DEFAULT_URL = "https://example.com/home"
API_KEY = "test-api-key"


class UnreachableStore(MappingStoreBase):
    """Store whose every operation fails as if the database were down."""

    def __init__(self):
        super().__init__("postgresql://unreachable")
        self.insert_calls = 0

    async def find_by_slug(self, slug):
        return LookupFailed(slug=slug, error=ConnectionRefusedError("connection refused"))

    async def insert_unique(self, slug, url):
        self.insert_calls += 1
        return InsertFailed(slug=slug, error=ConnectionRefusedError("connection refused"))

    async def ensure_schema(self):
        raise ConnectionRefusedError("connection refused")

    async def health_check(self):
        return False

    async def close(self):
        pass


class ExplodingStore(UnreachableStore):
    """Store that raises instead of returning a failure result."""

    async def find_by_slug(self, slug):
        raise RuntimeError("driver bug")

    async def insert_unique(self, slug, url):
        self.insert_calls += 1
        raise RuntimeError("driver bug")


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(
        default_url=DEFAULT_URL,
        connection_string="memory://",
        api_key=API_KEY,
    )


@pytest.fixture
def store(logger):
    """Create empty in-memory store."""
    return InMemoryMappingStore(logger=logger)


@pytest.fixture
def unreachable_store():
    return UnreachableStore()


@pytest.fixture
def exploding_store():
    return ExplodingStore()


@pytest.fixture
def resolver(store, logger):
    return SlugResolver(store, DEFAULT_URL, logger=logger)


@pytest.fixture
def registrar(store, logger):
    return SlugRegistrar(store, API_KEY, logger=logger)


@pytest.fixture
def app(config, store, logger):
    """Create test FastAPI app backed by the in-memory store."""
    return create_app(config=config, store=store, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_mappings():
    """Sample slug mappings for testing."""
    return {
        "docs": "https://example.com/documentation",
        "gh": "https://github.com/user/repo",
        "so": "https://stackoverflow.com/questions/123456",
    }
