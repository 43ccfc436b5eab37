# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.domain.sample_data import initial_state
from catalog.main import create_app
from catalog.repositories.catalog_store import CatalogStore


@pytest.fixture
def test_settings() -> Settings:
    return Settings(page_size=6, max_page_size=50, seed_sample_data=True, log_level="DEBUG")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # A new app per test: the lifespan creates a fresh, seeded catalog store
    with TestClient(create_app(test_settings)) as c:
        yield c


@pytest.fixture
def seeded_store() -> CatalogStore:
    return CatalogStore(initial_state())
