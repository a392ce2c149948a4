"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog items, a scripted fetcher standing in for the HTTP
client, and an API test client whose store never touches the network.

==============================================================================
"""

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from mealcatalog import main
from mealcatalog.catalog.schemas import CatalogItem
from mealcatalog.catalog.store import CatalogStore

from tests.fakes import ScriptedFetcher, make_item


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def seafood() -> List[CatalogItem]:
    return [
        make_item("52959", "Baked salmon with fennel & tomatoes"),
        make_item("52819", "Cajun spiced fish tacos"),
        make_item("52944", "Escovitch Fish"),
        make_item("52802", "Fish pie"),
        make_item("52918", "Shrimp Chow Fun"),
    ]


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def fetcher(seafood: List[CatalogItem]) -> ScriptedFetcher:
    return ScriptedFetcher(seafood)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, fetcher: ScriptedFetcher) -> Generator[TestClient, None, None]:
    """Test client whose startup builds a store around ``fetcher``."""

    def build_store(settings):
        return CatalogStore(fetch=fetcher, error_message=settings.error_message)

    monkeypatch.setattr(main, "build_store", build_store)
    with TestClient(main.app) as test_client:
        yield test_client
