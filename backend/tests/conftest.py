import pytest
from fastapi.testclient import TestClient

from notetagger.core.repositories.implementations.memory.custom_tag_store import (
    InMemoryCustomTagStore,
)
from notetagger.core.services.tag_registry import TagRegistry
from notetagger.core.tagging.seed import SEED_TAGS
from notetagger.core.tagging.trie import LexiconTrie
from notetagger.dependencies import get_tag_registry
from notetagger.main import create_app


@pytest.fixture
def seed_trie():
    return LexiconTrie(SEED_TAGS.items())


@pytest.fixture
def store():
    return InMemoryCustomTagStore()


@pytest.fixture
def registry(store):
    return TagRegistry(store)


@pytest.fixture
def client(registry):
    app = create_app()
    app.dependency_overrides[get_tag_registry] = lambda: registry
    return TestClient(app, base_url="http://testserver")
