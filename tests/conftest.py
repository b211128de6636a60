"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from string_analyzer.config import Settings
from string_analyzer.main import create_app
from string_analyzer.store import StringStore
from string_analyzer.utils import analyze_string


@pytest.fixture
def store() -> StringStore:
    """Fresh, empty store for each test"""
    return StringStore()


@pytest.fixture
def client(store: StringStore):
    """Client bound to an app built around the test store"""
    app = create_app(settings=Settings(log_level="WARNING"), store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_string(store: StringStore):
    """Analyze and store a value directly, bypassing the API"""
    def _add(value: str):
        return store.add(value, analyze_string(value))
    return _add
