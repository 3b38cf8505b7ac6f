import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.database import create_store
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, SEED_SAMPLE_DATA=True, API_PREFIX="")


@pytest.fixture
def app(settings):
    """A fresh application (and store) per test."""
    return create_app(settings)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def store():
    """A seeded store detached from any application."""
    return create_store(seed=True)


@pytest.fixture
def empty_store():
    return create_store(seed=False)
