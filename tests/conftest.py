"""Shared fixtures: every test gets its own store."""

import pytest
from fastapi.testclient import TestClient

from civic_pulse_api.app.main import create_app
from civic_pulse_api.app.services.seed import seed_storage
from civic_pulse_api.app.services.storage import MemStorage


@pytest.fixture
def empty_storage():
    return MemStorage()


@pytest.fixture
def storage():
    store = MemStorage()
    seed_storage(store)
    return store


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client
