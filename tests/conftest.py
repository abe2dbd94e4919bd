"""
Pytest configuration and shared fixtures

Fixtures here give every test the same catalog payload and a fresh
in-memory store, so no test needs the network or a database.
"""

import copy
import json
import os

import pytest

from device_sync.config import SyncConfig
from device_sync.source_extractor.adapters.mock_adapter import SAMPLE_CATALOG
from device_sync.storage import InMemoryDeviceStore


@pytest.fixture(scope="session")
def database_url() -> str | None:
    """
    Provide the integration test database URL, if configured.

    Scope: session (created once per test run)

    Returns:
        PostgreSQL connection URL or None
    """
    return os.getenv("TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_catalog() -> list[dict]:
    """
    Provide the 7-entry sample catalog.

    Contains one entry with null data, one numeric capacity, one alternate
    color key ("Strap Colour") and one "64 GB" capacity.

    Scope: function (fresh copy for each test)
    """
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture(scope="function")
def sample_payload(sample_catalog) -> str:
    """Provide the sample catalog serialized as the API would return it."""
    return json.dumps(sample_catalog)


@pytest.fixture(scope="function")
def memory_store() -> InMemoryDeviceStore:
    """Provide an empty in-memory device store."""
    return InMemoryDeviceStore()


@pytest.fixture(scope="function")
def sync_config() -> SyncConfig:
    """Provide the default sync configuration."""
    return SyncConfig()


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
