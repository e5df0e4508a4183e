from unittest.mock import MagicMock

import pytest

from rest_framework.test import APIClient

from shared.infrastructure.bus import get_event_publisher


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _reset_event_publisher():
    """Rebuild the cached publisher so settings overrides take effect."""
    get_event_publisher.cache_clear()
    yield
    get_event_publisher.cache_clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def mock_publisher(monkeypatch):
    """Replace the process-wide event publisher with a MagicMock."""
    publisher = MagicMock()
    monkeypatch.setattr(
        "modules.products.views.get_event_publisher", lambda: publisher
    )
    return publisher
