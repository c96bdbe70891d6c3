"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from barload.main import app


@pytest.fixture
def client():
    """Test client for the API."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def kg_plates():
    """Standard kg inventory used across the bar load tests (weight, pairs)."""
    return [(25, 4), (20, 2), (15, 2), (10, 2), (5, 2), (2.5, 2), (1.25, 2)]


@pytest.fixture
def lbs_plates():
    """Standard lbs inventory used across the bar load tests (weight, pairs)."""
    return [(45, 4), (25, 2), (10, 2), (5, 2), (2.5, 2)]
