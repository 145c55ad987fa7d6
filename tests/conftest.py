"""Pytest configuration and fixtures for all tests."""
import os

import pytest

# Settings are read once at import time.
os.environ["MPESA_QR_API_KEY"] = "test-api-key"
os.environ["MPESA_QR_LOGGING__JSON_LOGS"] = "false"

API_KEY = "test-api-key"


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from mpesa_qr.api import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}
