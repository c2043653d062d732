# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from weather_service.main import app


@pytest.fixture
def client():
    """FastAPI test client bound to the real application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio, the event loop the service uses."""
    return "asyncio"
