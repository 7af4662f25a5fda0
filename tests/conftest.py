# tests/conftest.py
import os
import sys

import httpx
import pytest

# Add the project root directory to sys.path so that "import app" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Settings are read at import time; keyed providers need a key to be built
os.environ.setdefault("GRAPHHOPPER_API_KEY", "test-graphhopper-key")
os.environ.setdefault("OPENROUTE_API_KEY", "test-openroute-key")

from fastapi.testclient import TestClient  # noqa: E402

from app.api.v1.routes_routing import get_routing_service  # noqa: E402
from app.core.config import Settings  # noqa: E402
from app.main import app  # noqa: E402
from app.services.routing_service import build_routing_service  # noqa: E402
from fakes import FakeProviders  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        GRAPHHOPPER_API_KEY="test-graphhopper-key",
        OPENROUTE_API_KEY="test-openroute-key",
        PROVIDER_TIMEOUT_S=2.0,
    )


@pytest.fixture
def fake_providers() -> FakeProviders:
    return FakeProviders()


@pytest.fixture
def http_client(fake_providers):
    client = httpx.Client(transport=httpx.MockTransport(fake_providers))
    yield client
    client.close()


@pytest.fixture
def routing_service(test_settings, http_client):
    return build_routing_service(test_settings, http_client)


@pytest.fixture
def api_client(routing_service):
    app.dependency_overrides[get_routing_service] = lambda: routing_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.pop(get_routing_service, None)
