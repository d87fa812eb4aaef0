"""
Shared fixtures: an application with rate limiting off, a lifespan-managed
TestClient, and a discovery service over the fixture places.
"""
import pytest
from fastapi.testclient import TestClient

from app.config.settings import DiscoverySettings, Environment, SecuritySettings, Settings
from app.main import create_app
from app.services.discovery_service import DiscoveryService
from app.services.place_repository import PlaceRepository


@pytest.fixture
def test_settings():
    return Settings(
        environment=Environment.TESTING,
        discovery=DiscoverySettings(default_radius=5.0, max_radius=50.0, max_results=50, default_limit=10),
        security=SecuritySettings(rate_limit_enabled=False),
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def repository():
    return PlaceRepository()


@pytest.fixture
def discovery_service(repository):
    return DiscoveryService(
        repository,
        DiscoverySettings(default_radius=5.0, max_radius=50.0, max_results=50, default_limit=10),
    )
