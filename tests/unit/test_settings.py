import pytest
from pydantic import ValidationError

from app.config.settings import DiscoverySettings, Environment, SecuritySettings, Settings


def test_discovery_defaults():
    config = DiscoverySettings()
    assert config.default_radius == 5.0
    assert config.max_radius == 50.0
    assert config.max_results == 50
    assert config.default_limit == 10


def test_default_radius_above_max_rejected():
    with pytest.raises(ValidationError, match="exceeds max_radius"):
        DiscoverySettings(default_radius=60.0, max_radius=50.0)


def test_non_positive_limits_rejected():
    with pytest.raises(ValidationError):
        DiscoverySettings(max_results=0)


@pytest.mark.parametrize("raw,expected", [
    ("/api/v1", "/api/v1"),
    ("api/v1/", "/api/v1"),
    ("/", ""),
])
def test_api_prefix_normalized(raw, expected):
    assert Settings(api_prefix=raw).api_prefix == expected


def test_environment_case_insensitive():
    s = Settings(environment="PRODUCTION")
    assert s.environment == Environment.PRODUCTION
    assert s.is_production()
    assert not s.is_development()


def test_cors_origins_from_comma_string():
    security = SecuritySettings(cors_origins="https://a.example, https://b.example,")
    assert security.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_config_shape():
    cors = Settings().get_cors_config()
    assert set(cors) == {"allow_origins", "allow_credentials", "allow_methods", "allow_headers"}
