"""
Settings for the location discovery service.

Values come from environment variables or a `.env` file; discovery limits keep
their historical unprefixed names (DEFAULT_RADIUS, MAX_RADIUS, ...).
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Deployment environment the service runs in"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DiscoverySettings(BaseSettings):
    """Search defaults and hard limits for place discovery (kilometers)"""

    default_radius: float = Field(default=5.0, ge=0.1)
    max_radius: float = Field(default=50.0, ge=0.1)
    max_results: int = Field(default=50, ge=1)
    default_limit: int = Field(default=10, ge=1)

    @model_validator(mode="after")
    def check_radius_bounds(self):
        """Default radius has to be reachable under the configured maximum"""
        if self.default_radius > self.max_radius:
            raise ValueError(
                f"default_radius {self.default_radius} exceeds max_radius {self.max_radius}"
            )
        return self

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class SecuritySettings(BaseSettings):
    """CORS and rate limiting configuration"""

    # Comma separated in env files; split by parse_cors_origins
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "OPTIONS"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=100, ge=1, le=10000)
    rate_limit_window_seconds: int = Field(default=60, ge=1, le=3600)

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Accept a comma separated string as well as a list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v or ["*"]

    model_config = {
        "env_prefix": "SECURITY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Top-level service settings"""

    # Service identity
    app_name: str = Field(default="Location Discovery API")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api/v1")

    # uvicorn
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_json: bool = Field(default=False)
    log_file: Optional[str] = Field(default=None)

    # Nested groups
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Environment names are case-insensitive"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('api_prefix')
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash"""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Keyword arguments for CORSMiddleware"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Process-wide settings, built at import
settings = Settings()


def get_settings() -> Settings:
    """Process-wide settings"""
    return settings


def reload_settings() -> Settings:
    """Rebuild the process-wide settings, e.g. after the environment changed"""
    global settings
    settings = Settings()
    return settings
