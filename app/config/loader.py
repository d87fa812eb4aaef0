"""
Environment-specific settings files (`.env.development`, `.env.production`, ...).
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .settings import DiscoverySettings, Environment, SecuritySettings, Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Reads `.env.<environment>` files into Settings"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings built from the environment file, or from plain env vars when the file is missing
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())
        env_file_path = Path(f".env.{env.value}")

        if env_file_path.exists():
            env_file = str(env_file_path)
            # Nested groups are separate BaseSettings and read the file themselves
            return Settings(
                _env_file=env_file,
                environment=env,
                discovery=DiscoverySettings(_env_file=env_file),
                security=SecuritySettings(_env_file=env_file),
            )

        logger.warning(
            f"Environment file {env_file_path} not found, using default settings"
        )
        return Settings(environment=env)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Environments that have a `.env.<name>` file in the working directory"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            env_name = env_file.name.replace(".env.", "", 1)
            if env_name.endswith(".sample"):
                continue
            env_files.append(env_name)
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration loads cleanly.

        A missing ``.env.<environment>`` file is valid: defaults apply.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            settings = ConfigLoader.load_environment_config(environment)
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid configuration for {environment}: {e}")
            return False

        required_settings = [
            settings.app_name,
            settings.environment,
            settings.host,
            settings.port,
        ]
        return all(setting is not None for setting in required_settings)

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Write a commented sample env file listing every discovery service setting.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        defaults = Settings()
        is_dev = env == Environment.DEVELOPMENT

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={defaults.app_name}
APP_VERSION={defaults.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if is_dev else 'false'}
API_PREFIX={defaults.api_prefix}

# Server Configuration
HOST={defaults.host}
PORT={defaults.port}
RELOAD={'true' if is_dev else 'false'}
WORKERS={1 if is_dev else 4}

# Logging Configuration
LOG_LEVEL={defaults.log_level.value}
LOG_JSON={'false' if is_dev else 'true'}

# Discovery Configuration (kilometers)
DEFAULT_RADIUS={defaults.discovery.default_radius}
MAX_RADIUS={defaults.discovery.max_radius}
MAX_RESULTS={defaults.discovery.max_results}
DEFAULT_LIMIT={defaults.discovery.default_limit}

# Security Configuration
SECURITY_CORS_ORIGINS={'*' if is_dev else 'https://example.com'}
SECURITY_RATE_LIMIT_ENABLED=true
SECURITY_RATE_LIMIT_REQUESTS={defaults.security.rate_limit_requests}
SECURITY_RATE_LIMIT_WINDOW_SECONDS={defaults.security.rate_limit_window_seconds}
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Settings for `environment`, or for $ENVIRONMENT when omitted"""
    return ConfigLoader.load_environment_config(environment)
