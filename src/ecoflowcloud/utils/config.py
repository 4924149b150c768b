"""Configuration management."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(value: str | None) -> float | None:
    if value is None or value.strip() == "":
        return None
    return float(value)


class Config:
    """Configuration for the EcoFlow cloud API client."""

    # API credentials
    ACCESS_KEY: str = os.getenv("ECOFLOW_ACCESS_KEY", "")
    SECRET_KEY: str = os.getenv("ECOFLOW_SECRET_KEY", "")

    # REST API host: api-e (Europe) or api-a (Americas)
    API_HOST: str = os.getenv("ECOFLOW_API_HOST", "api-e.ecoflow.com")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Connection settings
    REST_TIMEOUT: float | None = _optional_float(os.getenv("ECOFLOW_REST_TIMEOUT"))  # seconds, None = no timeout

    @classmethod
    def get_rest_url(cls, host: str | None = None) -> str:
        """Get REST API base URL."""
        return f"https://{host or cls.API_HOST}"

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration."""
        if not cls.ACCESS_KEY or not cls.SECRET_KEY:
            return False
        return True
