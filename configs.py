"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the app.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    LOG_LEVEL: str = "INFO"

    # Provider registry
    ENABLE_MOCK_PROVIDERS: bool = True
    REDBUS_API_KEY: Optional[str] = None
    RAPIDAPI_KEY: Optional[str] = None

    # Outbound calls
    REDBUS_RATE_LIMIT_SECONDS: float = 1.0
    RAPIDAPI_RATE_LIMIT_SECONDS: float = 2.0
    PROVIDER_TIMEOUT_SECONDS: float = 30.0
    PROVIDER_USER_AGENT: str = "BusAggregator/1.0"

    # API parameters
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]
    STRICT_CITY_VALIDATION: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
