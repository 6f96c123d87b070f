"""Library configuration with environment variable support."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    urlstate settings with environment variable support.

    Priority: ENV > .env.local > .env > defaults
    Every variable is read with the URLSTATE_ prefix, e.g. URLSTATE_INITIAL_URL.
    """

    model_config = SettingsConfigDict(
        env_prefix="URLSTATE_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Default navigation context
    INITIAL_URL: str = "http://localhost/"  # Starting address of the default memory backend
    AUTO_DISPATCH_POPSTATE: bool = True  # Deliver back/forward events as soon as go() steps

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    # Marketing parameters removed by strip_utm_parameters()
    UTM_KEYS: List[str] = [
        "utm_source",
        "utm_medium",
        "utm_campaign",
        "utm_term",
        "utm_content",
    ]


# Global settings instance
settings = Settings()
