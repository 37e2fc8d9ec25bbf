# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-calculator"
    DEBUG: bool = Field(
        default=False,
        description="Mount /docs and /openapi.json. Leave off in production.",
    )

    # -- Server --
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # -- CORS --
    CORS_ALLOWED_ORIGIN: str = Field(
        default="http://localhost:3001",
        description="Origin allowed to call the API from a browser (the web front end).",
    )
    CORS_ALLOWED_HEADERS: list[str] = ["content-type"]


settings = Settings()
