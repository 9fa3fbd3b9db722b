"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_NUTRITION_API_BASE_URL = "https://api.api-ninjas.com/v1/"
BUNDLED_DICTIONARY_PATH = Path(__file__).parent / "data" / "nutrition_dictionary.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nutrition_api_key: str | None = None
    nutrition_api_base_url: str = DEFAULT_NUTRITION_API_BASE_URL
    nutrition_timeout_seconds: float = 30.0
    nutrition_dictionary_path: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_api_key(raw: str | None) -> str | None:
    """Return the API key, or None when it is unset or blank."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None


def normalize_base_url(raw: str | None) -> str:
    """Return the API root with a trailing slash, falling back to the default."""
    if raw is None or not raw.strip():
        return DEFAULT_NUTRITION_API_BASE_URL
    cleaned = raw.strip()
    if not cleaned.endswith("/"):
        cleaned += "/"
    return cleaned


def resolve_dictionary_path(raw: str | None) -> Path:
    """Return the dictionary file to load."""
    if raw is None or not raw.strip():
        return BUNDLED_DICTIONARY_PATH
    return Path(raw.strip())
