"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    google_cloud_vision_api_key: str | None = None
    vision_base_url: str = "https://vision.googleapis.com/v1"
    vision_timeout_seconds: float = 30
    cors_allowed_origins: str = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
