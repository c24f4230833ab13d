"""
Centralized configuration for the Studyhall backend.

All settings are loaded from environment variables with sensible defaults.
Integration settings are namespaced (e.g., FIREBASE_*, STRIPE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Studyhall API"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Public base URL of the web app (used for Stripe redirects)
    app_url: str = "http://localhost:3000"

    # Firebase service account
    firebase_project_id: str = ""
    firebase_client_email: str = ""
    firebase_private_key: str = ""

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_publishable_key: str = ""
    stripe_pricing_table_id: str = ""

    # Session cookie
    session_expires_days: int = 14

    @property
    def is_production(self) -> bool:
        """Whether the service runs in production (enables secure cookies)."""
        return self.environment.lower() == "production"

    @property
    def session_max_age(self) -> int:
        """Session cookie lifetime in seconds."""
        return self.session_expires_days * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
