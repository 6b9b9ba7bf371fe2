"""
Centralized configuration for the DeWhitt backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., STRIPE_*, SUPABASE_*, MAIL_*).
"""

from functools import lru_cache
from pydantic import Field
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
    app_name: str = "DeWhitt API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = Field(default=60, ge=1)

    # Password hashing (bcrypt cost factor)
    password_hash_rounds: int = Field(default=10, ge=4, le=31)

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""

    # Stripe (loaded by billing module)
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_price_id: str = ""

    # Frontend URLs (for verification links and redirects)
    frontend_url: str = "http://localhost:5173"

    # Transactional mail API
    mail_api_url: str = ""
    mail_api_key: str = ""
    mail_from: str = "DeWhitt <no-reply@dewhitt.app>"
    mail_timeout_seconds: float = 5.0

    def require_signing_secret(self) -> str:
        """
        Return the token signing secret.

        Raises:
            RuntimeError: If JWT_SECRET is not configured
        """
        if not self.jwt_secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        return self.jwt_secret

    @property
    def mail_configured(self) -> bool:
        """Whether outbound mail delivery is configured."""
        return bool(self.mail_api_url and self.mail_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
