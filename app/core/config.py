"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here: no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        port: Port the HTTP server listens on.
        bad_words_api_key: API key of the profanity filter service.
        bad_words_api_url: Endpoint of the profanity filter service.
        external_api_max_retries: Attempts made against the profanity
            filter before giving up on transport failures.
        token_secret: Signing key for session tokens.
        token_ttl_days: Lifetime of a session token.
        cors_allowed_methods: Methods accepted from cross-origin callers.
        cors_allowed_headers: Request headers accepted from cross-origin callers.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Q&A Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "WARNING"
    port: int = 8080

    database_url: Optional[str] = None
    postgres_user: str = "root"
    postgres_password: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "rustwebdev"

    bad_words_api_key: Optional[str] = None
    bad_words_api_url: str = "https://api.apilayer.com/bad_words"
    external_api_timeout: float = 10.0
    external_api_max_retries: int = 3

    token_secret: Optional[str] = None
    token_ttl_days: int = 1

    cors_allowed_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allowed_headers: list[str] = ["content-type"]

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build the URL from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def require_secrets(self) -> None:
        """Fail fast when a secret needed to serve requests is missing.

        Raises:
            RuntimeError: If the profanity API key or token secret is unset.
        """
        if not self.bad_words_api_key:
            raise RuntimeError("Badwords API key not set")
        if not self.token_secret:
            raise RuntimeError("Token secret not set")


settings = Settings()
