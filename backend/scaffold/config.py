"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Supports SQLite (default) and PostgreSQL databases.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "scaffold-api"
    DEBUG: bool = False
    # Bind address used by run()
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    # Serve Swagger UI at /docs and the schema at /openapi.json
    DOCS_ENABLED: bool = True

    # Database Config
    # Supports "sqlite" or "postgresql"
    DATABASE_TYPE: Literal["sqlite", "postgresql"] = "sqlite"
    # SQLite default database path, PostgreSQL requires full connection string
    DATABASE_URL: str = "sqlite+aiosqlite:///./scaffold.db"

    # HTTP Client Config
    # Request timeout (seconds)
    HTTP_TIMEOUT: int = 30

    # Service Registry Config (Eureka-compatible REST API)
    REGISTRY_ENABLED: bool = False
    REGISTRY_URL: str = "http://localhost:8761/eureka"
    # Lease renewal interval (seconds)
    REGISTRY_HEARTBEAT_SECONDS: int = 30
    # Address advertised to the registry
    INSTANCE_HOST: str = "localhost"

    # Remote Client Config
    # Registry name of the CRUD provider called by the consumer
    PROVIDER_SERVICE_NAME: str = "scaffold-api"
    # Fixed provider URL; when set, the registry is not consulted
    PROVIDER_SERVICE_URL: str | None = None
    # Attempts per remote call (transport errors and status code >= 500)
    REMOTE_RETRY_MAX_ATTEMPTS: int = 3
    # Retry interval (ms)
    REMOTE_RETRY_DELAY_MS: int = 500

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:3000,https://example.com"
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
