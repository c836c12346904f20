"""Application configuration."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

STORAGE_BACKENDS = ("auto", "remote", "local")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        """Initialize settings from environment variables."""
        # API Settings
        self.api_title: str = os.getenv("API_TITLE", "Study Portal")
        self.api_version: str = os.getenv("API_VERSION", "0.1.0")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.environment: str = os.getenv("ENVIRONMENT", "development")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Settings
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8000"))

        # Database Settings
        self.db_host: str = os.getenv("DB_HOST", "localhost")
        self.db_port: int = int(os.getenv("DB_PORT", "5432"))
        self.db_user: str = os.getenv("DB_USER", "postgres")
        self.db_password: str = os.getenv("DB_PASSWORD", "")
        self.db_name: str = os.getenv("DB_NAME", "study_portal")
        self.database_url_override: Optional[str] = os.getenv("DATABASE_URL") or None
        self.run_migrations: bool = (
            os.getenv("RUN_MIGRATIONS", "True").lower() == "true"
        )

        # Storage Settings
        self.storage_backend: str = os.getenv("STORAGE_BACKEND", "auto").lower()
        self.local_store_path: str = os.getenv("LOCAL_STORE_PATH", ".study_portal")
        self.seed_defaults: bool = os.getenv("SEED_DEFAULTS", "True").lower() == "true"

        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, "
                f"got '{self.storage_backend}'"
            )

    @property
    def database_url(self) -> str:
        """Build database URL, preferring an explicit DATABASE_URL."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_production(self) -> bool:
        """Check whether the application runs in production."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
