import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Servobill API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./servobill.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Invoicing
    currency_symbol: str = "€"

    # Mutation routes require X-API-Key to match when set; empty disables the check
    api_key: str = ""

    # Listing pagination
    default_page_size: int = 100
    max_page_size: int = 500

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # servobill.application use cases

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.max_page_size < self.default_page_size:
            _config_logger.warning(
                "max_page_size (%d) is below default_page_size (%d); using %d for both",
                self.max_page_size,
                self.default_page_size,
                self.max_page_size,
            )
            object.__setattr__(self, "default_page_size", self.max_page_size)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
