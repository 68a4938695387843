from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Splicing Report Dashboard API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./splice_reports.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:5000"]

    # Insert demo reports on startup when the table is empty
    seed_demo_data: bool = True

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_reports: str = "INFO"          # report lifecycle services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
