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

    app_title: str = "Client Records API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./clients.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:4200"]

    # Postal code lookup (ViaCEP)
    viacep_base_url: str = "https://viacep.com.br/ws"
    viacep_format: str = "json"

    # Operator notifications
    notification_dismiss_label: str = "OK"
    notification_duration_ms: int = 2000

    # Printed client document (PDF points)
    document_title_font_size: float = 14
    document_text_font_size: float = 12
    document_line_width: float = 0.1

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_lookup: str = "INFO"           # ViaCEP address lookups
    log_level_forms: str = "INFO"            # client form controller

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
