"""Central configuration via pydantic-settings (environment / .env)."""
from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ── Storage ──
    DATABASE_URL: str = "sqlite:///data/outorga.db"

    # ── App ──
    LOG_LEVEL: str = "INFO"
    API_BASE_URL: str = "http://127.0.0.1:8000"


settings = Settings()
