"""
Configuration settings for the glossary browser.

Uses Pydantic Settings to load environment variables for the term source,
search behaviour, logging, and the persisted preference file.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Term source
    source_kind: str = Field("file", alias="GLOSSARY_SOURCE")
    data_dir: str = Field("data", alias="GLOSSARY_DATA_DIR")
    base_url: Optional[str] = Field(None, alias="GLOSSARY_BASE_URL")
    fetch_timeout_seconds: float = Field(10.0, alias="GLOSSARY_FETCH_TIMEOUT_SECONDS")
    fetch_attempts: int = Field(3, alias="GLOSSARY_FETCH_ATTEMPTS")

    # Search
    debounce_ms: int = Field(300, alias="GLOSSARY_DEBOUNCE_MS")

    # Preferences
    preferences_path: str = Field(".glossary-preferences.json", alias="GLOSSARY_PREFERENCES_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
