"""
Configuration settings for the Employee Record Manager.

Uses Pydantic Settings to load environment variables for the backing data
file, logging, and persistence behaviour. Core components never read these
values themselves; the CLI resolves them and passes explicit arguments down.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    data_file: Path = Field(Path("employees.json"), alias="EMPLOYEE_DATA_FILE")
    save_retry_attempts: int = Field(3, alias="SAVE_RETRY_ATTEMPTS", ge=1)

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

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
