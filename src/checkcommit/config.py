# src/checkcommit/config.py
from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Gemini
    gemini_api_key: str | None = None
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1/models"
    gemini_model: str = "gemini-2.5-flash"
    request_timeout: float = 60.0
    max_retries: int = 0

    # Git
    git_timeout: float = 30.0

    # Defaults
    checkcommit_root: str = str(Path.home() / "checkcommit")
    default_project_type: str = "dotnet"
    log_dir: str | None = None
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
