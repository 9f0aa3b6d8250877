# app/config.py

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Roster Sync API"
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Roster sources
    guild_file: str = "data/guild.txt"
    sheet_file: str = "data/sheet.txt"
    aliases_file: str = "data/sheet-names.txt"

    # Matching config
    excluded_roles: list[str] = ["Bomber", "Guild Master"]
    ignored_fragments: list[str] = ["sarge"]
    signup_junk_words: list[str] = ["delete", "spam", "mess", "pedo"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
