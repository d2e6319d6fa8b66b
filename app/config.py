from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./mentorlink.db"

    # JWT Authentication
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    # Meeting links handed out on approval (newline-delimited file)
    MEETING_LINKS_FILE: str = "meeting_links.txt"
    MEETING_LINK_PREFIX: str = "https://meet.google.com/"

    # Activity feed
    ACTIVITY_FEED_DEFAULT_LIMIT: int = 10
    ACTIVITY_FEED_MAX_LIMIT: int = 100

    # When enabled, session requests must fall inside one of the mentor's
    # availability slots.
    ENFORCE_AVAILABILITY: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Returns a cached instance of the Settings."""
    return Settings()


settings = get_settings()
