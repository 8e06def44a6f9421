from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    APP_NAME: str = "BizTime API"

    # Any SQLAlchemy URL; postgres works as well as sqlite
    DATABASE_URL: str = "sqlite:///./biztime.db"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Expose exception text in 500 responses
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
