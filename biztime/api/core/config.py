from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Any SQLAlchemy URL; postgresql+psycopg://... in production
    DATABASE_URL: str = "sqlite:///./biztime_data/biztime.db"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]  # change to frontend URL in production

    # Expose exception text in 500 bodies
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
