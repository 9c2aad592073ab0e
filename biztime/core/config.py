from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Any SQLAlchemy URL, e.g. postgresql+psycopg2://localhost/biztime
    DATABASE_URL: str = "sqlite:///./biztime.db"

    # Echo every statement the engine runs
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
