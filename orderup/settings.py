import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "orderup"
    DB_USER: str = "orderup"
    DB_PASS: str = "orderup"
    DB_ECHO: bool = False
    DB_CREATE_SCHEMA: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env.dev" if Path(".env.dev").exists() and not os.getenv("DOCKER_ENV") else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
