# app/core/config.py

import os

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (the directory holding pyproject.toml and .env)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and the project
    root `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True
    )

    # --- Application ---
    APP_NAME: str = "Employee Directory API"
    APP_VERSION: str = "0.1.0"
    APP_ENV: str = Field("development", description="Application environment (development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL and log at DEBUG level")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- HTTP ---
    PORT: int = Field(3000, description="Port the HTTP listener binds to")
    CORS_ORIGIN: str = Field("http://localhost:5173", description="The single origin allowed by CORS")

    # --- Database ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL")

    # --- JWT ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT signing")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, description="Access token lifetime in minutes")


settings = Settings()
