"""
Application configuration.

Centralized configuration management with environment variables.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "berust"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Translation
    INDENT_WIDTH: int = 4
    OUTPUT_EXTENSION: str = ".rs"
    ENCODING: str = "utf-8"

    # API
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    MAX_SOURCE_BYTES: int = 1_000_000

    class Config:
        env_prefix = "BERUST_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
