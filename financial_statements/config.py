"""
Application configuration.

All configuration is loaded from environment variables.
Defaults are chosen so the service runs with no .env file at all.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = os.getenv("APP_NAME", "Financial Statements API")
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Spreadsheet export
    EXPORT_FILENAME: str = os.getenv(
        "EXPORT_FILENAME",
        "estados-financieros.xlsx"
    )
    EXPORT_SHEET_TITLE: str = os.getenv(
        "EXPORT_SHEET_TITLE",
        "Estados Financieros"
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused, so the
    environment is read a single time per process.
    """
    return Settings()
