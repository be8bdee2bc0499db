"""
Application configuration settings.

This file loads settings from environment variables.
For local development, create a .env file based on .env.example
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL: SQLAlchemy async connection string for the local store
        APP_NAME: Name of the application
        DEBUG: Enable debug mode (echoes SQL statements)
        LOG_LEVEL: Root log level applied at startup
    """

    # Database connection string
    # Format: sqlite+aiosqlite:///path/to/file.db
    DATABASE_URL: str = "sqlite+aiosqlite:///./talentflow.db"

    # Application settings
    APP_NAME: str = "TalentFlow Data Service"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Simulated network conditions (latency in milliseconds)
    FAULT_INJECTION_ENABLED: bool = True
    FAULT_MIN_LATENCY_MS: int = 200
    FAULT_MAX_LATENCY_MS: int = 1200
    FAULT_FAILURE_RATE: float = 0.075
    REORDER_FAILURE_RATE: float = 0.10

    # Demo data
    SEED_ON_STARTUP: bool = True
    SEED_RANDOM_SEED: Optional[int] = None

    class Config:
        # Load variables from .env file if it exists
        env_file = ".env"
        env_file_encoding = "utf-8"


# Create a single settings instance to use throughout the app
settings = Settings()
