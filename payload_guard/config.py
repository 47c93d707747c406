"""
Configuration module for Payload Guard.

Loads environment variables and validates settings.
"""
import logging
import os

from dotenv import load_dotenv

# Load .env file
load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application settings loaded from environment variables."""

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Demo API
    API_TITLE: str = os.getenv("API_TITLE", "Payload Guard API")

    @property
    def log_level(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        if self.LOG_LEVEL not in _LOG_LEVELS:
            return logging.INFO
        return logging.getLevelName(self.LOG_LEVEL)

    @classmethod
    def validate(cls) -> None:
        """
        Validate that settings hold usable values.

        Raises:
            ValueError: If LOG_LEVEL is not a standard logging level name.
        """
        if cls.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}'. "
                f"Expected one of: {', '.join(_LOG_LEVELS)}."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (fail fast if misconfigured).
# Tests set VALIDATE_CONFIG=false.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"Warning: {e}")
            print("   Falling back to INFO logging.")
        else:
            raise
