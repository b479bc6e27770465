"""
Library configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="DENSEALGEBRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Numerics
    TOLERANCE: float = 1e-10  # |x| <= TOLERANCE is treated as exactly zero

    # Random generation
    RANDOM_LOWER: int = -10
    RANDOM_UPPER: int = 10
    RANDOM_SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
