"""
TimeBucks Configuration Management

Settings are read from TIMEBUCKS_* environment variables or a .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === API Configuration ===
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)

    # === Conversion Defaults ===
    default_method: str = Field(
        default="CPI",
        description="Method used when a caller does not name one"
    )

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_prefix": "TIMEBUCKS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
