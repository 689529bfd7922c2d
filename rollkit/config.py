"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Expression rolled when the CLI is given none
    default_expression: str = "1d20"

    # Show the kept-dice arithmetic next to totals
    show_breakdown: bool = True

    # Logging
    log_level: str = "WARNING"
    debug: bool = False

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level; debug mode always wins."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
