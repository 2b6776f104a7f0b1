"""
Application settings
"""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ORDERING_* environment variables or .env"""

    # Product log files (one <name>.log per product instance)
    LOG_DIR: Path = Path(".")
    LOG_ENCODING: str = "utf-8"

    # Console logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ORDERING_",
        case_sensitive=True,
        extra="ignore",
    )

    def get_log_level(self) -> int:
        """Parse LOG_LEVEL name into a logging level number"""
        import logging

        level = logging.getLevelName(self.LOG_LEVEL.upper())
        if isinstance(level, int):
            return level

        # Unknown names fall back to INFO
        return logging.INFO


settings = Settings()
