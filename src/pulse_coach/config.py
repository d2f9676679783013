"""Runtime configuration and logging setup."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Settings read from ``PULSE_COACH_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="PULSE_COACH_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Field(default=DATA_DIR)
    db_filename: str = Field(default="pulse_coach.db")
    log_level: str = Field(default="INFO")

    # Workout generation and analysis defaults
    default_target_minutes: int = Field(default=30, ge=6)
    history_days: int = Field(default=30, ge=1)
    history_limit: int = Field(default=20, ge=1)

    # API server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    @property
    def db_path(self) -> Path:
        """Full path of the SQLite database file."""
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return Settings()


def configure_logging(level: str | int = "INFO") -> None:
    """Send pulse-coach log records to stderr at ``level``."""
    logger = logging.getLogger("pulse_coach")
    logger.setLevel(level if isinstance(level, int) else level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
