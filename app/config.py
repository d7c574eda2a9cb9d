import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App config
    DEBUG: bool = False

    # Match defaults
    DEFAULT_BEST_OF: int = 3
    DEFAULT_ATTEMPTS: int = 5

    # Simulation
    SIMULATION_SEED: int | None = None

    @field_validator("DEFAULT_BEST_OF")
    @classmethod
    def validate_best_of(cls, v: int) -> int:
        if v < 1 or v % 2 == 0:
            raise ValueError("DEFAULT_BEST_OF must be a positive odd number")
        return v

    @field_validator("DEFAULT_ATTEMPTS")
    @classmethod
    def validate_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DEFAULT_ATTEMPTS must be at least 1")
        return v


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug(
        "Match defaults: best_of=%d, attempts=%d, seed=%s",
        settings.DEFAULT_BEST_OF,
        settings.DEFAULT_ATTEMPTS,
        settings.SIMULATION_SEED,
    )
    return settings
