"""Configuration management for Inventory Board."""

from __future__ import annotations

import logging
from functools import lru_cache

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inventory_board.core.models import Location

logger = structlog.get_logger()

DEFAULT_LOW_STOCK_THRESHOLD = 10

# Tab order of the board
DEFAULT_LOCATIONS: dict[str, str] = {
    "office": "Office",
    "ci": "C/I",
    "gate": "GATE",
    "ctx": "CTX",
    "check-room": "CHECK-ROOM",
    "celler": "CELLER",
    "innsbruck": "Innsbruck",
}


class BoardSettings(BaseSettings):
    """Board settings: recognized locations and the global low-stock threshold."""

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    # Ordered id -> label mapping, JSON when set through the environment
    locations: dict[str, str] = DEFAULT_LOCATIONS

    @field_validator("default_low_stock_threshold")
    @classmethod
    def _positive_threshold(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"default_low_stock_threshold must be positive, got: {value}")
        return value

    @property
    def location_list(self) -> list[Location]:
        """Recognized locations in display order."""
        return [Location(id=key, label=label) for key, label in self.locations.items()]

    @property
    def location_ids(self) -> list[str]:
        """Recognized location identifiers in display order."""
        return list(self.locations)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    @property
    def board(self) -> BoardSettings:
        """Get board settings."""
        return BoardSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure structlog to drop events below the given level.

    Args:
        level: Level name such as "DEBUG" or "INFO". If None, uses Settings.log_level.
    """
    if level is None:
        level = get_settings().log_level
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        logger.warning("unknown_log_level", level=level)
        numeric_level = logging.INFO

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
