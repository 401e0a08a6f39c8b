"""Application settings using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class GUISettings(BaseSettings):
    """Streamlit card picker configuration."""

    model_config = SettingsConfigDict(
        env_prefix="POKER_GUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = Field(default="Poker Hand Evaluator")
    streamlit_port: int = Field(
        default=8501,
        ge=1024,
        le=65535,
        description="Streamlit server port (1024-65535)",
    )
    grid_columns: int = Field(
        default=13,
        ge=1,
        le=13,
        description="Card buttons per grid row (1-13)",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    gui:GUISettings = Field(default_factory=GUISettings)

    # General settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    debug: bool = Field(default=False, alias="DEBUG")

    # Selection cap; a hand is classified only at exactly five cards
    max_selection: int = Field(
        default=5,
        ge=1,
        le=5,
        alias="MAX_SELECTION",
        description="Maximum number of cards a user may select (1-5)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings(config_path: str | None = None) -> Settings:
    """Load settings from an env file or the environment.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. Specified config file (--config option)
    3. Default .env in current directory
    """
    if config_path:
        from dotenv import load_dotenv

        load_dotenv(config_path, override=True)
        logger.debug(f"Loaded environment from {config_path}")

    return Settings()
