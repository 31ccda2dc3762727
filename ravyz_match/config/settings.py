"""Configuration settings for ravyz-match."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

StrategyName = Literal["hybrid", "behavioral", "legacy"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Matching
    default_strategy: StrategyName = Field(
        default="hybrid",
        description="Scoring model used when the caller does not pick one",
    )

    # Persistence
    results_db_path: Path = Field(
        default=Path("./data/matches.db"),
        description="Path to the SQLite database holding computed match results",
    )
    result_validity_days: Annotated[int, Field(gt=0)] = Field(
        default=7,
        description="Days a stored match result stays valid before recomputation",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives log records",
    )

    @field_validator("default_strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v: object) -> object:
        """Accept strategy names in any case."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
