"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SEPTA API configuration
    septa_api_base_url: str = Field(
        default="https://www3.septa.org/api",
        description="Base URL of the SEPTA real-time API (TrainView, NextToArrive)",
    )
    reference_api_base_url: str = Field(
        default="https://benjiled.pythonanywhere.com",
        description="Base URL serving stops, schedules and advisories",
    )
    api_timeout_seconds: float = Field(
        default=10, description="Timeout for API requests in seconds"
    )

    # Polling configuration
    live_feed_interval_seconds: float = Field(
        default=10, description="Interval between live train position updates in seconds"
    )
    favorites_refresh_interval_seconds: float = Field(
        default=5, description="Interval between favorites refreshes in seconds"
    )
    favorite_arrivals_limit: int = Field(
        default=3, description="Number of next arrivals fetched per favorite"
    )
    next_arrivals_limit: int = Field(
        default=10, description="Number of next arrivals fetched for the selected trip"
    )

    # Storage
    cache_dir: str = Field(
        default="~/.cache/septa_tracker",
        description="Directory holding cached reference data and favorites",
    )
    favorites_key: str = Field(
        default="favoriteStationPairs",
        description="Storage key for the favorites list",
    )

    # Location
    home_latitude: float | None = Field(
        default=None, description="Latitude used when looking for nearby trains"
    )
    home_longitude: float | None = Field(
        default=None, description="Longitude used when looking for nearby trains"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Optional TOML file with [polling] and [api] overrides
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with polling and API overrides",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file in the working directory."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator(
        "api_timeout_seconds",
        "live_feed_interval_seconds",
        "favorites_refresh_interval_seconds",
    )
    @classmethod
    def validate_positive_seconds(cls, v: float) -> float:
        """Validate durations are positive."""
        if v <= 0:
            raise ValueError("durations must be positive")
        return v

    @field_validator("favorite_arrivals_limit", "next_arrivals_limit")
    @classmethod
    def validate_positive_limit(cls, v: int) -> int:
        """Validate arrival limits are positive."""
        if v < 1:
            raise ValueError("arrival limits must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @property
    def cache_path(self) -> Path:
        """Cache directory with ``~`` expanded."""
        return Path(self.cache_dir).expanduser()

    @property
    def log_level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Apply [polling] and [api] settings from the TOML file, if configured.

        Returns the parsed TOML data (empty when no file is configured).
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        polling = toml_data.get("polling", {})
        if "live_feed_interval_seconds" in polling:
            self.live_feed_interval_seconds = polling["live_feed_interval_seconds"]
        if "favorites_refresh_interval_seconds" in polling:
            self.favorites_refresh_interval_seconds = polling["favorites_refresh_interval_seconds"]
        if "favorite_arrivals_limit" in polling:
            self.favorite_arrivals_limit = polling["favorite_arrivals_limit"]
        if "next_arrivals_limit" in polling:
            self.next_arrivals_limit = polling["next_arrivals_limit"]

        api = toml_data.get("api", {})
        if "septa_api_base_url" in api:
            self.septa_api_base_url = api["septa_api_base_url"]
        if "reference_api_base_url" in api:
            self.reference_api_base_url = api["reference_api_base_url"]
        if "timeout_seconds" in api:
            self.api_timeout_seconds = api["timeout_seconds"]

        return toml_data
