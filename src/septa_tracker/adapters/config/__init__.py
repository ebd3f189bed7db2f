"""Configuration adapters."""

from septa_tracker.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
