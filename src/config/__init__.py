"""Configuration module."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import (
    APISettings,
    SalesSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "APISettings",
    "SalesSettings",
    "StorageSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
