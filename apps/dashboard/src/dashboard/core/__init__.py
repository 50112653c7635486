"""Core module for the dashboard service."""

from .config import Settings, get_settings
from .logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
