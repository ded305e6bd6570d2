"""Configuration module for LineFilter."""

from .manager import ConfigManager
from .models import FilterConfig, LoggingSettings

__all__ = [
    "FilterConfig",
    "LoggingSettings",
    "ConfigManager",
]
