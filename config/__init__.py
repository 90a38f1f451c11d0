"""Configuration module for loading environment variables and settings."""

from config.logging import get_logger
from config.settings import Settings, get_settings

__all__ = ["Settings", "get_logger", "get_settings"]
