"""Configuration for all newsboard services."""

from newsboard.config.settings import Settings, get_settings


__all__ = ["Settings", "get_settings"]
