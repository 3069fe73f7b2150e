"""Configuration package."""

from paperscope.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
