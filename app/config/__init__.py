"""
Configuration package for the Location Discovery API.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DiscoverySettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DiscoverySettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
