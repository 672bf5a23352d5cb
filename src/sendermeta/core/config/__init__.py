"""Configuration."""

from sendermeta.core.config.settings import GeoIPConfig, LogConfig, NetworkConfig, Settings

__all__ = [
    "GeoIPConfig",
    "LogConfig",
    "NetworkConfig",
    "Settings",
]
