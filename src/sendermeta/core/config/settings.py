"""Configuration models using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeoIPConfig(BaseModel):
    """GeoIP database configuration."""

    database_path: Path | None = None  # MaxMind City database (.mmdb); None disables lookups


class NetworkConfig(BaseModel):
    """Network configuration."""

    trust_forwarded_headers: bool = False  # Only behind a reverse proxy that sets them


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Settings(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SENDERMETA_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    geoip: GeoIPConfig = Field(default_factory=GeoIPConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logs: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> Settings:
        """Load settings from a YAML file; environment variables still apply."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return cls(**(yaml.safe_load(path.read_text()) or {}))
