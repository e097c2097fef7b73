"""Cluster profiles service configuration.

Configuration sources (in priority order):
1. Environment variables (PROFILES_ prefix)
2. Config file (config.yaml)
3. Defaults
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 9090
    api_prefix: str = "/api/v1"


class DatabaseConfig(BaseModel):
    """Database configuration."""

    # sqlite by default; postgresql+asyncpg:// or mysql+asyncmy:// also work
    url: str = "sqlite+aiosqlite:///./profiles.db"
    echo: bool = False


class DefaultsConfig(BaseModel):
    """Location of the static distribution defaults."""

    dir: str = "defaults"
    defaults_file: str = "defaults.yaml"
    amazon_images_file: str = "defaults-amazon-images.yaml"

    @property
    def defaults_path(self) -> Path:
        return Path(self.dir) / self.defaults_file

    @property
    def amazon_images_path(self) -> Path:
        return Path(self.dir) / self.amazon_images_file


class ProfilesConfig(BaseModel):
    """Stored profile behaviour."""

    # Reserved name, can be neither updated nor deleted
    default_name: str = "default"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = False


class Settings(BaseSettings):
    """Cluster profiles service settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROFILES_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    profiles: ProfilesConfig = Field(default_factory=ProfilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values passed in from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def _load_config_file() -> dict:
    """Load configuration from YAML file if exists.

    Looks for config file in order:
    1. PROFILES_CONFIG_FILE environment variable
    2. ./config.yaml
    3. /etc/cluster-profiles/config.yaml
    """
    config_paths = [
        os.environ.get("PROFILES_CONFIG_FILE"),
        Path("config.yaml"),
        Path("/etc/cluster-profiles/config.yaml"),
    ]

    for path in config_paths:
        if path is None:
            continue
        path = Path(path)
        if path.exists():
            with open(path) as f:
                return yaml.safe_load(f) or {}

    return {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Configuration is loaded from:
    1. YAML config file (if exists)
    2. Environment variables (override)
    3. Defaults
    """
    file_config = _load_config_file()

    # Environment variables override file values via pydantic-settings
    return Settings(**file_config)
