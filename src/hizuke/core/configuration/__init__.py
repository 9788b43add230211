"""Configuration loading, persistence and environment resolution."""

from __future__ import annotations

from functools import lru_cache

from .constants import CONFIG_FILE
from .environment import EnvironmentManager
from .manager import ConfigManager
from .models import CLIConfig, OutputConfig
from .repository import ConfigRepository, TomlConfigRepository


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    return ConfigManager()


__all__ = [
    "CLIConfig",
    "CONFIG_FILE",
    "ConfigManager",
    "ConfigRepository",
    "EnvironmentManager",
    "OutputConfig",
    "TomlConfigRepository",
    "get_config_manager",
]
