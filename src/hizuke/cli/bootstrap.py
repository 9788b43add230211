"""Per-invocation runtime setup shared by every command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from hizuke.core.configuration import ConfigManager, get_config_manager
from hizuke.logging_setup import configure_logging


@dataclass
class RuntimeContext:
    console: Console
    config_manager: ConfigManager
    log_level: int


def _load_env_files() -> None:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)


def bootstrap_runtime() -> RuntimeContext:
    _load_env_files()
    config_manager = get_config_manager()
    log_level = config_manager.resolve_log_level()
    configure_logging(log_level)
    return RuntimeContext(console=Console(), config_manager=config_manager, log_level=log_level)
