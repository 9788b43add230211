"""Constants used throughout the configuration subsystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_DIR = Path(os.getenv("HIZUKE_CONFIG_DIR", user_config_dir("hizuke")))
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_VERBOSITY = "quiet"
VERBOSITY_ENV_VAR = "HIZUKE_LOG_LEVEL"
BASE_URL_ENV_VAR = "HIZUKE_BASE_URL"
VERBOSITY_PRESETS = {
    "quiet": logging.WARNING,
    "standard": logging.INFO,
    "verbose": logging.DEBUG,
}
VERBOSITY_ALIASES = {
    "warning": "quiet",
    "info": "standard",
    "debug": "verbose",
}
