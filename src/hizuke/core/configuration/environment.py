"""Environment adapters for applying configuration at runtime."""

from __future__ import annotations

import os
from collections.abc import MutableMapping

from .constants import BASE_URL_ENV_VAR, DEFAULT_VERBOSITY, VERBOSITY_ENV_VAR, VERBOSITY_PRESETS
from .models import CLIConfig
from .utils import normalize_optional_text, normalize_verbosity_label


class EnvironmentManager:
    """Thin wrapper around environment access to aid testing and reuse."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def getenv(self, key: str) -> str | None:
        return self._environ.get(key)

    def resolve_log_level(self, config: CLIConfig, default: int | None = None) -> int:
        label = normalize_verbosity_label(self.getenv(VERBOSITY_ENV_VAR))
        if label is None:
            label = normalize_verbosity_label(config.verbosity)

        if label is None:
            fallback = VERBOSITY_PRESETS[DEFAULT_VERBOSITY]
            return fallback if default is None else default

        return VERBOSITY_PRESETS[label]

    def resolve_base_url(self, config: CLIConfig) -> str | None:
        return normalize_optional_text(self.getenv(BASE_URL_ENV_VAR)) or config.outputs.base_url
