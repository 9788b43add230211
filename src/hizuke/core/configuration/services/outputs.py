"""Share-link and line-format preference helpers."""

from __future__ import annotations

from ..models import CLIConfig
from ..utils import normalize_optional_text


def set_base_url(config: CLIConfig, base_url: str | None) -> None:
    config.outputs.base_url = normalize_optional_text(base_url.strip() if base_url else None)


def get_base_url(config: CLIConfig) -> str | None:
    return config.outputs.base_url


def set_line_format(config: CLIConfig, line_format: str | None) -> None:
    # Whitespace is significant inside templates, so only None clears it.
    config.outputs.line_format = line_format


def get_line_format(config: CLIConfig, default: str) -> str:
    line_format = config.outputs.line_format
    return default if line_format is None else line_format
