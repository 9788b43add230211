"""Conversion between CLIConfig and its TOML-ready dictionary form."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import CLIConfig, OutputConfig
from .utils import normalize_optional_text, normalize_verbosity_label


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Config value {key!r} must be a string (got {type(value).__name__}).")
    return value


def config_from_dict(payload: Mapping[str, Any]) -> CLIConfig:
    outputs_payload = payload.get("outputs", {})
    if not isinstance(outputs_payload, Mapping):
        raise ValueError("Config section 'outputs' must be a table.")
    return CLIConfig(
        verbosity=normalize_verbosity_label(_optional_str(payload, "verbosity")),
        outputs=OutputConfig(
            base_url=normalize_optional_text(_optional_str(outputs_payload, "base_url")),
            line_format=_optional_str(outputs_payload, "line_format"),
        ),
    )


def config_to_dict(config: CLIConfig) -> dict[str, Any]:
    # TOML has no null, so unset values are omitted.
    payload: dict[str, Any] = {}
    if config.verbosity is not None:
        payload["verbosity"] = config.verbosity
    outputs: dict[str, str] = {}
    if config.outputs.base_url is not None:
        outputs["base_url"] = config.outputs.base_url
    if config.outputs.line_format is not None:
        outputs["line_format"] = config.outputs.line_format
    if outputs:
        payload["outputs"] = outputs
    return payload
