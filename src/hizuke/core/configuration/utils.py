"""Normalization helpers shared by configuration services."""

from __future__ import annotations

from .constants import VERBOSITY_ALIASES, VERBOSITY_PRESETS


def normalize_verbosity_label(value: str | None) -> str | None:
    if value is None:
        return None
    label = value.strip().lower()
    label = VERBOSITY_ALIASES.get(label, label)
    return label if label in VERBOSITY_PRESETS else None


def normalize_optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value if value.strip() else None
