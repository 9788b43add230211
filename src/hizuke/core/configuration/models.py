"""Dataclasses backing the persisted CLI configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    # Address prefix for printed share links; None prints a bare `?query`.
    base_url: str | None = None
    # Template used when a query carries no lineFormat.
    line_format: str | None = None


@dataclass
class CLIConfig:
    verbosity: str | None = None
    outputs: OutputConfig = field(default_factory=OutputConfig)
