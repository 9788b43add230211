"""Domain-specific helpers for configuration management."""

from . import logging, outputs

__all__ = [
    "logging",
    "outputs",
]
