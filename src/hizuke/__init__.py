"""Resolve chains of relative day offsets into dated checklists shareable by URL."""

__version__ = "0.1.0"
