"""Milestone chain state, its URL codec, and the text renderer."""

from .codec import decode, decode_url, encode, encode_query, encode_url
from .models import DEFAULT_LINE_FORMAT, GeneratedId, Milestone, MilestoneId, PositionalId, State
from .renderer import render, resolve_dates
from .store import StateStore

__all__ = [
    "DEFAULT_LINE_FORMAT",
    "GeneratedId",
    "Milestone",
    "MilestoneId",
    "PositionalId",
    "State",
    "StateStore",
    "decode",
    "decode_url",
    "encode",
    "encode_query",
    "encode_url",
    "render",
    "resolve_dates",
]
