"""Resolve a milestone chain to dates and format it as text lines."""

from __future__ import annotations

import logging
from datetime import date

from .dates import add_days, format_display, parse_canonical
from .models import State, is_missing_duration

logger = logging.getLogger(__name__)

DATE_PLACEHOLDER = "{date}"
NAME_PLACEHOLDER = "{name}"
INVALID_DATE_TEXT = "Invalid Date"


def _shift(current: date | None, days: int | float) -> date | None:
    if current is None or is_missing_duration(days):
        return None
    try:
        return add_days(current, int(days))
    except OverflowError:
        return None


def resolve_dates(state: State) -> list[date | None]:
    """
    Resolve every milestone to an absolute date.

    The first milestone sits on the start date; each later one is offset from
    its predecessor. Entries after an unparseable duration resolve to None.
    """
    try:
        current: date | None = parse_canonical(state.start_date)
    except ValueError:
        logger.warning("Start date %r cannot be parsed; dates render as invalid.", state.start_date)
        current = None

    resolved: list[date | None] = []
    for position, milestone in enumerate(state.milestones):
        if position > 0:
            current = _shift(current, milestone.duration_days_from_previous_one)
        resolved.append(current)
    return resolved


def format_line(line_format: str, resolved: date | None, name: str) -> str:
    date_text = format_display(resolved) if resolved is not None else INVALID_DATE_TEXT
    return line_format.replace(DATE_PLACEHOLDER, date_text).replace(NAME_PLACEHOLDER, name)


def render(state: State) -> str:
    lines = [
        format_line(state.line_format, resolved, milestone.name)
        for milestone, resolved in zip(state.milestones, resolve_dates(state))
    ]
    return "\n".join(lines)
