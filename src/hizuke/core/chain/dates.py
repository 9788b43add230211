"""Canonical date text helpers shared by the codec and the renderer."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, timedelta

CANONICAL_DATE_RE = re.compile(r"^(?P<year>[0-9]{4,})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})$")

Clock = Callable[[], date]


def parse_canonical(text: str) -> date:
    """
    Parse `yyyy-MM-dd` text into a date.

    Out-of-range months and days roll over into neighbouring months, so
    `2024-01-32` is 1 February and `2024-03-00` is the last day of February.
    Raises ValueError when the text is not date-shaped or the year cannot be
    represented.
    """
    match = CANONICAL_DATE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Date must use yyyy-MM-dd format (got {text!r}).")

    year = int(match.group("year"))
    month = int(match.group("month"))
    day = int(match.group("day"))

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        first_of_month = date(year, month, 1)
        return add_days(first_of_month, day - 1)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"Date is outside the supported calendar range (got {text!r}).") from error


def format_canonical(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_display(value: date) -> str:
    return f"{value.month:02d}/{value.day:02d}"


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def today_canonical(clock: Clock | None = None) -> str:
    return format_canonical((clock or date.today)())


def is_canonical(text: str | None) -> bool:
    if text is None or CANONICAL_DATE_RE.fullmatch(text) is None:
        return False
    try:
        parse_canonical(text)
    except ValueError:
        return False
    return True


def ensure_canonical(text: str | None, *, clock: Clock | None = None) -> str:
    """Return `text` untouched when it is date-shaped, otherwise today's date."""
    if text is not None and is_canonical(text):
        return text
    return today_canonical(clock)
