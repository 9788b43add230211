"""Translate chain state to and from the shareable URL query string.

Query-string schema:

    lineFormat              template with {date} and {name} placeholders
    startDate               chain anchor in yyyy-MM-dd form
    milestone[i].name       label of the milestone at position i
    milestone[i].duration   days after position i-1, base-10 integer

Bookmarked URLs depend on these keys; keep them stable.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Literal, NamedTuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .dates import Clock, ensure_canonical
from .models import DEFAULT_LINE_FORMAT, Milestone, PositionalId, State, is_missing_duration

logger = logging.getLogger(__name__)

LINE_FORMAT_KEY = "lineFormat"
START_DATE_KEY = "startDate"
MILESTONE_KEY_RE = re.compile(r"^milestone\[(?P<index>[0-9]+)\]\.(?P<field>name|duration)")
DURATION_PREFIX_RE = re.compile(r"^\s*(?P<digits>[+-]?[0-9]+)")
MISSING_DURATION_TEXT = "NaN"

MilestoneField = Literal["name", "duration"]
QueryPairs = list[tuple[str, str]]
QueryInput = str | Mapping[str, str | Iterable[str]] | Iterable[tuple[str, str]]


class MilestoneEntry(NamedTuple):
    position: int
    field: MilestoneField
    value: str


def _query_pairs(query: QueryInput) -> QueryPairs:
    if isinstance(query, str):
        return parse_qsl(query.removeprefix("?"), keep_blank_values=True)
    if isinstance(query, Mapping):
        pairs: QueryPairs = []
        for key, value in query.items():
            if isinstance(value, str):
                pairs.append((key, value))
            else:
                pairs.extend((key, item) for item in value)
        return pairs
    return [(key, value) for key, value in query]


def _first_values(pairs: QueryPairs) -> dict[str, str]:
    values: dict[str, str] = {}
    for key, value in pairs:
        values.setdefault(key, value)
    return values


def parse_duration(value: str | None) -> int | float:
    """Parse leading base-10 digits like `parseInt`; anything else is NaN."""
    if value is None:
        return math.nan
    match = DURATION_PREFIX_RE.match(value)
    if match is None:
        return math.nan
    return int(match.group("digits"))


def format_duration(value: int | float) -> str:
    if is_missing_duration(value):
        return MISSING_DURATION_TEXT
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def collect_milestone_entries(values: Mapping[str, str]) -> list[MilestoneEntry]:
    entries: list[MilestoneEntry] = []
    for key, value in values.items():
        match = MILESTONE_KEY_RE.match(key)
        if match is None:
            continue
        field: MilestoneField = "name" if match.group("field") == "name" else "duration"
        entries.append(MilestoneEntry(int(match.group("index")), field, value))
    return entries


def fold_milestone_entries(entries: Iterable[MilestoneEntry]) -> tuple[Milestone, ...]:
    """
    Fold `(index, field, value)` entries into a dense, index-ordered tuple.

    Missing indices are dropped from the sequence and reported; entries keep
    their relative order.
    """
    grouped: dict[int, dict[MilestoneField, str]] = {}
    for entry in entries:
        grouped.setdefault(entry.position, {}).setdefault(entry.field, entry.value)

    milestones: list[Milestone] = []
    expected = 0
    for index in sorted(grouped):
        if index != expected:
            logger.warning(
                "Query skips milestone indices %d..%d; compacting %d later milestone(s).",
                expected,
                index - 1,
                len(grouped) - len(milestones),
            )
        expected = index + 1
        fields = grouped[index]
        milestones.append(
            Milestone(
                id=PositionalId(index),
                name=fields.get("name", ""),
                duration_days_from_previous_one=parse_duration(fields.get("duration")),
            )
        )
    return tuple(milestones)


def decode(
    query: QueryInput,
    *,
    default_line_format: str = DEFAULT_LINE_FORMAT,
    clock: Clock | None = None,
) -> State:
    """Rebuild a State from query parameters; malformed parts fall back instead of raising."""
    values = _first_values(_query_pairs(query))
    start_date = values.get(START_DATE_KEY)
    normalized_start = ensure_canonical(start_date, clock=clock)
    if start_date is not None and start_date != normalized_start:
        logger.info("Replacing malformed startDate %r with %s.", start_date, normalized_start)

    milestones = fold_milestone_entries(collect_milestone_entries(values))
    logger.debug("Decoded %d milestone(s) from query.", len(milestones))
    return State(
        line_format=values.get(LINE_FORMAT_KEY, default_line_format),
        start_date=normalized_start,
        milestones=milestones,
    )


def encode(state: State) -> QueryPairs:
    pairs: QueryPairs = [
        (LINE_FORMAT_KEY, state.line_format),
        (START_DATE_KEY, state.start_date),
    ]
    for position, milestone in enumerate(state.milestones):
        pairs.append((f"milestone[{position}].name", milestone.name))
        pairs.append((f"milestone[{position}].duration", format_duration(milestone.duration_days_from_previous_one)))
    return pairs


def encode_query(state: State) -> str:
    return urlencode(encode(state))


def query_from_url(text: str) -> str:
    """Return the query part of a URL, or `text` itself when it is a bare query string."""
    prefix, separator, rest = text.partition("?")
    # A "?" after the first "=" belongs to a value, not to a URL.
    if separator and "=" not in prefix:
        return rest.split("#", 1)[0]
    if "=" in text:
        return text
    return ""


def decode_url(
    url: str,
    *,
    default_line_format: str = DEFAULT_LINE_FORMAT,
    clock: Clock | None = None,
) -> State:
    return decode(query_from_url(url), default_line_format=default_line_format, clock=clock)


def build_url(pairs: QueryPairs, base_url: str | None = None) -> str:
    query = urlencode(pairs)
    if not base_url:
        return f"?{query}"
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def encode_url(state: State, base_url: str | None = None) -> str:
    return build_url(encode(state), base_url)
