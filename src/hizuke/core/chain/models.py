"""Value types describing a milestone chain session."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_LINE_FORMAT = "- [ ] {date} {name}"


@dataclass(frozen=True, slots=True)
class PositionalId:
    """Identity derived from the `milestone[<index>]` key a milestone was decoded from."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class GeneratedId:
    """Identity minted for a milestone inserted during the session."""

    token: str

    def __str__(self) -> str:
        return self.token


MilestoneId = PositionalId | GeneratedId


@dataclass(frozen=True, slots=True)
class Milestone:
    id: MilestoneId
    name: str = ""
    # Ignored for the first milestone of a chain. NaN marks an unparseable value.
    duration_days_from_previous_one: int | float = 0


@dataclass(frozen=True, slots=True)
class State:
    start_date: str
    line_format: str = DEFAULT_LINE_FORMAT
    milestones: tuple[Milestone, ...] = field(default_factory=tuple)

    def equivalent(self, other: State) -> bool:
        """Compare every field except milestone identities."""
        if self.line_format != other.line_format or self.start_date != other.start_date:
            return False
        if len(self.milestones) != len(other.milestones):
            return False
        return all(
            left.name == right.name
            and _same_duration(left.duration_days_from_previous_one, right.duration_days_from_previous_one)
            for left, right in zip(self.milestones, other.milestones)
        )


def _same_duration(left: int | float, right: int | float) -> bool:
    if is_missing_duration(left) or is_missing_duration(right):
        return is_missing_duration(left) and is_missing_duration(right)
    return left == right


def is_missing_duration(value: int | float) -> bool:
    return isinstance(value, float) and math.isnan(value)
