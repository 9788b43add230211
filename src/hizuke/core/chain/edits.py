"""Pure state transitions behind each editing action."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .dates import Clock, format_canonical, parse_canonical, today_canonical
from .ids import new_id
from .models import Milestone, MilestoneId, State

IdFactory = Callable[[], MilestoneId]


def _check_index(state: State, index: int) -> None:
    if not 0 <= index < len(state.milestones):
        if not state.milestones:
            raise IndexError(f"Milestone index {index} is out of range; the chain is empty.")
        raise IndexError(
            f"Milestone index {index} is out of range (0..{len(state.milestones) - 1})."
        )


def _blank_milestone(id_factory: IdFactory) -> Milestone:
    return Milestone(id=id_factory(), name="", duration_days_from_previous_one=0)


def _replace_milestone(state: State, index: int, milestone: Milestone) -> State:
    milestones = list(state.milestones)
    milestones[index] = milestone
    return replace(state, milestones=tuple(milestones))


def insert_first(state: State, *, id_factory: IdFactory = new_id) -> State:
    return replace(state, milestones=(_blank_milestone(id_factory), *state.milestones))


def insert_after(state: State, index: int, *, id_factory: IdFactory = new_id) -> State:
    _check_index(state, index)
    milestones = list(state.milestones)
    milestones.insert(index + 1, _blank_milestone(id_factory))
    return replace(state, milestones=tuple(milestones))


def remove_at(state: State, index: int) -> State:
    _check_index(state, index)
    return replace(state, milestones=state.milestones[:index] + state.milestones[index + 1 :])


def rename(state: State, index: int, name: str) -> State:
    _check_index(state, index)
    return _replace_milestone(state, index, replace(state.milestones[index], name=name))


def set_duration(state: State, index: int, days: int | float) -> State:
    _check_index(state, index)
    return _replace_milestone(
        state,
        index,
        replace(state.milestones[index], duration_days_from_previous_one=days),
    )


def set_line_format(state: State, line_format: str) -> State:
    return replace(state, line_format=line_format)


def set_start_date(state: State, text: str) -> State:
    """Anchor the chain on `text`; rolled-over dates are stored normalized."""
    return replace(state, start_date=format_canonical(parse_canonical(text.strip())))


def reset_start_date(state: State, *, clock: Clock | None = None) -> State:
    return replace(state, start_date=today_canonical(clock))
