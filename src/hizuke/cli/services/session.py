"""Glue between command arguments and a one-shot chain editing session."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from hizuke.core.chain.codec import QueryPairs, build_url, decode_url, format_duration
from hizuke.core.chain.dates import format_canonical
from hizuke.core.chain.models import State
from hizuke.core.chain.renderer import INVALID_DATE_TEXT, render, resolve_dates
from hizuke.core.chain.store import StateEdit, StateStore

from ..bootstrap import RuntimeContext


def load_state(source: str | None, context: RuntimeContext) -> State:
    return decode_url(
        source or "",
        default_line_format=context.config_manager.get_line_format(),
    )


def print_plain(context: RuntimeContext, text: str) -> None:
    # User text may contain brackets, so rich markup is disabled.
    context.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_share_url(context: RuntimeContext, query: QueryPairs) -> None:
    print_plain(context, build_url(query, context.config_manager.get_base_url()))


def print_rendered(context: RuntimeContext, state: State) -> None:
    text = render(state)
    if text:
        print_plain(context, text)


def print_date_table(context: RuntimeContext, state: State) -> None:
    table = Table(title=f"Chain from {state.start_date}")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Offset", justify="right")
    table.add_column("Date")
    for position, (milestone, resolved) in enumerate(zip(state.milestones, resolve_dates(state))):
        offset = "-" if position == 0 else format_duration(milestone.duration_days_from_previous_one)
        date_text = format_canonical(resolved) if resolved is not None else INVALID_DATE_TEXT
        table.add_row(str(position), Text(milestone.name), offset, date_text)
    context.console.print(table)


def run_edit(source: str | None, edit: StateEdit, context: RuntimeContext, *, show_render: bool) -> State:
    """Apply `edit` to the decoded state; the store prints the new share URL."""
    store = StateStore(load_state(source, context), sink=lambda query: print_share_url(context, query))
    state = store.update(edit)
    if show_render:
        print_rendered(context, state)
    return state
