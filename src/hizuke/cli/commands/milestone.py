"""Implementation of the `milestone` command group."""

from __future__ import annotations

from functools import partial

import typer

from hizuke.core.chain import edits
from hizuke.core.chain.models import State
from hizuke.core.chain.store import StateEdit

from ..bootstrap import bootstrap_runtime
from ..services.session import run_edit

SOURCE_ARGUMENT = typer.Argument(..., help="Share URL or bare query string to edit.")
INDEX_ARGUMENT = typer.Argument(..., min=0, help="Zero-based milestone position.")
NAME_ARGUMENT = typer.Argument(..., help="New milestone label (may be empty).")
DAYS_ARGUMENT = typer.Argument(
    ...,
    help="Days after the previous milestone. Put -- before the arguments to pass a negative value.",
)
AFTER_OPTION = typer.Option(
    None,
    "--after",
    min=0,
    help="Insert after this position instead of at the head of the chain.",
)
NAME_OPTION = typer.Option(None, "--name", help="Label for the inserted milestone.")
DURATION_OPTION = typer.Option(
    None,
    "--duration",
    help="Days after the previous milestone for the inserted milestone.",
)
RENDER_OPTION = typer.Option(
    False,
    "--render/--no-render",
    help="Print the rendered text after the new share URL.",
)


def apply_edit(source: str, edit: StateEdit, *, show_render: bool) -> None:
    context = bootstrap_runtime()
    try:
        run_edit(source, edit, context, show_render=show_render)
    except (ValueError, IndexError) as error:
        raise typer.BadParameter(str(error)) from error


def _insert(state: State, *, after: int | None, name: str | None, duration: int | None) -> State:
    if after is None:
        position = 0
        updated = edits.insert_first(state)
    else:
        position = after + 1
        updated = edits.insert_after(state, after)
    if name is not None:
        updated = edits.rename(updated, position, name)
    if duration is not None:
        updated = edits.set_duration(updated, position, duration)
    return updated


def register(app: typer.Typer) -> None:
    """Register the `milestone` command group."""

    milestone_app = typer.Typer(help="Insert, remove and edit milestones of a shared chain.")
    app.add_typer(milestone_app, name="milestone")

    @milestone_app.command("add")
    def add_milestone(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        after: int | None = AFTER_OPTION,
        name: str | None = NAME_OPTION,
        duration: int | None = DURATION_OPTION,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        """Insert a blank milestone at the head, or after --after."""
        apply_edit(
            source,
            partial(_insert, after=after, name=name, duration=duration),
            show_render=show_render,
        )

    @milestone_app.command("remove")
    def remove_milestone(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        index: int = INDEX_ARGUMENT,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        apply_edit(source, partial(edits.remove_at, index=index), show_render=show_render)

    @milestone_app.command("rename")
    def rename_milestone(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        index: int = INDEX_ARGUMENT,
        name: str = NAME_ARGUMENT,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        apply_edit(source, partial(edits.rename, index=index, name=name), show_render=show_render)

    @milestone_app.command("duration")
    def set_milestone_duration(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        index: int = INDEX_ARGUMENT,
        days: int = DAYS_ARGUMENT,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        apply_edit(source, partial(edits.set_duration, index=index, days=days), show_render=show_render)
