"""Implementation of the `start` and `format` commands."""

from __future__ import annotations

from functools import partial

import typer

from hizuke.core.chain import edits

from .milestone import RENDER_OPTION, SOURCE_ARGUMENT, apply_edit

DATE_ARGUMENT = typer.Argument(None, metavar="YYYY-MM-DD", help="New start date for the chain.")
TODAY_OPTION = typer.Option(False, "--today", help="Anchor the chain on today's date.")
LINE_FORMAT_ARGUMENT = typer.Argument(
    ...,
    help="Line template; {date} becomes MM/dd and {name} the milestone label.",
)


def register(app: typer.Typer) -> None:
    """Register chain-level edit commands."""

    @app.command("start")
    def set_start(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        date: str | None = DATE_ARGUMENT,
        today: bool = TODAY_OPTION,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        """Change the date the chain is anchored on."""
        if today and date is not None:
            raise typer.BadParameter("Choose either a date or --today, not both.")
        if today:
            apply_edit(source, edits.reset_start_date, show_render=show_render)
            return
        if date is None:
            raise typer.BadParameter("Provide a YYYY-MM-DD date or --today.")
        apply_edit(source, partial(edits.set_start_date, text=date), show_render=show_render)

    @app.command("format")
    def set_format(  # type: ignore[func-returns-value]
        source: str = SOURCE_ARGUMENT,
        line_format: str = LINE_FORMAT_ARGUMENT,
        show_render: bool = RENDER_OPTION,
    ) -> None:
        """Change the per-milestone line template."""
        apply_edit(source, partial(edits.set_line_format, line_format=line_format), show_render=show_render)
