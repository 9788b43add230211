"""Implementation of the `render` and `encode` commands."""

from __future__ import annotations

import typer

from hizuke.core.chain.codec import encode

from ..bootstrap import bootstrap_runtime
from ..services.session import load_state, print_date_table, print_rendered, print_share_url

SOURCE_ARGUMENT = typer.Argument(
    None,
    help="Share URL or bare query string. Omit to start from an empty chain anchored today.",
)
DATES_OPTION = typer.Option(
    False,
    "--dates",
    help="Also print a table of resolved dates.",
)


def register(app: typer.Typer) -> None:
    """Register the `render` and `encode` commands."""

    @app.command("render")
    def render_chain(  # type: ignore[func-returns-value]
        source: str | None = SOURCE_ARGUMENT,
        dates: bool = DATES_OPTION,
    ) -> None:
        """Print one formatted line per milestone."""
        context = bootstrap_runtime()
        state = load_state(source, context)
        print_rendered(context, state)
        if dates:
            print_date_table(context, state)

    @app.command("encode")
    def encode_chain(  # type: ignore[func-returns-value]
        source: str | None = SOURCE_ARGUMENT,
    ) -> None:
        """Print the normalized share URL for a query."""
        context = bootstrap_runtime()
        print_share_url(context, encode(load_state(source, context)))
