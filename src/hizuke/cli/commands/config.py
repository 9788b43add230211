"""Implementation of the `config` command group."""

from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from hizuke.core.configuration.constants import VERBOSITY_PRESETS
from hizuke.core.configuration.utils import normalize_verbosity_label

from ..bootstrap import bootstrap_runtime

VERBOSITY_ARGUMENT = typer.Argument(..., help=f"One of: {', '.join(VERBOSITY_PRESETS)}.")
BASE_URL_ARGUMENT = typer.Argument(None, help="Address printed in front of share queries.")
LINE_FORMAT_ARGUMENT = typer.Argument(None, help="Template used when a query has no lineFormat.")
CLEAR_OPTION = typer.Option(False, "--clear", help="Remove the stored value.")


def register(app: typer.Typer) -> None:
    """Register the `config` command group."""

    config_app = typer.Typer(help="Inspect and change stored preferences.")
    app.add_typer(config_app, name="config")

    @config_app.command("show")
    def show_config() -> None:  # type: ignore[func-returns-value]
        context = bootstrap_runtime()
        manager = context.config_manager
        table = Table(title="hizuke configuration")
        table.add_column("Setting")
        table.add_column("Value")
        table.add_row("verbosity", manager.get_logging_verbosity() or "[dim]default[/]")
        table.add_row("base_url", Text(manager.get_base_url() or "-"))
        table.add_row("line_format", Text(manager.get_line_format()))
        context.console.print(table)

    @config_app.command("verbosity")
    def set_verbosity(  # type: ignore[func-returns-value]
        verbosity: str = VERBOSITY_ARGUMENT,
    ) -> None:
        context = bootstrap_runtime()
        label = normalize_verbosity_label(verbosity)
        if label is None:
            raise typer.BadParameter(f"Unknown verbosity {verbosity!r}. Choose one of: {', '.join(VERBOSITY_PRESETS)}.")
        context.config_manager.set_logging_verbosity(label)
        context.console.print(f"[green]Verbosity set to[/] {label}")

    @config_app.command("base-url")
    def set_base_url(  # type: ignore[func-returns-value]
        base_url: str | None = BASE_URL_ARGUMENT,
        clear: bool = CLEAR_OPTION,
    ) -> None:
        context = bootstrap_runtime()
        if clear == (base_url is not None):
            raise typer.BadParameter("Provide a base URL or --clear.")
        context.config_manager.set_base_url(base_url)
        if base_url is None:
            context.console.print("[green]Base URL cleared.[/]")
        else:
            context.console.print("[green]Base URL set to[/]", Text(base_url))

    @config_app.command("line-format")
    def set_line_format(  # type: ignore[func-returns-value]
        line_format: str | None = LINE_FORMAT_ARGUMENT,
        clear: bool = CLEAR_OPTION,
    ) -> None:
        context = bootstrap_runtime()
        if clear == (line_format is not None):
            raise typer.BadParameter("Provide a line format or --clear.")
        context.config_manager.set_line_format(line_format)
        if line_format is None:
            context.console.print("[green]Default line format restored.[/]")
        else:
            context.console.print("[green]Default line format set to[/]", Text(line_format))
