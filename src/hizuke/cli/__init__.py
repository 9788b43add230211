"""Typer application exposing the chain editor on the command line."""

from __future__ import annotations

import typer

from .commands import chain, config, milestone, render

app = typer.Typer(
    name="hizuke",
    help="Turn a start date and day offsets into a dated checklist, round-tripped through a share URL.",
    no_args_is_help=True,
    add_completion=False,
)

for command_module in (render, milestone, chain, config):
    command_module.register(app)

__all__ = ["app"]
