# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from wakabox import log
from wakabox.terminal import configuration
from wakabox.terminal.custom_typer import OrderedAliasedTyperGroup
from wakabox.terminal.refresh import note, show, today, watch, yesterday

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="WakaTime box - coding time summaries in your daily notes",
    no_args_is_help=True,
)
app.command(name="today, t")(today)
app.command(name="yesterday, y")(yesterday)
app.command(name="show, s")(show)
app.command(name="note, n")(note)
app.command(name="watch, w")(watch)
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log requests and cache activity"),
    ] = False,
) -> None:
    """
    WakaTime box - coding time summaries in your daily notes

    Global options that apply to all commands.
    """
    if verbose:
        log.set_level("INFO")


def run() -> None:
    app()
