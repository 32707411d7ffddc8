# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from plangrid.logger import setup_logging
from plangrid.terminal import configuration, view
from plangrid.terminal.custom_typer import OrderedAliasedTyperGroup
from plangrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="plangrid - Calendar layout for your plans in the CLI",
    no_args_is_help=True,
)
app.command(name="day, d")(view.day)
app.command(name="week, w")(view.week)
app.command(name="agenda, a")(view.agenda)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log layout decisions such as default substitutions",
        ),
    ] = False,
) -> None:
    """
    plangrid - Calendar layout for your plans in the CLI

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
