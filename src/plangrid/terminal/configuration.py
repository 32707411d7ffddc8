# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from plangrid import configuration
from plangrid.repository.configuration import CONFIGURATION_REPO
from plangrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()
    layout_options = CONFIGURATION_REPO.get_layout_options()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("show_weekends", _enabled(config["show_weekends"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "container_width",
        str(config["container_width"]) if config["container_width"] else "None",
    )
    table.add_row("max_columns", str(layout_options["max_columns"]))
    table.add_row(
        "day_hours",
        f"{layout_options['day_start_hour']}-{layout_options['day_end_hour']}",
    )
    table.add_row("hour_height", str(layout_options["hour_height"]))
    table.add_row("min_height", str(layout_options["min_height"]))
    table.add_row("min_width_percent", str(layout_options["min_width_percent"]))
    table.add_row(
        "reflow_breakpoints",
        ", ".join(
            f"<{bound}px: {columns}"
            for bound, columns in layout_options["reflow_breakpoints"]
        ),
    )

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show report headers"),
    ] = None,
    show_weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--show-weekends/--hide-weekends",
            help="Show Saturday and Sunday in week layouts",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding plans.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    container_width: Annotated[
        Optional[int],
        typer.Option(
            "--container-width", min=1, help="Default day column width in pixels"
        ),
    ] = None,
    remove_container_width: Annotated[
        bool,
        typer.Option("--remove-container-width", help="Disable reflow by default"),
    ] = False,
    max_columns: Annotated[
        Optional[int],
        typer.Option(
            "--max-columns", min=1, help="Maximum number of side-by-side lanes"
        ),
    ] = None,
    day_start_hour: Annotated[
        Optional[int],
        typer.Option("--day-start-hour", min=0, max=23, help="First displayed hour"),
    ] = None,
    day_end_hour: Annotated[
        Optional[int],
        typer.Option("--day-end-hour", min=1, max=24, help="Hour the display ends"),
    ] = None,
    hour_height: Annotated[
        Optional[float],
        typer.Option("--hour-height", min=1, help="Pixels per displayed hour"),
    ] = None,
    min_height: Annotated[
        Optional[float],
        typer.Option("--min-height", min=0, help="Minimum box height in pixels"),
    ] = None,
    min_width_percent: Annotated[
        Optional[float],
        typer.Option(
            "--min-width-percent",
            min=1,
            max=100,
            help="Narrowest width a reflowed box may shrink to",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    start = day_start_hour
    end = day_end_hour
    if start is not None or end is not None:
        layout_options = CONFIGURATION_REPO.get_layout_options()
        start = start if start is not None else layout_options["day_start_hour"]
        end = end if end is not None else layout_options["day_end_hour"]
        if start >= end:
            raise typer.BadParameter("day start hour must be before day end hour")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        show_weekends=show_weekends,
        data_path=data_path,
        remove_data_path=remove_data_path,
        container_width=container_width,
        remove_container_width=remove_container_width,
        max_columns=max_columns,
        day_start_hour=day_start_hour,
        day_end_hour=day_end_hour,
        hour_height=hour_height,
        min_height=min_height,
        min_width_percent=min_width_percent,
    )
    view()
