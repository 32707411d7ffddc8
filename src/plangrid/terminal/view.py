# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from plangrid.layout.normalize import remove_duplicate_items
from plangrid.layout.pipeline import layout_visible_days
from plangrid.layout.segment import visible_days_for_week
from plangrid.layout.sort import sort_chronologically
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.repository.configuration import CONFIGURATION_REPO
from plangrid.repository.plan import PlanRepository
from plangrid.terminal.parse import parse_date
from plangrid.time import date_to_display_str
from plangrid.view.layout import agenda_view, layout_days_view

PlansOption = Annotated[
    Optional[Path],
    typer.Option(
        "--plans",
        "-p",
        help="YAML plan file (defaults to plans.yaml in the data path)",
        exists=True,
        dir_okay=False,
    ),
]
DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="Day to show (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
WidthOption = Annotated[
    Optional[int],
    typer.Option(
        "--width",
        "-w",
        min=1,
        help="Day column width in pixels, used to reflow crowded days",
    ),
]


def _load_plans(plans: Optional[Path]) -> list[ScheduledItem]:
    try:
        return remove_duplicate_items(PlanRepository(plans).get_all_plans())
    except (OSError, ValueError) as e:
        Console(stderr=True).print(f"[red]Could not load plans: {e}[/red]")
        raise typer.Exit(1) from e


def day(
    plans: PlansOption = None,
    date: DateOption = None,
    width: WidthOption = None,
) -> None:
    """Show the layout computed for a single day."""
    config = CONFIGURATION_REPO.get_config()
    if date is None:
        date = pendulum.today("local").date()
    container_width = width if width is not None else config["container_width"]

    layouted_days = layout_visible_days(
        _load_plans(plans),
        [date],
        container_width=container_width,
        options=CONFIGURATION_REPO.get_layout_options(),
    )
    layout_days_view("day", layouted_days, date_to_display_str(date))


def week(
    plans: PlansOption = None,
    date: DateOption = None,
    width: WidthOption = None,
    weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--weekends/--no-weekends",
            help="Show Saturday and Sunday (defaults to the show_weekends setting)",
        ),
    ] = None,
) -> None:
    """Show the layout computed for the week containing a day."""
    config = CONFIGURATION_REPO.get_config()
    if date is None:
        date = pendulum.today("local").date()
    show_weekends = weekends if weekends is not None else config["show_weekends"]
    container_width = width if width is not None else config["container_width"]

    visible_days = visible_days_for_week(date, show_weekends)
    layouted_days = layout_visible_days(
        _load_plans(plans),
        visible_days,
        container_width=container_width,
        show_weekends=show_weekends,
        options=CONFIGURATION_REPO.get_layout_options(),
    )
    layout_days_view(
        "week",
        layouted_days,
        f"{date_to_display_str(visible_days[0])} - "
        f"{date_to_display_str(visible_days[-1])}",
    )


def agenda(plans: PlansOption = None) -> None:
    """List every plan in chronological order; plans without a start come first."""
    agenda_view("agenda", sort_chronologically(_load_plans(plans)))
