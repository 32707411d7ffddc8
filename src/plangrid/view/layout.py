# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from plangrid.color import item_style
from plangrid.model.layout import LayoutedDay, LayoutedItem
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.time import (
    date_to_display_str,
    datetime_to_display_local_datetime_str_optional,
    datetime_to_display_local_time_str,
)
from plangrid.view.header import header


def _layout_table(layouted_items: list[LayoutedItem]) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("title")
    table.add_column("time")
    table.add_column("segment")
    table.add_column("column", justify="right")
    table.add_column("top", justify="right")
    table.add_column("height", justify="right")
    table.add_column("left %", justify="right")
    table.add_column("width %", justify="right")
    table.add_column("z", justify="right")

    for layouted_item in layouted_items:
        item = layouted_item["item"]
        layout = layouted_item["layout"]
        segment = layouted_item["segment"]
        style = item_style(item)

        time_range = ""
        if item["start"] is not None and item["end"] is not None:
            time_range = (
                f"{datetime_to_display_local_time_str(item['start'])}"
                f"-{datetime_to_display_local_time_str(item['end'])}"
            )

        table.add_row(
            Text(item["title"] or "[no title]", style=style),
            time_range,
            segment["segment_type"] if segment is not None else "",
            f"{layout['column']}/{layout['total_columns']}",
            f"{layout['top']:.0f}",
            f"{layout['height']:.0f}",
            f"{layout['left_percent']:.1f}",
            f"{layout['width_percent']:.1f}",
            str(layout["z_index"]),
        )

    return table


def layout_days_view(
    report_name: str, layouted_days: list[LayoutedDay], sub_header: str
) -> None:
    """
    Display the computed layout metadata of each visible day.

    Args:
        report_name: The name of the report
        layouted_days: The days produced by layout_visible_days
        sub_header: Description of the displayed range
    """
    header(report_name, sub_header)

    console = Console()
    for layouted_day in layouted_days:
        console.print(f"\n[bold]{date_to_display_str(layouted_day['date'])}[/bold]")
        if not layouted_day["items"]:
            console.print("[dim]  no plans[/dim]")
            continue
        console.print(_layout_table(layouted_day["items"]))


def agenda_view(report_name: str, items: list[ScheduledItem]) -> None:
    """Display items as a flat list, in the order given."""
    header(report_name)

    table = Table(box=box.SIMPLE)
    table.add_column("title")
    table.add_column("kind")
    table.add_column("start")
    table.add_column("end")

    for item in items:
        style = item_style(item)
        table.add_row(
            Text(item["title"] or "[no title]", style=style),
            item["kind"],
            datetime_to_display_local_datetime_str_optional(item["start"]) or "",
            datetime_to_display_local_datetime_str_optional(item["end"]) or "",
        )

    console = Console()
    console.print(table)
