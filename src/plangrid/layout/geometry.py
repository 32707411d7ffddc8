# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

from plangrid.layout.normalize import ensure_normalized, normalize_options
from plangrid.model.layout import ColumnAssignment, LayoutBox
from plangrid.model.layout_options import LayoutOptions
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.time import MINUTES_PER_DAY, minute_of_day


def pixels_per_minute(options: LayoutOptions) -> float:
    displayed_hours = options["day_end_hour"] - options["day_start_hour"]
    displayed_minutes = displayed_hours * 60
    return options["hour_height"] * displayed_hours / displayed_minutes


def column_width_and_left(
    column: int, total_columns: int, options: LayoutOptions
) -> tuple[float, float]:
    """
    Horizontal placement of a lane, as percentages of the day column.

    A lone lane is centred with single_column_margin_percent shared between
    both sides. Side-by-side lanes are separated, and bordered, by
    column_margin_percent.

    Returns:
        (width, left)
    """
    if total_columns <= 1:
        margin = options["single_column_margin_percent"]
        return 100 - margin, margin / 2

    margin = options["column_margin_percent"]
    width = (100 - margin * (total_columns + 1)) / total_columns
    left = margin + column * (width + margin)
    return width, left


def vertical_extent(
    item: ScheduledItem, options: LayoutOptions
) -> tuple[float, float]:
    """
    Top offset and height in pixels of an item within its day column.

    Both ends are wall-clock minutes on the start's day, so a box lines up
    with the hour grid on daylight saving days too. An item running past
    midnight is cut at the bottom of the day.

    Returns:
        (top, height)
    """
    (item,) = ensure_normalized([item])
    start = cast(pendulum.DateTime, item["start"])
    end = cast(pendulum.DateTime, item["end"])
    if start.tzinfo is not None and end.tzinfo is not None:
        end = end.astimezone(start.tzinfo)
    scale = pixels_per_minute(options)

    start_minute = minute_of_day(start)
    if end.date() > start.date():
        end_minute = float(MINUTES_PER_DAY)
    else:
        end_minute = minute_of_day(end)

    top = (start_minute - options["day_start_hour"] * 60) * scale
    height = max((end_minute - start_minute) * scale, options["min_height"])
    return top, height


def layout_box(
    item: ScheduledItem,
    assignment: Optional[ColumnAssignment] = None,
    options: Optional[LayoutOptions] = None,
) -> LayoutBox:
    """
    Map an item and its column assignment to a positioned box.

    Args:
        item: The item to place; missing instants get their defaults
        assignment: The item's column assignment, or None for an item laid out
            on its own
        options: Layout options (defaults when None)

    Returns:
        The box. Later lanes get a higher z_index so they paint on top.
    """
    options = normalize_options(options)
    top, height = vertical_extent(item, options)

    if assignment is None:
        width, left = column_width_and_left(0, 1, options)
        return {
            "top": top,
            "height": height,
            "column": 0,
            "total_columns": 1,
            "width_percent": width,
            "left_percent": left,
            "z_index": 1,
        }

    return {
        "top": top,
        "height": height,
        "column": assignment["column"],
        "total_columns": assignment["total_columns"],
        "width_percent": assignment["width_percent"],
        "left_percent": assignment["left_percent"],
        "z_index": assignment["column"] + 1,
    }
