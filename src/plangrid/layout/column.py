# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

import pendulum

from plangrid.layout.geometry import column_width_and_left
from plangrid.layout.normalize import ensure_normalized, normalize_options
from plangrid.layout.sort import sort_chronologically
from plangrid.model.layout import ColumnAssignment, OverlapGroup
from plangrid.model.layout_options import LayoutOptions
from plangrid.model.scheduled_item import ScheduledItem

logger = logging.getLogger(__name__)


def pack_lanes(items: list[ScheduledItem], max_columns: int) -> list[int]:
    """
    Greedily give each item the lowest free lane.

    Items must already be in chronological order. A lane is free once its
    last occupant has ended. When every lane is busy the item is stacked into
    the last lane, so no more than max_columns lanes are ever used.

    Returns:
        The lane index of each item, in input order
    """
    items = ensure_normalized(items)
    lane_ends: list[Optional[pendulum.DateTime]] = [None] * max_columns
    lanes: list[int] = []

    for item in items:
        start = cast(pendulum.DateTime, item["start"])
        end = cast(pendulum.DateTime, item["end"])

        lane = next(
            (
                index
                for index, lane_end in enumerate(lane_ends)
                if lane_end is None or lane_end <= start
            ),
            None,
        )
        if lane is None:
            lane = max_columns - 1
            logger.debug(
                "lane cap of %d reached, stacking %s into lane %d",
                max_columns,
                item["id"],
                lane,
            )

        current_end = lane_ends[lane]
        lane_ends[lane] = end if current_end is None else max(current_end, end)
        lanes.append(lane)

    return lanes


def _visible_columns(
    items: list[ScheduledItem], lanes: list[int], index: int, max_columns: int
) -> int:
    """Lanes in use while the item at index is on screen, clamped to the cap."""
    start = cast(pendulum.DateTime, items[index]["start"])
    end = cast(pendulum.DateTime, items[index]["end"])

    highest_lane = lanes[index]
    for other_index, other in enumerate(items):
        if other_index == index:
            continue
        other_start = cast(pendulum.DateTime, other["start"])
        other_end = cast(pendulum.DateTime, other["end"])
        if other_start < end and other_end > start:
            highest_lane = max(highest_lane, lanes[other_index])

    return max(1, min(highest_lane + 1, max_columns))


def assign_columns(
    group: OverlapGroup, options: Optional[LayoutOptions] = None
) -> tuple[OverlapGroup, list[ColumnAssignment]]:
    """
    Assign a lane and a width to every item of an overlap group.

    Args:
        group: The group to lay out, left untouched
        options: Layout options (defaults when None)

    Returns:
        A new group with group_max_columns recomputed, and one assignment per
        item in chronological order
    """
    options = normalize_options(options)
    max_columns = options["max_columns"]

    items = sort_chronologically(ensure_normalized(group["items"]))
    if not items:
        return {**group, "items": [], "group_max_columns": 0}, []

    lanes = pack_lanes(items, max_columns)

    assignments: list[ColumnAssignment] = []
    for index, item in enumerate(items):
        column = lanes[index]
        total_columns = _visible_columns(items, lanes, index, max_columns)
        width, left = column_width_and_left(column, total_columns, options)
        assignments.append(
            {
                "item_id": item["id"],
                "column": column,
                "total_columns": total_columns,
                "width_percent": width,
                "left_percent": left,
            }
        )

    laid_out_group: OverlapGroup = {
        **group,
        "items": items,
        "group_max_columns": min(max_columns, max(lanes) + 1),
    }
    return laid_out_group, assignments
