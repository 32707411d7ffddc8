# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Hashable, Optional, Sequence

import pendulum

from plangrid.layout.column import assign_columns
from plangrid.layout.geometry import layout_box
from plangrid.layout.group import group_overlapping_items
from plangrid.layout.normalize import normalize_items, normalize_options
from plangrid.layout.reflow import reflow_layout
from plangrid.layout.segment import is_multi_day, segment_as_item, segment_item
from plangrid.model.layout import (
    ColumnAssignment,
    DaySegment,
    LayoutedDay,
    LayoutedItem,
)
from plangrid.model.layout_options import LayoutOptions
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.time import datetime_to_iso_str_optional, is_weekend

DEFAULT_VIEWPORT_BUFFER = 100


def _layout_normalized(
    entries: list[tuple[ScheduledItem, Optional[DaySegment]]],
    options: LayoutOptions,
) -> list[LayoutedItem]:
    items = [item for item, _ in entries]

    assignments: dict[str, ColumnAssignment] = {}
    for group in group_overlapping_items(items, options):
        _, group_assignments = assign_columns(group, options)
        for assignment in group_assignments:
            assignments[assignment["item_id"]] = assignment

    layouted_items: list[LayoutedItem] = []
    for item, segment in entries:
        start: pendulum.DateTime = item["start"]  # type: ignore[assignment]
        layouted_items.append(
            {
                "item": item,
                "layout": layout_box(item, assignments.get(item["id"]), options),
                "date": start.date(),
                "segment": segment,
            }
        )
    return layouted_items


def apply_layout(
    items: list[ScheduledItem],
    options: Optional[LayoutOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[LayoutedItem]:
    """
    Lay out items without splitting them across days.

    Items are grouped per start day. Missing or inverted timestamps are
    replaced with defaults, with `now` standing in for a missing start.

    Returns:
        One laid out item per input item, in input order
    """
    options = normalize_options(options)
    normalized = normalize_items(items, now)
    return _layout_normalized([(item, None) for item in normalized], options)


def apply_responsive_layout(
    items: list[ScheduledItem],
    container_width: float,
    options: Optional[LayoutOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[LayoutedItem]:
    options = normalize_options(options)
    return reflow_layout(apply_layout(items, options, now), container_width, options)


def layout_visible_days(
    items: list[ScheduledItem],
    visible_days: Sequence[pendulum.Date],
    container_width: Optional[float] = None,
    show_weekends: bool = True,
    options: Optional[LayoutOptions] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[LayoutedDay]:
    """
    Lay out every visible day of a calendar view.

    Multi-day items are split into per-day segments first. Items on days that
    are not visible, or on weekend days while weekends are hidden, are left
    out.

    Args:
        items: The items to lay out
        visible_days: The calendar days shown, in display order
        container_width: Day column width in pixels; enables reflow when given
        show_weekends: Whether Saturdays and Sundays are shown
        options: Layout options (defaults when None)
        now: Stand-in for missing starts (defaults to the current time)

    Returns:
        One entry per shown day, with its horizontal index among shown days
    """
    options = normalize_options(options)
    days = [day for day in visible_days if show_weekends or not is_weekend(day)]
    day_keys = {day.isoformat() for day in days}

    entries_by_day: dict[str, list[tuple[ScheduledItem, Optional[DaySegment]]]] = {}
    for item in normalize_items(items, now):
        if is_multi_day(item):
            for segment in segment_item(item, days, show_weekends):
                entries_by_day.setdefault(segment["date"].isoformat(), []).append(
                    (segment_as_item(segment), segment)
                )
            continue

        day_key = item["start"].date().isoformat()  # type: ignore[union-attr]
        if day_key in day_keys:
            entries_by_day.setdefault(day_key, []).append((item, None))

    layouted_days: list[LayoutedDay] = []
    for day_index, day in enumerate(days):
        layouted_items = _layout_normalized(
            entries_by_day.get(day.isoformat(), []), options
        )
        if container_width is not None:
            layouted_items = reflow_layout(layouted_items, container_width, options)
        layouted_days.append(
            {"date": day, "day_index": day_index, "items": layouted_items}
        )
    return layouted_days


def _item_fingerprint(item: ScheduledItem) -> tuple[Any, ...]:
    return (
        item.get("id"),
        item.get("kind"),
        item.get("title"),
        item.get("is_draft"),
        item.get("color"),
        datetime_to_iso_str_optional(item.get("start")),
        datetime_to_iso_str_optional(item.get("end")),
    )


class LayoutMemo:
    """
    Remembers the most recent layout_visible_days result.

    The result is recomputed only when the items, visible days, container
    width, weekend flag or options change. Callers receive copies, so mutating
    a returned layout never leaks into later calls.
    """

    def __init__(self) -> None:
        self._key: Optional[Hashable] = None
        self._layout: Optional[list[LayoutedDay]] = None
        self.computations = 0

    def layout(
        self,
        items: list[ScheduledItem],
        visible_days: Sequence[pendulum.Date],
        container_width: Optional[float] = None,
        show_weekends: bool = True,
        options: Optional[LayoutOptions] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> list[LayoutedDay]:
        normalized_options = normalize_options(options)
        key = (
            tuple(_item_fingerprint(item) for item in items),
            tuple(day.isoformat() for day in visible_days),
            container_width,
            show_weekends,
            tuple(
                (name, repr(value))
                for name, value in sorted(normalized_options.items())
            ),
        )

        if self._layout is None or key != self._key:
            self._layout = layout_visible_days(
                items,
                visible_days,
                container_width,
                show_weekends,
                normalized_options,
                now,
            )
            self._key = key
            self.computations += 1

        return deepcopy(self._layout)

    def clear(self) -> None:
        self._key = None
        self._layout = None


def items_in_viewport(
    layouted_items: list[LayoutedItem],
    scroll_top: float,
    viewport_height: float,
    buffer: float = DEFAULT_VIEWPORT_BUFFER,
) -> list[LayoutedItem]:
    """Keep the items whose box intersects the scrolled viewport plus a buffer."""
    viewport_bottom = scroll_top + viewport_height + buffer
    return [
        layouted_item
        for layouted_item in layouted_items
        if layouted_item["layout"]["top"] + layouted_item["layout"]["height"]
        >= scroll_top
        and layouted_item["layout"]["top"] <= viewport_bottom
    ]


def describe_layout(layouted_items: list[LayoutedItem]) -> str:
    lines = []
    for layouted_item in layouted_items:
        layout = layouted_item["layout"]
        title = layouted_item["item"].get("title") or "[no title]"
        lines.append(
            f"{title}: Column {layout['column']}/{layout['total_columns']}, "
            f"Width: {layout['width_percent']:.1f}%, "
            f"Left: {layout['left_percent']:.1f}%, "
            f"Height: {layout['height']:.0f}px"
        )
    return "\n".join(lines)
