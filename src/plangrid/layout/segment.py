# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, cast

import pendulum

from plangrid.layout.normalize import ensure_normalized
from plangrid.model.layout import DaySegment, SegmentType
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.time import is_weekend


def last_calendar_day(item: ScheduledItem) -> pendulum.Date:
    """
    The calendar day the item ends on.

    An end exactly at midnight closes the previous day rather than opening a
    new, empty one.
    """
    (item,) = ensure_normalized([item])
    start = cast(pendulum.DateTime, item["start"])
    end = cast(pendulum.DateTime, item["end"])
    end_day = end.date()
    if end == end.start_of("day") and end_day > start.date():
        return end_day.subtract(days=1)
    return end_day


def is_multi_day(item: ScheduledItem) -> bool:
    (item,) = ensure_normalized([item])
    start = cast(pendulum.DateTime, item["start"])
    return last_calendar_day(item) > start.date()


def segment_id(item: ScheduledItem, date: pendulum.Date) -> str:
    return f"{item['id']}-segment-{date.isoformat()}"


def segment_item(
    item: ScheduledItem,
    visible_days: Optional[Iterable[pendulum.Date]] = None,
    show_weekends: bool = True,
) -> list[DaySegment]:
    """
    Split an item into one segment per calendar day it touches.

    An item without usable instants is normalised first (see normalize_item);
    its segments then refer to the normalised copy.

    Args:
        item: The item to split
        visible_days: When given, only segments on these days are returned
        show_weekends: When False, Saturdays and Sundays produce no segment

    Returns:
        The segments in day order. A single-day item yields one FULL segment
        spanning the whole item; show_weekends does not apply to it. When
        hidden weekend days leave a single segment, it is typed by the real
        bound it holds: START on the start day, END on the end day.
    """
    (item,) = ensure_normalized([item])
    start = cast(pendulum.DateTime, item["start"])
    end = cast(pendulum.DateTime, item["end"])
    original_duration = pendulum.duration(seconds=(end - start).total_seconds())
    first_day = start.date()
    last_day = last_calendar_day(item)

    if last_day <= first_day:
        full_segment: DaySegment = {
            "id": segment_id(item, first_day),
            "date": first_day,
            "segment_start": start,
            "segment_end": end,
            "segment_type": SegmentType.FULL,
            "is_partial": False,
            "item": item,
            "original_duration": original_duration,
        }
        return _only_visible([full_segment], visible_days)

    day_starts: list[pendulum.DateTime] = []
    day_start = start.start_of("day")
    offset = 0
    while day_start.add(days=offset).date() <= last_day:
        current = day_start.add(days=offset)
        offset += 1
        if not show_weekends and is_weekend(current.date()):
            continue
        day_starts.append(current)

    segments: list[DaySegment] = []
    for index, current in enumerate(day_starts):
        current_day = current.date()
        segment_start = start if current_day == first_day else current
        segment_end = (
            end
            if current_day == last_day
            else current.set(hour=23, minute=59, second=59, microsecond=0)
        )

        if len(day_starts) == 1:
            segment_type = (
                SegmentType.START if current_day == first_day else SegmentType.END
            )
        elif index == 0:
            segment_type = SegmentType.START
        elif index == len(day_starts) - 1:
            segment_type = SegmentType.END
        else:
            segment_type = SegmentType.MIDDLE

        segments.append(
            {
                "id": segment_id(item, current_day),
                "date": current_day,
                "segment_start": segment_start,
                "segment_end": segment_end,
                "segment_type": segment_type,
                "is_partial": True,
                "item": item,
                "original_duration": original_duration,
            }
        )

    return _only_visible(segments, visible_days)


def _only_visible(
    segments: list[DaySegment], visible_days: Optional[Iterable[pendulum.Date]]
) -> list[DaySegment]:
    if visible_days is None:
        return segments
    visible = {day.isoformat() for day in visible_days}
    return [segment for segment in segments if segment["date"].isoformat() in visible]


def segment_as_item(segment: DaySegment) -> ScheduledItem:
    """A copy of the segment's item narrowed to the segment's id and bounds."""
    narrowed = cast(ScheduledItem, dict(segment["item"]))
    narrowed["id"] = segment["id"]
    narrowed["start"] = segment["segment_start"]
    narrowed["end"] = segment["segment_end"]
    return narrowed


def visible_days_for_week(
    anchor: pendulum.Date, show_weekends: bool = True
) -> list[pendulum.Date]:
    """The Monday-to-Sunday week containing anchor, weekends optional."""
    monday = anchor.subtract(days=anchor.isoweekday() - 1)
    days = [monday.add(days=offset) for offset in range(7)]
    if not show_weekends:
        days = [day for day in days if not is_weekend(day)]
    return days
