from typing import Optional

import pendulum

from plangrid.model.item_kind import ItemKind
from plangrid.model.scheduled_item import ScheduledItem

TZ = "UTC"

# 2024-01-15 is a Monday
MONDAY = pendulum.date(2024, 1, 15)
FRIDAY = pendulum.date(2024, 1, 19)
NEXT_MONDAY = pendulum.date(2024, 1, 22)


def at(day: pendulum.Date, hour: int, minute: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(day.year, day.month, day.day, hour, minute, tz=TZ)


def plan(
    item_id: str,
    start: Optional[pendulum.DateTime],
    end: Optional[pendulum.DateTime],
    title: Optional[str] = None,
    kind: str = ItemKind.PLAN,
    is_draft: bool = False,
) -> ScheduledItem:
    return {
        "id": item_id,
        "kind": kind,
        "title": title if title is not None else item_id,
        "start": start,
        "end": end,
        "is_draft": is_draft,
        "color": None,
    }
