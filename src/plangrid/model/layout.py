# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from plangrid.model.entity_id import EntityId
from plangrid.model.scheduled_item import ScheduledItem


class SegmentType:
    START = "start"
    MIDDLE = "middle"
    END = "end"
    FULL = "full"


class DaySegment(TypedDict):
    id: EntityId
    date: pendulum.Date
    segment_start: pendulum.DateTime
    segment_end: pendulum.DateTime
    segment_type: str
    is_partial: bool
    item: ScheduledItem
    original_duration: pendulum.Duration


class OverlapGroup(TypedDict):
    id: str
    date: pendulum.Date
    items: list[ScheduledItem]
    group_start: pendulum.DateTime
    group_end: pendulum.DateTime
    group_max_columns: int


class ColumnAssignment(TypedDict):
    item_id: EntityId
    column: int
    total_columns: int
    width_percent: float
    left_percent: float


class LayoutBox(TypedDict):
    top: float
    height: float
    column: int
    total_columns: int
    width_percent: float
    left_percent: float
    z_index: int


class LayoutedItem(TypedDict):
    item: ScheduledItem
    layout: LayoutBox
    date: pendulum.Date
    segment: Optional[DaySegment]


class LayoutedDay(TypedDict):
    date: pendulum.Date
    day_index: int
    items: list[LayoutedItem]
