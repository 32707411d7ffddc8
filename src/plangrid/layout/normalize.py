# SPDX-License-Identifier: MIT

import logging
from typing import Any, Mapping, Optional, cast

import pendulum

from plangrid.model.item_kind import ItemKind
from plangrid.model.layout_options import LayoutOptions
from plangrid.model.scheduled_item import ScheduledItem
from plangrid.template.layout_options import get_layout_options_template
from plangrid.time import coerce_datetime, now_local

logger = logging.getLogger(__name__)

DEFAULT_DURATION = pendulum.duration(hours=1)


def normalize_item(
    item: Mapping[str, Any], now: Optional[pendulum.DateTime] = None
) -> ScheduledItem:
    """
    Return a copy of the item with concrete start and end instants.

    A missing or unreadable start becomes `now`. A missing or unreadable end,
    or one that lies before the start, becomes start plus one hour. The input
    item is never modified.
    """
    item_id = str(item.get("id"))
    start = coerce_datetime(item.get("start"))
    end = coerce_datetime(item.get("end"))

    if start is None:
        start = now if now is not None else now_local()
        logger.debug("item %s has no usable start, using %s", item_id, start)
    if end is None or end < start:
        logger.debug("item %s has no usable end, defaulting to one hour", item_id)
        end = start + DEFAULT_DURATION

    normalized = cast(ScheduledItem, dict(item))
    normalized["id"] = item_id
    normalized["kind"] = item.get("kind") or ItemKind.PLAN
    normalized["title"] = item.get("title")
    normalized["is_draft"] = bool(item.get("is_draft", False))
    normalized["start"] = start
    normalized["end"] = end
    return normalized


def normalize_items(
    items: list[ScheduledItem], now: Optional[pendulum.DateTime] = None
) -> list[ScheduledItem]:
    # Resolve "now" once so every defaulted item lands on the same instant
    if now is None:
        now = now_local()
    return [normalize_item(item, now) for item in items]


def is_normalized(item: Mapping[str, Any]) -> bool:
    start = item.get("start")
    end = item.get("end")
    return (
        isinstance(start, pendulum.DateTime)
        and isinstance(end, pendulum.DateTime)
        and start <= end
    )


def ensure_normalized(
    items: list[ScheduledItem], now: Optional[pendulum.DateTime] = None
) -> list[ScheduledItem]:
    """
    Normalise only the items that still lack concrete instants.

    Items that are already usable are passed through as they are, so callers
    keep identity with their own dicts.
    """
    if all(is_normalized(item) for item in items):
        return list(items)
    if now is None:
        now = now_local()
    return [
        item if is_normalized(item) else normalize_item(item, now) for item in items
    ]


def remove_duplicate_items(items: list[ScheduledItem]) -> list[ScheduledItem]:
    """Drop items repeating an earlier item's title, start and end."""
    seen: set[tuple[Any, ...]] = set()
    unique: list[ScheduledItem] = []
    for item in items:
        start = item.get("start")
        end = item.get("end")
        key = (
            item.get("title"),
            start.timestamp() if start is not None else None,
            end.timestamp() if end is not None else None,
        )
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def normalize_options(options: Optional[Mapping[str, Any]] = None) -> LayoutOptions:
    """Fill missing layout options from the defaults and reset invalid ones."""
    defaults = get_layout_options_template()
    if options is None:
        return defaults

    merged = cast(LayoutOptions, {**defaults, **options})

    if not isinstance(merged["max_columns"], int) or merged["max_columns"] < 1:
        logger.debug("invalid max_columns %r", merged["max_columns"])
        merged["max_columns"] = defaults["max_columns"]
    if not (
        0 <= merged["day_start_hour"] < merged["day_end_hour"] <= 24
    ):
        logger.debug(
            "invalid day window %r-%r",
            merged["day_start_hour"],
            merged["day_end_hour"],
        )
        merged["day_start_hour"] = defaults["day_start_hour"]
        merged["day_end_hour"] = defaults["day_end_hour"]
    if merged["hour_height"] <= 0:
        logger.debug("invalid hour_height %r", merged["hour_height"])
        merged["hour_height"] = defaults["hour_height"]
    if merged["min_height"] < 0:
        merged["min_height"] = defaults["min_height"]
    for margin_key in ("column_margin_percent", "single_column_margin_percent"):
        if not 0 <= merged[margin_key] < 50:  # type: ignore[literal-required]
            merged[margin_key] = defaults[margin_key]  # type: ignore[literal-required]
    if not 0 < merged["min_width_percent"] <= 100:
        merged["min_width_percent"] = defaults["min_width_percent"]
    merged["reflow_breakpoints"] = sorted(
        [
            [int(bound), int(columns)]
            for bound, columns in merged["reflow_breakpoints"]
            if columns >= 1
        ]
    )

    return merged
