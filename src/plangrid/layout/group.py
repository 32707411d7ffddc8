# SPDX-License-Identifier: MIT

from typing import Any, Mapping, Optional, TypedDict, cast

import pendulum

from plangrid.layout.column import pack_lanes
from plangrid.layout.normalize import ensure_normalized, normalize_options
from plangrid.layout.sort import sort_chronologically
from plangrid.model.layout import OverlapGroup
from plangrid.model.layout_options import LayoutOptions
from plangrid.model.scheduled_item import ScheduledItem


class _Cluster(TypedDict):
    positions: list[int]
    start: pendulum.DateTime
    end: pendulum.DateTime


def items_overlap(first: Mapping[str, Any], second: Mapping[str, Any]) -> bool:
    """Half-open interval overlap: touching items do not overlap."""
    return bool(first["start"] < second["end"] and second["start"] < first["end"])


def _cluster_day(items: list[ScheduledItem]) -> list[list[ScheduledItem]]:
    clusters: list[_Cluster] = []

    for position, item in enumerate(items):
        start = cast(pendulum.DateTime, item["start"])
        end = cast(pendulum.DateTime, item["end"])

        matching = [
            cluster
            for cluster in clusters
            if start < cluster["end"] and cluster["start"] < end
        ]
        if not matching:
            clusters.append({"positions": [position], "start": start, "end": end})
            continue

        target = matching[0]
        target["positions"].append(position)
        target["start"] = min(target["start"], start)
        target["end"] = max(target["end"], end)

        # The item bridges every other cluster it touched into the first one
        for absorbed in matching[1:]:
            target["positions"].extend(absorbed["positions"])
            target["start"] = min(target["start"], absorbed["start"])
            target["end"] = max(target["end"], absorbed["end"])
            clusters = [cluster for cluster in clusters if cluster is not absorbed]

    return [
        [items[position] for position in sorted(cluster["positions"])]
        for cluster in clusters
    ]


def group_overlapping_items(
    items: list[ScheduledItem], options: Optional[LayoutOptions] = None
) -> list[OverlapGroup]:
    """
    Partition items into clusters of transitively overlapping items.

    Items are bucketed by the calendar day they start on and clustered per
    day, so a group never spans two days. Items without usable instants are
    normalised first (see normalize_item).

    Args:
        items: The items to group
        options: Layout options (defaults when None)

    Returns:
        Groups ordered by day and then by their first item's start. Items
        inside a group keep chronological order.
    """
    options = normalize_options(options)
    ordered = sort_chronologically(ensure_normalized(items))

    items_by_day: dict[str, list[ScheduledItem]] = {}
    day_of_key: dict[str, pendulum.Date] = {}
    for item in ordered:
        day = cast(pendulum.DateTime, item["start"]).date()
        day_key = day.isoformat()
        day_of_key[day_key] = day
        items_by_day.setdefault(day_key, []).append(item)

    groups: list[OverlapGroup] = []
    for day_key, day_items in items_by_day.items():
        for index, members in enumerate(_cluster_day(day_items)):
            lanes = pack_lanes(members, options["max_columns"])
            groups.append(
                {
                    "id": f"{day_key}-group-{index}",
                    "date": day_of_key[day_key],
                    "items": members,
                    "group_start": min(
                        cast(pendulum.DateTime, member["start"]) for member in members
                    ),
                    "group_end": max(
                        cast(pendulum.DateTime, member["end"]) for member in members
                    ),
                    "group_max_columns": min(options["max_columns"], max(lanes) + 1),
                }
            )

    return groups
