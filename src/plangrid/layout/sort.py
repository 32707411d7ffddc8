# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Mapping, Sequence, TypeVar

# Absent starts sort before every real instant.
_ABSENT_START = (0, 0.0)

ItemT = TypeVar("ItemT", bound=Mapping[str, Any])


def chronological_key(item: Mapping[str, Any]) -> tuple[int, float]:
    start = item.get("start")
    if not isinstance(start, datetime.datetime):
        return _ABSENT_START
    return (1, start.timestamp())


def sort_chronologically(items: Sequence[ItemT]) -> list[ItemT]:
    """
    Return the items ordered by start, earliest first.

    The sort is stable: items with equal starts keep their relative input
    order. Items without a start come first.
    """
    return sorted(items, key=chronological_key)
