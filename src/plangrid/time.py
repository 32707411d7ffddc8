# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum

MINUTES_PER_DAY = 24 * 60


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    return cast(pendulum.DateTime, pendulum.parse(date_str)).date()


def coerce_datetime(value: Any) -> Optional[pendulum.DateTime]:
    """
    Coerce a loosely typed timestamp into a pendulum.DateTime.

    Accepts pendulum and stdlib datetimes and ISO-8601 strings. Anything else,
    including strings that do not parse, yields None.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value)
    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value)
        except ValueError:
            return None
        if isinstance(parsed, pendulum.DateTime):
            return parsed
    return None


def minute_of_day(datetime: pendulum.DateTime) -> float:
    """Wall-clock minutes elapsed since midnight, seconds included."""
    return datetime.hour * 60 + datetime.minute + datetime.second / 60


def is_weekend(date: pendulum.Date) -> bool:
    return date.isoweekday() in (6, 7)
