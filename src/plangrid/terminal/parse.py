# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from plangrid.time import date_from_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar day given on the command line.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    relative to today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()
    raise typer.BadParameter("Incorrect date format")
