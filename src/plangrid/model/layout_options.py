# SPDX-License-Identifier: MIT

from typing import TypedDict


class LayoutOptions(TypedDict):
    max_columns: int
    day_start_hour: int
    day_end_hour: int
    hour_height: float
    min_height: float
    column_margin_percent: float
    single_column_margin_percent: float
    min_width_percent: float
    # [upper container width bound in pixels, columns allowed below it]
    reflow_breakpoints: list[list[int]]
