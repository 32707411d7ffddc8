# SPDX-License-Identifier: MIT

from plangrid.model.layout_options import LayoutOptions


def get_layout_options_template() -> LayoutOptions:
    return {
        "max_columns": 2,
        "day_start_hour": 0,
        "day_end_hour": 24,
        "hour_height": 60,
        "min_height": 20,
        "column_margin_percent": 2,
        "single_column_margin_percent": 5,
        "min_width_percent": 45,
        "reflow_breakpoints": [[400, 2], [600, 3], [800, 4]],
    }
