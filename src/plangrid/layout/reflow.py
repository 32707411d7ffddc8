# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from plangrid.layout.normalize import normalize_options
from plangrid.model.layout import LayoutBox, LayoutedItem
from plangrid.model.layout_options import LayoutOptions

logger = logging.getLogger(__name__)


def max_columns_for_width(
    container_width: float, options: Optional[LayoutOptions] = None
) -> int:
    """
    Number of side-by-side lanes a container of this width can show.

    The first breakpoint whose bound exceeds the width decides; wider
    containers are only limited by max_columns, which also caps every
    breakpoint.
    """
    options = normalize_options(options)
    for bound, columns in options["reflow_breakpoints"]:
        if container_width < bound:
            return min(columns, options["max_columns"])
    return options["max_columns"]


def reflow_box(
    box: LayoutBox, container_width: float, options: Optional[LayoutOptions] = None
) -> LayoutBox:
    """
    Compress a box laid out for more lanes than the container can show.

    Reflow only ever reduces total_columns. Boxes that already fit are
    returned as an unchanged copy.
    """
    options = normalize_options(options)
    allowed = max_columns_for_width(container_width, options)
    if box["total_columns"] <= allowed:
        return {**box}

    logger.debug(
        "reflowing box from %d to %d columns for width %s",
        box["total_columns"],
        allowed,
        container_width,
    )
    scale = allowed / box["total_columns"]
    column = min(box["column"], allowed - 1)
    left = column * (100 / allowed) + options["column_margin_percent"] / 2
    width = max(box["width_percent"] * scale, options["min_width_percent"])
    width = min(width, 100 - left)

    return {
        **box,
        "column": column,
        "total_columns": allowed,
        "width_percent": width,
        "left_percent": left,
    }


def reflow_layout(
    layouted_items: list[LayoutedItem],
    container_width: float,
    options: Optional[LayoutOptions] = None,
) -> list[LayoutedItem]:
    return [
        {
            **layouted_item,
            "layout": reflow_box(layouted_item["layout"], container_width, options),
        }
        for layouted_item in layouted_items
    ]
