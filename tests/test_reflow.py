from copy import deepcopy

import pytest
from factories import MONDAY, at, plan

from plangrid.layout.geometry import column_width_and_left, layout_box
from plangrid.layout.normalize import normalize_options
from plangrid.layout.reflow import max_columns_for_width, reflow_box, reflow_layout

WIDE_OPTIONS = {"max_columns": 4}


def _box(column: int, total_columns: int, options=None):
    normalized = normalize_options(options)
    width, left = column_width_and_left(column, total_columns, normalized)
    return layout_box(
        plan("a", at(MONDAY, 9), at(MONDAY, 10)),
        {
            "item_id": "a",
            "column": column,
            "total_columns": total_columns,
            "width_percent": width,
            "left_percent": left,
        },
        normalized,
    )


@pytest.mark.parametrize("width", [100, 300, 500, 700, 1200])
def test_default_cap_bounds_every_breakpoint(width: int) -> None:
    assert max_columns_for_width(width) == 2


@pytest.mark.parametrize(
    "width,columns", [(300, 2), (400, 3), (599, 3), (700, 4), (1200, 4)]
)
def test_breakpoints(width: int, columns: int) -> None:
    assert max_columns_for_width(width, WIDE_OPTIONS) == columns


@pytest.mark.parametrize("width", [100, 450, 2000])
def test_default_layout_is_unchanged(width: int) -> None:
    box = _box(1, 2)
    assert reflow_box(box, width) == box


def test_crowded_box_is_compressed() -> None:
    box = _box(3, 4, WIDE_OPTIONS)
    reflowed = reflow_box(box, 300, WIDE_OPTIONS)

    assert reflowed["total_columns"] == 2
    assert reflowed["column"] == 1
    assert reflowed["left_percent"] == pytest.approx(51)
    assert reflowed["width_percent"] == pytest.approx(45)
    assert reflowed["left_percent"] + reflowed["width_percent"] <= 100
    assert reflowed["top"] == box["top"]
    assert reflowed["z_index"] == box["z_index"]


def test_reflow_never_adds_columns() -> None:
    box = _box(0, 1, WIDE_OPTIONS)
    assert reflow_box(box, 5000, WIDE_OPTIONS)["total_columns"] == 1


def test_reflow_layout_leaves_input_alone() -> None:
    layouted_items = [
        {
            "item": plan("a", at(MONDAY, 9), at(MONDAY, 10)),
            "layout": _box(2, 3, WIDE_OPTIONS),
            "date": MONDAY,
            "segment": None,
        }
    ]
    before = deepcopy(layouted_items)

    reflowed = reflow_layout(layouted_items, 300, WIDE_OPTIONS)

    assert layouted_items == before
    assert reflowed[0]["layout"]["total_columns"] == 2
    assert reflowed[0]["item"] == layouted_items[0]["item"]
