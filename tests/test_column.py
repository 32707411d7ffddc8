from copy import deepcopy

import pytest
from factories import MONDAY, at, plan

from plangrid.layout.column import assign_columns, pack_lanes
from plangrid.layout.group import group_overlapping_items


def _only_group(items, options=None):
    groups = group_overlapping_items(items, options)
    assert len(groups) == 1
    return groups[0]


def test_two_overlapping_items_share_the_width() -> None:
    group = _only_group(
        [
            plan("a", at(MONDAY, 9), at(MONDAY, 10)),
            plan("b", at(MONDAY, 9, 30), at(MONDAY, 10, 30)),
        ]
    )
    _, assignments = assign_columns(group)

    assert [assignment["column"] for assignment in assignments] == [0, 1]
    assert [assignment["total_columns"] for assignment in assignments] == [2, 2]
    assert assignments[0]["width_percent"] == pytest.approx(47)
    assert assignments[1]["width_percent"] == pytest.approx(47)
    assert assignments[0]["left_percent"] == pytest.approx(2)
    assert assignments[1]["left_percent"] == pytest.approx(51)


def test_third_item_stacks_into_last_lane() -> None:
    group = _only_group(
        [
            plan("a", at(MONDAY, 9), at(MONDAY, 11)),
            plan("b", at(MONDAY, 9, 30), at(MONDAY, 10, 30)),
            plan("c", at(MONDAY, 10), at(MONDAY, 12)),
        ]
    )
    laid_out_group, assignments = assign_columns(group)

    assert [assignment["item_id"] for assignment in assignments] == ["a", "b", "c"]
    assert [assignment["column"] for assignment in assignments] == [0, 1, 1]
    assert all(assignment["total_columns"] == 2 for assignment in assignments)
    assert laid_out_group["group_max_columns"] == 2


def test_lane_is_reused_once_free() -> None:
    group = _only_group(
        [
            plan("a", at(MONDAY, 9), at(MONDAY, 10)),
            plan("b", at(MONDAY, 9, 30), at(MONDAY, 10, 30)),
            plan("c", at(MONDAY, 10), at(MONDAY, 11)),
        ]
    )
    _, assignments = assign_columns(group)

    assert [assignment["column"] for assignment in assignments] == [0, 1, 0]


def test_item_reclaims_width_from_idle_lanes() -> None:
    options = {"max_columns": 3}
    group = _only_group(
        [
            plan("a", at(MONDAY, 9), at(MONDAY, 12)),
            plan("b", at(MONDAY, 9), at(MONDAY, 10)),
            plan("c", at(MONDAY, 9), at(MONDAY, 10)),
            plan("d", at(MONDAY, 10, 30), at(MONDAY, 11)),
        ],
        options,
    )
    laid_out_group, assignments = assign_columns(group, options)
    by_id = {assignment["item_id"]: assignment for assignment in assignments}

    assert laid_out_group["group_max_columns"] == 3
    assert by_id["b"]["total_columns"] == 3
    assert by_id["d"]["column"] == 1
    assert by_id["d"]["total_columns"] == 2


def test_lanes_never_hold_overlapping_items() -> None:
    items = [
        plan("a", at(MONDAY, 8), at(MONDAY, 9, 30)),
        plan("b", at(MONDAY, 8, 30), at(MONDAY, 9)),
        plan("c", at(MONDAY, 9), at(MONDAY, 10)),
        plan("d", at(MONDAY, 9, 30), at(MONDAY, 11)),
        plan("e", at(MONDAY, 10), at(MONDAY, 10, 45)),
        plan("f", at(MONDAY, 10, 45), at(MONDAY, 12)),
    ]
    lanes = pack_lanes(items, 2)

    for first_index, first in enumerate(items):
        for second_index in range(first_index + 1, len(items)):
            second = items[second_index]
            if lanes[first_index] == lanes[second_index]:
                assert first["end"] <= second["start"]


def test_lane_count_is_capped() -> None:
    items = [plan(str(index), at(MONDAY, 9), at(MONDAY, 10)) for index in range(5)]

    assert pack_lanes(items, 2) == [0, 1, 1, 1, 1]
    assert max(pack_lanes(items, 3)) == 2


def test_group_is_left_untouched() -> None:
    group = _only_group(
        [
            plan("b", at(MONDAY, 9, 30), at(MONDAY, 10, 30)),
            plan("a", at(MONDAY, 9), at(MONDAY, 10)),
        ]
    )
    before = deepcopy(group)

    laid_out_group, _ = assign_columns(group)

    assert group == before
    assert laid_out_group is not group


def test_empty_group() -> None:
    laid_out_group, assignments = assign_columns(
        {
            "id": "2024-01-15-group-0",
            "date": MONDAY,
            "items": [],
            "group_start": at(MONDAY, 0),
            "group_end": at(MONDAY, 0),
            "group_max_columns": 1,
        }
    )

    assert assignments == []
    assert laid_out_group["group_max_columns"] == 0


def test_three_simultaneous_items() -> None:
    group = _only_group(
        [plan(name, at(MONDAY, 10), at(MONDAY, 11)) for name in ("a", "b", "c")]
    )
    laid_out_group, assignments = assign_columns(group)

    assert [assignment["column"] for assignment in assignments] == [0, 1, 1]
    assert all(assignment["total_columns"] == 2 for assignment in assignments)
    assert laid_out_group["group_max_columns"] == 2


def test_items_without_instants_get_lanes() -> None:
    items = [
        plan("a", at(MONDAY, 9), None),
        plan("b", at(MONDAY, 9, 30), at(MONDAY, 10, 30)),
    ]
    assert pack_lanes(items, 2) == [0, 1]

    _, assignments = assign_columns(
        {
            "id": "2024-01-15-group-0",
            "date": MONDAY,
            "items": items + [plan("c", None, None)],
            "group_start": at(MONDAY, 9),
            "group_end": at(MONDAY, 10, 30),
            "group_max_columns": 2,
        }
    )
    assert len(assignments) == 3
    assert all(1 <= assignment["total_columns"] <= 2 for assignment in assignments)
