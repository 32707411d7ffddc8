from copy import deepcopy

import pendulum
from factories import MONDAY, at, plan

from plangrid.layout.normalize import (
    ensure_normalized,
    is_normalized,
    normalize_item,
    normalize_items,
    normalize_options,
    remove_duplicate_items,
)
from plangrid.template.layout_options import get_layout_options_template

NOW = at(MONDAY, 9)


def test_missing_start_uses_now_and_one_hour() -> None:
    normalized = normalize_item(plan("a", None, None), NOW)
    assert normalized["start"] == NOW
    assert normalized["end"] == NOW.add(hours=1)


def test_missing_end_defaults_to_one_hour() -> None:
    normalized = normalize_item(plan("a", at(MONDAY, 14), None), NOW)
    assert normalized["end"] == at(MONDAY, 15)


def test_end_before_start_defaults_to_one_hour() -> None:
    normalized = normalize_item(plan("a", at(MONDAY, 14), at(MONDAY, 13)), NOW)
    assert normalized["end"] == at(MONDAY, 15)


def test_zero_length_item_is_kept() -> None:
    normalized = normalize_item(plan("a", at(MONDAY, 14), at(MONDAY, 14)), NOW)
    assert normalized["end"] == at(MONDAY, 14)


def test_iso_strings_are_parsed() -> None:
    raw = plan("a", None, None)
    raw["start"] = "2024-01-15T10:00:00+00:00"  # type: ignore[typeddict-item]
    raw["end"] = "2024-01-15T11:30:00+00:00"  # type: ignore[typeddict-item]
    normalized = normalize_item(raw, NOW)
    assert normalized["start"] == at(MONDAY, 10)
    assert normalized["end"] == at(MONDAY, 11, 30)


def test_unreadable_start_falls_back_to_now() -> None:
    raw = plan("a", None, None)
    raw["start"] = "not a date"  # type: ignore[typeddict-item]
    normalized = normalize_item(raw, NOW)
    assert normalized["start"] == NOW


def test_input_is_not_modified() -> None:
    raw = plan("a", None, None)
    before = deepcopy(raw)
    normalize_item(raw, NOW)
    assert raw == before


def test_items_share_one_now() -> None:
    first, second = normalize_items([plan("a", None, None), plan("b", None, None)])
    assert first["start"] == second["start"]


def test_remove_duplicate_items_keeps_first() -> None:
    items = [
        plan("a", at(MONDAY, 9), at(MONDAY, 10), title="Standup"),
        plan("b", at(MONDAY, 9), at(MONDAY, 10), title="Standup"),
        plan("c", at(MONDAY, 9), at(MONDAY, 10), title="Review"),
        plan("d", at(MONDAY, 9), at(MONDAY, 11), title="Standup"),
    ]
    assert [item["id"] for item in remove_duplicate_items(items)] == ["a", "c", "d"]


def test_remove_duplicate_items_compares_instants() -> None:
    utc = plan("a", at(MONDAY, 9), at(MONDAY, 10), title="Standup")
    paris = plan(
        "b",
        pendulum.datetime(2024, 1, 15, 10, tz="Europe/Paris"),
        pendulum.datetime(2024, 1, 15, 11, tz="Europe/Paris"),
        title="Standup",
    )
    assert [item["id"] for item in remove_duplicate_items([utc, paris])] == ["a"]


def test_options_default() -> None:
    assert normalize_options(None) == get_layout_options_template()


def test_partial_options_keep_defaults() -> None:
    options = normalize_options({"max_columns": 4})
    assert options["max_columns"] == 4
    assert options["hour_height"] == 60
    assert options["single_column_margin_percent"] == 5


def test_invalid_options_fall_back() -> None:
    options = normalize_options(
        {
            "max_columns": 0,
            "day_start_hour": 20,
            "day_end_hour": 8,
            "hour_height": -1,
            "min_width_percent": 0,
        }
    )
    assert options["max_columns"] == 2
    assert options["day_start_hour"] == 0
    assert options["day_end_hour"] == 24
    assert options["hour_height"] == 60
    assert options["min_width_percent"] == 45


def test_breakpoints_are_sorted() -> None:
    options = normalize_options({"reflow_breakpoints": [[800, 4], [400, 2], [500, 0]]})
    assert options["reflow_breakpoints"] == [[400, 2], [800, 4]]


def test_ensure_normalized_keeps_usable_items() -> None:
    usable = plan("a", at(MONDAY, 9), at(MONDAY, 10))
    raw = plan("b", None, None)

    kept, filled = ensure_normalized([usable, raw], NOW)

    assert kept is usable
    assert is_normalized(filled)
    assert filled["start"] == NOW
    assert not is_normalized(raw)
