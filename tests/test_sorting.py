"""Row sorting over mixed, null and missing cell values."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from textgrid import Table
from textgrid.sorting import SortKey, SortOrder, parse_criterion

_MISSING = "<missing>"


def _values(table: Table, key: str) -> list[Any]:
    return [row[key] if key in row else _MISSING for row in table.rows]


def _with_missing_values() -> Table:
    table = Table()
    table.cell("a", 1).new_row()
    table.cell("a", 2).new_row()
    table.cell("a", None).new_row()
    table.new_row()
    return table


def test_descending_puts_missing_then_none_first() -> None:
    table = _with_missing_values()

    table.sort(["a|des"])

    assert _values(table, "a") == [_MISSING, None, 2, 1]


def test_ascending_puts_values_before_none_and_missing() -> None:
    table = _with_missing_values()

    table.sort(["a|des"]).sort(["a"])

    assert _values(table, "a") == [1, 2, None, _MISSING]


def test_repeated_sorts_in_opposite_directions() -> None:
    table = _with_missing_values()

    table.sort(["a|des"]).sort(["a|asc"])

    assert _values(table, "a") == [1, 2, None, _MISSING]


def test_sort_is_stable_across_direction_changes(table: Table) -> None:
    for key, tag in ((1, "a"), (0, "b"), (1, "c"), (0, "d")):
        table.cell("k", key).cell("tag", tag).new_row()

    table.sort(["k"])
    first = _values(table, "tag")
    table.sort(["k|des"]).sort(["k|asc"])

    assert first == ["b", "d", "a", "c"]
    assert _values(table, "tag") == first


def test_earlier_keys_take_priority(table: Table) -> None:
    table.cell("x", 1).cell("y", "b").new_row()
    table.cell("x", 1).cell("y", "a").new_row()
    table.cell("x", 0).cell("y", "c").new_row()

    table.sort(["x", "y|des"])

    assert [(row["x"], row["y"]) for row in table.rows] == [(0, "c"), (1, "b"), (1, "a")]


def test_numbers_compare_numerically_and_others_as_text(table: Table) -> None:
    for value in ("abc", 10, 9):
        table.cell("v", value).new_row()

    table.sort(["v"])

    assert _values(table, "v") == [9, 10, "abc"]


def test_sort_without_criteria_uses_all_columns(table: Table) -> None:
    table.cell("a", 2).cell("b", 1).new_row()
    table.cell("a", 1).cell("b", 2).new_row()
    table.cell("a", 1).cell("b", 1).new_row()

    table.sort()

    assert [(row["a"], row["b"]) for row in table.rows] == [(1, 1), (1, 2), (2, 1)]


def test_sort_accepts_row_key_callable(table: Table) -> None:
    for value in (1, 3, 2):
        table.cell("a", value).new_row()

    table.sort(lambda row: -row["a"])

    assert _values(table, "a") == [3, 2, 1]


def test_sort_reorders_rendered_lines(table: Table) -> None:
    table.cell("a", "x").new_row()
    table.cell("a", "y").new_row()

    table.sort(["a|des"])

    assert table.to_string().splitlines()[2:] == ["y", "x"]


def test_invalid_direction_raises(table: Table) -> None:
    table.cell("a", 1).new_row()

    with pytest.raises(ValueError, match="Invalid sort direction 'up'"):
        table.sort(["a|up"])


@pytest.mark.parametrize(
    ("criterion", "expected"),
    [
        ("price", SortKey("price", SortOrder.ASC)),
        ("price|asc", SortKey("price", SortOrder.ASC)),
        ("price | des", SortKey("price", SortOrder.DES)),
        ("a|b|DES", SortKey("a|b", SortOrder.DES)),
    ],
)
def test_parse_criterion(criterion: str, expected: SortKey) -> None:
    assert parse_criterion(criterion) == expected


def test_decimals_compare_numerically(table: Table) -> None:
    for value in (Decimal("10"), Decimal("9"), Decimal("100")):
        table.cell("price", value).new_row()

    table.sort(["price"])

    assert _values(table, "price") == [Decimal("9"), Decimal("10"), Decimal("100")]


def test_decimals_and_floats_compare_numerically(table: Table) -> None:
    for value in (Decimal("2.5"), 10.0, 3):
        table.cell("n", value).new_row()

    table.sort(["n|des"])

    assert _values(table, "n") == [10.0, 3, Decimal("2.5")]
