"""Row ordering over heterogeneous cell values."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from functools import cmp_to_key
from typing import Any

from textgrid.printers import is_number
from textgrid.row import Row

type RowKey = Callable[[Row], Any]


class SortOrder(StrEnum):
    ASC = "asc"
    DES = "des"


@dataclass(frozen=True, slots=True)
class SortKey:
    column: str
    order: SortOrder = SortOrder.ASC


def parse_criterion(criterion: str) -> SortKey:
    """Parse ``"key"``, ``"key|asc"`` or ``"key|des"``.

    >>> parse_criterion("price | des")
    SortKey(column='price', order=<SortOrder.DES: 'des'>)
    """
    column, sep, direction = criterion.rpartition("|")
    if not sep:
        return SortKey(column=criterion)
    normalized = direction.strip().lower()
    try:
        order = SortOrder(normalized)
    except ValueError as error:
        raise ValueError(
            f"Invalid sort direction {direction.strip()!r} in {criterion!r}: "
            f"expected one of {[o.value for o in SortOrder]}."
        ) from error
    return SortKey(column=column.rstrip(), order=order)


def _missing_rank(row: Row, column: str) -> int:
    if column not in row:
        return 2
    if row[column] is None:
        return 1
    return 0


def compare_values(a: Any, b: Any) -> int:
    if is_number(a) and is_number(b):
        left, right = a, b
    else:
        left, right = str(a), str(b)
    return (left > right) - (left < right)


def compare_rows(a: Row, b: Row, key: SortKey) -> int:
    """Ascending order is value < ``None`` < missing; descending reverses it."""
    rank_a = _missing_rank(a, key.column)
    rank_b = _missing_rank(b, key.column)
    if rank_a or rank_b:
        result = (rank_a > rank_b) - (rank_a < rank_b)
    else:
        result = compare_values(a[key.column], b[key.column])
    return -result if key.order is SortOrder.DES else result


def sort_rows(rows: list[Row], keys: Sequence[SortKey]) -> None:
    """Stable in-place sort; earlier keys take priority over later ones."""

    def _compare(a: Row, b: Row) -> int:
        for key in keys:
            result = compare_rows(a, b, key)
            if result:
                return result
        return 0

    rows.sort(key=cmp_to_key(_compare))


def build_sort_keys(
    criteria: Sequence[str] | None,
    columns: Sequence[str],
) -> list[SortKey]:
    if criteria is None:
        return [SortKey(column=column) for column in columns]
    if isinstance(criteria, str):
        criteria = [criteria]
    return [parse_criterion(criterion) for criterion in criteria]

