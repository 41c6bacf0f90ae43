"""Column aggregators used by table totals."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

from textgrid.printers import stringify

type Reducer = Callable[[Sequence[Any]], Any]


@dataclass(frozen=True, slots=True)
class Aggregator:
    """Named reducer over a column's values with an optional display label."""

    name: str
    reduce: Reducer
    label: str = ""

    def __call__(self, values: Sequence[Any]) -> Any:
        return self.reduce(values)

    def format(self, result: Any) -> str:
        return f"{self.label}{stringify(result)}"


def _avg(values: Sequence[Any]) -> Any:
    if not values:
        return None
    return sum(values) / len(values)


def _min(values: Sequence[Any]) -> Any:
    return min(values) if values else None


def _max(values: Sequence[Any]) -> Any:
    return max(values) if values else None


# Looked up as ``aggr.sum``, ``aggr.avg`` and so on.
aggr = SimpleNamespace(
    sum=Aggregator("sum", sum, "∑ "),
    avg=Aggregator("avg", _avg, "Avg: "),
    min=Aggregator("min", _min, "Min: "),
    max=Aggregator("max", _max, "Max: "),
    count=Aggregator("count", len, "Count: "),
)


def format_result(aggregator: Reducer, result: Any) -> str:
    """Default total text: the aggregator's label (if any) and its result."""
    if isinstance(aggregator, Aggregator):
        return aggregator.format(result)
    return stringify(result)
