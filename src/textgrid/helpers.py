"""One-call renderers for lists of records and single records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypedDict

from textgrid.printers import CellPrinter, LeftPadder
from textgrid.settings import TableSettings
from textgrid.table import Table


class ColumnSpec(TypedDict, total=False):
    """Per-field display overrides."""

    name: str
    width: int
    printer: CellPrinter | Callable[[Any], object]


type CellSink = Callable[..., Table]
type RecordFormatter = Callable[[Mapping[str, Any], CellSink], object]


def _spec_formatter(spec: Mapping[str, ColumnSpec]) -> RecordFormatter:
    def _format(item: Mapping[str, Any], cell: CellSink) -> None:
        for field, value in item.items():
            column = spec.get(field, {})
            cell(column.get("name", field), value, column.get("printer"), column.get("width"))

    return _format


def print_array(
    items: Iterable[Mapping[str, Any]],
    spec: Mapping[str, ColumnSpec] | RecordFormatter | None = None,
    *,
    settings: TableSettings | None = None,
) -> str:
    """Render a sequence of records as a full table (header, rule, rows).

    ``spec`` maps field names to ``ColumnSpec`` overrides, or is a callable
    ``(item, cell)`` that fills one row through the table's ``cell`` method.

    >>> print(print_array([{"id": 1, "name": "adam"}]), end="")
    id  name
    --  ----
    1   adam
    """
    table = Table(settings=settings)
    formatter = spec if callable(spec) else _spec_formatter(spec or {})
    for item in items:
        formatter(item, table.cell)
        table.new_row()
    return table.to_string()


def print_obj(obj: Mapping[str, Any], spec: Mapping[str, ColumnSpec] | None = None) -> str:
    """Render one record as right-aligned ``key : value`` lines."""
    spec = spec or {}
    table = Table(" : ")
    key_printer = LeftPadder()
    for field, value in obj.items():
        column = spec.get(field, {})
        table.cell("key", column.get("name", field), key_printer)
        table.cell("value", value, column.get("printer"), column.get("width"))
        table.new_row()
    return table.print()
