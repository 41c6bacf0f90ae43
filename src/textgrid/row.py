"""Cells and rows."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from textgrid.printers import DEFAULT_PRINTER, CellPrinter


@dataclass(frozen=True, slots=True)
class Cell:
    """One value plus the printer and optional fixed width used to show it."""

    value: Any
    printer: CellPrinter = DEFAULT_PRINTER
    width: int | None = None

    def measure(self, row: Row) -> str:
        return self.printer.measure(self.value, row)

    def render(self, width: int, row: Row) -> str:
        return self.printer.render(self.value, width, row)


class Row(Mapping[str, Any]):
    """Read-only view of one table row, mapping column key to cell value.

    Printers receive the row they belong to, so sibling values are available
    as ``row["other"]``. ``row.cell(key)`` exposes the full ``Cell``.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Mapping[str, Cell] | None = None) -> None:
        self._cells: dict[str, Cell] = dict(cells or {})

    def __getitem__(self, key: str) -> Any:
        return self._cells[key].value

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Row({dict(self)!r})"

    def cell(self, key: str) -> Cell | None:
        return self._cells.get(key)

    def _set(self, key: str, cell: Cell) -> None:
        self._cells[key] = cell
