"""Fixed-width plain-text tables.

Cells are added to a pending row with ``cell()`` and committed with
``new_row()``. Every render resolves column widths afresh from the
committed rows, so tables can keep growing between renders::

    t = Table()
    t.cell("name", "ada").cell("age", 36).new_row()
    print(t)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from textgrid.aggregators import Reducer, aggr, format_result
from textgrid.logging import get_logger
from textgrid.printers import CellPrinter, as_printer, fit, stringify
from textgrid.row import Cell, Row
from textgrid.settings import TableSettings
from textgrid.sorting import RowKey, build_sort_keys, sort_rows
from textgrid.widths import resolve_widths

logger = get_logger(__name__)

type TotalFormatter = Callable[[Any, int | None], object]


@dataclass(frozen=True, slots=True)
class Total:
    """A registered column total: how to reduce the column and how to show it."""

    aggregator: Reducer
    formatter: TotalFormatter | None = None

    def compute(self, key: str, rows: Sequence[Row]) -> Any:
        values = [row[key] for row in rows if row.get(key) is not None]
        return self.aggregator(values)


class _TotalPrinter:
    """Printer for one cell of the totals line.

    A custom formatter is called with ``width=None`` while measuring and with
    the resolved width while rendering. Rendered text is fitted to that width
    so a fixed column width also holds on the totals line.
    """

    def __init__(self, total: Total) -> None:
        self._total = total

    def measure(self, value: Any, row: Row) -> str:
        if self._total.formatter is not None:
            return str(self._total.formatter(value, None))
        return format_result(self._total.aggregator, value)

    def render(self, value: Any, width: int, row: Row) -> str:
        if self._total.formatter is not None:
            return fit(str(self._total.formatter(value, width)), width)
        return fit(format_result(self._total.aggregator, value), width)


class Table:
    """Accumulates rows of cells and renders them as aligned text."""

    def __init__(
        self,
        separator: str | None = None,
        *,
        settings: TableSettings | None = None,
    ) -> None:
        self.settings = settings or TableSettings()
        self.separator = self.settings.separator if separator is None else separator
        self._rows: list[Row] = []
        self._pending = Row()
        # dict keeps first-insertion order of column keys.
        self._columns: dict[str, None] = {}
        self._totals: dict[str, Total] = {}

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    def cell(
        self,
        key: str,
        value: Any,
        printer: CellPrinter | Callable[[Any], object] | None = None,
        width: int | None = None,
    ) -> Table:
        """Set ``key`` on the pending row, replacing any earlier value."""
        self._pending._set(key, Cell(value=value, printer=as_printer(printer), width=width))
        self._columns.setdefault(key, None)
        return self

    def new_row(self) -> Table:
        """Commit the pending row and start an empty one."""
        self._rows.append(self._pending)
        self._pending = Row()
        return self

    def sort(self, criteria: Sequence[str] | RowKey | None = None) -> Table:
        """Reorder committed rows in place.

        ``criteria`` lists column keys, optionally suffixed with ``|asc`` or
        ``|des``; earlier keys win and ties keep their current order. With no
        criteria every column is used in column order. A callable is used as
        the sort key over rows.
        """
        if callable(criteria):
            self._rows.sort(key=criteria)
        else:
            keys = build_sort_keys(criteria, self.columns)
            sort_rows(self._rows, keys)
        logger.debug("Sorted table rows.", criteria=criteria, rows=len(self._rows))
        return self

    def total(
        self,
        key: str,
        aggregator: Reducer | None = None,
        formatter: TotalFormatter | None = None,
    ) -> Table:
        """Show an aggregate of column ``key`` on the totals line.

        The aggregator defaults to ``aggr.sum`` and receives the column's
        non-``None`` values in row order. Totals are computed on each render
        and are never part of the rows, so sorting leaves them in place.
        """
        self._totals[key] = Total(aggregator=aggregator or aggr.sum, formatter=formatter)
        logger.debug("Registered column total.", column=key)
        return self

    def _totals_row(self) -> Row:
        row = Row()
        for key, total in self._totals.items():
            if key not in self._columns:
                continue
            result = total.compute(key, self._rows)
            row._set(key, Cell(value=result, printer=_TotalPrinter(total)))
        return row

    def _line(self, row: Row, widths: dict[str, int]) -> str:
        parts: list[str] = []
        for key in self._columns:
            cell = row.cell(key)
            width = widths[key]
            parts.append(" " * width if cell is None else cell.render(width, row))
        return self.separator.join(parts)

    def _rule(self, widths: dict[str, int]) -> str:
        return self.separator.join(self.settings.rule_char * widths[key] for key in self._columns)

    def to_string(self) -> str:
        """Header, dash rule and one line per row, plus the totals line if any."""
        if not self._columns:
            return ""
        totals = self._totals_row() or None
        measured = [*self._rows, totals] if totals is not None else self._rows
        widths = resolve_widths(self.columns, measured)

        lines = [
            self.separator.join(fit(key, widths[key]) for key in self._columns),
            self._rule(widths),
        ]
        lines.extend(self._line(row, widths) for row in self._rows)
        if totals is not None:
            if self.settings.total_rule:
                lines.append(self._rule(widths))
            lines.append(self._line(totals, widths))
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.to_string()

    def print(self) -> str:
        """Data rows only: no header, rule or totals, widths ignore headers."""
        if not self._columns:
            return ""
        widths = resolve_widths(self.columns, self._rows, include_header=False)
        return "".join(f"{self._line(row, widths)}\n" for row in self._rows)

    def print_transposed(self, separator: str | None = None) -> str:
        """One line per column: the key followed by each row's raw value."""
        sep = self.separator if separator is None else separator
        return "".join(
            sep.join([key, *(stringify(row.get(key)) for row in self._rows)]) + "\n"
            for key in self._columns
        )
