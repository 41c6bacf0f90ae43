"""Fixed-width plain-text tables for console output."""

from textgrid.aggregators import Aggregator, aggr
from textgrid.helpers import ColumnSpec, print_array, print_obj
from textgrid.printers import (
    CellPrinter,
    LeftPadder,
    NumberPrinter,
    RightPadder,
    TextPrinter,
    pad_left,
    pad_right,
)
from textgrid.row import Cell, Row
from textgrid.settings import TableSettings, load_settings
from textgrid.table import Table

__all__ = [
    "Aggregator",
    "Cell",
    "CellPrinter",
    "ColumnSpec",
    "LeftPadder",
    "NumberPrinter",
    "RightPadder",
    "Row",
    "Table",
    "TableSettings",
    "TextPrinter",
    "aggr",
    "load_settings",
    "pad_left",
    "pad_right",
    "print_array",
    "print_obj",
]
