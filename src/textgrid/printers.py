"""Cell printers: turn raw cell values into column text.

A printer is asked twice per render. ``measure`` returns the natural text
of a value and only feeds width resolution. ``render`` returns the text that
is placed in the cell once the column width is known.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from textgrid.row import Row

ELLIPSIS = "..."


@runtime_checkable
class CellPrinter(Protocol):
    """Two-pass printer contract used by the table renderer."""

    def measure(self, value: Any, row: Row) -> str: ...

    def render(self, value: Any, width: int, row: Row) -> str: ...


def is_number(value: Any) -> bool:
    """True for real numbers and ``Decimal``; booleans do not count."""
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def stringify(value: Any) -> str:
    """Plain text for a cell value; ``None`` becomes an empty string.

    >>> stringify(2.0), stringify(None), stringify("x")
    ('2', '', 'x')
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def pad_right(text: str, width: int, fill: str = " ") -> str:
    """Left-align ``text`` within ``width``, never truncating."""
    return text + fill * (width - len(text)) if width > len(text) else text


def pad_left(text: str, width: int, fill: str = " ") -> str:
    """Right-align ``text`` within ``width``, never truncating.

    >>> pad_left("a", 2)
    ' a'
    """
    return fill * (width - len(text)) + text if width > len(text) else text


def fit(text: str, width: int) -> str:
    """Pad or truncate ``text`` to exactly ``width`` characters.

    >>> fit("A very long value", 14)
    'A very long...'
    """
    if len(text) <= width:
        return pad_right(text, width)
    if width < len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


class TextPrinter:
    """Default printer: stringified value, left-aligned and truncated to fit."""

    def measure(self, value: Any, row: Row) -> str:
        return stringify(value)

    def render(self, value: Any, width: int, row: Row) -> str:
        return fit(self.measure(value, row), width)


class FunctionPrinter(TextPrinter):
    """Adapt a one-argument callable returning the cell text."""

    def __init__(self, fn: Callable[[Any], object]) -> None:
        self._fn = fn

    def measure(self, value: Any, row: Row) -> str:
        return str(self._fn(value))


class NumberPrinter(TextPrinter):
    """Right-aligned numbers, optionally with a fixed count of decimals."""

    def __init__(self, digits: int | None = None) -> None:
        self.digits = digits

    def measure(self, value: Any, row: Row) -> str:
        if value is None:
            return ""
        if not is_number(value):
            raise TypeError(f"{value!r} is not a number")
        if self.digits is None:
            return stringify(value)
        return f"{value:.{self.digits}f}"

    def render(self, value: Any, width: int, row: Row) -> str:
        return pad_left(self.measure(value, row), width)


class LeftPadder(TextPrinter):
    """Right-align the value, filling the gap with ``fill``."""

    def __init__(self, fill: str = " ") -> None:
        self.fill = fill

    def render(self, value: Any, width: int, row: Row) -> str:
        return pad_left(self.measure(value, row), width, self.fill)


class RightPadder(TextPrinter):
    """Left-align the value, filling the gap with ``fill``."""

    def __init__(self, fill: str = " ") -> None:
        self.fill = fill

    def render(self, value: Any, width: int, row: Row) -> str:
        return pad_right(self.measure(value, row), width, self.fill)


DEFAULT_PRINTER = TextPrinter()


def as_printer(printer: CellPrinter | Callable[[Any], object] | None) -> CellPrinter:
    """Normalize a printer argument into a ``CellPrinter``."""
    if printer is None:
        return DEFAULT_PRINTER
    if isinstance(printer, CellPrinter):
        return printer
    if callable(printer):
        return FunctionPrinter(printer)
    raise TypeError(f"Expected a cell printer or callable, got {type(printer).__name__}.")
