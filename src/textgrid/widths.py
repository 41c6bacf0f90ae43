"""Column width negotiation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from textgrid.row import Row


def resolve_widths(
    columns: Sequence[str],
    rows: Iterable[Row],
    *,
    include_header: bool = True,
) -> dict[str, int]:
    """Compute the display width of every column.

    Each column is as wide as its header (when headers are shown) and its
    longest measured cell. A fixed width on any cell overrides the measured
    width, the last one in row order taking precedence; content longer than
    a fixed width is truncated when rendered.
    """
    widths = {key: len(key) if include_header else 0 for key in columns}
    fixed: dict[str, int] = {}
    for row in rows:
        for key in columns:
            cell = row.cell(key)
            if cell is None:
                continue
            widths[key] = max(widths[key], len(cell.measure(row)))
            if cell.width is not None:
                fixed[key] = cell.width
    widths.update(fixed)
    return widths
