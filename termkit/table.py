from __future__ import annotations

from typing import Any, Optional, Sequence

from termkit.width import pad, vlen


def render_table(rows: Sequence[Sequence[Any]], header: Optional[Sequence[Any]] = None) -> str:
    """
    Render rows as an ASCII grid.

    Column widths ignore escape codes, so pre-styled cells line up. A border
    is drawn above the first row, below the header (when given) and below
    the last row:

        +------+-------+---+
        | 1    | 2     | 3 |
        | Test | Value | 0 |
        +------+-------+---+
    """
    data = [[str(cell) for cell in row] for row in rows]
    has_header = bool(header)
    if has_header:
        data.insert(0, [str(cell) for cell in header])
    if not data:
        return ""

    widths: list[int] = []
    for row in data:
        for i, cell in enumerate(row):
            if i == len(widths):
                widths.append(0)
            widths[i] = max(widths[i], vlen(cell))

    border = "+" + "".join("-" * (w + 2) + "+" for w in widths) + "\n"

    lines = [border]
    last = len(data) - 1
    for i, row in enumerate(data):
        cells = [pad(cell, widths[j]) for j, cell in enumerate(row)]
        lines.append("| " + " | ".join(cells) + " |\n")
        if (i == 0 and has_header) or i == last:
            lines.append(border)
    return "".join(lines)
