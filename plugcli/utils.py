"""Utilities."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["tablify"]


def tablify(rows: Sequence[Sequence[str | None]]) -> str:
    """Render `rows` as a plain text table.

    Every column but the last is padded to its widest cell, columns are
    separated by two spaces and each row ends with a newline.
    Line breaks inside cells are dropped.

    Eg:
        tablify([["foo", "bar"], ["yada", "yada"]]) == "foo   bar\\nyada  yada\\n"
    """
    cleaned = [[(cell or "").replace("\r", "").replace("\n", "") for cell in row] for row in rows]

    widths: list[int] = []
    for row in cleaned:
        for i, cell in enumerate(row):
            if i >= len(widths):
                widths.append(len(cell))
            else:
                widths[i] = max(widths[i], len(cell))

    lines = []
    for row in cleaned:
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row[:-1])] + row[-1:]
        lines.append("  ".join(cells) + "\n")
    return "".join(lines)
