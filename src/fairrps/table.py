from __future__ import annotations

from fairrps.protocol import MoveSet, determine_outcome

CORNER = "PC/User >"
SEPARATOR = " | "


def build_table(moves: MoveSet) -> list[list[str]]:
    """Outcome grid: cell (i, j) is the result of move i played against move j."""
    n = len(moves)
    grid: list[list[str]] = [[CORNER, *moves]]
    for i, name in enumerate(moves):
        grid.append([name, *(determine_outcome(i, j, n) for j in range(n))])
    return grid


def format_table(grid: list[list[str]]) -> str:
    if not grid:
        return ""

    widths = [max(len(row[col]) for row in grid) for col in range(len(grid[0]))]
    lines = [
        SEPARATOR.join(cell.ljust(widths[col]) for col, cell in enumerate(row))
        for row in grid
    ]
    return "\n".join(lines)
