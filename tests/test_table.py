from __future__ import annotations

from fairrps.protocol import MoveSet
from fairrps.table import CORNER, build_table, format_table


def test_build_table_matches_rules() -> None:
    grid = build_table(MoveSet(["Rock", "Paper", "Scissors"]))
    assert grid == [
        [CORNER, "Rock", "Paper", "Scissors"],
        ["Rock", "Draw", "Lose", "Win"],
        ["Paper", "Win", "Draw", "Lose"],
        ["Scissors", "Lose", "Win", "Draw"],
    ]


def test_build_table_shape() -> None:
    grid = build_table(MoveSet(list("ABCDEFG")))
    assert len(grid) == 8
    assert all(len(row) == 8 for row in grid)


def test_format_table_pads_columns() -> None:
    text = format_table(build_table(MoveSet(["Rock", "Paper", "Scissors"])))
    lines = text.split("\n")
    assert lines[0] == "PC/User > | Rock | Paper | Scissors"
    assert lines[1] == "Rock      | Draw | Lose  | Win     "
    assert lines[3] == "Scissors  | Lose | Win   | Draw    "
    assert len({len(line) for line in lines}) == 1


def test_format_table_empty() -> None:
    assert format_table([]) == ""
