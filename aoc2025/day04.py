"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

ROLL = "@"
EMPTY = "."
MAX_NEIGHBOURS = 4

_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _parse_grid(text: str) -> list[list[str]]:
    return [list(line) for line in text.strip().splitlines()]


def count_adjacent_rolls(grid: Sequence[Sequence[str]], row: int, col: int) -> int:
    """Count the rolls in the eight cells around ``(row, col)``."""
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    return sum(
        1
        for dr, dc in _OFFSETS
        if 0 <= row + dr < rows
        and 0 <= col + dc < cols
        and grid[row + dr][col + dc] == ROLL
    )


def find_accessible_rolls(grid: Sequence[Sequence[str]]) -> list[tuple[int, int]]:
    """Return the positions of rolls with fewer than four neighbouring rolls."""
    cols = len(grid[0]) if grid else 0
    return [
        (row, col)
        for row, line in enumerate(grid)
        for col in range(cols)
        if line[col] == ROLL and count_adjacent_rolls(grid, row, col) < MAX_NEIGHBOURS
    ]


def solve_part1(text: str) -> int:
    """Count the rolls that are accessible right away."""
    return len(find_accessible_rolls(_parse_grid(text)))


def solve_part2(text: str) -> int:
    """Repeatedly remove accessible rolls and count how many are removed in total."""
    grid = _parse_grid(text)
    total_removed = 0
    while accessible := find_accessible_rolls(grid):
        for row, col in accessible:
            grid[row][col] = EMPTY
        total_removed += len(accessible)
    return total_removed


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day04", description="Printing department rolls.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())