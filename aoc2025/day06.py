"""Day 6: solving the cephalopods' column-arranged arithmetic worksheet."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")

Problem = tuple[list[int], str]


def _parse_u64(text: str, message: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _U64_MAX:
        raise ValueError(message)
    return int(text)


def solve_problem(numbers: Sequence[int], operator: str) -> int:
    """Add or multiply ``numbers`` according to ``operator``."""
    if operator == "+":
        return sum(numbers)
    if operator == "*":
        return math.prod(numbers)
    raise ValueError(f"Unknown operator: {operator}")


def _non_empty_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line]


def _is_separator(lines: Sequence[str], col: int) -> bool:
    return all(col >= len(line) or line[col] == " " for line in lines)


def _column_spans(lines: Sequence[str]):
    """Yield ``(start, end)`` for each run of columns that are not all blank."""
    width = max(len(line) for line in lines)
    start: int | None = None
    for col in range(width):
        if _is_separator(lines, col):
            if start is not None:
                yield start, col
                start = None
        elif start is None:
            start = col
    if start is not None:
        yield start, width


def _find_operator(operator_row: str, start: int, end: int) -> str:
    for char in operator_row[start:end]:
        if not char.isspace():
            return char
    raise ValueError("No operator found in problem")


def _row_problem(lines: Sequence[str], start: int, end: int) -> Problem:
    *rows, operator_row = lines
    numbers = []
    for line in rows:
        chunk = "".join(char for char in line[start:end] if not char.isspace())
        if chunk:
            numbers.append(_parse_u64(chunk, "Invalid number in problem"))
    return numbers, _find_operator(operator_row, start, end)


def _column_problem(lines: Sequence[str], start: int, end: int) -> Problem:
    *rows, operator_row = lines
    numbers = []
    for col in reversed(range(start, end)):
        digits = "".join(
            line[col] for line in rows if col < len(line) and line[col] in "0123456789"
        )
        if digits:
            numbers.append(_parse_u64(digits, "Invalid number in column"))
    return numbers, _find_operator(operator_row, start, end)


def _parse_with(
    text: str, extract: Callable[[Sequence[str], int, int], Problem]
) -> list[Problem]:
    lines = _non_empty_lines(text)
    if not lines:
        return []
    return [extract(lines, start, end) for start, end in _column_spans(lines)]


def parse_problems(text: str) -> list[Problem]:
    """Read each problem's numbers row by row, top to bottom."""
    return _parse_with(text, _row_problem)


def parse_problems_part2(text: str) -> list[Problem]:
    """Read each problem's numbers column by column, right to left."""
    return _parse_with(text, _column_problem)


def solve_part1(text: str) -> int:
    """Sum the answers of all problems read row-wise."""
    return sum(solve_problem(numbers, op) for numbers, op in parse_problems(text))


def solve_part2(text: str) -> int:
    """Sum the answers of all problems read column-wise."""
    return sum(solve_problem(numbers, op) for numbers, op in parse_problems_part2(text))


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day06", description="Trash compactor worksheet.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())