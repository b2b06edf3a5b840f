"""Day 2: summing product IDs made of repeated digit patterns."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u64(text: str, message: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(message)
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(message)
    return value


def parse_range(text: str) -> range:
    """Parse ``"start-end"`` into an inclusive range of IDs."""
    start, dash, end = text.partition("-")
    if not dash:
        raise ValueError("Range must contain a dash separator")
    first = _parse_u64(start, "Start must be a valid number")
    last = _parse_u64(end, "End must be a valid number")
    return range(first, last + 1)


def _ids(text: str):
    for part in text.strip().split(","):
        yield from parse_range(part)


def is_doubled(n: int) -> bool:
    """True when the decimal digits of ``n`` are one sequence written twice."""
    digits = str(n)
    if len(digits) % 2:
        return False
    mid = len(digits) // 2
    return digits[:mid] == digits[mid:]


def is_repeated(n: int) -> bool:
    """True when the decimal digits of ``n`` are one sequence repeated at least twice."""
    digits = str(n)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def solve_part1(text: str) -> int:
    """Sum the IDs in all ranges that are a digit sequence written twice."""
    return sum(n for n in _ids(text) if is_doubled(n))


def solve_part2(text: str) -> int:
    """Sum the IDs in all ranges that are a digit sequence repeated."""
    return sum(n for n in _ids(text) if is_repeated(n))


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day02", description="Gift shop invalid IDs.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())