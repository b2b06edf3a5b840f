"""Day 3: choosing batteries from each bank for the largest joltage."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_DIGITS = frozenset("0123456789")


def max_joltage_k(bank: str, k: int) -> int:
    """Return the largest number formed by keeping ``k`` digits of ``bank`` in order."""
    n = len(bank)
    if n < k:
        raise ValueError(f"Bank must have at least {k} batteries, got {n}: '{bank}'")

    for char in bank:
        if char not in _DIGITS:
            raise ValueError(f"Invalid character in bank: '{char}'")

    drop = n - k
    stack: list[str] = []
    for digit in bank:
        while stack and drop > 0 and stack[-1] < digit:
            stack.pop()
            drop -= 1
        stack.append(digit)

    kept = stack[:k]
    return int("".join(kept)) if kept else 0


def solve_part1(text: str) -> int:
    """Sum the best two-battery joltage of every bank."""
    return sum(max_joltage_k(bank, 2) for bank in text.strip().splitlines())


def solve_part2(text: str) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return sum(max_joltage_k(bank, 12) for bank in text.strip().splitlines())


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day03", description="Lobby battery joltage.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())