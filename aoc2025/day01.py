"""Day 1: counting how often a circular dial lands on or passes zero."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

DIAL_SIZE = 100
START_POSITION = 50


def _parse_rotation(line: str) -> tuple[str, int]:
    direction, distance = line[:1], line[1:]
    return direction, int(distance)


def _rotate(position: int, direction: str, distance: int) -> int:
    if direction == "L":
        return (position - distance) % DIAL_SIZE
    if direction == "R":
        return (position + distance) % DIAL_SIZE
    raise ValueError(f"Invalid direction: {direction}")


def solve_part1(text: str) -> int:
    """Count the rotations that leave the dial pointing at zero."""
    position = START_POSITION
    count = 0
    for line in text.splitlines():
        direction, distance = _parse_rotation(line)
        position = _rotate(position, direction, distance)
        if position == 0:
            count += 1
    return count


def solve_part2(text: str) -> int:
    """Count every click at which the dial points at zero, including mid-rotation."""
    position = START_POSITION
    count = 0
    for line in text.splitlines():
        direction, distance = _parse_rotation(line)
        count += count_zeros(position, distance, direction == "L")
        position = _rotate(position, direction, distance)
    return count


def count_zeros(position: int, distance: int, is_left: bool) -> int:
    """Return how many times a rotation from ``position`` reaches zero."""
    if position == 0:
        first_hit = DIAL_SIZE
    elif is_left:
        first_hit = position
    else:
        first_hit = DIAL_SIZE - position

    if first_hit > distance:
        return 0
    return (distance - first_hit) // DIAL_SIZE + 1


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day01", description="Secret entrance dial.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())