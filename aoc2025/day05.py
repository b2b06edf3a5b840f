"""Day 5: checking ingredient IDs against ranges of fresh IDs."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u64(text: str, message: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _U64_MAX:
        raise ValueError(message)
    return int(text)


def parse_range(line: str) -> tuple[int, int]:
    """Parse ``"start-end"`` into a ``(start, end)`` pair."""
    start, dash, end = line.partition("-")
    if not dash:
        raise ValueError("Range must contain a dash separator")
    return (
        _parse_u64(start, "Start must be a valid number"),
        _parse_u64(end, "End must be a valid number"),
    )


def parse_input(text: str) -> tuple[list[tuple[int, int]], list[int]]:
    """Split the input into its list of fresh ranges and its list of IDs."""
    sections = text.strip().split("\n\n")
    if len(sections) < 2:
        raise ValueError("Missing IDs section")
    ranges_section, ids_section = sections[0], sections[1]
    ranges = [parse_range(line) for line in ranges_section.splitlines()]
    ids = [_parse_u64(line, "Invalid ID") for line in ids_section.splitlines()]
    return ranges, ids


def is_fresh(item_id: int, ranges: Iterable[tuple[int, int]]) -> bool:
    """True when ``item_id`` falls inside any of the inclusive ranges."""
    return any(start <= item_id <= end for start, end in ranges)


def merge_ranges(ranges: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or adjacent inclusive ranges, sorted by start."""
    ordered = sorted(ranges, key=lambda pair: pair[0])
    if not ordered:
        return []

    merged: list[tuple[int, int]] = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if start <= current_end + 1:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def solve_part1(text: str) -> int:
    """Count the listed IDs that are fresh."""
    ranges, ids = parse_input(text)
    return sum(1 for item_id in ids if is_fresh(item_id, ranges))


def solve_part2(text: str) -> int:
    """Count every ID covered by at least one fresh range."""
    ranges, _ = parse_input(text)
    return sum(end - start + 1 for start, end in merge_ranges(ranges))


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input in a file or on standard input."""
    parser = argparse.ArgumentParser(prog="day05", description="Cafeteria fresh ingredients.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file ('-' for stdin)")
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    print(f"Part 1: {solve_part1(text)}")
    print(f"Part 2: {solve_part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())