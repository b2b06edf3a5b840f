"""Entry point that announces the puzzle collection."""

from __future__ import annotations

import argparse
import sys

BANNER = "Advent of Code 2025"


def main(argv: list[str] | None = None) -> int:
    """Print the collection banner."""
    parser = argparse.ArgumentParser(prog="aoc2025", description=BANNER)
    parser.parse_args(argv)
    print(BANNER)
    return 0


if __name__ == "__main__":
    sys.exit(main())