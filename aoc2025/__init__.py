"""Solutions to the Advent of Code 2025 puzzles, days 1 to 6, with their commands."""

__version__ = "1.0.0"
__all__ = ["cli", "day01", "day02", "day03", "day04", "day05", "day06"]