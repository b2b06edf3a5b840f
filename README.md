# aoc2025

Solutions to the first six Advent of Code 2025 puzzles. Each day lives in
its own module (`aoc2025.day01` to `aoc2025.day06`) and exposes
`solve_part1(text)` and `solve_part2(text)`, which take the puzzle input as
a string and return the answer as an integer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aoc2025
```

prints the banner `Advent of Code 2025`. Each day has its own command that
reads a puzzle input file and prints the answers to both parts as
`Part 1: ...` and `Part 2: ...`:

```
aoc2025-day01 input.txt
aoc2025-day02 input.txt
aoc2025-day03 input.txt
aoc2025-day04 input.txt
aoc2025-day05 input.txt
aoc2025-day06 input.txt
```

Leave out the file name, or pass `-`, to read the input from standard input:

```
aoc2025-day01 < input.txt
```

No puzzle inputs are included; supply your own.

## Library use

```python
from aoc2025 import day01, day03, day05

day01.solve_part1("L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82")  # 3
day03.max_joltage_k("987654321111111", 2)                           # 98
day05.merge_ranges([(1, 5), (6, 10)])                               # [(1, 10)]
```

| Module  | Puzzle                                   | Helpers                                                   |
|---------|------------------------------------------|-----------------------------------------------------------|
| `day01` | Dial rotations landing on or passing 0   | `count_zeros`                                             |
| `day02` | Sum of IDs made of a repeated pattern    | `parse_range`, `is_doubled`, `is_repeated`                |
| `day03` | Largest joltage from a bank of batteries | `max_joltage_k`                                           |
| `day04` | Paper rolls reachable by a forklift      | `count_adjacent_rolls`, `find_accessible_rolls`           |
| `day05` | Fresh ingredient ID ranges               | `parse_input`, `parse_range`, `is_fresh`, `merge_ranges`  |
| `day06` | Column-wise arithmetic worksheet         | `parse_problems`, `parse_problems_part2`, `solve_problem` |

Malformed input raises `ValueError` with a message naming the problem, for
example `Invalid direction: X`, `Range must contain a dash separator`,
`Bank must have at least 2 batteries, ...` or `Unknown operator: -`.