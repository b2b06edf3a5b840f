[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2025"
version = "1.0.0"
description = "Solutions to the Advent of Code 2025 puzzles, days 1 to 6"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2025"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2025 = "aoc2025.cli:main"
aoc2025-day01 = "aoc2025.day01:main"
aoc2025-day02 = "aoc2025.day02:main"
aoc2025-day03 = "aoc2025.day03:main"
aoc2025-day04 = "aoc2025.day04:main"
aoc2025-day05 = "aoc2025.day05:main"
aoc2025-day06 = "aoc2025.day06:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2025"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
