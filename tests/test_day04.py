import pytest

from aoc2025.day04 import (
    count_adjacent_rolls,
    find_accessible_rolls,
    main,
    solve_part1,
    solve_part2,
)

EXAMPLE = """..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@."""


def test_part1_example():
    assert solve_part1(EXAMPLE) == 13


def test_count_adjacent_corner_top_left():
    assert count_adjacent_rolls(["@.", ".."], 0, 0) == 0


def test_count_adjacent_corner_with_neighbors():
    assert count_adjacent_rolls(["@@", "@."], 0, 0) == 2


def test_count_adjacent_center_surrounded():
    assert count_adjacent_rolls(["@@@", "@@@", "@@@"], 1, 1) == 8


def test_count_adjacent_center_no_neighbors():
    assert count_adjacent_rolls(["...", ".@.", "..."], 1, 1) == 0


def test_single_roll_accessible():
    assert solve_part1("@") == 1


def test_all_empty():
    assert solve_part1("...\n...\n...") == 0


def test_roll_with_exactly_three_neighbors():
    assert solve_part1(".@.\n@@.\n...") == 3


def test_roll_with_exactly_four_neighbors():
    assert solve_part1(".@.\n@@@\n.@.") == 4


def test_edge_roll():
    assert count_adjacent_rolls([".@.", "..."], 0, 1) == 0


def test_find_accessible_rolls_excludes_crowded_centre():
    grid = [list(".@."), list("@@@"), list(".@.")]
    assert find_accessible_rolls(grid) == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_find_accessible_rolls_empty_grid():
    assert find_accessible_rolls([]) == []


def test_part2_example():
    assert solve_part2(EXAMPLE) == 43


def test_part2_single_roll():
    assert solve_part2("@") == 1


def test_part2_all_empty():
    assert solve_part2("...\n...\n...") == 0


def test_part2_chain_removal():
    assert solve_part2("@@@@@") == 5


def test_part2_dense_block_partial():
    assert solve_part2("@@@\n@@@\n@@@") == 9


def test_part2_never_less_than_part1():
    assert solve_part2(EXAMPLE) >= solve_part1(EXAMPLE)


@pytest.mark.parametrize("text", ["", "\n\n"])
def test_empty_input(text):
    assert solve_part1(text) == 0
    assert solve_part2(text) == 0


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Part 1: 13\nPart 2: 43\n"