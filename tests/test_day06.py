import pytest

from aoc2025.day06 import (
    main,
    parse_problems,
    parse_problems_part2,
    solve_part1,
    solve_part2,
    solve_problem,
)

EXAMPLE = "123 328  51 64\n 45 64  387 23\n  6 98  215 314\n*   +   *   +  "


def test_part1_example():
    assert solve_part1(EXAMPLE) == 4277556


def test_parse_problems_example():
    problems = parse_problems(EXAMPLE)
    assert len(problems) == 4
    assert problems[0] == ([123, 45, 6], "*")
    assert problems[1] == ([328, 64, 98], "+")
    assert problems[2] == ([51, 387, 215], "*")
    assert problems[3] == ([64, 23, 314], "+")


def test_solve_problem_multiply():
    assert solve_problem([123, 45, 6], "*") == 33210


def test_solve_problem_add():
    assert solve_problem([328, 64, 98], "+") == 490


def test_single_problem_multiply():
    assert solve_part1("10\n20\n*") == 200


def test_single_problem_add():
    assert solve_part1("10\n20\n+") == 30


def test_single_number():
    assert solve_part1("42\n*") == 42


def test_empty_input():
    assert parse_problems("") == []


def test_unknown_operator():
    with pytest.raises(ValueError, match="Unknown operator"):
        solve_problem([1, 2], "-")


def test_part2_example():
    assert solve_part2(EXAMPLE) == 3263827


def test_parse_problems_part2_example():
    problems = parse_problems_part2(EXAMPLE)
    assert len(problems) == 4
    assert problems[0] == ([356, 24, 1], "*")
    assert problems[1] == ([8, 248, 369], "+")
    assert problems[2] == ([175, 581, 32], "*")
    assert problems[3] == ([4, 431, 623], "+")


def test_part2_single_column():
    assert solve_part2("1\n2\n3\n+") == 123


def test_part2_empty_input():
    assert parse_problems_part2("") == []


def test_missing_operator():
    with pytest.raises(ValueError, match="No operator found in problem"):
        parse_problems("12\n  ")


def test_invalid_number():
    with pytest.raises(ValueError, match="Invalid number in problem"):
        parse_problems("1x\n+")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Part 1: 4277556\nPart 2: 3263827\n"