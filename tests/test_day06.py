import pytest

from advent24.day06 import Outcome, find_guard, main, part1, part2, walk

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOPING = ".#..\n...#\n#^..\n..#."


@pytest.mark.parametrize("solver, expected", [(part1, 41), (part2, 6)])
def test_example(solver, expected):
    assert solver(EXAMPLE) == expected


def test_find_guard_locates_caret():
    assert find_guard(EXAMPLE.splitlines()) == (6, 4)


def test_find_guard_missing_raises():
    with pytest.raises(ValueError):
        find_guard(["....", "...."])


@pytest.mark.parametrize(
    "text, outcome",
    [(EXAMPLE, Outcome.EXIT), ("...\n.^.\n...", Outcome.EXIT), (LOOPING, Outcome.LOOP)],
)
def test_walk_outcome(text, outcome):
    grid = text.splitlines()
    assert walk(grid, *find_guard(grid)) is outcome


def test_part1_loop_raises():
    with pytest.raises(ValueError):
        part1(LOOPING)


def test_part1_straight_line_counts_column():
    assert part1("...\n...\n.^.") == 3


def test_main_defaults_to_first_part(tmp_path, monkeypatch, capsys):
    (tmp_path / "input.txt").write_text(EXAMPLE)
    monkeypatch.chdir(tmp_path)
    main([])
    assert capsys.readouterr().out == "Solution: 41\n"