import pytest

from advent24.day15 import main, parse_warehouse, part1, part2, widen

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

PYRAMID_WALLED = """\
##########
#........#
#...#....#
#..OO....#
#...O@...#
#........#
##########

"""

PYRAMID_OPEN = PYRAMID_WALLED.replace("#...#....#", "#........#")


def test_small_example_part1():
    assert part1(SMALL) == 2028


def test_parse_warehouse_splits_map_and_moves():
    grid, moves = parse_warehouse("#@#\n\n<>\n^v\n")
    assert grid == [list("#@#")]
    assert moves == "<>^v"


def test_parse_requires_blank_line():
    with pytest.raises(ValueError):
        parse_warehouse("#@.#\n")


def test_widen_tiles():
    assert widen([list("#.O@#")]) == [list("##..[]@.##")]


def test_widen_rejects_unknown_tile():
    with pytest.raises(ValueError):
        widen([list("#X#")])


def test_unknown_move_raises():
    with pytest.raises(ValueError):
        part1("#####\n#@.O#\n#####\n\nx\n")


def test_missing_robot_raises():
    with pytest.raises(ValueError):
        part1("#####\n#..O#\n#####\n\n<\n")


def test_horizontal_push_against_wall():
    start = "#######\n#@.O..#\n#######\n\n"
    end = "#######\n#...@O#\n#######\n\n"
    assert part1(start + ">>>>>>") == part1(end)
    assert part2(start + ">>>>>>>>>>") == part2(end)


def test_vertical_push_to_bottom():
    start = "#####\n#.@.#\n#.O.#\n#...#\n#...#\n#####\n\n"
    end = "#####\n#...#\n#...#\n#.@.#\n#.O.#\n#####\n\n"
    assert part1(start + "vvvv") == part1(end)
    assert part2(start + "vvvv") == part2(end)


def test_extra_pushes_change_nothing():
    start = "#######\n#@.O..#\n#######\n\n"
    assert part1(start + ">>>") == part1(start + ">>>>>>>>")


def test_blocked_double_push_is_rolled_back():
    assert part2(PYRAMID_WALLED + "<v<<^") == part2(PYRAMID_WALLED + "<v<<")


def test_unblocked_double_push_raises_three_boxes():
    before = part2(PYRAMID_OPEN + "<v<<")
    after = part2(PYRAMID_OPEN + "<v<<^")
    assert before - after == 300


def test_main_prints_solution(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SMALL)
    main([str(path)])
    assert capsys.readouterr().out == "Solution: 2028\n"