import pytest

from advent24.day10 import part1, part2, trailhead_rating, trailhead_score

STRAIGHT = ["0123456789"]

FORK = ["01", "12", ".3", ".4", ".5", ".6", ".7", ".8", ".9"]


def test_single_trail():
    assert trailhead_score(STRAIGHT, 0, 0) == 1
    assert trailhead_rating(STRAIGHT, 0, 0) == 1


def test_two_trails_to_one_summit():
    assert trailhead_score(FORK, 0, 0) == 1
    assert trailhead_rating(FORK, 0, 0) == 2


@pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (-1, 0), (0, 10), (5, 5)])
def test_non_trailheads_score_nothing(row, col):
    assert trailhead_score(STRAIGHT, row, col) == 0
    assert trailhead_rating(STRAIGHT, row, col) == 0


def test_separate_trails_each_count():
    text = "0123456789\n..........\n9876543210\n"
    assert part1(text) == text.count("0")
    assert part2(text) == text.count("0")


def test_rating_never_below_score():
    text = "\n".join(FORK)
    assert part2(text) >= part1(text)
    assert part2(text) == trailhead_rating(FORK, 0, 0)


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        part1("")