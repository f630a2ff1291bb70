import pytest

from advent24.day11 import blink, count_stones, part1, part2


def test_zero_becomes_one():
    assert blink([0]) == [1]


def test_odd_digit_count_multiplies():
    assert blink([1]) == [2024]


def test_even_digit_count_splits():
    assert blink([10]) == [1, 0]
    assert blink([1000]) == [10, 0]


def test_blink_keeps_order():
    assert blink([0, 10]) == blink([0]) + blink([10])


@pytest.mark.parametrize("stone", [0, 1, 17, 125, 2024, 99])
def test_zero_blinks_leave_one_stone(stone):
    assert count_stones(0, stone) == 1


@pytest.mark.parametrize("blinks", range(9))
def test_count_matches_simulation(blinks):
    stones = [125, 17]
    for _ in range(blinks):
        stones = blink(stones)
    assert len(stones) == count_stones(blinks, 125) + count_stones(blinks, 17)


def test_part1_example():
    assert part1("125 17\n") == 55312


def test_part1_agrees_with_count():
    assert part1("3 0 77") == sum(count_stones(25, s) for s in (3, 0, 77))


def test_part2_agrees_with_count():
    assert part2("125 17") == count_stones(75, 125) + count_stones(75, 17)


def test_part2_exceeds_part1():
    assert part2("125 17") > part1("125 17")


@pytest.mark.parametrize("text", ["", "a b"])
def test_bad_input_rejected(text):
    with pytest.raises(ValueError):
        part1(text)