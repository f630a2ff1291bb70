"""Day 11: counting stones that change on every blink."""

from __future__ import annotations

import argparse
from functools import cache
from pathlib import Path
from typing import Iterable

BLINKS_PART1 = 25
BLINKS_PART2 = 75


def _change(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> list[int]:
    """The row of stones after one blink."""
    return [new for stone in stones for new in _change(stone)]


@cache
def count_stones(blinks: int, stone: int) -> int:
    """How many stones one stone becomes after the given number of blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(blinks - 1, new) for new in _change(stone))


def _stones(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("no stones given")
    return [int(field) for field in lines[0].split()]


def part1(text: str) -> int:
    """Number of stones after 25 blinks, simulated directly."""
    stones = _stones(text)
    for _ in range(BLINKS_PART1):
        stones = blink(stones)
    return len(stones)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return sum(count_stones(BLINKS_PART2, stone) for stone in _stones(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 11: plutonian pebbles")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    solver = part1 if args.part == 1 else part2
    print(f"Solution: {solver(text)}")


if __name__ == "__main__":
    main()