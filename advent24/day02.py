"""Day 2: judging reactor reports."""

from collections.abc import Iterable
from itertools import pairwise

from advent24.day01 import _solve_cli


def parse_reports(text: str) -> list[list[int]]:
    """Return one list of levels per line."""
    return [[int(field) for field in line.split()] for line in text.splitlines()]


def is_safe(levels: Iterable[int]) -> bool:
    """A report is safe if it strictly rises or falls by 1 to 3 at every step."""
    levels = list(levels)
    if not levels:
        raise ValueError("a report needs at least one level")
    diffs = [b - a for a, b in pairwise(levels)]
    return all(0 < d <= 3 for d in diffs) or all(-3 <= d < 0 for d in diffs)


def is_safe_dampened(levels: Iterable[int]) -> bool:
    """Safe once any single level is removed."""
    levels = list(levels)
    return any(is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels)))


def part1(text: str) -> int:
    return sum(is_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    return sum(is_safe_dampened(report) for report in parse_reports(text))


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 2: red-nosed reports", part1, part2)


if __name__ == "__main__":
    main()