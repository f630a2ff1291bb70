"""Day 1: comparing two location lists, plus the command-line runner shared by every day."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Callable
from pathlib import Path

Solver = Callable[[str], int]


def _solve_cli(
    argv: list[str] | None, description: str, first: Solver, second: Solver
) -> None:
    """Read a puzzle input file and print the answer of the chosen part."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    solver = first if args.part == 1 else second
    print(f"Solution: {solver(args.input.read_text())}")


def _grid_lines(text: str, what: str = "grid") -> list[str]:
    """Lines of a character grid, refusing an empty one."""
    rows = text.splitlines()
    if not rows:
        raise ValueError(f"empty {what}")
    return rows


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split each line into two integers and return the left and right columns."""
    left: list[int] = []
    right: list[int] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"line {lineno}: expected two numbers, got {line!r}")
        a, b = (int(field) for field in fields)
        left.append(a)
        right.append(b)
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted columns."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left value times its count in the right column."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 1: historian hysteria", part1, part2)


if __name__ == "__main__":
    main()