"""Day 3: summing uncorrupted multiplications."""

import re

from advent24.day01 import _solve_cli

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_MUL_OR_SWITCH = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|don't|do")


def part1(text: str) -> int:
    """Sum of every mul(a,b) product."""
    return sum(int(m[1]) * int(m[2]) for m in _MUL.finditer(text))


def part2(text: str) -> int:
    """Sum of products, honouring do and don't switches across the whole text."""
    enabled = True
    total = 0
    for match in _MUL_OR_SWITCH.finditer(text):
        token = match[0]
        if token == "do":
            enabled = True
        elif token == "don't":
            enabled = False
        elif enabled:
            total += int(match[1]) * int(match[2])
    return total


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 3: mull it over", part1, part2)


if __name__ == "__main__":
    main()