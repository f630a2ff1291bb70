"""Day 13: cheapest button presses to win claw machine prizes."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

PRIZE_OFFSET = 10_000_000_000_000

_BUTTON = re.compile(r"Button .: X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")

Machine = tuple[int, int, int, int, int, int]


def _div_toward_zero(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def solve_machine(
    ax: int, ay: int, bx: int, by: int, px: int, py: int
) -> tuple[int, int] | None:
    """Presses of A and B that land exactly on the prize, by Cramer's rule."""
    det = ax * by - bx * ay
    if det == 0:
        return None
    a = _div_toward_zero(px * by - bx * py, det)
    b = _div_toward_zero(ax * py - px * ay, det)
    if ax * a + bx * b == px and ay * a + by * b == py:
        return a, b
    return None


def _match(pattern: re.Pattern[str], line: str, lineno: int) -> tuple[int, int]:
    found = pattern.search(line)
    if found is None:
        raise ValueError(f"line {lineno}: cannot read {line!r}")
    return int(found[1]), int(found[2])


def parse_machines(text: str) -> list[Machine]:
    """One (ax, ay, bx, by, px, py) tuple per prize line."""
    ax = ay = bx = by = 0
    machines: list[Machine] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        if line.startswith("Button A:"):
            ax, ay = _match(_BUTTON, line, lineno)
        elif line.startswith("Button B:"):
            bx, by = _match(_BUTTON, line, lineno)
        elif line.startswith("Prize:"):
            px, py = _match(_PRIZE, line, lineno)
            machines.append((ax, ay, bx, by, px, py))
    return machines


def _cost(machines: list[Machine], offset: int) -> int:
    total = 0
    for ax, ay, bx, by, px, py in machines:
        presses = solve_machine(ax, ay, bx, by, px + offset, py + offset)
        if presses is not None:
            a, b = presses
            total += 3 * a + b
    return total


def part1(text: str) -> int:
    """Tokens needed to win every winnable prize."""
    return _cost(parse_machines(text), 0)


def part2(text: str) -> int:
    """Tokens needed once the prizes are moved far away."""
    return _cost(parse_machines(text), PRIZE_OFFSET)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 13: claw contraption")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    solver = part1 if args.part == 1 else part2
    print(f"Solution: {solver(text)}")


if __name__ == "__main__":
    main()