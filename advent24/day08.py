"""Day 8: antinodes of resonant antennas."""

from collections import defaultdict
from collections.abc import Iterator
from math import gcd

from advent24.day01 import _grid_lines, _solve_cli

Point = tuple[int, int]


def generate_line(
    x: int, y: int, xdiff: int, ydiff: int, max_x: int, max_y: int
) -> list[Point]:
    """Points x + k*xdiff, y + k*ydiff inside [0, max], forwards from k=0 then backwards."""
    if xdiff == 0 and ydiff == 0:
        raise ValueError("a line needs a non-zero step")

    def inside(px: int, py: int) -> bool:
        return 0 <= px <= max_x and 0 <= py <= max_y

    points: list[Point] = []
    for step in (1, -1):
        k = 0 if step == 1 else -1
        while inside(x + xdiff * k, y + ydiff * k):
            points.append((x + xdiff * k, y + ydiff * k))
            k += step
    return points


def _pairs(lines: list[str]) -> Iterator[tuple[Point, Point]]:
    """Each antenna paired with every earlier antenna of the same frequency."""
    seen: defaultdict[str, list[Point]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, ch in enumerate(line):
            if ch == ".":
                continue
            for earlier in seen[ch]:
                yield (row, col), earlier
            seen[ch].append((row, col))


def part1(text: str) -> int:
    """Antinodes at twice the distance on either side of each antenna pair."""
    lines = _grid_lines(text, "map")
    height, width = len(lines), len(lines[0])
    antinodes: set[Point] = set()
    for (row, col), (row0, col0) in _pairs(lines):
        drow, dcol = row - row0, col - col0
        antinodes.add((row + drow, col + dcol))
        antinodes.add((row0 - drow, col0 - dcol))
    return sum(0 <= r < height and 0 <= c < width for r, c in antinodes)


def part2(text: str) -> int:
    """Antinodes at every grid point in line with an antenna pair."""
    lines = _grid_lines(text, "map")
    height, width = len(lines), len(lines[0])
    antinodes: set[Point] = set()
    for (row, col), (row0, col0) in _pairs(lines):
        drow, dcol = row - row0, col - col0
        divisor = gcd(abs(drow), abs(dcol))
        antinodes.update(
            generate_line(
                row, col, drow // divisor, dcol // divisor, height - 1, width - 1
            )
        )
    return len(antinodes)


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 8: resonant collinearity", part1, part2)


if __name__ == "__main__":
    main()