"""Day 6: following the patrolling guard."""

from collections.abc import Sequence
from enum import Enum

from advent24.day01 import _grid_lines, _solve_cli

Grid = Sequence[Sequence[str]]
State = tuple[tuple[int, int], int, int]

_UP = (-1, 0)
_TURN_RIGHT = {(-1, 0): (0, 1), (0, 1): (1, 0), (1, 0): (0, -1), (0, -1): (-1, 0)}


class Outcome(Enum):
    """How a patrol ends."""

    LOOP = "loop"
    EXIT = "exit"


def find_guard(grid: Grid) -> tuple[int, int]:
    """Row and column of the '^' guard."""
    for r, row in enumerate(grid):
        if "^" in row:
            return r, row.index("^")
    raise ValueError("no guard on the map")


def _patrol(
    grid: Grid, row: int, col: int, extra: tuple[int, int] | None = None
) -> tuple[Outcome, set[State]]:
    height, width = len(grid), len(grid[0])
    direction = _UP
    seen: set[State] = set()
    while True:
        state = (direction, row, col)
        if state in seen:
            return Outcome.LOOP, seen
        seen.add(state)
        nr, nc = row + direction[0], col + direction[1]
        if not (0 <= nr < height and 0 <= nc < width):
            return Outcome.EXIT, seen
        if grid[nr][nc] == "#" or (nr, nc) == extra:
            direction = _TURN_RIGHT[direction]
        else:
            row, col = nr, nc


def walk(grid: Grid, row: int, col: int) -> Outcome:
    """Patrol from (row, col) facing up until the guard leaves or repeats."""
    return _patrol(grid, row, col)[0]


def part1(text: str) -> int:
    """Number of distinct cells the guard visits before leaving."""
    grid = _grid_lines(text, "map")
    outcome, seen = _patrol(grid, *find_guard(grid))
    if outcome is Outcome.LOOP:
        raise ValueError("the guard never leaves the map")
    return len({(r, c) for _, r, c in seen})


def part2(text: str) -> int:
    """Number of empty cells where one new obstacle traps the guard in a loop."""
    grid = _grid_lines(text, "map")
    start = find_guard(grid)
    return sum(
        _patrol(grid, *start, extra=(r, c))[0] is Outcome.LOOP
        for r, line in enumerate(grid)
        for c, ch in enumerate(line)
        if ch == "."
    )


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 6: guard gallivant", part1, part2)


if __name__ == "__main__":
    main()