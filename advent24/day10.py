"""Day 10: hiking trails on a topographic map."""

from collections.abc import Callable, Iterator, Sequence

from advent24.day01 import _grid_lines, _solve_cli

Grid = Sequence[str]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _trail_ends(
    grid: Grid, row: int, col: int, height: str = "0"
) -> Iterator[tuple[int, int]]:
    """Yield the summit reached by every trail climbing from (row, col)."""
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        return
    if grid[row][col] != height:
        return
    if height == "9":
        yield row, col
        return
    following = chr(ord(height) + 1)
    for drow, dcol in _STEPS:
        yield from _trail_ends(grid, row + drow, col + dcol, following)


def trailhead_score(grid: Grid, row: int, col: int) -> int:
    """Number of distinct summits reachable from a trailhead."""
    return len(set(_trail_ends(grid, row, col)))


def trailhead_rating(grid: Grid, row: int, col: int) -> int:
    """Number of distinct trails starting at a trailhead."""
    return sum(1 for _ in _trail_ends(grid, row, col))


def _total(text: str, measure: Callable[[Grid, int, int], int]) -> int:
    grid = _grid_lines(text, "map")
    return sum(
        measure(grid, row, col)
        for row, line in enumerate(grid)
        for col in range(len(line))
    )


def part1(text: str) -> int:
    """Sum of trailhead scores."""
    return _total(text, trailhead_score)


def part2(text: str) -> int:
    """Sum of trailhead ratings."""
    return _total(text, trailhead_rating)


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 10: hoof it", part1, part2)


if __name__ == "__main__":
    main()