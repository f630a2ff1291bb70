"""Day 4: word search for XMAS."""

from advent24.day01 import _grid_lines, _solve_cli

_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]
_DIAGONAL_PAIRS = {"MS", "SM"}


def part1(text: str) -> int:
    """Count XMAS in all eight directions."""
    grid = _grid_lines(text)
    height, width = len(grid), len(grid[0])

    def spells_xmas(row: int, col: int, dr: int, dc: int) -> bool:
        end_row, end_col = row + 3 * dr, col + 3 * dc
        if not (0 <= end_row < height and 0 <= end_col < width):
            return False
        return all(
            grid[row + k * dr][col + k * dc] == ch for k, ch in enumerate("MAS", 1)
        )

    return sum(
        spells_xmas(r, c, dr, dc)
        for r, line in enumerate(grid)
        for c, ch in enumerate(line)
        if ch == "X"
        for dr, dc in _DIRECTIONS
    )


def part2(text: str) -> int:
    """Count crossed MAS shapes."""
    grid = _grid_lines(text)
    height, width = len(grid), len(grid[0])
    if height < 3 or width < 3:
        raise ValueError("grid must be at least 3x3")

    def is_cross(r: int, c: int) -> bool:
        return (
            grid[r + 1][c + 1] == "A"
            and grid[r][c] + grid[r + 2][c + 2] in _DIAGONAL_PAIRS
            and grid[r + 2][c] + grid[r][c + 2] in _DIAGONAL_PAIRS
        )

    return sum(is_cross(r, c) for r in range(height - 2) for c in range(width - 2))


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 4: ceres search", part1, part2)


if __name__ == "__main__":
    main()