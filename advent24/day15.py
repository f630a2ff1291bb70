"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

Grid = list[list[str]]

_STEPS = {"<": (-1, 0), ">": (1, 0), "^": (0, -1), "v": (0, 1)}
_WIDE = {"#": "##", "O": "[]", "@": "@.", ".": ".."}


def parse_warehouse(text: str) -> tuple[Grid, str]:
    """Split the input into the map rows and the joined move sequence."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("missing blank line between map and moves") from None
    grid = [list(line) for line in lines[:blank]]
    moves = "".join(lines[blank + 1 :])
    return grid, moves


def widen(rows: list[list[str]]) -> Grid:
    """Double every map tile horizontally; boxes become '[]'."""
    wide: Grid = []
    for row in rows:
        try:
            wide.append([ch for tile in row for ch in _WIDE[tile]])
        except KeyError as exc:
            raise ValueError(f"unexpected map tile {exc.args[0]!r}") from None
    return wide


def _step(direction: str, x: int, y: int) -> tuple[int, int]:
    try:
        dx, dy = _STEPS[direction]
    except KeyError:
        raise ValueError(f"unknown move {direction!r}") from None
    return x + dx, y + dy


def _find_robot(grid: Grid) -> tuple[int, int]:
    found: tuple[int, int] | None = None
    for y, row in enumerate(grid):
        if "@" in row:
            found = (row.index("@"), y)
    if found is None:
        raise ValueError("no robot on the map")
    return found


def _push_narrow(grid: Grid, direction: str, x: int, y: int) -> bool:
    nx, ny = _step(direction, x, y)
    target = grid[ny][nx]
    if target == "." or (target == "O" and _push_narrow(grid, direction, nx, ny)):
        grid[ny][nx] = grid[y][x]
        return True
    return False


def _push_box(grid: Grid, direction: str, x: int, y: int) -> bool:
    """Move the wide box whose left half is at (x, y)."""
    nx, ny = _step(direction, x, y)
    if direction == "<":
        target = grid[ny][nx]
        if target == "." or (target == "]" and _push_box(grid, direction, nx - 1, ny)):
            grid[ny][nx] = grid[y][x]
            grid[ny][nx + 1] = grid[y][x + 1]
            return True
        return False
    if direction == ">":
        target = grid[ny][nx + 1]
        if target == "." or (target == "[" and _push_box(grid, direction, nx + 1, ny)):
            grid[ny][nx + 1] = grid[y][x + 1]
            grid[ny][nx] = grid[y][x]
            return True
        return False

    left, right = grid[ny][nx], grid[ny][nx + 1]
    if "#" in (left, right):
        return False
    if left == "." and right == ".":
        moved = True
    elif left == "[":
        moved = _push_box(grid, direction, nx, ny)
    elif grid[ny][nx - 1] == "[" and right == ".":
        moved = _push_box(grid, direction, nx - 1, ny)
    elif right == "[" and left == ".":
        moved = _push_box(grid, direction, nx + 1, ny)
    else:
        if not (grid[ny][nx - 1] == "[" and right == "["):
            raise ValueError(f"inconsistent boxes above or below ({x}, {y})")
        saved = [row[:] for row in grid]
        moved = _push_box(grid, direction, nx - 1, ny) and _push_box(
            grid, direction, nx + 1, ny
        )
        if not moved:
            grid[:] = saved
    if moved:
        grid[ny][nx] = grid[y][x]
        grid[ny][nx + 1] = grid[y][x + 1]
        grid[y][x] = "."
        grid[y][x + 1] = "."
    return moved


def _push_robot_wide(grid: Grid, direction: str, x: int, y: int) -> bool:
    nx, ny = _step(direction, x, y)
    target = grid[ny][nx]
    if target == ".":
        moved = True
    elif target == "[":
        moved = _push_box(grid, direction, nx, ny)
    elif target == "]":
        moved = _push_box(grid, direction, nx - 1, ny)
    else:
        moved = False
    if moved:
        grid[ny][nx] = grid[y][x]
    return moved


def _run(
    grid: Grid, moves: str, push: Callable[[Grid, str, int, int], bool]
) -> None:
    x, y = _find_robot(grid)
    for direction in moves:
        if push(grid, direction, x, y):
            grid[y][x] = "."
            x, y = _step(direction, x, y)


def _gps(grid: Grid, box: str) -> int:
    return sum(
        100 * y + x
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile == box
    )


def part1(text: str) -> int:
    """Sum of box GPS coordinates after the robot finishes moving."""
    grid, moves = parse_warehouse(text)
    _run(grid, moves, _push_narrow)
    return _gps(grid, "O")


def part2(text: str) -> int:
    """Sum of box GPS coordinates in the widened warehouse."""
    rows, moves = parse_warehouse(text)
    grid = widen(rows)
    _run(grid, moves, _push_robot_wide)
    return _gps(grid, "[")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 15: warehouse woes")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    solver = part1 if args.part == 1 else part2
    print(f"Solution: {solver(text)}")


if __name__ == "__main__":
    main()