"""Day 12: fencing garden regions by perimeter and by sides."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence

Grid = Sequence[str]
Cell = tuple[int, int]


class Direction(Enum):
    """Which side of a cell a fence stands on."""

    N = "N"
    S = "S"
    E = "E"
    W = "W"


_HORIZONTAL = frozenset({Direction.N, Direction.S})

# Fence sides in the order they are checked, which is also the order the
# neighbouring cells are explored in.
_SIDES = (
    (Direction.N, -1, 0),
    (Direction.S, 1, 0),
    (Direction.W, 0, -1),
    (Direction.E, 0, 1),
)


@dataclass
class Edge:
    """A straight run of fence facing one direction."""

    direction: Direction
    rowmin: int
    rowmax: int
    colmin: int
    colmax: int


def add_edge(edges: list[Edge], edge: Edge) -> bool:
    """Extend an adjacent edge of the same direction, or append a new one.

    Returns True when an existing edge absorbed the new one.
    """
    for existing in edges:
        if existing.direction is not edge.direction:
            continue
        if existing.direction in _HORIZONTAL:
            if existing.rowmax != edge.rowmax:
                continue
            if existing.colmax + 1 == edge.colmin:
                existing.colmax = edge.colmax
                return True
            if edge.colmax + 1 == existing.colmin:
                existing.colmin = edge.colmin
                return True
        else:
            if existing.colmax != edge.colmax:
                continue
            if existing.rowmax + 1 == edge.rowmin:
                existing.rowmax = edge.rowmax
                return True
            if edge.rowmax + 1 == existing.rowmin:
                existing.rowmin = edge.rowmin
                return True
    edges.append(edge)
    return False


def combine_edges(edges: Sequence[Edge]) -> tuple[list[Edge], bool]:
    """Merge the edges once more; return the new list and whether anything merged."""
    combined: list[Edge] = []
    merged = False
    for edge in edges:
        merged |= add_edge(combined, replace(edge))
    return combined, merged


def _grid(text: str) -> list[str]:
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("empty map")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("map rows differ in length")
    return rows


def _regions(grid: Grid) -> Iterator[tuple[str, list[Cell]]]:
    """Yield each region's plant and its cells in depth-first order."""
    height, width = len(grid), len(grid[0])
    visited: set[Cell] = set()
    for r, line in enumerate(grid):
        for c, plant in enumerate(line):
            if (r, c) in visited:
                continue
            order: list[Cell] = []
            stack: list[Cell] = [(r, c)]
            while stack:
                cell = stack.pop()
                row, col = cell
                if cell in visited or grid[row][col] != plant:
                    continue
                visited.add(cell)
                order.append(cell)
                neighbours = [
                    (row + dr, col + dc)
                    for _, dr, dc in _SIDES
                    if 0 <= row + dr < height and 0 <= col + dc < width
                ]
                stack.extend(reversed(neighbours))
            yield plant, order


def _fences(grid: Grid, plant: str, row: int, col: int) -> Iterator[Direction]:
    height, width = len(grid), len(grid[0])
    for direction, dr, dc in _SIDES:
        nr, nc = row + dr, col + dc
        if not (0 <= nr < height and 0 <= nc < width) or grid[nr][nc] != plant:
            yield direction


def part1(text: str) -> int:
    """Sum over regions of area times perimeter."""
    grid = _grid(text)
    total = 0
    for plant, cells in _regions(grid):
        perimeter = sum(
            1 for row, col in cells for _ in _fences(grid, plant, row, col)
        )
        total += perimeter * len(cells)
    return total


def part2(text: str) -> int:
    """Sum over regions of area times number of straight sides."""
    grid = _grid(text)
    total = 0
    for plant, cells in _regions(grid):
        edges: list[Edge] = []
        for row, col in cells:
            for direction in _fences(grid, plant, row, col):
                add_edge(edges, Edge(direction, row, row, col, col))
        merged = True
        while merged:
            edges, merged = combine_edges(edges)
        total += len(edges) * len(cells)
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 12: garden groups")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    solver = part1 if args.part == 1 else part2
    print(f"Solution: {solver(text)}")


if __name__ == "__main__":
    main()