"""Day 14: robots moving on a wrapping grid."""

from __future__ import annotations

import argparse
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

WIDTH = 101
HEIGHT = 103
SECONDS = 100
DEFAULT_THRESHOLD = 4_000_000.0

_ROBOT = re.compile(r"p=(\d+),(\d+) v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Robot:
    """A robot's starting position and velocity."""

    x: int
    y: int
    vx: int
    vy: int

    def position_at(self, seconds: int, width: int, height: int) -> tuple[int, int]:
        """Position after the given number of seconds on a wrapping grid."""
        return (self.x + self.vx * seconds) % width, (self.y + self.vy * seconds) % height


def parse_robots(text: str) -> list[Robot]:
    """One robot per line, written as 'p=x,y v=dx,dy'."""
    robots = []
    for lineno, line in enumerate(text.splitlines(), 1):
        found = _ROBOT.search(line)
        if found is None:
            raise ValueError(f"line {lineno}: cannot read robot {line!r}")
        robots.append(Robot(*(int(group) for group in found.groups())))
    return robots


def safety_factor(
    robots: Sequence[Robot], seconds: int, width: int, height: int
) -> int:
    """Product of robot counts in the four quadrants, ignoring the middle lines."""
    mid_x, mid_y = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x, y = robot.position_at(seconds, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[2 * (x > mid_x) + (y > mid_y)] += 1
    return math.prod(quadrants)


def pair_distance(
    robots: Sequence[Robot], seconds: int, width: int, height: int
) -> float:
    """Sum of straight-line distances between every pair of robots."""
    points = [robot.position_at(seconds, width, height) for robot in robots]
    distance = 0.0
    for idx, (x, y) in enumerate(points):
        for px, py in points[:idx]:
            distance += math.sqrt((x - px) ** 2 + (y - py) ** 2)
    return distance


def render(robots: Sequence[Robot], seconds: int, width: int, height: int) -> str:
    """The grid with '*' where a robot stands and '.' elsewhere."""
    occupied = {robot.position_at(seconds, width, height) for robot in robots}
    return "\n".join(
        "".join("*" if (x, y) in occupied else "." for x in range(width))
        for y in range(height)
    )


def _distances(
    robots: Sequence[Robot], width: int, height: int
) -> Iterator[tuple[int, float]]:
    for seconds in range(width * height):
        yield seconds, pair_distance(robots, seconds, width, height)


def find_frames(
    robots: Sequence[Robot], threshold: float, width: int, height: int
) -> Iterator[tuple[int, float]]:
    """Yield (seconds, distance) for every frame in one full cycle packed tighter than threshold."""
    return (
        (seconds, distance)
        for seconds, distance in _distances(robots, width, height)
        if distance < threshold
    )


def part1(text: str) -> int:
    """Safety factor after 100 seconds on the full-size grid."""
    return safety_factor(parse_robots(text), SECONDS, WIDTH, HEIGHT)


def part2(text: str) -> list[int]:
    """Seconds at which the robots huddle together closely enough to form a picture."""
    robots = parse_robots(text)
    return [seconds for seconds, _ in find_frames(robots, DEFAULT_THRESHOLD, WIDTH, HEIGHT)]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 14: restroom redoubt")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--threshold", type=float, default=DEFAULT_THRESHOLD)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    if args.part == 1:
        print(f"Solution: {part1(text)}")
        return
    robots = parse_robots(text)
    total = 0.0
    smallest = math.inf
    for seconds, distance in _distances(robots, WIDTH, HEIGHT):
        total += distance
        smallest = min(smallest, distance)
        if distance < args.threshold:
            print(f"Iteration {seconds}")
            print(render(robots, seconds, WIDTH, HEIGHT))
    print(f"Min distance is {smallest} average is {total / (WIDTH * HEIGHT)}")


if __name__ == "__main__":
    main()