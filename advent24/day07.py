"""Day 7: finding operators that balance calibration equations."""

from collections.abc import Sequence

from advent24.day01 import _solve_cli


def concat(a: int, b: int) -> int:
    """Append the decimal digits of b to a."""
    return a * 10 ** len(str(b)) + b


def can_make(target: int, values: Sequence[int], allow_concat: bool) -> bool:
    """Whether +, * (and optionally ||), applied left to right, reach target."""
    if not values:
        raise ValueError("an equation needs at least one value")
    first, *rest = values
    reachable = {first}
    for value in rest:
        following: set[int] = set()
        for current in reachable:
            if current > target:
                continue
            following.add(current + value)
            following.add(current * value)
            if allow_concat:
                following.add(concat(current, value))
        if not following:
            return False
        reachable = following
    return target in reachable


def _equations(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for lineno, line in enumerate(text.splitlines(), 1):
        head, sep, tail = line.partition(": ")
        if not sep:
            raise ValueError(f"line {lineno}: expected 'target: values', got {line!r}")
        equations.append((int(head), [int(field) for field in tail.split()]))
    return equations


def _total(text: str, allow_concat: bool) -> int:
    return sum(
        target
        for target, values in _equations(text)
        if can_make(target, values, allow_concat)
    )


def part1(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _total(text, allow_concat=False)


def part2(text: str) -> int:
    """Sum of targets reachable when concatenation is allowed too."""
    return _total(text, allow_concat=True)


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 7: bridge repair", part1, part2)


if __name__ == "__main__":
    main()