"""Day 5: page ordering rules for print updates."""

from collections import defaultdict
from collections.abc import Mapping, Sequence

from advent24.day01 import _solve_cli


def parse(text: str) -> tuple[dict[int, set[int]], list[list[int]]]:
    """Return the ordering rules (page -> pages that must follow) and the updates."""
    lines = iter(text.splitlines())
    rules: defaultdict[int, set[int]] = defaultdict(set)
    for line in lines:
        if not line:
            break
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"bad rule {line!r}")
        rules[int(before)].add(int(after))
    else:
        raise ValueError("missing blank line between rules and updates")
    updates = [[int(page) for page in line.split(",")] for line in lines]
    return dict(rules), updates


def first_violation(rules: Mapping[int, set[int]], pages: Sequence[int]) -> int | None:
    """Index of the first page that should have come before an earlier one."""
    seen: list[int] = []
    for idx, page in enumerate(pages):
        must_follow = rules.get(page, ())
        if any(prev in must_follow for prev in seen):
            return idx
        seen.append(page)
    return None


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(
        pages[len(pages) // 2]
        for pages in updates
        if first_violation(rules, pages) is None
    )


def part2(text: str) -> int:
    """Sum of middle pages of the misordered updates once fixed."""
    rules, updates = parse(text)
    total = 0
    for pages in updates:
        idx = first_violation(rules, pages)
        if idx is None:
            continue
        pages = list(pages)
        while idx is not None:
            pages[idx - 1], pages[idx] = pages[idx], pages[idx - 1]
            idx = first_violation(rules, pages)
        total += pages[len(pages) // 2]
    return total


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 5: print queue", part1, part2)


if __name__ == "__main__":
    main()