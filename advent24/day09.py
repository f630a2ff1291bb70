"""Day 9: compacting a fragmented disk and computing its checksum."""

from dataclasses import dataclass

from advent24.day01 import _solve_cli

_DIGITS = frozenset("0123456789")


@dataclass
class _Span:
    used: int
    avail: int


def _disk_map(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("empty disk map")
    line = lines[0]
    if not set(line) <= _DIGITS:
        raise ValueError(f"disk map must be digits only, got {line!r}")
    return [int(ch) for ch in line]


def part1(text: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    sizes = _disk_map(text)
    checksum = 0
    position = 0
    last = len(sizes) - 1
    for idx in range(len(sizes)):
        count = sizes[idx]
        if idx % 2 == 0:
            checksum += (idx // 2) * (count + 1) * (2 * position + count) // 2
            position += count
            continue
        while count > 0:
            while sizes[last] > 0 and count > 0:
                checksum += (last // 2) * position
                count -= 1
                position += 1
                sizes[last] -= 1
            if sizes[last] == 0:
                if last < 2:
                    raise ValueError("disk map ran out of files to move")
                sizes[last - 1] = 0
                last -= 2
    return checksum


def part2(text: str) -> int:
    """Checksum after moving whole files, highest id first, into the first gap that fits."""
    spans = [
        _Span(used=size, avail=0) if idx % 2 == 0 else _Span(used=0, avail=size)
        for idx, size in enumerate(_disk_map(text))
    ]
    checksum = 0

    for idx, span in reversed(list(enumerate(spans))):
        if idx % 2 or span.used == 0:
            continue
        file_id = idx // 2
        position = 0
        for idx2, other in enumerate(spans[:idx]):
            if idx2 % 2 == 0:
                position += other.used
            elif other.avail - other.used >= span.used:
                position += other.used
                moved = span.used
                checksum += file_id * sum(range(position, position + moved))
                other.used += moved
                span.avail += moved
                span.used = 0
                break
            else:
                position += other.avail

    position = 0
    for idx, span in enumerate(spans):
        if idx % 2 or span.avail > 0:
            position += span.avail
            continue
        checksum += (idx // 2) * sum(range(position, position + span.used))
        position += span.used
    return checksum


def main(argv: list[str] | None = None) -> None:
    _solve_cli(argv, "Day 9: disk fragmenter", part1, part2)


if __name__ == "__main__":
    main()