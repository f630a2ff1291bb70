# advent24

Solvers for fifteen days of a programming puzzle season. Each day is its own
module, `advent24.day01` to `advent24.day15`. Every module has `part1(text)`
and `part2(text)`, which take the puzzle input as a string, and a
`main(argv=None)` function that is installed as a command. The package has no
dependencies beyond the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running from the command line

Each day has its own command, `advent24-day01` to `advent24-day15`. Each takes
an optional input path (default `input.txt` in the current directory) and
`--part 1` or `--part 2` (default 1), and prints `Solution: <answer>`:

    advent24-day01
    advent24-day07 --part 2
    advent24-day11 my-input.txt --part 2

`advent24-day14 --part 2` works differently: it checks every second of one
full 101 x 103 cycle, and for each frame whose summed pairwise robot distance
is below `--threshold` (default 4000000) it prints `Iteration <seconds>`
followed by a picture of the grid (`*` for a robot, `.` elsewhere). At the end
it prints the smallest and the average distance.

## Using from Python

    from advent24 import day01, day07

    text = open("input.txt").read()
    print(day01.part1(text), day01.part2(text))

    print(day07.can_make(190, [10, 19], allow_concat=False))  # True
    print(day07.concat(15, 6))                                # 156

All `part1` and `part2` functions return an integer, except
`day14.part2`, which returns the list of seconds whose frames fall below the
default distance threshold.

Modules also expose the pieces they are built from:

- `day01.parse_lists`
- `day02.parse_reports`, `is_safe`, `is_safe_dampened`
- `day05.parse`, `first_violation`
- `day06.find_guard`, `walk` and the `Outcome` enum (`LOOP`, `EXIT`)
- `day07.concat`, `can_make`
- `day08.generate_line`
- `day10.trailhead_score`, `trailhead_rating`
- `day11.blink`, `count_stones` (cached)
- `day12.Direction`, `Edge`, `add_edge`, `combine_edges`
- `day13.solve_machine`, `parse_machines`
- `day14.Robot` (with `position_at`), `parse_robots`, `safety_factor`,
  `pair_distance`, `render`, `find_frames`
- `day15.parse_warehouse`, `widen`

Malformed input raises `ValueError`.