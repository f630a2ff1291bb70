import pytest

from advent24.day05 import first_violation, main, parse, part1, part2

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13"""
UPDATES = """75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""
EXAMPLE = f"{RULES}\n\n{UPDATES}\n"
SMALL_RULES = parse("12|34\n\n1,2")[0]


def test_parse():
    assert parse("12|34\n\n1,2") == ({12: {34}}, [[1, 2]])


@pytest.mark.parametrize("solver, expected", [(part1, 143), (part2, 123)])
def test_example(solver, expected):
    assert solver(EXAMPLE) == expected


@pytest.mark.parametrize("pages, expected", [([34, 12], 1), ([12, 34], None)])
def test_first_violation(pages, expected):
    assert first_violation(SMALL_RULES, pages) == expected


def test_correct_updates_have_no_violation():
    rules, updates = parse(EXAMPLE)
    good = [pages for pages in updates if first_violation(rules, pages) is None]
    assert good == updates[:3]


@pytest.mark.parametrize("bad", ["12|34\n56|78", "12|34\n\n1,x", "12-34\n\n1"])
def test_bad_input_raises(bad):
    with pytest.raises(ValueError):
        part1(bad)


def test_main(tmp_path, capsys):
    queue = tmp_path / "queue.txt"
    queue.write_text(EXAMPLE)
    main([str(queue), "--part=2"])
    assert capsys.readouterr().out == "Solution: 123\n"