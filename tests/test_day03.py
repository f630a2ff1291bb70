from advent24.day03 import main, part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE1) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_part2_equals_part1_without_dont():
    assert part2(EXAMPLE1) == part1(EXAMPLE1)


def test_part2_not_above_part1():
    assert part2(EXAMPLE2) <= part1(EXAMPLE2)


def test_four_digit_operand_ignored():
    assert part1("mul(1234,5)mul(2,3)") == part1("mul(2,3)")


def test_dont_carries_across_lines():
    assert part2("don't()\nmul(2,3)") == part1("")


def test_do_reenables():
    assert part2("don't()do()mul(2,3)") == part1("mul(2,3)")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE2)
    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"Solution: {part2(EXAMPLE2)}\n"