import math

import pytest

from drillbook import patterns


SIZES = [1, 2, 3, 5, 8]


def test_alphabet_pyramid_small():
    assert patterns.alphabet_palindrome_pyramid(3) == ["A", "ABA", "ABCBA"]


@pytest.mark.parametrize("n", SIZES)
def test_alphabet_pyramid_rows_are_palindromes(n):
    rows = patterns.alphabet_palindrome_pyramid(n)
    assert len(rows) == n
    for index, row in enumerate(rows):
        assert row == row[::-1]
        assert len(row) == 2 * index + 1
        assert row[0] == "A"


@pytest.mark.parametrize("n", SIZES)
def test_butterfly_is_mirrored(n):
    rows = patterns.butterfly(n)
    assert len(rows) == 2 * n
    assert rows[:n] == rows[n:][::-1]
    assert all(len(row) == 4 * n for row in rows)
    assert rows[n - 1] == "* " * (2 * n)


@pytest.mark.parametrize("n", SIZES)
def test_flipped_solid_diamond_is_mirrored(n):
    rows = patterns.flipped_solid_diamond(n)
    assert len(rows) == 2 * n
    assert rows[:n] == rows[n:][::-1]
    assert all(len(row) == 2 * n + 1 for row in rows)
    assert rows[0] == "*" * n + " " + "*" * n


@pytest.mark.parametrize("n", SIZES)
def test_floyd_triangle_counts_up(n):
    rows = patterns.floyd_triangle(n)
    assert [len(row) for row in rows] == list(range(1, n + 1))
    flat = [value for row in rows for value in row]
    assert flat == list(range(1, len(flat) + 1))


def test_pascal_triangle_known_row():
    assert patterns.pascal_triangle(5)[4] == [1, 4, 6, 4, 1]


@pytest.mark.parametrize("n", [1, 4, 10, 15])
def test_pascal_triangle_properties(n):
    rows = patterns.pascal_triangle(n)
    assert len(rows) == n
    for index, row in enumerate(rows):
        assert sum(row) == 2 ** index
        assert row == row[::-1]
        assert row == [math.comb(index, k) for k in range(index + 1)]


@pytest.mark.parametrize("n", SIZES)
def test_full_pyramid_shape(n):
    rows = patterns.full_pyramid(n)
    assert len(rows) == n
    for index, row in enumerate(rows):
        assert row.count("*") == index + 1
        assert row.startswith(" " * (n - index - 1) + "*")


@pytest.mark.parametrize("n", SIZES)
def test_inverted_full_pyramid_reverses_full(n):
    assert patterns.inverted_full_pyramid(n) == patterns.full_pyramid(n)[::-1]


@pytest.mark.parametrize("n", SIZES)
def test_half_pyramid_grows(n):
    rows = patterns.half_pyramid(n)
    assert [row.count("*") for row in rows] == list(range(1, n + 1))
    assert all(row.endswith("* ") for row in rows)


@pytest.mark.parametrize("n", SIZES)
def test_inverted_half_pyramid_reverses_half(n):
    assert patterns.inverted_half_pyramid(n) == patterns.half_pyramid(n)[::-1]


@pytest.mark.parametrize("n", SIZES)
def test_hollow_diamond_outline(n):
    rows = patterns.hollow_diamond(n)
    assert len(rows) == 2 * n
    assert rows[:n] == rows[n:][::-1]
    assert rows[0].count("*") == 1
    assert rows[-1].count("*") == 1
    assert all(row.count("*") <= 2 for row in rows)
    assert all(row.endswith("*") for row in rows)


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_hollow_inverted_half_pyramid(n):
    rows = patterns.hollow_inverted_half_pyramid(n)
    assert len(rows) == n
    assert rows[0] == "* " * n
    assert rows[-1] == "* "
    for row in rows[1:-1]:
        assert row.count("*") == 2
        assert row.startswith("* ") and row.endswith("* ")


@pytest.mark.parametrize("rows,stars", [(3, 4), (5, 2), (4, 7)])
def test_hollow_rectangle(rows, stars):
    lines = patterns.hollow_rectangle(rows, stars)
    assert len(lines) == rows
    assert lines[0] == lines[-1] == "* " * stars
    for line in lines[1:-1]:
        assert line.count("*") == 2
        assert len(line) == 2 * stars


@pytest.mark.parametrize("n", [3, 4, 6])
def test_hollow_square(n):
    lines = patterns.hollow_square(n)
    assert len(lines) == n
    assert lines[0] == lines[-1] == "*" * n
    for line in lines[1:-1]:
        assert line == "* " + " " * (n - 1) + "*"


@pytest.mark.parametrize("rows,stars", [(1, 1), (3, 4), (6, 2)])
def test_rectangle(rows, stars):
    lines = patterns.rectangle(rows, stars)
    assert lines == ["* " * stars] * rows


@pytest.mark.parametrize("n", SIZES)
def test_square_is_rectangle(n):
    assert patterns.square(n) == patterns.rectangle(n, n)


@pytest.mark.parametrize("n", SIZES)
def test_solid_diamond_composition(n):
    rows = patterns.solid_diamond(n)
    assert rows == patterns.full_pyramid(n) + patterns.inverted_full_pyramid(n)
    assert rows[n - 1] == rows[n]


@pytest.mark.parametrize("n", SIZES)
def test_solid_half_diamond_composition(n):
    rows = patterns.solid_half_diamond(n)
    assert rows == patterns.half_pyramid(n) + patterns.inverted_half_pyramid(n)
    assert len(rows) == 2 * n


@pytest.mark.parametrize(
    "builder",
    [
        patterns.alphabet_palindrome_pyramid,
        patterns.butterfly,
        patterns.flipped_solid_diamond,
        patterns.floyd_triangle,
        patterns.full_pyramid,
        patterns.half_pyramid,
        patterns.hollow_diamond,
        patterns.hollow_inverted_half_pyramid,
        patterns.hollow_square,
        patterns.inverted_full_pyramid,
        patterns.inverted_half_pyramid,
        patterns.pascal_triangle,
        patterns.solid_diamond,
        patterns.solid_half_diamond,
        patterns.square,
    ],
)
@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_sizes_give_nothing(builder, n):
    assert builder(n) == []


def test_main_prints_half_pyramid(capsys):
    assert patterns.main(["half-pyramid", "2"]) == 0
    assert capsys.readouterr().out == "* \n* * \n"


def test_main_prints_rectangle(capsys):
    assert patterns.main(["rectangle", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == patterns.rectangle(2, 3)


def test_main_prints_pascal_rows(capsys):
    patterns.main(["pascal", "4"])
    lines = capsys.readouterr().out.splitlines()
    parsed = [[int(token) for token in line.split()] for line in lines]
    assert parsed == patterns.pascal_triangle(4)


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        patterns.main(["hexagon", "3"])