"""Text patterns: pyramids, diamonds, rectangles and number triangles."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

_STAR = "* "
_GAP = "  "


def alphabet_palindrome_pyramid(lines: int) -> list[str]:
    """Rows of letters rising from A and falling back to A."""
    rows = []
    for row in range(lines):
        rising = [chr(ord("A") + col) for col in range(row + 1)]
        rows.append("".join(rising + rising[-2::-1]))
    return rows


def butterfly(lines: int) -> list[str]:
    """Two wings of stars that widen and then narrow again."""
    upper = [
        _STAR * (row + 1) + _GAP * (2 * (lines - row - 1)) + _STAR * (row + 1)
        for row in range(lines)
    ]
    lower = [
        _STAR * (lines - row) + _GAP * (2 * row) + _STAR * (lines - row)
        for row in range(lines)
    ]
    return upper + lower


def flipped_solid_diamond(lines: int) -> list[str]:
    """A diamond-shaped gap cut out of a solid block of stars."""
    upper = [
        "*" * (lines - row) + " " * (2 * row + 1) + "*" * (lines - row)
        for row in range(lines)
    ]
    lower = [
        "*" * (row + 1) + " " * (2 * lines - 2 * row - 1) + "*" * (row + 1)
        for row in range(lines)
    ]
    return upper + lower


def floyd_triangle(lines: int) -> list[list[int]]:
    """Consecutive numbers from 1, one more on each row."""
    rows: list[list[int]] = []
    start = 1
    for row in range(lines):
        rows.append(list(range(start, start + row + 1)))
        start += row + 1
    return rows


def full_pyramid(lines: int) -> list[str]:
    """A centred pyramid of stars, point at the top."""
    return [" " * (lines - row - 1) + _STAR * (row + 1) for row in range(lines)]


def half_pyramid(rows: int) -> list[str]:
    """A left-aligned triangle growing one star per row."""
    return [_STAR * (row + 1) for row in range(rows)]


def hollow_diamond(lines: int) -> list[str]:
    """The outline of a diamond."""
    def outline(width: int) -> str:
        return "".join("*" if col in (0, width - 1) else " " for col in range(width))

    upper = [" " * (lines - row - 1) + outline(2 * row + 1) for row in range(lines)]
    lower = [" " * row + outline(2 * lines - 2 * row - 1) for row in range(lines)]
    return upper + lower


def hollow_inverted_half_pyramid(lines: int) -> list[str]:
    """The outline of a left-aligned triangle standing on its point."""
    rows = []
    for row in range(lines):
        if row == 0:
            rows.append(_STAR * lines)
        else:
            closing = _STAR if row != lines - 1 else ""
            rows.append(_STAR + _GAP * (lines - row - 2) + closing)
    return rows


def hollow_rectangle(rows: int, stars: int) -> list[str]:
    """The outline of a rectangle ``stars`` wide."""
    edge = _STAR * stars
    middle = _STAR + _GAP * (stars - 2) + _STAR
    return [edge if row in (0, rows - 1) else middle for row in range(rows)]


def hollow_square(lines: int) -> list[str]:
    """The outline of a square."""
    edge = "*" * lines
    middle = _STAR + " " * (lines - 1) + "*"
    return [edge if row in (0, lines - 1) else middle for row in range(lines)]


def inverted_full_pyramid(lines: int) -> list[str]:
    """A centred pyramid of stars, point at the bottom."""
    return [" " * row + _STAR * (lines - row) for row in range(lines)]


def inverted_half_pyramid(rows: int) -> list[str]:
    """A left-aligned triangle losing one star per row."""
    return [_STAR * (rows - row) for row in range(rows)]


def pascal_triangle(lines: int) -> list[list[int]]:
    """The first ``lines`` rows of binomial coefficients."""
    rows: list[list[int]] = []
    for row in range(lines):
        coefficient = 1
        values = []
        for col in range(row + 1):
            values.append(coefficient)
            coefficient = coefficient * (row - col) // (col + 1)
        rows.append(values)
    return rows


def rectangle(rows: int, stars: int) -> list[str]:
    """A solid rectangle of stars."""
    return [_STAR * stars for _ in range(rows)]


def solid_diamond(lines: int) -> list[str]:
    """A full pyramid stacked on an inverted one."""
    return full_pyramid(lines) + inverted_full_pyramid(lines)


def solid_half_diamond(lines: int) -> list[str]:
    """A half pyramid stacked on an inverted half pyramid."""
    return half_pyramid(lines) + inverted_half_pyramid(lines)


def square(side: int) -> list[str]:
    """A solid square of stars."""
    return rectangle(side, side)


def _number_rows(rows: list[list[int]]) -> list[str]:
    return ["".join(f"{value} " for value in row) for row in rows]


_SINGLE: dict[str, Callable[[int], list[str]]] = {
    "alphabet-pyramid": alphabet_palindrome_pyramid,
    "butterfly": butterfly,
    "flipped-diamond": flipped_solid_diamond,
    "floyd": lambda lines: _number_rows(floyd_triangle(lines)),
    "full-pyramid": full_pyramid,
    "half-pyramid": half_pyramid,
    "hollow-diamond": hollow_diamond,
    "hollow-inverted-half-pyramid": hollow_inverted_half_pyramid,
    "hollow-square": hollow_square,
    "inverted-full-pyramid": inverted_full_pyramid,
    "inverted-half-pyramid": inverted_half_pyramid,
    "pascal": lambda lines: _number_rows(pascal_triangle(lines)),
    "solid-diamond": solid_diamond,
    "solid-half-diamond": solid_half_diamond,
    "square": square,
}

_DOUBLE: dict[str, Callable[[int, int], list[str]]] = {
    "rectangle": rectangle,
    "hollow-rectangle": hollow_rectangle,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook-patterns", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name in _SINGLE:
        commands.add_parser(name).add_argument("lines", type=int)
    for name in _DOUBLE:
        sub = commands.add_parser(name)
        sub.add_argument("rows", type=int)
        sub.add_argument("stars", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the pattern chosen on the command line."""
    args = _build_parser().parse_args(argv)
    if args.command in _DOUBLE:
        lines = _DOUBLE[args.command](args.rows, args.stars)
    else:
        lines = _SINGLE[args.command](args.lines)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())