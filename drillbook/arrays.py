"""Array drills: searching, partitioning, counting and matrix exercises."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

SEARCH_VALUES: tuple[int, ...] = (2, 10, 5, 7, 9)
EXTREME_VALUES: tuple[int, ...] = (1, 4, 6, 8, 9, 10, 67, 90, 13, 23)
MINIMUM_VALUES: tuple[int, ...] = (2, 56, 78, -1, 3, -90, 67, 56, 9, 0, 11, -100)
REVERSE_VALUES: tuple[int, ...] = (1, 5, 6, 7, 8, 10)
GRID: tuple[tuple[int, ...], ...] = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 16),
)
TRANSPOSE_MATRIX: tuple[tuple[int, ...], ...] = (
    (1, 34, 56, 78),
    (2, 67, 89, 90),
    (3, 150, 145, 167),
    (4, 890, 765, 143),
)


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is possible."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def last_duplicate(values: Sequence[int]) -> int | None:
    """Value at the highest position that appears again later, or None."""
    found = None
    for position, value in enumerate(values):
        if value in values[position + 1:]:
            found = value
    return found


def partition_binary(values: Iterable[int]) -> list[int]:
    """Move every zero to the front using the two-pointer flag partition."""
    result = list(values)
    start, end = 0, len(result) - 1
    while start <= end:
        if result[start] == 0:
            start += 1
        else:
            result[start], result[end] = result[end], result[start]
            end -= 1
    return result


def extreme_pairs(values: Sequence[int]) -> list[int]:
    """Elements taken alternately from the front and the back."""
    ordered: list[int] = []
    front, back = 0, len(values) - 1
    while front <= back:
        ordered.append(values[front])
        if front != back:
            ordered.append(values[back])
        front += 1
        back -= 1
    return ordered


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Distinct elements of ``first`` also in ``second``, in ``first`` order."""
    others = set(second)
    seen: set[int] = set()
    common: list[int] = []
    for value in first:
        if value in others and value not in seen:
            seen.add(value)
            common.append(value)
    return common


def rotate_left(values: Sequence[int]) -> list[int]:
    """Rotate by one place to the left."""
    items = list(values)
    return items[1:] + items[:1]


def linear_search(values: Iterable[int], key: int) -> bool:
    """Whether ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def contains_2d(matrix: Iterable[Iterable[int]], key: int) -> bool:
    """Whether ``key`` occurs anywhere in the matrix."""
    return any(linear_search(row, key) for row in matrix)


def most_frequent(values: Iterable[int]) -> tuple[int, int]:
    """The most common value and its count; ties go to the earliest value."""
    counts = Counter(values)
    if not counts:
        raise ValueError("most_frequent() needs at least one value")
    value, count = counts.most_common(1)[0]
    return value, count


def matrix_extremes(matrix: Iterable[Iterable[int]]) -> tuple[int, int]:
    """The largest and smallest element of the matrix."""
    cells = [cell for row in matrix for cell in row]
    if not cells:
        raise ValueError("matrix_extremes() needs a non-empty matrix")
    return max(cells), min(cells)


def minimum(values: Iterable[int]) -> int:
    """The smallest value."""
    items = list(values)
    if not items:
        raise ValueError("minimum() needs at least one value")
    return min(items)


def move_negatives(values: Iterable[int]) -> list[int]:
    """Swap negative numbers towards the end, past the positive ones."""
    result = list(values)
    low, high = 0, len(result) - 1
    while low < high:
        if result[low] < 0:
            if result[high] > 0:
                result[low], result[high] = result[high], result[low]
            high -= 1
        else:
            low += 1
    return result


def pair_sums(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Every pair of elements, in position order, that adds up to ``target``."""
    return [
        (left, right)
        for position, left in enumerate(values)
        for right in values[position + 1:]
        if left + right == target
    ]


def reversed_values(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    return list(values)[::-1]


def sort_012(values: Iterable[int]) -> list[int]:
    """The values in ascending order."""
    return sorted(values)


def transpose(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    """Rows become columns."""
    return [list(column) for column in zip(*matrix)]


def union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """All elements of ``first`` followed by all elements of ``second``."""
    return [*first, *second]


def find_unique(values: Iterable[int]) -> int:
    """The one value not paired with another, found by XOR-ing everything."""
    return reduce(xor, values, 0)


def _joined(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook-arrays", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    for name in ("max-profit", "duplicate", "partition", "rotate", "majority",
                 "move-negatives", "sort012", "unique"):
        commands.add_parser(name).add_argument("values", nargs="*", type=int)

    for name in ("extremes", "minimum", "reverse"):
        commands.add_parser(name).add_argument("values", nargs="*", type=int)

    search = commands.add_parser("search")
    search.add_argument("key", type=int)
    search.add_argument("values", nargs="*", type=int)

    commands.add_parser("search-2d").add_argument("key", type=int)
    commands.add_parser("matrix-extremes")
    commands.add_parser("transpose")

    pair = commands.add_parser("pair-sum")
    pair.add_argument("target", type=int)
    pair.add_argument("values", nargs="*", type=int)

    for name in ("intersection", "union"):
        sub = commands.add_parser(name)
        sub.add_argument("-a", "--first", nargs="*", type=int, default=[])
        sub.add_argument("-b", "--second", nargs="*", type=int, default=[])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one array drill chosen on the command line."""
    args = _build_parser().parse_args(argv)
    command = args.command

    if command == "max-profit":
        print("The max profit on this share in the given number of days is : "
              f"{max_profit(args.values)}")
    elif command == "duplicate":
        found = last_duplicate(args.values)
        if found is None:
            print("No duplicate elements found in your input.")
        else:
            print(f"The first duplicate element is : {found}")
    elif command == "partition":
        print(_joined(partition_binary(args.values)))
    elif command == "extremes":
        print(_joined(extreme_pairs(args.values or EXTREME_VALUES)))
    elif command == "intersection":
        print("The intersected elements of the two arrays are : "
              + _joined(intersection(args.first, args.second)))
    elif command == "rotate":
        print(_joined(rotate_left(args.values)))
    elif command == "search":
        present = linear_search(args.values or SEARCH_VALUES, args.key)
        print("The key is present in the array." if present
              else "The key is not present in the array.")
    elif command == "search-2d":
        print("The element is present" if contains_2d(GRID, args.key)
              else "The element is not present")
    elif command == "majority":
        value, count = most_frequent(args.values)
        print(f"The element that has occurred the most is {value}, "
              f"it has occurred {count} times.")
    elif command == "matrix-extremes":
        largest, smallest = matrix_extremes(GRID)
        print(f"The max and min elements are : {largest} {smallest}")
    elif command == "minimum":
        print("The minimum number in the array is : "
              f"{minimum(args.values or MINIMUM_VALUES)}")
    elif command == "move-negatives":
        print(_joined(move_negatives(args.values)))
    elif command == "pair-sum":
        pairs = pair_sums(args.values, args.target)
        for left, right in pairs:
            print(f"The pair that satisfies the value is : ({left}, {right})")
        if not pairs:
            print("Sorry I cannot find any pair that will satisfy the underlined value")
    elif command == "reverse":
        print(_joined(reversed_values(args.values or REVERSE_VALUES)))
    elif command == "sort012":
        print(_joined(sort_012(args.values)))
    elif command == "transpose":
        for row in transpose(TRANSPOSE_MATRIX):
            print(_joined(row))
    elif command == "union":
        print("The unified array is : " + _joined(union(args.first, args.second)))
    elif command == "unique":
        print(f"The unique element is : {find_unique(args.values)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())