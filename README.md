# drillbook

A small collection of classic programming drills: array exercises
(searching, partitioning, rotating, set operations on lists, simple
stock-profit and pair-sum problems) and the familiar star, number and
letter patterns (pyramids, diamonds, butterflies, Floyd's and Pascal's
triangles).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Array exercises

They live in `drillbook.arrays` and take plain lists of integers (or
lists of rows for the matrix functions):

```python
from drillbook.arrays import max_profit, intersection, find_unique, transpose

max_profit([7, 1, 5, 3, 6, 4])          # best single buy-then-sell profit
intersection([1, 2, 2, 3], [2, 3, 4])   # shared values, first-seen order, no repeats
find_unique([4, 1, 2, 1, 2])            # XOR of all values: the one left unpaired
transpose([[1, 2], [3, 4]])             # rows become columns
```

The rest of the module:

- `last_duplicate(values)` – the value at the highest position that
  appears again later in the list, or `None`.
- `partition_binary(values)` – zeros moved to the front with a
  two-pointer swap.
- `extreme_pairs(values)` – elements taken alternately from the front
  and the back.
- `rotate_left(values)` – rotated by one place.
- `linear_search(values, key)` and `contains_2d(matrix, key)` – whether
  the key occurs.
- `most_frequent(values)` – `(value, count)` of the commonest value,
  ties going to the earliest.
- `matrix_extremes(matrix)` – `(largest, smallest)`.
- `minimum(values)`.
- `move_negatives(values)` – negatives swapped towards the end past the
  positives.
- `pair_sums(values, target)` – every pair, in position order, summing
  to the target.
- `reversed_values(values)`, `sort_012(values)` (ascending order) and
  `union(first, second)` (the two lists joined, duplicates kept).

`most_frequent`, `matrix_extremes` and `minimum` raise `ValueError`
when given nothing.

## Text patterns

They live in `drillbook.patterns`. Each function takes the size of the
figure and returns its rows as a list of strings, except
`floyd_triangle` and `pascal_triangle`, which return lists of integer
rows:

```python
from drillbook.patterns import full_pyramid, pascal_triangle, butterfly

full_pyramid(4)      # ['   * ', '  * * ', ' * * * ', '* * * * ']
pascal_triangle(5)   # [[1], [1, 1], [1, 2, 1], ...]
butterfly(3)
```

The full set: `alphabet_palindrome_pyramid`, `butterfly`,
`flipped_solid_diamond`, `floyd_triangle`, `full_pyramid`,
`half_pyramid`, `hollow_diamond`, `hollow_inverted_half_pyramid`,
`hollow_rectangle(rows, stars)`, `hollow_square`,
`inverted_full_pyramid`, `inverted_half_pyramid`, `pascal_triangle`,
`rectangle(rows, stars)`, `solid_diamond`, `solid_half_diamond` and
`square`.

## Command line

Two commands are installed:

```
drillbook-arrays --help
drillbook-patterns --help
```

`drillbook-arrays` takes the exercise as a sub-command followed by the
numbers to work on, for example:

```
drillbook-arrays max-profit 7 1 5 3 6 4
drillbook-arrays search 7 2 10 5 7 9
drillbook-arrays pair-sum 10 1 9 4 6
drillbook-arrays intersection -a 1 2 3 -b 2 3 4
```

`extremes`, `minimum`, `reverse` and `search` fall back to a built-in
sample list when no values are given; `search-2d`, `matrix-extremes`
and `transpose` always work on a fixed 4×4 matrix.

`drillbook-patterns` takes the pattern name and its size, for example:

```
drillbook-patterns full-pyramid 4
drillbook-patterns pascal 6
drillbook-patterns hollow-rectangle 4 7
```

Use `--help` on either command, or on a sub-command, to see the full
list and the arguments each one takes.