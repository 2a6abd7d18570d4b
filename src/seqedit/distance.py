from __future__ import annotations

"""Levenshtein edit distance over arbitrary element sequences."""

from typing import Iterable, Sequence, TypeVar

from .grid import Grid

T = TypeVar("T")


def distance_grid(first: Sequence[T], second: Sequence[T]) -> Grid:
    """Return the filled Wagner-Fischer table for *first* and *second*.

    Column ``x`` tracks the first ``x`` elements of *first* and row ``y`` the
    first ``y`` elements of *second*, so cell ``(y, x)`` holds the distance
    between those two prefixes.
    """

    grid = Grid(len(first) + 1, len(second) + 1)
    for y in range(grid.height):
        grid[y, 0] = y
    for x in range(grid.width):
        grid[0, x] = x

    # Row-major fill: each cell reads its upper, left and upper-left neighbours.
    for y in range(1, grid.height):
        for x in range(1, grid.width):
            cost = 0 if first[x - 1] == second[y - 1] else 1
            grid[y, x] = min(
                grid[y - 1, x - 1] + cost,
                grid[y - 1, x] + 1,
                grid[y, x - 1] + 1,
            )
    return grid


def levenshtein(first: Sequence[T], second: Sequence[T]) -> int:
    """Return the Levenshtein distance between *first* and *second*.

    Elements only need to support ``==``. The result is the minimum number of
    single-element insertions, deletions and substitutions turning one
    sequence into the other.
    """

    grid = distance_grid(first, second)
    return grid[grid.height - 1, grid.width - 1]


def levenshtein_iter(first: Iterable[T], second: Iterable[T]) -> int:
    """Like :func:`levenshtein` but buffers both (finite) iterables first."""

    return levenshtein(list(first), list(second))
