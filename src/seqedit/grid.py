from __future__ import annotations

"""Fixed-size two-dimensional table of unsigned integers."""

import operator
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

Selector = Tuple[int, int]

_DTYPE = np.uint64


class InvalidIndexError(IndexError):
    """Raised when trusted grid access addresses a cell outside the grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Invalid index ({row}, {col})")
        self.row = row
        self.col = col


@dataclass
class Cell:
    """Writable handle onto a single grid cell."""

    grid: "Grid"
    selector: Selector

    @property
    def value(self) -> int:
        return self.grid[self.selector]

    @value.setter
    def value(self, value: int) -> None:
        self.grid[self.selector] = value


class Grid:
    """Row-major table of ``width * height`` unsigned integers.

    Cells are addressed by a ``(row, col)`` selector. The checked accessors
    (:meth:`get`, :meth:`get_mut`, :meth:`set`) report out-of-range selectors
    by returning ``None``/``False``; subscripting raises
    :class:`InvalidIndexError` instead.
    """

    __slots__ = ("_data", "_width", "_height")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._data = np.zeros(width * height, dtype=_DTYPE)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def index_of(self, selector: Selector) -> Optional[int]:
        """Translate *selector* into a linear index, or ``None`` if out of range."""

        row, col = selector
        if not (0 <= row < self._height and 0 <= col < self._width):
            return None
        return row * self._width + col

    def get(self, selector: Selector) -> Optional[int]:
        index = self.index_of(selector)
        if index is None:
            return None
        return int(self._data[index])

    def get_mut(self, selector: Selector) -> Optional[Cell]:
        if self.index_of(selector) is None:
            return None
        return Cell(self, (selector[0], selector[1]))

    def set(self, selector: Selector, value: int) -> bool:
        """Write *value* into the cell; returns ``False`` if out of range."""

        index = self.index_of(selector)
        if index is None:
            return False
        self._data[index] = _checked_value(value)
        return True

    def rows(self) -> Iterator[List[int]]:
        for row in range(self._height):
            start = row * self._width
            yield [int(v) for v in self._data[start : start + self._width]]

    def __getitem__(self, selector: Selector) -> int:
        value = self.get(selector)
        if value is None:
            raise InvalidIndexError(*selector)
        return value

    def __setitem__(self, selector: Selector, value: int) -> None:
        if not self.set(selector, value):
            raise InvalidIndexError(*selector)

    def __str__(self) -> str:
        return "".join(" ".join(str(v) for v in row) + "\n" for row in self.rows())

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"


def _checked_value(value: int) -> int:
    try:
        value = operator.index(value)
    except TypeError as exc:
        raise ValueError(f"Grid cells hold integers, got {value!r}") from exc
    if value < 0:
        raise ValueError(f"Grid cells are unsigned, got {value}")
    return value
