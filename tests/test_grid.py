from __future__ import annotations

import pytest

from seqedit.grid import Grid, InvalidIndexError


def test_index_of_is_row_major() -> None:
    grid = Grid(3, 3)
    expected = 0
    for row in range(3):
        for col in range(3):
            assert grid.index_of((row, col)) == expected
            expected += 1


def test_index_of_uses_width_for_rows() -> None:
    grid = Grid(4, 2)
    assert grid.index_of((1, 0)) == 4
    assert grid.index_of((1, 3)) == 7


@pytest.mark.parametrize("selector", [(0, 3), (2, 0), (3, 3), (-1, 0), (0, -1)])
def test_out_of_range_selectors_are_absent(selector: tuple[int, int]) -> None:
    grid = Grid(3, 2)
    assert grid.index_of(selector) is None
    assert grid.get(selector) is None
    assert grid.get_mut(selector) is None
    assert grid.set(selector, 5) is False


def test_fresh_grid_reads_zero_everywhere() -> None:
    grid = Grid(4, 3)
    assert (grid.width, grid.height) == (4, 3)
    for row in range(grid.height):
        for col in range(grid.width):
            assert grid.get((row, col)) == 0
            assert grid[row, col] == 0


def test_get_mut_writes_through() -> None:
    grid = Grid(3, 3)
    cell = grid.get_mut((1, 0))
    assert cell is not None
    cell.value = 112
    assert grid.get((1, 0)) == 112
    assert cell.value == 112
    assert cell.selector == (1, 0)
    assert grid.get((0, 1)) == 0


def test_subscript_round_trip() -> None:
    grid = Grid(3, 3)
    grid[1, 1] = 112
    assert grid[1, 1] == 112
    assert isinstance(grid[1, 1], int)


def test_subscript_out_of_range_raises_with_coordinates() -> None:
    grid = Grid(3, 3)
    with pytest.raises(InvalidIndexError) as excinfo:
        grid[3, 0]
    assert (excinfo.value.row, excinfo.value.col) == (3, 0)
    assert "Invalid index (3, 0)" in str(excinfo.value)
    with pytest.raises(IndexError):
        grid[0, 3] = 1


def test_empty_grid_has_no_cells() -> None:
    grid = Grid(0, 0)
    assert grid.get((0, 0)) is None
    assert str(grid) == ""


def test_negative_dimensions_rejected() -> None:
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_cells_are_unsigned() -> None:
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid[0, 0] = -1


@pytest.mark.parametrize("value", [1.7, "3", None])
def test_cells_reject_non_integers(value: object) -> None:
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid[0, 0] = value  # type: ignore[assignment]
    assert grid[0, 0] == 0


def test_oversized_grid_fails_to_allocate() -> None:
    with pytest.raises((MemoryError, ValueError, OverflowError)):
        Grid(2**40, 2**40)


def test_display_renders_rows() -> None:
    grid = Grid(3, 2)
    grid[0, 1] = 1
    grid[1, 2] = 7
    assert str(grid) == "0 1 0\n0 0 7\n"
    assert list(grid.rows()) == [[0, 1, 0], [0, 0, 7]]
