"""
Lazy iterators over containers and views.

Each ``elements()``/``rows()``/``cols()`` call returns a fresh iterator, so
the sequences are restartable; an individual iterator is single-pass and
is exhausted once its position reaches the bound.
"""

from __future__ import annotations

from typing import Any, Callable

__all__ = ['ElementIterator', 'RowIterator', 'ColumnIterator']


class _PositionIterator:
    """Yields ``self._make(pos)`` for pos in ``[0, bound)``."""

    __slots__ = ("_pos", "_bound")

    def __init__(self, bound: int):
        self._pos = 0
        self._bound = bound

    def _make(self, pos: int) -> Any:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self):
        if self._pos >= self._bound:
            raise StopIteration
        item = self._make(self._pos)
        self._pos += 1
        return item

    def __length_hint__(self) -> int:
        return self._bound - self._pos


class ElementIterator(_PositionIterator):
    """Element values in index order, read live from the source."""

    __slots__ = ("_getter",)

    def __init__(self, getter: Callable[[int], Any], size: int):
        super().__init__(size)
        self._getter = getter

    def _make(self, pos: int) -> Any:
        return self._getter(pos)


class RowIterator(_PositionIterator):
    """``RowView`` objects for every row of a matrix or submatrix."""

    __slots__ = ("_grid",)

    def __init__(self, grid):
        super().__init__(grid.nrows)
        self._grid = grid

    def _make(self, pos: int):
        return self._grid.row(pos)


class ColumnIterator(_PositionIterator):
    """``ColumnView`` objects for every column of a matrix or submatrix."""

    __slots__ = ("_grid",)

    def __init__(self, grid):
        super().__init__(grid.ncols)
        self._grid = grid

    def _make(self, pos: int):
        return self._grid.col(pos)
