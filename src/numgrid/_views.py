"""
Read-only Views

Non-owning windows into a Vector or Matrix:

- SubVector: ``(vector, offset, size)``
- RowView: one row of a matrix, ``(matrix, pos, offset, size)``
- ColumnView: one column of a matrix, ``(matrix, pos, offset, size)``
- Submatrix: ``(matrix, row_offset, col_offset, nrows, ncols)``

Views are created in O(1) without copying. They keep a strong reference
to the *root* owner, never to another view: building a view from a view
folds the offsets into a new view of the same root, so repeated slicing
never stacks indirections. Reads go to the owner's live storage, so a
mutation of the owner is visible through every view over it.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from ._base import NumericContainer, format_values
from ._dtypes import DType
from ._errors import OutOfBoundsError
from ._iterators import ColumnIterator, ElementIterator, RowIterator
from ._ranges import check_index, is_range, resolve_range
from ._typing import RangeIndex

__all__ = ['SubVector', 'RowView', 'ColumnView', 'Submatrix', 'MatrixLike', 'values_equal']


def values_equal(a, b) -> bool:
    """Same shape and same element values (element types may differ)."""
    return a.shape == b.shape and a.tolist() == b.tolist()


def _is_comparable(obj, ndim: int) -> bool:
    if getattr(obj, "ndim", None) != ndim:
        return False
    return isinstance(obj, (NumericContainer, _LineView, Submatrix))


def _check_window(offset: int, size: int, extent: int, what: str, axis: int = 0):
    if offset < 0 or size < 0 or offset + size > extent:
        raise OutOfBoundsError(
            offset + size, extent, axis,
            f"{what} window [{offset}, {offset + size}) out of range for extent {extent}",
        )


# =============================================================================
# One-dimensional Views
# =============================================================================

class _LineView:
    """Shared behaviour of SubVector, RowView and ColumnView."""

    __slots__ = ("_root", "_offset", "_size")

    ndim = 1
    _index_message = "index {index} out of range for view with number of elements {extent}"
    _slice_label = "View"

    def _read(self, k: int) -> Any:
        raise NotImplementedError

    def _window(self, offset: int, size: int) -> "_LineView":
        raise NotImplementedError

    @property
    def source(self):
        """The container this view reads from."""
        return self._root

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> Tuple[int]:
        return (self._size,)

    @property
    def dtype(self) -> DType:
        return self._root._data.dtype

    def __len__(self) -> int:
        return self._size

    def at(self, index: int) -> Any:
        """Element at a local index, checked against the view's own size."""
        k = check_index(index, self._size, self._index_message)
        return self._read(k)

    def __getitem__(self, index):
        if is_range(index):
            return self.slice(index)
        return self.at(index)

    def slice(self, index: RangeIndex) -> "_LineView":
        """Narrower view of the same kind; offsets are relative to this view."""
        offset, size = resolve_range(index, self._size, self._slice_label)
        return self._window(offset, size)

    def elements(self) -> ElementIterator:
        """Lazy iterator over the element values in index order."""
        return ElementIterator(self._read, self._size)

    def __iter__(self):
        return self.elements()

    def tolist(self) -> List:
        return [self._read(k) for k in range(self._size)]

    def to_vector(self):
        """Copy the viewed elements into a new Vector."""
        from ._array import Array
        from ._vector import Vector

        return Vector._wrap(Array.from_list(self.tolist(), self.dtype))

    copy = to_vector

    def to_numpy(self):
        return self.to_vector().to_numpy()

    def __eq__(self, other):
        if not _is_comparable(other, 1):
            return NotImplemented
        return values_equal(self, other)

    __hash__ = None


class SubVector(_LineView):
    """
    Window ``[offset, offset + size)`` of a Vector.

    Example:
        >>> v = vector(3, 1, 4, 1, 5)
        >>> v[1:4]
        SubVector([1, 4, 1], offset=1, dtype=int64)
    """

    __slots__ = ()

    _index_message = "index {index} out of range for vector slice with length {extent}"
    _slice_label = "Vector"

    def __init__(self, source, offset: int, size: int):
        """
        Args:
            source: Vector or SubVector
            offset: First element, relative to source
            size: Number of elements
        """
        _check_window(offset, size, len(source), "SubVector")
        self._root = source._root
        self._offset = source._offset + offset
        self._size = size

    def _read(self, k: int) -> Any:
        return self._root._data[self._offset + k]

    def _window(self, offset: int, size: int) -> "SubVector":
        return SubVector(self, offset, size)

    def __repr__(self) -> str:
        return (f"SubVector({format_values(self.tolist())}, offset={self._offset}, "
                f"dtype={self.dtype.label})")


class RowView(_LineView):
    """
    Columns ``[offset, offset + size)`` of row ``pos`` of a matrix.

    ``view[j]`` reads ``matrix.at(pos, offset + j)``.
    """

    __slots__ = ("_pos",)

    _index_message = "index {index} out of range for row matrix with number of elements {extent}"
    _slice_label = "Row"

    def __init__(self, source, pos: int, offset: int, size: int):
        """
        Args:
            source: Matrix or Submatrix
            pos: Row index, relative to source
            offset: First column, relative to source
            size: Number of columns
        """
        pos = check_index(pos, source.nrows,
                          "Row index {index} out of range for matrix with number of rows {extent}")
        _check_window(offset, size, source.ncols, "RowView", axis=1)
        self._root = source._root
        self._pos = source._row_offset + pos
        self._offset = source._col_offset + offset
        self._size = size

    @property
    def pos(self) -> int:
        """Row index in the root matrix."""
        return self._pos

    def _read(self, k: int) -> Any:
        root = self._root
        return root._data[self._pos * root._ncols + self._offset + k]

    def _window(self, offset: int, size: int) -> "RowView":
        view = RowView.__new__(RowView)
        view._root = self._root
        view._pos = self._pos
        view._offset = self._offset + offset
        view._size = size
        return view

    def __repr__(self) -> str:
        return format_values(self.tolist())


class ColumnView(_LineView):
    """
    Rows ``[offset, offset + size)`` of column ``pos`` of a matrix.

    ``view[i]`` reads ``matrix.at(offset + i, pos)``.
    """

    __slots__ = ("_pos",)

    _index_message = "index {index} out of range for column matrix with number of elements {extent}"
    _slice_label = "Column"

    def __init__(self, source, pos: int, offset: int, size: int):
        """
        Args:
            source: Matrix or Submatrix
            pos: Column index, relative to source
            offset: First row, relative to source
            size: Number of rows
        """
        pos = check_index(pos, source.ncols,
                          "Column index {index} out of range for matrix with number of columns {extent}",
                          axis=1)
        _check_window(offset, size, source.nrows, "ColumnView")
        self._root = source._root
        self._pos = source._col_offset + pos
        self._offset = source._row_offset + offset
        self._size = size

    @property
    def pos(self) -> int:
        """Column index in the root matrix."""
        return self._pos

    def _read(self, k: int) -> Any:
        root = self._root
        return root._data[(self._offset + k) * root._ncols + self._pos]

    def _window(self, offset: int, size: int) -> "ColumnView":
        view = ColumnView.__new__(ColumnView)
        view._root = self._root
        view._pos = self._pos
        view._offset = self._offset + offset
        view._size = size
        return view

    def __repr__(self) -> str:
        return format_values(self.tolist(), separator="; ")


# =============================================================================
# Two-dimensional Access
# =============================================================================

_ROW_MESSAGE = "Row index {index} out of range for matrix with number of rows {extent}"
_COL_MESSAGE = "Column index {index} out of range for matrix with number of columns {extent}"


class MatrixLike:
    """
    Indexing, slicing and iteration shared by Matrix and Submatrix.

    Implementers provide ``_root`` (the owning Matrix), ``_row_offset``,
    ``_col_offset``, ``_nrows`` and ``_ncols``. All indices are checked
    against the implementer's own extents before being translated into the
    root's flat row-major storage.
    """

    __slots__ = ()

    ndim = 2

    @property
    def nrows(self) -> int:
        """Number of rows."""
        return self._nrows

    @property
    def ncols(self) -> int:
        """Number of columns."""
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        """``(nrows, ncols)``."""
        return (self._nrows, self._ncols)

    def __len__(self) -> int:
        return self._nrows

    def _flat(self, i: int, j: int) -> int:
        return (self._row_offset + i) * self._root._ncols + self._col_offset + j

    def _check_row(self, i) -> int:
        return check_index(i, self._nrows, _ROW_MESSAGE, axis=0)

    def _check_col(self, j) -> int:
        return check_index(j, self._ncols, _COL_MESSAGE, axis=1)

    def at(self, i: int, j: int) -> Any:
        """
        Element at row i, column j.

        Raises:
            OutOfBoundsError: If i >= nrows or j >= ncols, naming the axis
        """
        i = self._check_row(i)
        j = self._check_col(j)
        return self._root._data[self._flat(i, j)]

    def row(self, i: int) -> RowView:
        """View of row i."""
        return RowView(self, i, 0, self._ncols)

    def col(self, j: int) -> ColumnView:
        """View of column j."""
        return ColumnView(self, j, 0, self._nrows)

    def rows(self) -> RowIterator:
        """Lazy iterator of RowView, top to bottom."""
        return RowIterator(self)

    def cols(self) -> ColumnIterator:
        """Lazy iterator of ColumnView, left to right."""
        return ColumnIterator(self)

    def __iter__(self):
        return self.rows()

    def elements(self) -> ElementIterator:
        """Lazy iterator over element values in row-major order."""
        ncols = self._ncols

        def read(k: int) -> Any:
            return self._root._data[self._flat(k // ncols, k % ncols)]

        return ElementIterator(read, self._nrows * ncols)

    def slice(self, row_range: RangeIndex = slice(None),
              col_range: RangeIndex = slice(None)) -> "Submatrix":
        """
        Rectangular window of this matrix.

        Args:
            row_range: Any range form (slice or Inclusive)
            col_range: Any range form (slice or Inclusive)

        Returns:
            Submatrix addressed against the root matrix

        Raises:
            InvalidRangeError: If an exact or inclusive range starts after it ends
            OutOfBoundsError: If a range reaches past the number of rows or columns
        """
        row_offset, nrows = resolve_range(row_range, self._nrows, "Matrix", 0, "number of rows")
        col_offset, ncols = resolve_range(col_range, self._ncols, "Matrix", 1, "number of columns")
        return Submatrix(self, row_offset, col_offset, nrows, ncols)

    def __getitem__(self, key):
        """
        ``m[i, j]`` element, ``m[i]`` row, ``m[rows, cols]`` submatrix.

        Mixing an integer with a range gives a partial row or column view.
        """
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"matrices take two indices, got {len(key)}")
            r, c = key
            if is_range(r) and is_range(c):
                return self.slice(r, c)
            if is_range(c):
                offset, size = resolve_range(c, self._ncols, "Matrix", 1, "number of columns")
                return RowView(self, self._check_row(r), offset, size)
            if is_range(r):
                offset, size = resolve_range(r, self._nrows, "Matrix", 0, "number of rows")
                return ColumnView(self, self._check_col(c), offset, size)
            return self.at(r, c)
        if is_range(key):
            return self.slice(key)
        return self.row(key)

    def tolist(self) -> List[List]:
        """Nested list of rows."""
        data = self._root._data
        return [
            [data[self._flat(i, j)] for j in range(self._ncols)]
            for i in range(self._nrows)
        ]

    def _flat_values(self) -> List:
        data = self._root._data
        return [data[self._flat(i, j)] for i in range(self._nrows) for j in range(self._ncols)]

    def _format_rows(self) -> str:
        from ._config import config

        rows = [format_values(row) for row in self.tolist()]
        printing = config.printing
        if len(rows) > printing.threshold:
            edge = printing.edgeitems
            rows = rows[:edge] + ["..."] + rows[len(rows) - edge:]
        return "[" + ", ".join(rows) + "]"


class Submatrix(MatrixLike):
    """
    Rectangular window of a matrix.

    Supports the same ``at``/``row``/``col``/``rows``/``cols``/``slice``
    contract as Matrix; the rows, columns and submatrices it returns are
    addressed directly against the root matrix.

    Example:
        >>> m = matrix([3, 1, 4], [1, 5, 9])
        >>> m[0:2, 1:3].tolist()
        [[1, 4], [5, 9]]
    """

    __slots__ = ("_root", "_row_offset", "_col_offset", "_nrows", "_ncols")

    def __init__(self, source, row_offset: int, col_offset: int, nrows: int, ncols: int):
        """
        Args:
            source: Matrix or Submatrix
            row_offset: First row, relative to source
            col_offset: First column, relative to source
            nrows: Number of rows
            ncols: Number of columns
        """
        _check_window(row_offset, nrows, source.nrows, "Submatrix rows", axis=0)
        _check_window(col_offset, ncols, source.ncols, "Submatrix columns", axis=1)
        self._root = source._root
        self._row_offset = source._row_offset + row_offset
        self._col_offset = source._col_offset + col_offset
        self._nrows = nrows
        self._ncols = ncols

    @property
    def source(self):
        """The matrix this view reads from."""
        return self._root

    @property
    def offsets(self) -> Tuple[int, int]:
        """``(row_offset, col_offset)`` in the root matrix."""
        return (self._row_offset, self._col_offset)

    @property
    def size(self) -> int:
        return self._nrows * self._ncols

    @property
    def dtype(self) -> DType:
        return self._root._data.dtype

    def to_matrix(self):
        """Copy the viewed elements into a new Matrix."""
        from ._array import Array
        from ._matrix import Matrix

        data = Array.from_list(self._flat_values(), self.dtype)
        return Matrix._from_flat(self._nrows, self._ncols, data)

    copy = to_matrix

    def to_numpy(self):
        return self.to_matrix().to_numpy()

    def __eq__(self, other):
        if not _is_comparable(other, 2):
            return NotImplemented
        return values_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Submatrix({self._format_rows()}, offsets={self.offsets}, "
                f"dtype={self.dtype.label})")
