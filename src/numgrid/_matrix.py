"""
Matrix - Two-dimensional Numeric Container

Owned flat storage of ``nrows * ncols`` elements in row-major order:
element ``(i, j)`` lives at flat index ``i * ncols + j``. Elementwise
arithmetic runs on the flat buffer; indexing, row/column views and
submatrix slicing come from MatrixLike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

from ._array import Array
from ._base import NumericContainer
from ._dtypes import DType, infer_dtype, scalar_result_dtype, validate_dtype
from ._errors import InconsistentShapeError
from ._typing import DTypeLike, MatrixInput, ShapeLike, ensure_shape, is_ndarray
from ._views import MatrixLike, Submatrix, values_equal

if TYPE_CHECKING:
    from ._loaders import CSVLoader

__all__ = ['Matrix']


def _default_float() -> DType:
    from ._config import config
    return config.dtype.default_float


class Matrix(MatrixLike, NumericContainer):
    """
    Two-dimensional numeric container.

    The shape is fixed at construction; ``len(data) == nrows * ncols``
    always holds. Elements change only through index assignment, the
    ``*_mut`` methods and ``+=``/``-=``/``*=``.

    Args:
        rows: Rectangular nested sequence of numbers (rows of equal length),
            a 2-D numpy array, or another Matrix/Submatrix
        dtype: Element type; inferred from the elements if omitted

    Raises:
        InconsistentShapeError: If a row's length differs from the first row's

    Example:
        >>> m = Matrix([[1, 2, 3], [4, 5, 6]])
        >>> m.shape
        (2, 3)
        >>> m.at(1, 2)
        6
        >>> m.col(1).tolist()
        [2, 5]
    """

    __slots__ = ("_nrows", "_ncols", "_data", "__weakref__")

    _kind = "Matrix"
    _row_offset = 0
    _col_offset = 0

    def __init__(self, rows: MatrixInput = (), dtype: DTypeLike = None):
        if isinstance(rows, MatrixLike):
            source_dtype = rows.dtype
            self._nrows, self._ncols = rows.shape
            self._data = Array.from_list(rows._flat_values(), validate_dtype(dtype, source_dtype))
            return
        if is_ndarray(rows):
            if rows.ndim != 2:
                raise ValueError(f"Matrix requires a 2-D array, got {rows.ndim}-D")
            self._nrows, self._ncols = rows.shape
            self._data = Array.from_numpy(rows, None if dtype is None else validate_dtype(dtype))
            return

        nested = [list(row) for row in rows]
        ncols = len(nested[0]) if nested else 0
        for row in nested:
            if len(row) != ncols:
                raise InconsistentShapeError()
        flat = [x for row in nested for x in row]
        if dtype is None:
            dtype = infer_dtype(flat)
        self._nrows = len(nested)
        self._ncols = ncols
        self._data = Array.from_list(flat, validate_dtype(dtype))

    @classmethod
    def _from_flat(cls, nrows: int, ncols: int, data: Array) -> "Matrix":
        """Adopt a flat row-major Array without copying."""
        if data.size != nrows * ncols:
            raise ValueError(
                f"cannot arrange {data.size} elements into a {nrows}x{ncols} matrix"
            )
        obj = cls.__new__(cls)
        obj._nrows = nrows
        obj._ncols = ncols
        obj._data = data
        return obj

    @property
    def _root(self) -> "Matrix":
        return self

    # -------------------------------------------------------------------------
    # NumericContainer hooks
    # -------------------------------------------------------------------------

    def _shape_key(self) -> Tuple[int, int]:
        return (self._nrows, self._ncols)

    def _operand(self, other) -> Optional["Matrix"]:
        if isinstance(other, Matrix):
            return other
        if isinstance(other, Submatrix):
            return other.to_matrix()
        return None

    def _rebuild(self, data: Array) -> "Matrix":
        return Matrix._from_flat(self._nrows, self._ncols, data)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @classmethod
    def full(cls, shape: ShapeLike, value, dtype: DTypeLike = None) -> "Matrix":
        """
        Matrix of the given ``(nrows, ncols)`` shape filled with value.

        Example:
            >>> Matrix.full((2, 2), 7).tolist()
            [[7, 7], [7, 7]]
        """
        nrows, ncols = ensure_shape(shape)
        dtype = validate_dtype(dtype) if dtype is not None else infer_dtype([value])
        return cls._from_flat(nrows, ncols, Array.full(nrows * ncols, value, dtype))

    @classmethod
    def full_like(cls, other, value) -> "Matrix":
        """Matrix with the shape of other, every element equal to value."""
        nrows, ncols = other.shape
        dtype = scalar_result_dtype(other.dtype, value)
        return cls._from_flat(nrows, ncols, Array.full(nrows * ncols, value, dtype))

    @classmethod
    def zeros(cls, shape: ShapeLike, dtype: DTypeLike = None) -> "Matrix":
        """Matrix of zeros (float64 unless dtype is given)."""
        nrows, ncols = ensure_shape(shape)
        dtype = validate_dtype(dtype, _default_float())
        return cls._from_flat(nrows, ncols, Array.zeros(nrows * ncols, dtype))

    @classmethod
    def zeros_like(cls, other) -> "Matrix":
        """Matrix of zeros with the shape and element type of other."""
        nrows, ncols = other.shape
        return cls._from_flat(nrows, ncols, Array.zeros(nrows * ncols, other.dtype))

    @classmethod
    def ones(cls, shape: ShapeLike, dtype: DTypeLike = None) -> "Matrix":
        """Matrix of ones (float64 unless dtype is given)."""
        nrows, ncols = ensure_shape(shape)
        dtype = validate_dtype(dtype, _default_float())
        return cls._from_flat(nrows, ncols, Array.full(nrows * ncols, dtype.one, dtype))

    @classmethod
    def ones_like(cls, other) -> "Matrix":
        """Matrix of ones with the shape and element type of other."""
        nrows, ncols = other.shape
        return cls._from_flat(nrows, ncols, Array.full(nrows * ncols, other.dtype.one, other.dtype))

    @classmethod
    def uniform(cls, shape: ShapeLike, low, high, dtype: DTypeLike = None,
                sampler=None) -> "Matrix":
        """
        Samples from ``[low, high)``, filled row by row.

        Raises:
            InvalidRangeError: If low >= high
        """
        from ._random import RandomMatrixBuilder

        return RandomMatrixBuilder(sampler=sampler).uniform(shape, low, high, dtype)

    @classmethod
    def normal(cls, shape: ShapeLike, mean: float, std_dev: float,
               dtype: DTypeLike = None, sampler=None) -> "Matrix":
        """
        Samples from a normal distribution, filled row by row.

        Raises:
            NegativeStandardDeviationError: If std_dev < 0
        """
        from ._random import RandomMatrixBuilder

        return RandomMatrixBuilder(sampler=sampler).normal(shape, mean, std_dev, dtype)

    @classmethod
    def from_vector(cls, vector, shape: ShapeLike) -> "Matrix":
        """
        Arrange a vector's elements row by row into the given shape (copy).

        Raises:
            ValueError: If the vector length is not ``nrows * ncols``
        """
        nrows, ncols = ensure_shape(shape)
        return cls._from_flat(nrows, ncols, Array.from_list(vector.tolist(), vector.dtype))

    @classmethod
    def from_csv(cls, path) -> "CSVLoader":
        """
        Start loading a matrix from a CSV file.

        Example:
            >>> m = Matrix.from_csv("data.csv").has_headers(True).load()
        """
        from ._loaders import CSVLoader

        return CSVLoader(path)

    @classmethod
    def from_numpy(cls, array, dtype: DTypeLike = None) -> "Matrix":
        """Copy a 2-D numpy array into a new Matrix."""
        return cls(array, dtype)

    # -------------------------------------------------------------------------
    # Element Access
    # -------------------------------------------------------------------------

    def at(self, i: int, j: int) -> Any:
        """
        Element at row i, column j.

        Raises:
            OutOfBoundsError: If i >= nrows or j >= ncols, naming the axis
        """
        i = self._check_row(i)
        j = self._check_col(j)
        return self._data[i * self._ncols + j]

    def __setitem__(self, key, value):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix assignment takes exactly two integer indices: m[i, j] = x")
        i = self._check_row(key[0])
        j = self._check_col(key[1])
        self._data[i * self._ncols + j] = value

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def _flat_values(self):
        return self._data.tolist()

    def copy(self) -> "Matrix":
        return Matrix._from_flat(self._nrows, self._ncols, self._data.copy())

    def to_vector(self):
        """Row-major flattening into a new Vector."""
        from ._vector import Vector

        return Vector._wrap(self._data.copy())

    def to_numpy(self):
        """Copy into a 2-D numpy array."""
        return self._data.to_numpy().reshape(self._nrows, self._ncols)

    def __array__(self, dtype=None, copy=None):
        array = self.to_numpy()
        return array if dtype is None else array.astype(dtype)

    # -------------------------------------------------------------------------
    # Comparison & Representation
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, (Matrix, Submatrix)):
            return values_equal(self, other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._format_rows()}, dtype={self.dtype.label})"

    def __str__(self) -> str:
        return self._format_rows()
