"""
Flat Typed Buffer

Contiguous ctypes-backed storage shared by Vector and Matrix. A Matrix
keeps one Array of ``nrows * ncols`` elements in row-major order.
"""

import ctypes
from typing import Any, Iterable, Iterator, List, Union

from ._dtypes import DType, validate_dtype

__all__ = ['Array']


class Array:
    """
    Contiguous typed buffer.

    Every value written through the Array is converted with
    ``DType.coerce``, so integer storage never wraps around silently.

    Attributes:
        dtype (DType): Element type
        size (int): Number of elements
        nbytes (int): Total bytes

    Example:
        >>> arr = Array.zeros(4, dtype='i32')
        >>> arr[0] = 7
        >>> arr.tolist()
        [7, 0, 0, 0]
    """

    __slots__ = ("_size", "_dtype", "_data")

    def __init__(self, size: int, dtype: Union[str, DType] = DType.FLOAT64):
        """
        Allocate a zero-initialized array.

        Args:
            size: Number of elements
            dtype: Element type (DType or name)
        """
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        self._size = size
        self._dtype = validate_dtype(dtype)
        self._data = (self._dtype.ctype * size)()

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._size

    @property
    def dtype(self) -> DType:
        """Element type."""
        return self._dtype

    @property
    def itemsize(self) -> int:
        """Bytes per element."""
        return self._dtype.itemsize

    @property
    def nbytes(self) -> int:
        """Total bytes."""
        return self._size * self._dtype.itemsize

    # -------------------------------------------------------------------------
    # Initialization Methods
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, size: int, dtype: Union[str, DType] = DType.FLOAT64) -> 'Array':
        """Create zero-initialized array."""
        return cls(size, dtype)

    @classmethod
    def full(cls, size: int, value, dtype: Union[str, DType] = DType.FLOAT64) -> 'Array':
        """Create array with every element equal to value."""
        arr = cls(size, dtype)
        arr.fill(value)
        return arr

    @classmethod
    def from_list(cls, data: Iterable, dtype: Union[str, DType] = DType.FLOAT64) -> 'Array':
        """Create array from a sequence of Python numbers."""
        dtype = validate_dtype(dtype)
        values = [dtype.coerce(v) for v in data]
        arr = cls.__new__(cls)
        arr._size = len(values)
        arr._dtype = dtype
        arr._data = (dtype.ctype * len(values))(*values)
        return arr

    @classmethod
    def from_numpy(cls, array: Any, dtype: Union[str, DType, None] = None) -> 'Array':
        """
        Create array from a numpy array (copied, flattened in C order).

        Args:
            array: numpy.ndarray
            dtype: Target element type (defaults to the array's own)
        """
        import numpy as np

        dtype = validate_dtype(dtype if dtype is not None else array.dtype)
        if dtype.is_integer and array.dtype.kind == "f":
            return cls.from_list(array.ravel().tolist(), dtype)
        flat = np.ascontiguousarray(array, dtype=dtype.label).ravel()
        arr = cls.__new__(cls)
        arr._size = flat.size
        arr._dtype = dtype
        arr._data = (dtype.ctype * flat.size).from_buffer_copy(flat.tobytes())
        return arr

    # -------------------------------------------------------------------------
    # Element Access
    # -------------------------------------------------------------------------

    def __getitem__(self, idx: int):
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError(f"Index {idx} out of bounds [0, {self._size})")
        return self._data[idx]

    def __setitem__(self, idx: int, value):
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError(f"Index {idx} out of bounds [0, {self._size})")
        self._data[idx] = self._dtype.coerce(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def assign(self, values: Iterable):
        """
        Overwrite every element in place.

        Raises:
            ValueError: If values does not hold exactly ``size`` elements
        """
        coerced = [self._dtype.coerce(v) for v in values]
        if len(coerced) != self._size:
            raise ValueError(f"Expected {self._size} values, got {len(coerced)}")
        self._data[:] = coerced

    def tobytes(self) -> bytes:
        """Convert to bytes."""
        return bytes(self._data)

    def tolist(self) -> List:
        """Convert to Python list."""
        return self._data[:]

    def to_numpy(self):
        """
        Convert to a 1-D numpy array (copy).

        Returns:
            numpy.ndarray
        """
        import numpy as np

        return np.frombuffer(self.tobytes(), dtype=self._dtype.label).copy()

    # -------------------------------------------------------------------------
    # Copy Operations
    # -------------------------------------------------------------------------

    def copy(self) -> 'Array':
        """Create a deep copy."""
        new = Array(self._size, self._dtype)
        if self._size:
            ctypes.memmove(new._data, self._data, self.nbytes)
        return new

    def fill(self, value):
        """Fill array with a constant value."""
        value = self._dtype.coerce(value)
        for i in range(self._size):
            self._data[i] = value

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        values = self.tolist()
        if self._size <= 6:
            data_str = str(values)
        else:
            preview = [str(v) for v in values[:3]] + ['...'] + [str(v) for v in values[-3:]]
            data_str = "[" + ", ".join(preview) + "]"
        return f"Array({data_str}, dtype={self._dtype.label})"
