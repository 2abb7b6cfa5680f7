"""
Vector - One-dimensional Numeric Container

Owned, contiguous, homogeneous storage with elementwise arithmetic,
bounds-checked indexing and O(1) slicing into SubVector views.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, List, Optional, Tuple

from ._array import Array
from ._base import NumericContainer, format_values
from ._dtypes import DType, infer_dtype, scalar_result_dtype, validate_dtype
from ._errors import InvalidStepValueError
from ._iterators import ElementIterator
from ._ranges import check_index, is_range, resolve_range
from ._typing import DTypeLike, RangeIndex, VectorInput, is_ndarray
from ._views import SubVector, _LineView, values_equal

__all__ = ['Vector']


_INDEX_MESSAGE = "index {index} out of range for vector with length {extent}"


def _check_length(length: Any) -> int:
    try:
        length = operator.index(length)
    except TypeError:
        raise TypeError(f"vector length must be an integer, got {type(length).__name__}") from None
    if length < 0:
        raise ValueError(f"vector length must be non-negative, got {length}")
    return length


def _default_float() -> DType:
    from ._config import config
    return config.dtype.default_float


class Vector(NumericContainer):
    """
    One-dimensional numeric container.

    The length is fixed at construction. Elements change only through
    index assignment, the ``*_mut`` methods and ``+=``/``-=``/``*=``.

    Args:
        elements: Iterable of numbers, numpy array, or another Vector/view
        dtype: Element type; inferred from the elements if omitted

    Example:
        >>> v = Vector([1, 2, 3])
        >>> v + 1
        Vector([2, 3, 4], dtype=int64)
        >>> 10 - v
        Vector([9, 8, 7], dtype=int64)
    """

    __slots__ = ("_data", "__weakref__")

    _kind = "Vector"
    _offset = 0
    ndim = 1

    def __init__(self, elements: VectorInput = (), dtype: DTypeLike = None):
        if isinstance(elements, (Vector, _LineView)):
            source_dtype = elements.dtype
            self._data = Array.from_list(elements.tolist(), validate_dtype(dtype, source_dtype))
        elif is_ndarray(elements):
            if elements.ndim != 1:
                raise ValueError(f"Vector requires a 1-D array, got {elements.ndim}-D")
            self._data = Array.from_numpy(elements, None if dtype is None else validate_dtype(dtype))
        else:
            values = list(elements)
            if dtype is None:
                dtype = infer_dtype(values)
            self._data = Array.from_list(values, validate_dtype(dtype))

    @classmethod
    def _wrap(cls, data: Array) -> "Vector":
        """Adopt a flat Array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @property
    def _root(self) -> "Vector":
        return self

    # -------------------------------------------------------------------------
    # NumericContainer hooks
    # -------------------------------------------------------------------------

    def _shape_key(self) -> int:
        return self._data.size

    def _operand(self, other) -> Optional["Vector"]:
        if isinstance(other, Vector):
            return other
        if isinstance(other, _LineView):
            return other.to_vector()
        return None

    def _rebuild(self, data: Array) -> "Vector":
        return Vector._wrap(data)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int]:
        return (self._data.size,)

    def __len__(self) -> int:
        return self._data.size

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @classmethod
    def full(cls, length: int, value, dtype: DTypeLike = None) -> "Vector":
        """
        Vector of the given length with every element equal to value.

        Example:
            >>> Vector.full(5, 2.5).tolist()
            [2.5, 2.5, 2.5, 2.5, 2.5]
        """
        length = _check_length(length)
        dtype = validate_dtype(dtype) if dtype is not None else infer_dtype([value])
        return cls._wrap(Array.full(length, value, dtype))

    @classmethod
    def full_like(cls, other, value) -> "Vector":
        """Vector with the length of other, every element equal to value."""
        dtype = scalar_result_dtype(other.dtype, value)
        return cls._wrap(Array.full(len(other), value, dtype))

    @classmethod
    def zeros(cls, length: int, dtype: DTypeLike = None) -> "Vector":
        """Vector of zeros (float64 unless dtype is given)."""
        dtype = validate_dtype(dtype, _default_float())
        return cls._wrap(Array.zeros(_check_length(length), dtype))

    @classmethod
    def zeros_like(cls, other) -> "Vector":
        """Vector of zeros with the length and element type of other."""
        return cls._wrap(Array.zeros(len(other), other.dtype))

    @classmethod
    def ones(cls, length: int, dtype: DTypeLike = None) -> "Vector":
        """Vector of ones (float64 unless dtype is given)."""
        dtype = validate_dtype(dtype, _default_float())
        return cls._wrap(Array.full(_check_length(length), dtype.one, dtype))

    @classmethod
    def ones_like(cls, other) -> "Vector":
        """Vector of ones with the length and element type of other."""
        return cls._wrap(Array.full(len(other), other.dtype.one, other.dtype))

    @classmethod
    def range(cls, start, stop, step=1, dtype: DTypeLike = None) -> "Vector":
        """
        Values ``start, start + step, start + 2*step, ...`` short of stop.

        Values are accumulated by repeated addition. A positive step stops
        before reaching stop from below, a negative step before reaching it
        from above. ``start == stop`` gives ``[start]``.

        Raises:
            InvalidStepValueError: If step is zero, or its sign disagrees
                with the direction from start to stop

        Example:
            >>> Vector.range(1, 3, 0.5).tolist()
            [1.0, 1.5, 2.0, 2.5]
        """
        for name, bound in (("start", start), ("stop", stop), ("step", step)):
            if not isinstance(bound, numbers.Real):
                raise TypeError(f"range {name} must be a real number, got {type(bound).__name__}")
        if step == 0:
            raise InvalidStepValueError(f"step={step} should not be zero")
        if start < stop and step < 0:
            raise InvalidStepValueError(
                f"step={step} should be positive if start={start} < stop={stop}"
            )
        if start > stop and step > 0:
            raise InvalidStepValueError(
                f"step={step} should be negative if start={start} > stop={stop}"
            )
        if dtype is None:
            dtype = infer_dtype([start, stop, step])
        dtype = validate_dtype(dtype)

        values = []
        if start == stop:
            values.append(start)
        else:
            current = start
            if step > 0:
                while current < stop:
                    values.append(current)
                    current = current + step
            else:
                while current > stop:
                    values.append(current)
                    current = current + step
        return cls._wrap(Array.from_list(values, dtype))

    @classmethod
    def linspace(cls, length: int, start, stop, dtype: DTypeLike = None) -> "Vector":
        """
        Exactly ``length`` evenly spaced values over the closed interval.

        The spacing is ``(stop - start) / (length - 1)``, accumulated by
        repeated addition; the last element is set to stop exactly so
        rounding drift never leaks into it.

        Example:
            >>> Vector.linspace(5, 1.0, 10.0).tolist()
            [1.0, 3.25, 5.5, 7.75, 10.0]
        """
        length = _check_length(length)
        dtype = validate_dtype(dtype, _default_float())
        if not dtype.is_float:
            raise TypeError(f"linspace requires a floating point dtype, got {dtype.type_name}")
        if length == 0:
            return cls._wrap(Array(0, dtype))
        if length == 1:
            return cls._wrap(Array.from_list([stop], dtype))

        step = (stop - start) / (length - 1)
        values = []
        current = float(start)
        for _ in range(length):
            values.append(current)
            current += step
        values[-1] = float(stop)
        return cls._wrap(Array.from_list(values, dtype))

    @classmethod
    def uniform(cls, length: int, low, high, dtype: DTypeLike = None,
                sampler=None) -> "Vector":
        """
        Samples from the half-open interval ``[low, high)``.

        Integer bounds give integer samples unless dtype says otherwise.

        Raises:
            InvalidRangeError: If low >= high
        """
        from ._random import RandomVectorBuilder

        return RandomVectorBuilder(sampler=sampler).uniform(length, low, high, dtype)

    @classmethod
    def normal(cls, length: int, mean: float, std_dev: float,
               dtype: DTypeLike = None, sampler=None) -> "Vector":
        """
        Samples from a normal distribution.

        Raises:
            NegativeStandardDeviationError: If std_dev < 0
        """
        from ._random import RandomVectorBuilder

        return RandomVectorBuilder(sampler=sampler).normal(length, mean, std_dev, dtype)

    # -------------------------------------------------------------------------
    # Indexing & Slicing
    # -------------------------------------------------------------------------

    def at(self, index: int) -> Any:
        """
        Element at index (negative indices count from the end).

        Raises:
            OutOfBoundsError: If index is outside the vector
        """
        return self._data[check_index(index, self._data.size, _INDEX_MESSAGE)]

    def __getitem__(self, index):
        if is_range(index):
            return self.slice(index)
        return self.at(index)

    def __setitem__(self, index, value):
        if is_range(index):
            raise TypeError("slice assignment is not supported; assign elements individually")
        self._data[check_index(index, self._data.size, _INDEX_MESSAGE)] = value

    def slice(self, index: RangeIndex) -> SubVector:
        """
        O(1) view of a range of elements.

        Args:
            index: slice (``a:b``, ``a:``, ``:b``, ``:``) or Inclusive

        Raises:
            InvalidRangeError: If an exact or inclusive range starts after it ends
            OutOfBoundsError: If the range reaches past the end of the vector
        """
        offset, size = resolve_range(index, self._data.size, "Vector")
        return SubVector(self, offset, size)

    # -------------------------------------------------------------------------
    # Iteration & Conversion
    # -------------------------------------------------------------------------

    def elements(self) -> ElementIterator:
        """Lazy iterator over the element values in index order."""
        return ElementIterator(self._data.__getitem__, self._data.size)

    def __iter__(self):
        return self.elements()

    def tolist(self) -> List:
        return self._data.tolist()

    def copy(self) -> "Vector":
        return Vector._wrap(self._data.copy())

    def to_numpy(self):
        """Copy into a 1-D numpy array."""
        return self._data.to_numpy()

    def __array__(self, dtype=None, copy=None):
        array = self.to_numpy()
        return array if dtype is None else array.astype(dtype)

    @classmethod
    def from_numpy(cls, array, dtype: DTypeLike = None) -> "Vector":
        """Copy a 1-D numpy array into a new Vector."""
        return cls(array, dtype)

    # -------------------------------------------------------------------------
    # Comparison & Representation
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, (Vector, _LineView)):
            return values_equal(self, other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({format_values(self._data.tolist())}, dtype={self.dtype.label})"

    def __str__(self) -> str:
        return format_values(self._data.tolist())
