"""
Random Builders

Vectors and matrices filled with samples from a pluggable sampler. The
default sampler wraps ``numpy.random.Generator``; any object implementing
the Sampler protocol can be passed instead.

Example:
    >>> builder = RandomVectorBuilder(seed=42)
    >>> v = builder.uniform(5, 0.0, 1.0)
    >>> w = RandomVectorBuilder(seed=42).uniform(5, 0.0, 1.0)
    >>> v == w
    True
"""

from __future__ import annotations

import logging
import numbers
from typing import List, Optional, Protocol, runtime_checkable

import numpy as np

from ._array import Array
from ._dtypes import DType, infer_dtype, validate_dtype
from ._errors import InvalidRangeError, NegativeStandardDeviationError
from ._typing import DTypeLike, ShapeLike, ensure_shape

__all__ = ['Sampler', 'NumpySampler', 'RandomVectorBuilder', 'RandomMatrixBuilder']

logger = logging.getLogger("numgrid.random")


# =============================================================================
# Sampler Protocol
# =============================================================================

@runtime_checkable
class Sampler(Protocol):
    """
    Source of random values.

    Both methods return a list of exactly ``size`` Python numbers suitable
    for storage as ``dtype``.
    """

    def uniform(self, size: int, low, high, dtype: DType) -> List:
        """Samples from the half-open interval ``[low, high)``."""
        ...

    def normal(self, size: int, mean: float, std_dev: float, dtype: DType) -> List:
        """Samples from a normal distribution."""
        ...


class NumpySampler:
    """
    Sampler backed by ``numpy.random.default_rng``.

    Args:
        seed: Seed for reproducible output; None draws fresh OS entropy
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug("Created numpy sampler (seed=%r)", seed)

    def uniform(self, size: int, low, high, dtype: DType) -> List:
        if dtype.is_integer:
            return self._rng.integers(low, high, size=size, dtype=dtype.label).tolist()
        return self._rng.uniform(low, high, size=size).tolist()

    def normal(self, size: int, mean: float, std_dev: float, dtype: DType) -> List:
        return self._rng.normal(mean, std_dev, size=size).tolist()

    def __repr__(self) -> str:
        return f"NumpySampler(seed={self.seed!r})"


def _resolve_sampler(seed: Optional[int], sampler) -> Sampler:
    if sampler is not None:
        if not isinstance(sampler, Sampler):
            raise TypeError(
                f"sampler must implement uniform() and normal(), got {type(sampler).__name__}"
            )
        return sampler
    if seed is None:
        from ._config import config
        seed = config.random.seed
    return NumpySampler(seed)


def _draw(values: List, size: int, kind: str) -> List:
    values = list(values)
    if len(values) != size:
        raise ValueError(f"sampler returned {len(values)} {kind} samples, expected {size}")
    return values


def _largest_below(high, dtype: DType) -> float:
    """Largest value storable as dtype that is strictly less than high."""
    ftype = np.float32 if dtype == DType.FLOAT32 else np.float64
    with np.errstate(over="ignore"):
        value = ftype(high)
    while float(value) >= high:
        value = np.nextafter(value, ftype(-np.inf))
    return float(value)


def _store_uniform(values: List, low, high, dtype: DType) -> Array:
    """
    Store uniform samples, keeping them inside ``[low, high)``.

    Narrowing to float32 can round a sample just below ``high`` up to
    ``high``; such samples are pulled down to the largest storable value
    under ``high``.
    """
    data = Array.from_list(values, dtype)
    if not dtype.is_float:
        return data
    ceiling = None
    for i, x in enumerate(data):
        if x < high:
            continue
        if ceiling is None:
            ceiling = _largest_below(high, dtype)
            if ceiling < low:
                raise InvalidRangeError(
                    f"no {dtype.type_name} value lies in [{low}, {high})", low, high
                )
        data[i] = ceiling
    return data


# =============================================================================
# Validation
# =============================================================================

def _uniform_dtype(low, high, dtype) -> DType:
    if not isinstance(low, numbers.Real) or not isinstance(high, numbers.Real):
        raise TypeError("uniform bounds must be real numbers")
    if low >= high:
        raise InvalidRangeError(
            f"Vector builder invalid range: low={low} should be less than high={high}", low, high
        )
    dtype = validate_dtype(dtype) if dtype is not None else infer_dtype([low, high])
    if dtype.is_integer:
        # Integer samples need integral bounds
        dtype.coerce(low)
        dtype.coerce(high - 1)
    return dtype


def _normal_dtype(std_dev, dtype) -> DType:
    if std_dev < 0:
        raise NegativeStandardDeviationError(std_dev)
    from ._config import config

    dtype = validate_dtype(dtype, config.dtype.default_float)
    if not dtype.is_float:
        raise TypeError(f"normal samples require a floating point dtype, got {dtype.type_name}")
    return dtype


# =============================================================================
# Builders
# =============================================================================

class RandomVectorBuilder:
    """
    Builds vectors of random samples.

    Args:
        seed: Seed for the default sampler (falls back to ``config.random.seed``)
        sampler: Custom Sampler; takes precedence over seed
    """

    def __init__(self, seed: Optional[int] = None, sampler: Optional[Sampler] = None):
        self._sampler = _resolve_sampler(seed, sampler)

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def uniform(self, length: int, low, high, dtype: DTypeLike = None):
        """
        Vector of samples from ``[low, high)``.

        Raises:
            InvalidRangeError: If low >= high
        """
        from ._vector import Vector, _check_length

        length = _check_length(length)
        dtype = _uniform_dtype(low, high, dtype)
        values = _draw(self._sampler.uniform(length, low, high, dtype), length, "uniform")
        return Vector._wrap(_store_uniform(values, low, high, dtype))

    def normal(self, length: int, mean: float, std_dev: float,
               dtype: DTypeLike = None):
        """
        Vector of samples from a normal distribution.

        Raises:
            NegativeStandardDeviationError: If std_dev < 0
        """
        from ._vector import Vector, _check_length

        length = _check_length(length)
        dtype = _normal_dtype(std_dev, dtype)
        values = _draw(self._sampler.normal(length, mean, std_dev, dtype), length, "normal")
        return Vector._wrap(Array.from_list(values, dtype))


class RandomMatrixBuilder:
    """
    Builds matrices of random samples, filled row by row.

    Args:
        seed: Seed for the default sampler (falls back to ``config.random.seed``)
        sampler: Custom Sampler; takes precedence over seed
    """

    def __init__(self, seed: Optional[int] = None, sampler: Optional[Sampler] = None):
        self._sampler = _resolve_sampler(seed, sampler)

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def uniform(self, shape: ShapeLike, low, high, dtype: DTypeLike = None):
        """
        Matrix of samples from ``[low, high)``.

        Raises:
            InvalidRangeError: If low >= high
        """
        from ._matrix import Matrix

        nrows, ncols = ensure_shape(shape)
        dtype = _uniform_dtype(low, high, dtype)
        size = nrows * ncols
        values = _draw(self._sampler.uniform(size, low, high, dtype), size, "uniform")
        return Matrix._from_flat(nrows, ncols, _store_uniform(values, low, high, dtype))

    def normal(self, shape: ShapeLike, mean: float, std_dev: float,
               dtype: DTypeLike = None):
        """
        Matrix of samples from a normal distribution.

        Raises:
            NegativeStandardDeviationError: If std_dev < 0
        """
        from ._matrix import Matrix

        nrows, ncols = ensure_shape(shape)
        dtype = _normal_dtype(std_dev, dtype)
        size = nrows * ncols
        values = _draw(self._sampler.normal(size, mean, std_dev, dtype), size, "normal")
        return Matrix._from_flat(nrows, ncols, Array.from_list(values, dtype))
