"""
Literal construction helpers.

``vector(1, 2, 3)`` and ``matrix([1, 2], [3, 4])`` are shorthands for
``Vector([1, 2, 3])`` and ``Matrix([[1, 2], [3, 4]])``.
"""

from __future__ import annotations

from typing import Sequence

from ._matrix import Matrix
from ._typing import DTypeLike, ShapeLike
from ._vector import Vector

__all__ = ['vector', 'vector_of', 'matrix', 'matrix_of']


def vector(*elements, dtype: DTypeLike = None) -> Vector:
    """
    Vector from positional elements.

    Example:
        >>> vector(3, 1, 4, 1).filter(lambda x: x >= 2)
        Vector([3, 4], dtype=int64)
    """
    return Vector(elements, dtype)


def vector_of(value, length: int, dtype: DTypeLike = None) -> Vector:
    """``length`` copies of value."""
    return Vector.full(length, value, dtype)


def matrix(*rows: Sequence, dtype: DTypeLike = None) -> Matrix:
    """
    Matrix from positional rows.

    Raises:
        InconsistentShapeError: If the rows differ in length

    Example:
        >>> matrix([1, 2], [3, 4]).tolist()
        [[1, 2], [3, 4]]
    """
    return Matrix(rows, dtype)


def matrix_of(shape: ShapeLike, value, dtype: DTypeLike = None) -> Matrix:
    """Matrix of the given shape with every element equal to value."""
    return Matrix.full(shape, value, dtype)
