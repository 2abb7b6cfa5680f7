"""
Fixed-dimension Nested-list Builders

Plain Python nested lists of one to four dimensions, built through small
immutable builders, plus the ``dim``/``shape``/``size`` properties of such
lists.

Example:
    >>> two_dim().with_shape([2, 3]).full_of(5).generate()
    [[5, 5, 5], [5, 5, 5]]
    >>> arange().start_at(0.0).stop_at(3.0).step_by(0.5).generate()
    [0.0, 0.5, 1.0, 1.5, 2.0, 2.5]
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from ._errors import InvalidRangeError, InvalidStepValueError
from ._typing import ensure_shape

__all__ = [
    'DimensionalBuilder',
    'one_dim', 'two_dim', 'three_dim', 'four_dim',
    'RangeBuilder', 'arange',
    'LinspaceBuilder', 'linspace',
    'dim', 'shape', 'size',
]

MAX_DIM = 4


# =============================================================================
# Dimensional Builders
# =============================================================================

@dataclass(frozen=True)
class DimensionalBuilder:
    """
    Builder for an ``ndim``-dimensional nested list.

    ``generate()`` without a fill value produces the nested structure with
    empty innermost lists.
    """
    ndim: int
    shape: Optional[Tuple[int, ...]] = None
    fill: Any = None

    def __post_init__(self):
        if not 1 <= self.ndim <= MAX_DIM:
            raise ValueError(f"ndim must be between 1 and {MAX_DIM}, got {self.ndim}")

    def with_shape(self, shape) -> "DimensionalBuilder":
        """Set the extent of every dimension; clears any fill value."""
        return replace(self, shape=ensure_shape(shape, self.ndim), fill=None)

    def full_of(self, value) -> "DimensionalBuilder":
        """Fill every element with value."""
        if not isinstance(value, numbers.Number):
            raise TypeError(f"fill value must be a number, got {type(value).__name__}")
        return replace(self, fill=value)

    def zeros(self) -> "DimensionalBuilder":
        return self.full_of(0)

    def ones(self) -> "DimensionalBuilder":
        return self.full_of(1)

    def generate(self) -> List:
        """
        Build the nested list.

        Raises:
            ValueError: If no shape was set
        """
        if self.shape is None:
            raise ValueError(f"shape of the {self.ndim}-dimensional list should be specified")
        return _build(self.shape, self.fill)


def _build(extents: Tuple[int, ...], fill) -> List:
    if len(extents) == 1:
        return [] if fill is None else [fill] * extents[0]
    return [_build(extents[1:], fill) for _ in range(extents[0])]


def one_dim() -> DimensionalBuilder:
    return DimensionalBuilder(1)


def two_dim() -> DimensionalBuilder:
    return DimensionalBuilder(2)


def three_dim() -> DimensionalBuilder:
    return DimensionalBuilder(3)


def four_dim() -> DimensionalBuilder:
    return DimensionalBuilder(4)


# =============================================================================
# Range & Linspace Builders
# =============================================================================

@dataclass(frozen=True)
class RangeBuilder:
    """
    Half-open range ``[start, stop)`` stepping by ``step`` as a list.

    Defaults: start 0, step 1; stop is required.
    """
    start: Any = 0
    stop: Any = None
    step: Any = 1

    def start_at(self, value) -> "RangeBuilder":
        return replace(self, start=value)

    def stop_at(self, value) -> "RangeBuilder":
        return replace(self, stop=value)

    def step_by(self, value) -> "RangeBuilder":
        return replace(self, step=value)

    def generate(self) -> List:
        """
        Raises:
            ValueError: If stop was not set
            InvalidRangeError: If start >= stop
            InvalidStepValueError: If step is not positive
        """
        if self.stop is None:
            raise ValueError("range stop value should be specified")
        if self.start >= self.stop:
            raise InvalidRangeError(
                f"Invalid range interval start={self.start} stop={self.stop}",
                self.start, self.stop,
            )
        if self.step <= 0:
            raise InvalidStepValueError(f"step={self.step} should be positive")
        values = []
        current = self.start
        while current < self.stop:
            values.append(current)
            current = current + self.step
        return values


def arange() -> RangeBuilder:
    return RangeBuilder()


@dataclass(frozen=True)
class LinspaceBuilder:
    """
    ``size`` evenly spaced floats over ``[start, stop]`` as a list.

    Defaults: start 0.0, size 10; stop is required.
    """
    start: float = 0.0
    stop: Optional[float] = None
    size: int = 10

    def start_at(self, value) -> "LinspaceBuilder":
        return replace(self, start=value)

    def stop_at(self, value) -> "LinspaceBuilder":
        return replace(self, stop=value)

    def with_size(self, value: int) -> "LinspaceBuilder":
        return replace(self, size=value)

    def generate(self) -> Optional[List[float]]:
        """None when stop is missing or start >= stop."""
        if self.stop is None or self.start >= self.stop:
            return None
        from ._vector import Vector

        return Vector.linspace(self.size, self.start, self.stop).tolist()


def linspace() -> LinspaceBuilder:
    return LinspaceBuilder()


# =============================================================================
# Properties of Nested Lists
# =============================================================================

def dim(nested) -> int:
    """
    Number of dimensions of a nested list, following the first element.

    Example:
        >>> dim([[1, 2], [3, 4]])
        2
    """
    depth = 0
    current = nested
    while isinstance(current, (list, tuple)):
        depth += 1
        if not current:
            break
        current = current[0]
    return depth


def shape(nested) -> Tuple[int, ...]:
    """
    Extent of each dimension, following the first element.

    Example:
        >>> shape([[1, 2, 3], [4, 5, 6]])
        (2, 3)
    """
    extents = []
    current = nested
    while isinstance(current, (list, tuple)):
        extents.append(len(current))
        if not current:
            break
        current = current[0]
    return tuple(extents)


def size(nested) -> int:
    """Total number of scalar elements in a nested list."""
    if not isinstance(nested, (list, tuple)):
        return 1
    return sum(size(item) for item in nested)
