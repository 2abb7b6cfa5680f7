"""
numgrid Type Definitions and Protocols.

Type aliases for the inputs accepted across the package, protocols for
duck-typed containers, and small validation helpers.
"""

from __future__ import annotations

import numbers
import operator
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    List,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    import numpy as np
    from numgrid._dtypes import DType
    from numgrid._ranges import Inclusive


# =============================================================================
# Type Aliases
# =============================================================================

Scalar = Union[int, float]
ShapeLike = Union[Tuple[int, int], Sequence[int]]
RangeIndex = Union[slice, "Inclusive"]
DTypeLike = Union["DType", str, type, None]
NestedSequence = Iterable[Sequence[Scalar]]
VectorInput = Union[Iterable[Scalar], "np.ndarray"]
MatrixInput = Union[NestedSequence, "np.ndarray"]


# =============================================================================
# Protocol Definitions
# =============================================================================

@runtime_checkable
class VectorLike(Protocol):
    """Anything one-dimensional: Vector, SubVector, RowView, ColumnView."""

    @property
    def shape(self) -> Tuple[int]:
        ...

    def __len__(self) -> int:
        ...

    def tolist(self) -> List[Any]:
        ...


@runtime_checkable
class GridLike(Protocol):
    """Anything two-dimensional: Matrix, Submatrix."""

    @property
    def shape(self) -> Tuple[int, int]:
        ...

    def at(self, i: int, j: int) -> Any:
        ...

    def row(self, i: int) -> Any:
        ...

    def col(self, j: int) -> Any:
        ...


# =============================================================================
# Helpers
# =============================================================================

def is_scalar(obj: Any) -> bool:
    """True for real numbers, including numpy scalars."""
    return isinstance(obj, numbers.Real)


def is_ndarray(obj: Any) -> bool:
    """Check if object is a numpy ndarray."""
    import numpy as np

    return isinstance(obj, np.ndarray)


def ensure_shape(shape: Any, ndim: int = 2) -> Tuple[int, ...]:
    """
    Normalize a shape argument into a tuple of non-negative ints.

    Args:
        shape: Sequence of extents, e.g. ``(2, 3)`` or ``[2, 3]``
        ndim: Required number of extents

    Raises:
        TypeError: If shape is not a sequence of integers
        ValueError: If shape has the wrong length or a negative extent
    """
    try:
        extents = tuple(operator.index(n) for n in shape)
    except TypeError:
        raise TypeError(f"shape must be a sequence of {ndim} integers, got {shape!r}") from None
    if len(extents) != ndim:
        raise ValueError(f"shape must have {ndim} extents, got {len(extents)}")
    if any(n < 0 for n in extents):
        raise ValueError(f"shape extents must be non-negative, got {extents}")
    return extents
