"""
Error handling for numgrid.

Every failure is raised as an exception. Each exception carries a numeric
error code (see the constants below) so callers can dispatch on codes the
same way across the whole package.

Two severities exist:

- Programmer errors (out-of-bounds indexing, shape-mismatched arithmetic,
  ragged matrix construction). These indicate a bug in the calling code.
- Recoverable errors (invalid builder parameters, CSV loading failures).
  These are caused by input the caller cannot always check in advance.

The severity is exposed through the ``recoverable`` class attribute.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Union


__all__ = [
    'NumgridError',
    'ShapeMismatchError',
    'OutOfBoundsError',
    'InvalidRangeError',
    'InvalidStepValueError',
    'NegativeStandardDeviationError',
    'InconsistentShapeError',
    'EmptyContainerError',
    'LoadError',
    'LoadErrorKind',
]


# =============================================================================
# Error Codes
# =============================================================================

# Success
NUMGRID_OK = 0

# General errors (1-9)
NUMGRID_ERROR_UNKNOWN = 1

# Shape and indexing errors (10-19)
NUMGRID_ERROR_SHAPE_MISMATCH = 10
NUMGRID_ERROR_OUT_OF_BOUNDS = 11
NUMGRID_ERROR_INCONSISTENT_SHAPE = 12
NUMGRID_ERROR_EMPTY_CONTAINER = 13

# Builder errors (20-29)
NUMGRID_ERROR_INVALID_RANGE = 20
NUMGRID_ERROR_INVALID_STEP_VALUE = 21
NUMGRID_ERROR_NEGATIVE_STD_DEV = 22

# Load errors (30-39)
NUMGRID_ERROR_IO = 30
NUMGRID_ERROR_CSV = 31
NUMGRID_ERROR_EMPTY_SOURCE = 32
NUMGRID_ERROR_INVALID_ELEMENT = 33
NUMGRID_ERROR_INCONSISTENT_COLUMNS = 34


# Error code to message mapping
_ERROR_MESSAGES = {
    NUMGRID_OK: "Success",
    NUMGRID_ERROR_UNKNOWN: "Unknown error",
    NUMGRID_ERROR_SHAPE_MISMATCH: "Shape mismatch",
    NUMGRID_ERROR_OUT_OF_BOUNDS: "Index out of bounds",
    NUMGRID_ERROR_INCONSISTENT_SHAPE: "Inconsistent shape",
    NUMGRID_ERROR_EMPTY_CONTAINER: "Empty container",
    NUMGRID_ERROR_INVALID_RANGE: "Invalid range",
    NUMGRID_ERROR_INVALID_STEP_VALUE: "Invalid step value",
    NUMGRID_ERROR_NEGATIVE_STD_DEV: "Negative standard deviation",
    NUMGRID_ERROR_IO: "I/O error",
    NUMGRID_ERROR_CSV: "Malformed CSV source",
    NUMGRID_ERROR_EMPTY_SOURCE: "Empty source",
    NUMGRID_ERROR_INVALID_ELEMENT: "Invalid element",
    NUMGRID_ERROR_INCONSISTENT_COLUMNS: "Inconsistent number of columns",
}


# =============================================================================
# Exception Classes
# =============================================================================

class NumgridError(Exception):
    """
    Base exception for all numgrid errors.

    Attributes:
        code: Numeric error code (one of the ``NUMGRID_*`` constants)
        message: Human readable description naming the offending values
    """

    OK = NUMGRID_OK
    ERROR_UNKNOWN = NUMGRID_ERROR_UNKNOWN
    ERROR_SHAPE_MISMATCH = NUMGRID_ERROR_SHAPE_MISMATCH
    ERROR_OUT_OF_BOUNDS = NUMGRID_ERROR_OUT_OF_BOUNDS
    ERROR_INCONSISTENT_SHAPE = NUMGRID_ERROR_INCONSISTENT_SHAPE
    ERROR_EMPTY_CONTAINER = NUMGRID_ERROR_EMPTY_CONTAINER
    ERROR_INVALID_RANGE = NUMGRID_ERROR_INVALID_RANGE
    ERROR_INVALID_STEP_VALUE = NUMGRID_ERROR_INVALID_STEP_VALUE
    ERROR_NEGATIVE_STD_DEV = NUMGRID_ERROR_NEGATIVE_STD_DEV
    ERROR_IO = NUMGRID_ERROR_IO
    ERROR_CSV = NUMGRID_ERROR_CSV
    ERROR_EMPTY_SOURCE = NUMGRID_ERROR_EMPTY_SOURCE
    ERROR_INVALID_ELEMENT = NUMGRID_ERROR_INVALID_ELEMENT
    ERROR_INCONSISTENT_COLUMNS = NUMGRID_ERROR_INCONSISTENT_COLUMNS

    recoverable = False

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Create numgrid exception.

        Args:
            code: Error code
            message: Optional detailed message (generic text for the code if omitted)
        """
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "NumgridError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


def _format_shape(shape: Union[int, Sequence[int]]) -> str:
    if isinstance(shape, int):
        return str(shape)
    return "[" + ", ".join(str(n) for n in shape) + "]"


class ShapeMismatchError(NumgridError, ValueError):
    """
    Same-shape arithmetic between containers of different length or shape.

    Example:
        >>> vector(1, 2) + vector(1, 2, 3)
        ShapeMismatchError: Vector addition with invalid length: 2 != 3
    """

    def __init__(self, container: str, operation: str, lhs, rhs):
        self.lhs = lhs
        self.rhs = rhs
        noun = "length" if isinstance(lhs, int) else "shape"
        super().__init__(
            NUMGRID_ERROR_SHAPE_MISMATCH,
            f"{container} {operation} with invalid {noun}: "
            f"{_format_shape(lhs)} != {_format_shape(rhs)}",
        )


class OutOfBoundsError(NumgridError, IndexError):
    """
    An index or slice bound exceeds the declared extent on some axis.

    Attributes:
        index: Offending index
        limit: Extent of the axis that was indexed
        axis: Axis number (0 for vectors and rows, 1 for columns)
    """

    def __init__(self, index: int, limit: int, axis: int = 0,
                 message: Optional[str] = None):
        self.index = index
        self.limit = limit
        self.axis = axis
        if message is None:
            message = f"index {index} out of range for axis {axis} with extent {limit}"
        super().__init__(NUMGRID_ERROR_OUT_OF_BOUNDS, message)


class InconsistentShapeError(NumgridError, ValueError):
    """Matrix construction from rows of unequal length."""

    def __init__(self, message: str = "Invalid matrix: the number of columns is inconsistent"):
        super().__init__(NUMGRID_ERROR_INCONSISTENT_SHAPE, message)


class EmptyContainerError(NumgridError, ValueError):
    """Reduction that has no result on an empty container (``max``, ``min``)."""

    def __init__(self, message: str = "operation is undefined on an empty container"):
        super().__init__(NUMGRID_ERROR_EMPTY_CONTAINER, message)


class InvalidRangeError(NumgridError, ValueError):
    """
    Slice start greater than its end, or a uniform interval with low >= high.

    Attributes:
        start: Lower bound that was supplied
        end: Upper bound that was supplied
    """

    recoverable = True

    def __init__(self, message: str, start=None, end=None):
        self.start = start
        self.end = end
        super().__init__(NUMGRID_ERROR_INVALID_RANGE, message)


class InvalidStepValueError(NumgridError, ValueError):
    """Zero step, or a step whose sign disagrees with the range direction."""

    recoverable = True

    def __init__(self, message: str):
        super().__init__(
            NUMGRID_ERROR_INVALID_STEP_VALUE,
            f"Vector builder invalid step value: {message}",
        )


class NegativeStandardDeviationError(NumgridError, ValueError):
    """Normal distribution requested with ``std_dev < 0``."""

    recoverable = True

    def __init__(self, std_dev):
        self.std_dev = std_dev
        super().__init__(
            NUMGRID_ERROR_NEGATIVE_STD_DEV,
            "Random vector builder standard deviation should not "
            f"be negative: std_dev={std_dev}",
        )


# =============================================================================
# Load Errors
# =============================================================================

class LoadErrorKind(IntEnum):
    """Why loading a matrix from a file failed."""
    IO_ERROR = NUMGRID_ERROR_IO
    CSV_ERROR = NUMGRID_ERROR_CSV
    EMPTY = NUMGRID_ERROR_EMPTY_SOURCE
    INVALID_ELEMENT = NUMGRID_ERROR_INVALID_ELEMENT
    INCONSISTENT_COLUMNS = NUMGRID_ERROR_INCONSISTENT_COLUMNS


_LOAD_PREFIXES = {
    LoadErrorKind.IO_ERROR: "Cannot load Matrix from file due to: {}",
    LoadErrorKind.CSV_ERROR: "Cannot load Matrix, {}",
    LoadErrorKind.EMPTY: "Cannot load Matrix from empty file",
    LoadErrorKind.INVALID_ELEMENT: "Cannot load Matrix, invalid element: {}",
    LoadErrorKind.INCONSISTENT_COLUMNS: "Cannot load Matrix, inconsistent number of columns: {}",
}


class LoadError(NumgridError):
    """
    Failure while loading a matrix from a CSV source.

    Attributes:
        kind: LoadErrorKind describing the failure
        detail: The undecorated detail message
    """

    recoverable = True

    def __init__(self, kind: LoadErrorKind, detail: str = ""):
        self.kind = LoadErrorKind(kind)
        self.detail = detail
        super().__init__(int(self.kind), _LOAD_PREFIXES[self.kind].format(detail))
