"""
Range forms accepted by slicing.

Six logical forms select a window along one axis:

=================  ============================  ==================
Form               Python spelling               Interval
=================  ============================  ==================
exact              ``slice(a, b)`` / ``a:b``     ``[a, b)``
range-from         ``a:``                        ``[a, extent)``
range-to           ``:b``                        ``[0, b)``
full               ``:``                         ``[0, extent)``
inclusive          ``inclusive(a, b)``           ``[a, b]``
range-to-incl.     ``to_inclusive(b)``           ``[0, b]``
=================  ============================  ==================

``resolve_range`` turns any of them into an ``(offset, size)`` pair after
validating it against the extent of the axis.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple

from ._errors import InvalidRangeError, OutOfBoundsError

__all__ = [
    'Inclusive',
    'RangeKind',
    'inclusive',
    'to_inclusive',
    'is_range',
    'classify_range',
    'resolve_range',
    'check_index',
]


@dataclass(frozen=True)
class Inclusive:
    """Closed range ``[start, end]``; ``start=None`` means ``[0, end]``."""
    start: Optional[int]
    end: int


def inclusive(start: int, end: int) -> Inclusive:
    """Closed range ``[start, end]``."""
    return Inclusive(start, end)


def to_inclusive(end: int) -> Inclusive:
    """Closed range ``[0, end]``."""
    return Inclusive(None, end)


class RangeKind(IntEnum):
    EXACT = 0
    FROM = 1
    TO = 2
    FULL = 3
    INCLUSIVE = 4
    TO_INCLUSIVE = 5


def is_range(index: Any) -> bool:
    return isinstance(index, (slice, Inclusive))


def _bound(value: Any) -> int:
    try:
        bound = operator.index(value)
    except TypeError:
        raise TypeError(f"slice bounds must be integers, got {type(value).__name__}") from None
    if bound < 0:
        raise InvalidRangeError(f"negative slice bound {bound} is not supported", bound)
    return bound


def classify_range(index: Any) -> Tuple[RangeKind, Optional[int], Optional[int]]:
    """
    Identify the range form of a slicing argument.

    Returns:
        (kind, start, end) with missing bounds as None

    Raises:
        TypeError: If index is not a slice or Inclusive
        ValueError: If a slice has a step other than 1
    """
    if isinstance(index, Inclusive):
        end = _bound(index.end)
        if index.start is None:
            return RangeKind.TO_INCLUSIVE, None, end
        return RangeKind.INCLUSIVE, _bound(index.start), end
    if not isinstance(index, slice):
        raise TypeError(f"expected a slice or inclusive range, got {type(index).__name__}")
    if index.step is not None and operator.index(index.step) != 1:
        raise ValueError(f"slice step must be 1, got {index.step}")
    start = None if index.start is None else _bound(index.start)
    stop = None if index.stop is None else _bound(index.stop)
    if start is None and stop is None:
        return RangeKind.FULL, None, None
    if stop is None:
        return RangeKind.FROM, start, None
    if start is None:
        return RangeKind.TO, None, stop
    return RangeKind.EXACT, start, stop


def resolve_range(index: Any, extent: int, container: str = "Vector",
                  axis: int = 0, axis_label: str = "length") -> Tuple[int, int]:
    """
    Validate a range form against an axis and compute its window.

    Args:
        index: slice or Inclusive
        extent: Number of elements along the axis
        container: Container name used in error messages
        axis: Axis number reported by OutOfBoundsError
        axis_label: Description of the extent used in error messages

    Returns:
        (offset, size) of the window

    Raises:
        InvalidRangeError: If an exact or inclusive range starts after it ends
        OutOfBoundsError: If the last index of the window is past the extent
    """
    kind, start, end = classify_range(index)

    if kind in (RangeKind.EXACT, RangeKind.INCLUSIVE) and start > end:
        raise InvalidRangeError(
            f"{container} slice index starts at {start} but ends at {end}", start, end
        )

    if kind == RangeKind.FULL:
        return 0, extent
    if kind == RangeKind.FROM:
        if start > extent:
            raise _out_of_range(start, extent, container, axis, axis_label)
        return start, extent - start
    if kind == RangeKind.TO:
        if end > extent:
            raise _out_of_range(end, extent, container, axis, axis_label)
        return 0, end
    if kind == RangeKind.EXACT:
        if end > extent:
            raise _out_of_range(end, extent, container, axis, axis_label)
        return start, end - start
    if kind == RangeKind.INCLUSIVE:
        if end >= extent:
            raise _out_of_range(end, extent, container, axis, axis_label)
        return start, end - start + 1
    # TO_INCLUSIVE
    if end >= extent:
        raise _out_of_range(end, extent, container, axis, axis_label)
    return 0, end + 1


def _out_of_range(bound: int, extent: int, container: str, axis: int,
                  axis_label: str) -> OutOfBoundsError:
    return OutOfBoundsError(
        bound, extent, axis,
        f"{container} slice index {bound} out of range for {axis_label} {extent}",
    )


def check_index(index: Any, extent: int, message: str, axis: int = 0) -> int:
    """
    Validate a single integer index against an extent.

    Negative indices count from the end. ``message`` is formatted with
    ``index`` (as supplied) and ``extent``.

    Returns:
        The non-negative index

    Raises:
        TypeError: If index is not an integer
        OutOfBoundsError: If index is outside ``[-extent, extent)``
    """
    if isinstance(index, bool):
        raise TypeError("indices must be integers, got bool")
    try:
        position = operator.index(index)
    except TypeError:
        raise TypeError(f"indices must be integers, got {type(index).__name__}") from None
    resolved = position + extent if position < 0 else position
    if resolved < 0 or resolved >= extent:
        raise OutOfBoundsError(
            position, extent, axis, message.format(index=position, extent=extent)
        )
    return resolved
