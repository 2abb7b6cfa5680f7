"""
Shared elementwise machinery for owned containers.

Vector and Matrix both keep their elements in one flat ``Array``; every
elementwise operation here works on that flat buffer and lets the concrete
class rebuild a container of the right shape around the result.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Sequence

from ._array import Array
from ._dtypes import DType, promote_dtype, scalar_result_dtype
from ._errors import EmptyContainerError, ShapeMismatchError
from ._typing import is_scalar

__all__ = ['NumericContainer', 'format_values']


_OPERATION_NAMES = {
    operator.add: "addition",
    operator.sub: "subtraction",
    operator.mul: "multiplication",
}


def format_values(values: Sequence, separator: str = ", ") -> str:
    """Render values as ``[a, b, c]`` truncated per the print configuration."""
    from ._config import config

    printing = config.printing
    items = [str(v) for v in values]
    if len(items) > printing.threshold:
        edge = printing.edgeitems
        items = items[:edge] + ["..."] + items[len(items) - edge:]
    return "[" + separator.join(items) + "]"


def _power(base, exp: int, one):
    """Square-and-multiply exponentiation."""
    result = one
    while exp:
        if exp & 1:
            result = result * base
        exp >>= 1
        if exp:
            base = base * base
    return result


def _check_exponent(exp: Any) -> int:
    if isinstance(exp, bool) or not isinstance(exp, numbers.Integral):
        raise TypeError(f"exponent must be a non-negative integer, got {exp!r}")
    if exp < 0:
        raise ValueError(f"exponent must be a non-negative integer, got {exp}")
    return int(exp)


class NumericContainer:
    """
    Mixin implementing arithmetic, reductions and in-place updates.

    Subclasses provide:
        _data: the flat Array
        _kind: container name used in error messages ("Vector", "Matrix")
        _shape_key(): the length (int) or shape (tuple) compared by operators
        _operand(other): other as a container of the same kind, or None
        _rebuild(data): a new container of the same shape holding data
    """

    __slots__ = ()

    _kind = "Container"

    # numpy scalars on the left must defer to our reflected operators
    __array_ufunc__ = None

    @property
    def dtype(self) -> DType:
        """Element type."""
        return self._data.dtype

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._data.size

    def _shape_key(self):
        raise NotImplementedError

    def _operand(self, other):
        raise NotImplementedError

    def _rebuild(self, data: Array):
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Binary Operations
    # -------------------------------------------------------------------------

    def _combine(self, other, op: Callable, reflected: bool = False):
        """
        Evaluate ``self OP other`` (or ``other OP self`` when reflected).

        Returns:
            (values, dtype), or None if other is not a supported operand
        """
        container = self._operand(other)
        if container is not None:
            if container._shape_key() != self._shape_key():
                lhs, rhs = self._shape_key(), container._shape_key()
                if reflected:
                    lhs, rhs = rhs, lhs
                raise ShapeMismatchError(self._kind, _OPERATION_NAMES[op], lhs, rhs)
            dtype = promote_dtype(self.dtype, container.dtype)
            pairs = zip(self._data, container._data)
            if reflected:
                values = [op(b, a) for a, b in pairs]
            else:
                values = [op(a, b) for a, b in pairs]
            return values, dtype
        if is_scalar(other):
            dtype = scalar_result_dtype(self.dtype, other)
            if reflected:
                values = [op(other, x) for x in self._data]
            else:
                values = [op(x, other) for x in self._data]
            return values, dtype
        return None

    def _binary(self, other, op: Callable, reflected: bool = False):
        combined = self._combine(other, op, reflected)
        if combined is None:
            return NotImplemented
        values, dtype = combined
        return self._rebuild(Array.from_list(values, dtype))

    def _inplace(self, other, op: Callable):
        combined = self._combine(other, op)
        if combined is None:
            return NotImplemented
        values, dtype = combined
        if dtype != self.dtype:
            raise TypeError(
                f"cannot store {dtype.type_name} result in place into a "
                f"{self.dtype.type_name} {self._kind.lower()}"
            )
        self._data.assign(values)
        return self

    def _named(self, other, op: Callable):
        result = self._binary(other, op)
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand type for {self._kind} {_OPERATION_NAMES[op]}: "
                f"{type(other).__name__}"
            )
        return result

    def add(self, other):
        """Elementwise ``self + other`` (container of the same shape, or scalar)."""
        return self._named(other, operator.add)

    def sub(self, other):
        """Elementwise ``self - other`` (container of the same shape, or scalar)."""
        return self._named(other, operator.sub)

    def mul(self, other):
        """Elementwise ``self * other`` (container of the same shape, or scalar)."""
        return self._named(other, operator.mul)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    # -------------------------------------------------------------------------
    # Powers
    # -------------------------------------------------------------------------

    def power(self, exp: int):
        """
        Raise every element to a non-negative integer power.

        Args:
            exp: Exponent (``0`` gives a container of ones)

        Returns:
            New container of the same shape and element type
        """
        exp = _check_exponent(exp)
        one = self.dtype.one
        values = [_power(x, exp, one) for x in self._data]
        return self._rebuild(Array.from_list(values, self.dtype))

    def power_mut(self, exp: int) -> None:
        """In-place variant of ``power``."""
        exp = _check_exponent(exp)
        one = self.dtype.one
        self._data.assign([_power(x, exp, one) for x in self._data])

    def map_mut(self, func: Callable) -> None:
        """
        Replace every element ``x`` with ``func(x)`` in place.

        The result must still fit the element type.
        """
        self._data.assign([func(x) for x in self._data])

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def filter(self, predicate: Callable[[Any], bool]):
        """
        Elements for which predicate holds, in storage order.

        Returns:
            Vector (a matrix cannot keep its shape after filtering)
        """
        from ._vector import Vector

        kept = [x for x in self._data if predicate(x)]
        return Vector._wrap(Array.from_list(kept, self.dtype))

    def sum(self):
        """Sum of all elements, starting from the element type's zero."""
        total = self.dtype.zero
        for x in self._data:
            total = total + x
        return self.dtype.coerce(total)

    def _extremum(self, pick: Callable, name: str):
        if not self.dtype.is_integer:
            raise TypeError(
                f"{name}() is only defined for integer element types, got {self.dtype.type_name}"
            )
        if self.size == 0:
            raise EmptyContainerError(f"{name}() of an empty {self._kind.lower()}")
        return pick(self._data)

    def max(self):
        """Largest element. Integer element types only."""
        return self._extremum(max, "max")

    def min(self):
        """Smallest element. Integer element types only."""
        return self._extremum(min, "min")
