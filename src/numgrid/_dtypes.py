"""
numgrid DTypes - Element Type Definitions

Defines the element types a container can hold, their storage
representation and the conversion rules between Python values and
stored elements.
"""

from __future__ import annotations

import numbers
import re
from ctypes import (
    c_double, c_float,
    c_int8, c_int16, c_int32, c_int64,
    c_uint8, c_uint16, c_uint32, c_uint64,
)
from enum import IntEnum
from typing import Any, Dict, Iterable, Type, Union


__all__ = [
    'DType',
    'validate_dtype',
    'promote_dtype',
    'infer_dtype',
    'scalar_result_dtype',
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
    'float32', 'float64',
]


# =============================================================================
# Data Type Enumeration
# =============================================================================

class DType(IntEnum):
    """
    Supported element types.

    Each type has a ctypes storage type, a size and a short type name
    (``"i32"``, ``"u8"``, ``"f64"``) used in error messages.
    """
    INT8 = 0
    INT16 = 1
    INT32 = 2
    INT64 = 3
    UINT8 = 4
    UINT16 = 5
    UINT32 = 6
    UINT64 = 7
    FLOAT32 = 8
    FLOAT64 = 9

    @property
    def itemsize(self) -> int:
        """Size in bytes of one element."""
        return _DTYPE_INFO[self]["size"]

    @property
    def ctype(self) -> Type:
        """Corresponding ctypes type."""
        return _DTYPE_INFO[self]["ctype"]

    @property
    def label(self) -> str:
        """Long name, matching the numpy dtype name."""
        return _DTYPE_INFO[self]["label"]

    @property
    def type_name(self) -> str:
        """Short name such as ``i32`` or ``f64``."""
        return _DTYPE_INFO[self]["short"]

    @property
    def is_integer(self) -> bool:
        return _DTYPE_INFO[self]["kind"] in ("i", "u")

    @property
    def is_float(self) -> bool:
        return _DTYPE_INFO[self]["kind"] == "f"

    @property
    def is_signed(self) -> bool:
        return _DTYPE_INFO[self]["kind"] != "u"

    @property
    def min_value(self) -> Union[int, float]:
        """Smallest representable value (``-inf`` for floats)."""
        if self.is_float:
            return float("-inf")
        if not self.is_signed:
            return 0
        return -(1 << (self.itemsize * 8 - 1))

    @property
    def max_value(self) -> Union[int, float]:
        """Largest representable value (``inf`` for floats)."""
        if self.is_float:
            return float("inf")
        if not self.is_signed:
            return (1 << (self.itemsize * 8)) - 1
        return (1 << (self.itemsize * 8 - 1)) - 1

    @property
    def zero(self) -> Union[int, float]:
        """The element type's representation of 0."""
        return 0.0 if self.is_float else 0

    @property
    def one(self) -> Union[int, float]:
        """The element type's representation of 1."""
        return 1.0 if self.is_float else 1

    def coerce(self, value: Any) -> Union[int, float]:
        """
        Convert a Python number for storage as this element type.

        Integer types accept integral values only and never wrap around.

        Raises:
            TypeError: If value is not a real number, or is a non-integral
                number stored into an integer type
            OverflowError: If value does not fit the integer type
        """
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"cannot store {type(value).__name__} value {value!r} as {self.type_name}"
            )
        if self.is_float:
            return float(value)
        if isinstance(value, numbers.Integral):
            result = int(value)
        else:
            as_float = float(value)
            if not as_float.is_integer():
                raise TypeError(f"cannot store non-integral value {value!r} as {self.type_name}")
            result = int(as_float)
        if result < self.min_value or result > self.max_value:
            raise OverflowError(f"value {value!r} is out of range for {self.type_name}")
        return result

    def parse(self, text: str) -> Union[int, float]:
        """
        Parse a decimal string into this element type.

        Surrounding whitespace is ignored. Integers must be plain base-10
        literals and in range.

        Raises:
            ValueError: If text is not a valid literal of this type
        """
        value = text.strip()
        error = f'"{value}" is not valid {self.type_name}'
        if "_" in value:
            raise ValueError(error)
        if self.is_integer:
            if not _INT_LITERAL.fullmatch(value):
                raise ValueError(error)
            result = int(value)
            if result < self.min_value or result > self.max_value:
                raise ValueError(error)
            return result
        try:
            return float(value)
        except ValueError:
            raise ValueError(error) from None

    @classmethod
    def from_ctype(cls, ctype: Type) -> "DType":
        """Get DType from ctypes type."""
        for dtype, info in _DTYPE_INFO.items():
            if info["ctype"] == ctype:
                return dtype
        raise ValueError(f"Unknown ctype: {ctype}")

    @classmethod
    def from_name(cls, name: str) -> "DType":
        """Get DType from a long name, short name or alias."""
        name_lower = name.lower()
        for dtype, info in _DTYPE_INFO.items():
            if name_lower in (info["label"], info["short"]):
                return dtype
        aliases = {
            "double": cls.FLOAT64,
            "float": cls.FLOAT64,
            "real": cls.FLOAT64,
            "index": cls.INT64,
            "int": cls.INT64,
            "long": cls.INT64,
            "byte": cls.UINT8,
        }
        if name_lower in aliases:
            return aliases[name_lower]
        raise ValueError(f"Unknown dtype name: {name}")


_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


# Type information table
_DTYPE_INFO: Dict[DType, Dict[str, Any]] = {
    DType.INT8: {"ctype": c_int8, "size": 1, "label": "int8", "short": "i8", "kind": "i"},
    DType.INT16: {"ctype": c_int16, "size": 2, "label": "int16", "short": "i16", "kind": "i"},
    DType.INT32: {"ctype": c_int32, "size": 4, "label": "int32", "short": "i32", "kind": "i"},
    DType.INT64: {"ctype": c_int64, "size": 8, "label": "int64", "short": "i64", "kind": "i"},
    DType.UINT8: {"ctype": c_uint8, "size": 1, "label": "uint8", "short": "u8", "kind": "u"},
    DType.UINT16: {"ctype": c_uint16, "size": 2, "label": "uint16", "short": "u16", "kind": "u"},
    DType.UINT32: {"ctype": c_uint32, "size": 4, "label": "uint32", "short": "u32", "kind": "u"},
    DType.UINT64: {"ctype": c_uint64, "size": 8, "label": "uint64", "short": "u64", "kind": "u"},
    DType.FLOAT32: {"ctype": c_float, "size": 4, "label": "float32", "short": "f32", "kind": "f"},
    DType.FLOAT64: {"ctype": c_double, "size": 8, "label": "float64", "short": "f64", "kind": "f"},
}


# =============================================================================
# Type Mapping (Python type -> DType)
# =============================================================================

TYPE_MAP: Dict[type, DType] = {
    float: DType.FLOAT64,
    int: DType.INT64,
}

CTYPE_MAP: Dict[Type, DType] = {info["ctype"]: dtype for dtype, info in _DTYPE_INFO.items()}

_SIGNED_BY_SIZE = {
    1: DType.INT8,
    2: DType.INT16,
    4: DType.INT32,
    8: DType.INT64,
}


# Module-level aliases
int8 = DType.INT8
int16 = DType.INT16
int32 = DType.INT32
int64 = DType.INT64
uint8 = DType.UINT8
uint16 = DType.UINT16
uint32 = DType.UINT32
uint64 = DType.UINT64
float32 = DType.FLOAT32
float64 = DType.FLOAT64


# =============================================================================
# Type Validation
# =============================================================================

def validate_dtype(dtype: Union[DType, str, Type, None],
                   default: DType = DType.FLOAT64) -> DType:
    """
    Validate and normalize dtype specification.

    Args:
        dtype: Input dtype (DType enum, string name, ctypes type, Python
            type, numpy dtype or None)
        default: Default dtype if None

    Returns:
        Validated DType
    """
    if dtype is None:
        return default
    if isinstance(dtype, DType):
        return dtype
    if isinstance(dtype, str):
        return DType.from_name(dtype)
    if dtype in CTYPE_MAP:
        return CTYPE_MAP[dtype]
    if dtype in TYPE_MAP:
        return TYPE_MAP[dtype]
    numpy_name = _numpy_dtype_name(dtype)
    if numpy_name is not None:
        return DType.from_name(numpy_name)
    raise TypeError(f"Cannot convert {dtype!r} to DType")


def _numpy_dtype_name(dtype: Any):
    """Name of a numpy dtype or scalar type, or None if dtype is not one."""
    import numpy as np
    try:
        return np.dtype(dtype).name
    except TypeError:
        return None


def _default_dtypes():
    from ._config import config
    return config.dtype.default_int, config.dtype.default_float


def infer_dtype(values: Iterable) -> DType:
    """
    Infer the element type for a collection of Python numbers.

    Any float gives the default float type, otherwise the default integer
    type. An empty collection gives the default float type.

    Raises:
        TypeError: If any value is not a real number
    """
    default_int, default_float = _default_dtypes()
    saw_value = False
    for value in values:
        if not isinstance(value, numbers.Real):
            raise TypeError(f"cannot infer element type from {type(value).__name__} value {value!r}")
        if not isinstance(value, numbers.Integral):
            return default_float
        saw_value = True
    return default_int if saw_value else default_float


def promote_dtype(a: Union[DType, str], b: Union[DType, str]) -> DType:
    """
    Result type of combining two element types.

    Float beats integer, wider beats narrower. Mixed signed/unsigned
    integers go to a signed type wide enough for both.
    """
    a = validate_dtype(a)
    b = validate_dtype(b)
    if a == b:
        return a
    if a.is_float or b.is_float:
        if a.is_float and b.is_float:
            return a if a.itemsize >= b.itemsize else b
        return DType.FLOAT64
    if a.is_signed == b.is_signed:
        return a if a.itemsize >= b.itemsize else b
    signed, unsigned = (a, b) if a.is_signed else (b, a)
    if signed.itemsize > unsigned.itemsize:
        return signed
    return _SIGNED_BY_SIZE.get(unsigned.itemsize * 2, DType.FLOAT64)


def scalar_result_dtype(dtype: DType, scalar: Any) -> DType:
    """
    Element type of ``container OP scalar``.

    An integer container combined with a non-integral scalar gives float64,
    otherwise the container keeps its type.
    """
    if not isinstance(scalar, numbers.Real):
        raise TypeError(f"unsupported scalar type {type(scalar).__name__}")
    if dtype.is_integer and not isinstance(scalar, numbers.Integral):
        return DType.FLOAT64
    return dtype
