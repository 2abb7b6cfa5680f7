"""
Tests for the flat typed buffer.
"""

import numpy as np
import pytest

from numgrid import Array, DType


class TestArrayCreation:
    """Test Array construction."""

    def test_zeros(self):
        arr = Array.zeros(4, dtype="i32")
        assert arr.size == 4
        assert len(arr) == 4
        assert arr.dtype == DType.INT32
        assert arr.tolist() == [0, 0, 0, 0]

    def test_nbytes(self):
        arr = Array(3, DType.FLOAT64)
        assert arr.itemsize == 8
        assert arr.nbytes == 24

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Array(-1)

    def test_full(self):
        assert Array.full(3, 2, "u8").tolist() == [2, 2, 2]

    def test_from_list_coerces(self):
        arr = Array.from_list([1, 2.0, 3], "i16")
        assert arr.tolist() == [1, 2, 3]
        with pytest.raises(OverflowError):
            Array.from_list([40000], "i16")

    def test_from_numpy(self):
        arr = Array.from_numpy(np.array([[1, 2], [3, 4]], dtype=np.int32))
        assert arr.dtype == DType.INT32
        assert arr.tolist() == [1, 2, 3, 4]

    def test_from_numpy_float_to_int(self):
        assert Array.from_numpy(np.array([1.0, 2.0]), "i8").tolist() == [1, 2]
        with pytest.raises(TypeError):
            Array.from_numpy(np.array([1.5]), "i8")


class TestArrayAccess:
    """Test element access and bulk updates."""

    def test_getitem_setitem(self):
        arr = Array.zeros(3, "i64")
        arr[1] = 5
        arr[-1] = 7
        assert arr[1] == 5
        assert arr.tolist() == [0, 5, 7]

    def test_index_error(self):
        arr = Array.zeros(2)
        with pytest.raises(IndexError):
            arr[2]
        with pytest.raises(IndexError):
            arr[-3] = 1.0

    def test_setitem_coerces(self):
        arr = Array.zeros(1, "u8")
        with pytest.raises(OverflowError):
            arr[0] = 256

    def test_assign(self):
        arr = Array.zeros(3, "f64")
        arr.assign([1, 2, 3])
        assert arr.tolist() == [1.0, 2.0, 3.0]

    def test_assign_wrong_length(self):
        with pytest.raises(ValueError):
            Array.zeros(3).assign([1.0])

    def test_fill(self):
        arr = Array.zeros(3, "i8")
        arr.fill(-1)
        assert arr.tolist() == [-1, -1, -1]


class TestArrayConversion:
    """Test copies and conversions."""

    def test_copy_is_independent(self):
        arr = Array.from_list([1.0, 2.0])
        clone = arr.copy()
        clone[0] = 9.0
        assert arr[0] == 1.0

    def test_copy_empty(self):
        assert Array.zeros(0).copy().tolist() == []

    def test_to_numpy(self):
        out = Array.from_list([1, 2], "u16").to_numpy()
        assert out.dtype == np.uint16
        np.testing.assert_array_equal(out, [1, 2])

    def test_tobytes(self):
        assert Array.from_list([1, 2], "u8").tobytes() == b"\x01\x02"

    def test_repr(self):
        assert repr(Array.from_list([1, 2], "i32")) == "Array([1, 2], dtype=int32)"
        long = Array.from_list(list(range(10)), "i32")
        assert repr(long) == "Array([0, 1, 2, ..., 7, 8, 9], dtype=int32)"
