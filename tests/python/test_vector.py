"""
Tests for Vector construction, builders, indexing and conversion.
"""

import numpy as np
import pytest

from numgrid import (
    DType,
    InvalidStepValueError,
    OutOfBoundsError,
    Vector,
    vector,
)


class TestVectorCreation:
    """Test constructing vectors from Python data."""

    def test_from_list_infers_int(self):
        v = Vector([1, 2, 3])
        assert len(v) == 3
        assert v.dtype == DType.INT64
        assert v.tolist() == [1, 2, 3]

    def test_from_list_infers_float(self):
        v = Vector([1, 2.5, 3])
        assert v.dtype == DType.FLOAT64
        assert v.tolist() == [1.0, 2.5, 3.0]

    def test_explicit_dtype(self):
        v = Vector([1, 2, 3], dtype="u8")
        assert v.dtype == DType.UINT8
        assert v.shape == (3,)
        assert v.size == 3

    def test_empty(self):
        v = Vector()
        assert len(v) == 0
        assert v.tolist() == []
        assert v.dtype == DType.FLOAT64

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            Vector(["a", "b"])

    def test_rejects_overflow(self):
        with pytest.raises(OverflowError):
            Vector([1, 300], dtype="u8")

    def test_rejects_fraction_in_integer_vector(self):
        with pytest.raises(TypeError):
            Vector([1, 2.5], dtype="i32")

    def test_from_generator(self):
        v = Vector(x * x for x in range(4))
        assert v.tolist() == [0, 1, 4, 9]

    def test_copy_constructor_is_independent(self):
        v = Vector([1, 2, 3])
        w = Vector(v)
        w[0] = 100
        assert v[0] == 1

    def test_literal_helper(self):
        assert vector(1, 2, 3) == Vector([1, 2, 3])
        assert vector(1, 2, dtype="f32").dtype == DType.FLOAT32


class TestVectorBuilders:
    """Test full/zeros/ones/range/linspace builders."""

    def test_full(self):
        v = Vector.full(5, 2.5)
        assert v.tolist() == [2.5, 2.5, 2.5, 2.5, 2.5]
        assert v.dtype == DType.FLOAT64

    def test_full_int(self):
        v = Vector.full(3, 7)
        assert v.tolist() == [7, 7, 7]
        assert v.dtype == DType.INT64

    def test_full_like(self):
        base = Vector([1, 2, 3, 4], dtype="i32")
        v = Vector.full_like(base, 5)
        assert v.tolist() == [5, 5, 5, 5]
        assert v.dtype == DType.INT32

    def test_full_like_promotes_for_float_value(self):
        base = Vector([1, 2], dtype="i32")
        v = Vector.full_like(base, 0.5)
        assert v.dtype == DType.FLOAT64
        assert v.tolist() == [0.5, 0.5]

    def test_zeros_and_ones(self):
        assert Vector.zeros(3).tolist() == [0.0, 0.0, 0.0]
        assert Vector.ones(2, dtype="i16").tolist() == [1, 1]
        assert Vector.ones(2, dtype="i16").dtype == DType.INT16

    def test_zeros_like_and_ones_like(self):
        base = Vector([4, 5, 6], dtype="u16")
        zeros = Vector.zeros_like(base)
        ones = Vector.ones_like(base)
        assert zeros.tolist() == [0, 0, 0]
        assert ones.tolist() == [1, 1, 1]
        assert zeros.dtype == ones.dtype == DType.UINT16

    def test_zero_length(self):
        assert Vector.zeros(0).tolist() == []

    def test_negative_length(self):
        with pytest.raises(ValueError):
            Vector.full(-1, 0)

    def test_range_integers(self):
        assert Vector.range(0, 3, 1).tolist() == [0, 1, 2]
        assert Vector.range(0, 3).dtype == DType.INT64

    def test_range_float_step(self):
        assert Vector.range(1, 3, 0.5).tolist() == [1.0, 1.5, 2.0, 2.5]

    def test_range_excludes_stop(self):
        assert Vector.range(0.0, 3.0, 0.5).tolist() == [0.0, 0.5, 1.0, 1.5, 2.0, 2.5]
        assert Vector.range(0, 10, 3).tolist() == [0, 3, 6, 9]

    def test_range_descending(self):
        assert Vector.range(3, 0, -1).tolist() == [3, 2, 1]

    def test_range_start_equals_stop(self):
        assert Vector.range(4, 4, 1).tolist() == [4]

    def test_range_zero_step(self):
        with pytest.raises(InvalidStepValueError, match="should not be zero"):
            Vector.range(0, 3, 0)

    def test_range_step_against_direction(self):
        with pytest.raises(InvalidStepValueError):
            Vector.range(0, 3, -1)
        with pytest.raises(InvalidStepValueError):
            Vector.range(3, 0, 1)

    def test_range_error_is_recoverable(self):
        with pytest.raises(InvalidStepValueError) as info:
            Vector.range(0, 3, 0)
        assert info.value.recoverable
        assert isinstance(info.value, ValueError)

    def test_linspace(self):
        v = Vector.linspace(5, 1.0, 10.0)
        assert v.tolist() == [1.0, 3.25, 5.5, 7.75, 10.0]

    def test_linspace_last_is_exact(self):
        v = Vector.linspace(7, 0.0, 1.0)
        assert len(v) == 7
        assert v[-1] == 1.0
        assert v[0] == 0.0

    def test_linspace_drift_never_reaches_last(self):
        v = Vector.linspace(11, 0.0, 0.3)
        assert len(v) == 11
        assert v[10] == 0.3

    def test_linspace_descending(self):
        assert Vector.linspace(3, 1.0, -1.0).tolist() == [1.0, 0.0, -1.0]

    def test_linspace_small_lengths(self):
        assert Vector.linspace(0, 1.0, 2.0).tolist() == []
        assert Vector.linspace(1, 1.0, 2.0).tolist() == [2.0]

    def test_linspace_rejects_integer_dtype(self):
        with pytest.raises(TypeError):
            Vector.linspace(3, 0, 1, dtype="i32")


class TestVectorIndexing:
    """Test bounds-checked element access."""

    def test_getitem(self, small_vector):
        assert small_vector[0] == 3
        assert small_vector[4] == 5
        assert small_vector.at(2) == 4

    def test_negative_index(self, small_vector):
        assert small_vector[-1] == 5
        assert small_vector[-5] == 3

    def test_out_of_bounds(self, small_vector):
        with pytest.raises(OutOfBoundsError) as info:
            small_vector[5]
        err = info.value
        assert err.index == 5
        assert err.limit == 5
        assert err.axis == 0
        assert "index 5 out of range for vector with length 5" in str(err)

    def test_out_of_bounds_is_index_error(self, small_vector):
        with pytest.raises(IndexError):
            small_vector[-6]

    def test_non_integer_index(self, small_vector):
        with pytest.raises(TypeError):
            small_vector[1.5]

    def test_bool_index_rejected(self, small_vector):
        with pytest.raises(TypeError, match="bool"):
            small_vector[True]
        with pytest.raises(TypeError):
            small_vector[False] = 1

    def test_setitem(self, small_vector):
        small_vector[1] = 10
        assert small_vector.tolist() == [3, 10, 4, 1, 5]

    def test_setitem_out_of_bounds(self, small_vector):
        with pytest.raises(OutOfBoundsError):
            small_vector[10] = 1

    def test_setitem_checks_type(self, small_vector):
        with pytest.raises(TypeError):
            small_vector[0] = 0.5

    def test_iteration(self, small_vector):
        assert list(small_vector) == [3, 1, 4, 1, 5]
        assert list(small_vector.elements()) == [3, 1, 4, 1, 5]


class TestVectorConversion:
    """Test copies, numpy interop and representation."""

    def test_copy(self, small_vector):
        c = small_vector.copy()
        c[0] = 0
        assert small_vector[0] == 3
        assert c == Vector([0, 1, 4, 1, 5])

    def test_to_numpy(self):
        v = Vector([1.5, 2.5], dtype="f32")
        arr = v.to_numpy()
        assert arr.dtype == np.float32
        np.testing.assert_allclose(arr, [1.5, 2.5])

    def test_from_numpy(self):
        v = Vector.from_numpy(np.array([1, 2, 3], dtype=np.int16))
        assert v.dtype == DType.INT16
        assert v.tolist() == [1, 2, 3]

    def test_from_numpy_rejects_2d(self):
        with pytest.raises(ValueError):
            Vector(np.zeros((2, 2)))

    def test_asarray(self, small_vector):
        np.testing.assert_array_equal(np.asarray(small_vector), [3, 1, 4, 1, 5])

    def test_equality(self):
        assert Vector([1, 2]) == Vector([1.0, 2.0])
        assert Vector([1, 2]) != Vector([1, 2, 3])
        assert Vector([1, 2]) != [1, 2]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1]))

    def test_repr(self):
        assert repr(Vector([1, 2, 3])) == "Vector([1, 2, 3], dtype=int64)"
        assert str(Vector([1, 2, 3])) == "[1, 2, 3]"

    def test_repr_truncates(self):
        r = repr(Vector.range(0, 20))
        assert r == "Vector([0, 1, 2, ..., 17, 18, 19], dtype=int64)"
