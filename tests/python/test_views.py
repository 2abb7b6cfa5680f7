"""
Tests for slicing and the read-only view types.
"""

import pytest

from numgrid import (
    ColumnView,
    InvalidRangeError,
    Matrix,
    OutOfBoundsError,
    RowView,
    Submatrix,
    SubVector,
    Vector,
    inclusive,
    matrix,
    to_inclusive,
    vector,
)


class TestVectorSlicing:
    """Test the six range forms on vectors."""

    def test_exact(self, small_vector):
        s = small_vector[1:4]
        assert isinstance(s, SubVector)
        assert s.tolist() == [1, 4, 1]
        assert s.offset == 1
        assert len(s) == 3

    def test_range_from(self, small_vector):
        assert small_vector[2:].tolist() == [4, 1, 5]

    def test_range_to(self, small_vector):
        assert small_vector[:2].tolist() == [3, 1]

    def test_full(self, small_vector):
        assert small_vector[:].tolist() == [3, 1, 4, 1, 5]

    def test_inclusive(self, small_vector):
        assert small_vector[inclusive(1, 3)].tolist() == [1, 4, 1]

    def test_to_inclusive(self, small_vector):
        assert small_vector.slice(to_inclusive(1)).tolist() == [3, 1]

    def test_empty_slice(self, small_vector):
        assert small_vector[2:2].tolist() == []
        assert small_vector[5:].tolist() == []

    def test_start_after_end(self, small_vector):
        with pytest.raises(InvalidRangeError) as info:
            small_vector[3:1]
        assert "Vector slice index starts at 3 but ends at 1" in str(info.value)
        assert info.value.start == 3
        assert info.value.end == 1

    def test_inclusive_start_after_end(self, small_vector):
        with pytest.raises(InvalidRangeError):
            small_vector[inclusive(4, 2)]

    def test_exact_past_end(self, small_vector):
        with pytest.raises(OutOfBoundsError):
            small_vector[2:6]

    def test_inclusive_past_end(self, small_vector):
        with pytest.raises(OutOfBoundsError):
            small_vector[inclusive(0, 5)]
        with pytest.raises(OutOfBoundsError):
            small_vector[to_inclusive(5)]

    def test_range_from_past_end(self, small_vector):
        with pytest.raises(OutOfBoundsError):
            small_vector[6:]

    def test_negative_bounds_rejected(self, small_vector):
        with pytest.raises(InvalidRangeError):
            small_vector[-2:]

    def test_step_rejected(self, small_vector):
        with pytest.raises(ValueError):
            small_vector[::2]

    def test_subvector_index_checks_own_size(self, small_vector):
        s = small_vector[0:2]
        assert s[1] == 1
        with pytest.raises(OutOfBoundsError, match="vector slice with length 2"):
            s[2]

    def test_subvector_of_subvector_targets_root(self, small_vector):
        inner = small_vector[1:5][1:3]
        assert inner.tolist() == [4, 1]
        assert inner.source is small_vector
        assert inner.offset == 2

    def test_subvector_reads_live_data(self, small_vector):
        s = small_vector[1:3]
        small_vector[1] = 100
        assert s.tolist() == [100, 4]

    def test_subvector_to_vector_copies(self, small_vector):
        copy = small_vector[0:2].to_vector()
        small_vector[0] = 0
        assert copy == vector(3, 1)

    def test_subvector_equality(self, small_vector):
        assert small_vector[0:2] == Vector([3, 1])
        assert Vector([3, 1]) == small_vector[0:2]

    def test_subvector_repr(self, small_vector):
        assert repr(small_vector[1:3]) == "SubVector([1, 4], offset=1, dtype=int64)"


class TestMatrixSlicing:
    """Test Submatrix construction with every range form."""

    def test_scenario(self):
        m = matrix([3, 1, 4], [1, 5, 9])
        sub = m.slice(slice(0, 2), slice(1, 3))
        assert isinstance(sub, Submatrix)
        assert sub.shape == (2, 2)
        assert sub.tolist() == [[1, 4], [5, 9]]

    def test_getitem_forms(self, wide_matrix):
        assert wide_matrix[1:, 2:].tolist() == [[12, 13], [22, 23]]
        assert wide_matrix[:1, :2].tolist() == [[0, 1]]
        assert wide_matrix[:, inclusive(1, 2)].tolist() == [[1, 2], [11, 12], [21, 22]]
        assert wide_matrix[to_inclusive(0), :].tolist() == [[0, 1, 2, 3]]

    def test_row_range_only(self, wide_matrix):
        assert wide_matrix[1:3].shape == (2, 4)

    def test_offsets(self, wide_matrix):
        sub = wide_matrix[1:3, 2:4]
        assert sub.offsets == (1, 2)
        assert sub.nrows == 2
        assert sub.ncols == 2

    def test_start_after_end(self, wide_matrix):
        with pytest.raises(InvalidRangeError, match="Matrix slice index starts at 2 but ends at 1"):
            wide_matrix[2:1, :]

    def test_rows_past_end(self, wide_matrix):
        with pytest.raises(OutOfBoundsError) as info:
            wide_matrix[0:4, :]
        assert info.value.axis == 0

    def test_cols_past_end(self, wide_matrix):
        with pytest.raises(OutOfBoundsError) as info:
            wide_matrix[:, inclusive(1, 4)]
        assert info.value.axis == 1

    def test_submatrix_bounds_are_its_own(self, wide_matrix):
        sub = wide_matrix[0:2, 0:2]
        assert sub.at(1, 1) == 11
        with pytest.raises(OutOfBoundsError, match="number of rows 2"):
            sub.at(2, 0)
        with pytest.raises(OutOfBoundsError, match="number of columns 2"):
            sub.at(0, 2)

    def test_submatrix_row_and_col(self, wide_matrix):
        sub = wide_matrix[1:3, 1:4]
        row = sub.row(1)
        col = sub.col(2)
        assert isinstance(row, RowView)
        assert isinstance(col, ColumnView)
        assert row.tolist() == [21, 22, 23]
        assert (row.pos, row.offset, row.size) == (2, 1, 3)
        assert col.tolist() == [13, 23]
        assert (col.pos, col.offset, col.size) == (3, 1, 2)
        assert row.source is wide_matrix

    def test_submatrix_of_submatrix_targets_root(self, wide_matrix):
        inner = wide_matrix[1:3, 1:4][1:, 0:2]
        assert inner.source is wide_matrix
        assert inner.offsets == (2, 1)
        assert inner.tolist() == [[21, 22]]

    def test_submatrix_iteration(self, wide_matrix):
        sub = wide_matrix[0:2, 2:4]
        assert [r.tolist() for r in sub.rows()] == [[2, 3], [12, 13]]
        assert [c.tolist() for c in sub.cols()] == [[2, 12], [3, 13]]
        assert list(sub.elements()) == [2, 3, 12, 13]

    def test_submatrix_reads_live_data(self, wide_matrix):
        sub = wide_matrix[0:2, 0:2]
        wide_matrix[1, 1] = -1
        assert sub.at(1, 1) == -1

    def test_submatrix_to_matrix(self, wide_matrix):
        copy = wide_matrix[0:2, 0:2].to_matrix()
        assert isinstance(copy, Matrix)
        wide_matrix[0, 0] = 99
        assert copy.tolist() == [[0, 1], [10, 11]]

    def test_submatrix_equality(self, wide_matrix):
        assert wide_matrix[0:1, 0:2] == Matrix([[0, 1]])
        assert Matrix([[0, 1]]) == wide_matrix[0:1, 0:2]

    def test_empty_submatrix(self, wide_matrix):
        sub = wide_matrix[1:1, :]
        assert sub.shape == (0, 4)
        assert list(sub.rows()) == []


class TestRowColumnViews:
    """Test RowView and ColumnView access."""

    def test_row_view_indexing(self, small_matrix):
        row = small_matrix.row(1)
        assert row[0] == 4
        assert row[2] == 6
        with pytest.raises(OutOfBoundsError) as info:
            row[5]
        assert str(info.value) == "index 5 out of range for row matrix with number of elements 3"

    def test_column_view_indexing(self, small_matrix):
        col = small_matrix.col(0)
        assert col[2] == 7
        with pytest.raises(OutOfBoundsError, match="column matrix with number of elements 3"):
            col[3]

    def test_view_slicing(self, small_matrix):
        row = small_matrix.row(2)
        part = row[1:]
        assert isinstance(part, RowView)
        assert part.tolist() == [8, 9]
        assert small_matrix.col(1)[inclusive(0, 1)].tolist() == [2, 5]

    def test_view_repr(self, small_matrix):
        assert repr(small_matrix.row(0)) == "[1, 2, 3]"
        assert repr(small_matrix.col(0)) == "[1; 4; 7]"

    def test_view_to_vector(self, small_matrix):
        v = small_matrix.col(1).to_vector()
        assert isinstance(v, Vector)
        assert v.tolist() == [2, 5, 8]

    def test_view_equality(self, small_matrix):
        assert small_matrix.row(0) == Vector([1, 2, 3])
        assert small_matrix.row(0) == small_matrix.row(0)
        assert small_matrix.row(0) != small_matrix.col(0)

    def test_view_construction_validates(self, small_matrix):
        with pytest.raises(OutOfBoundsError):
            RowView(small_matrix, 0, 2, 2)
        with pytest.raises(OutOfBoundsError):
            ColumnView(small_matrix, 3, 0, 1)
        with pytest.raises(OutOfBoundsError):
            Submatrix(small_matrix, 2, 0, 2, 1)
