"""
Tests for element, row and column iterators.
"""

import pytest

from numgrid import ColumnIterator, ColumnView, ElementIterator, RowIterator, RowView, Vector


class TestElementIterator:
    """Test lazy element iteration."""

    def test_yields_in_order(self, small_vector):
        it = small_vector.elements()
        assert isinstance(it, ElementIterator)
        assert list(it) == [3, 1, 4, 1, 5]

    def test_single_pass(self, small_vector):
        it = small_vector.elements()
        assert list(it) == [3, 1, 4, 1, 5]
        assert list(it) == []
        with pytest.raises(StopIteration):
            next(it)

    def test_restartable_through_container(self, small_vector):
        assert list(small_vector.elements()) == list(small_vector.elements())

    def test_length_hint(self, small_vector):
        it = small_vector.elements()
        next(it)
        assert it.__length_hint__() == 4

    def test_reads_live_values(self):
        v = Vector([1, 2, 3])
        it = v.elements()
        assert next(it) == 1
        v[1] = 20
        assert next(it) == 20

    def test_empty(self):
        assert list(Vector([]).elements()) == []

    def test_subvector_elements(self, small_vector):
        assert list(small_vector[1:4].elements()) == [1, 4, 1]

    def test_sum_over_iterator(self, small_matrix):
        assert sum(small_matrix.elements()) == 45


class TestRowColumnIterators:
    """Test row and column iteration."""

    def test_rows(self, small_matrix):
        rows = small_matrix.rows()
        assert isinstance(rows, RowIterator)
        collected = list(rows)
        assert all(isinstance(r, RowView) for r in collected)
        assert [r.tolist() for r in collected] == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_cols(self, small_matrix):
        cols = small_matrix.cols()
        assert isinstance(cols, ColumnIterator)
        collected = list(cols)
        assert all(isinstance(c, ColumnView) for c in collected)
        assert [c.tolist() for c in collected] == [[1, 4, 7], [2, 5, 8], [3, 6, 9]]

    def test_iter_matrix_gives_rows(self, wide_matrix):
        assert [row[0] for row in wide_matrix] == [0, 10, 20]

    def test_row_count(self, wide_matrix):
        assert len(list(wide_matrix.rows())) == 3
        assert len(list(wide_matrix.cols())) == 4

    def test_row_elements(self, wide_matrix):
        row = next(wide_matrix.rows())
        assert list(row.elements()) == [0, 1, 2, 3]
