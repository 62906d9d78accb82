"""
Tests for row and element access.

Covers at(), get(), row(), rows(), [] indexing and assignment,
bounds checking without wrap-around, read-only views and freeze().
"""

import numpy as np
import pytest

from toygemm import IndexOutOfBoundsError, Mat, ReadOnlyError, ValidationError, DimensionError


@pytest.fixture
def I3():
    return Mat[3, 3](1, 0, 0, 0, 1, 0, 0, 0, 1)


# ═══════════════════════════════════════════════════════════════════════
# Reads
# ═══════════════════════════════════════════════════════════════════════


class TestRead:

    def test_constant_row(self, I3):
        np.testing.assert_array_equal(I3.get(0), [1, 0, 0])

    def test_indexed_row(self, I3):
        np.testing.assert_array_equal(I3[1], [0, 1, 0])

    def test_constant_element(self, I3):
        assert I3.get(2, 0) == 0
        assert I3.get(2, 2) == 1

    def test_chained_indexing(self, I3):
        assert I3[2][1] == 0

    def test_at_element(self, I3):
        assert I3.at(2, 2) == 1
        assert I3[2, 2] == 1

    def test_row_length(self, I3):
        assert len(I3.row(0)) == 3

    def test_rows_iteration(self):
        m = Mat[2, 3]((1, 2, 3), (4, 5, 6))
        dup = m.copy()
        count = 0
        for r, row in enumerate(m.rows()):
            assert len(row) == 3
            np.testing.assert_array_equal(row, dup[r])
            count += 1
        assert count == 2

    def test_iterating_matrix_yields_rows(self):
        m = Mat[2, 2]((1, 2), (3, 4))
        assert [list(row) for row in m] == [[1, 2], [3, 4]]


# ═══════════════════════════════════════════════════════════════════════
# Bounds
# ═══════════════════════════════════════════════════════════════════════


class TestBounds:

    @pytest.mark.parametrize("index", [3, -1, 100])
    def test_row_out_of_range(self, I3, index):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            I3[index]
        assert exc_info.value.axis == "row"
        assert exc_info.value.bound == 3

    def test_column_out_of_range(self):
        m = Mat[2, 3]()
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            m.at(1, 3)
        assert exc_info.value.axis == "column"
        assert exc_info.value.index == 3

    def test_caught_as_index_error(self, I3):
        with pytest.raises(IndexError):
            I3.at(0, -1)

    def test_constant_access_out_of_range(self, I3):
        with pytest.raises(IndexOutOfBoundsError):
            I3.get(3)

    def test_constant_access_requires_plain_int(self, I3):
        with pytest.raises(TypeError):
            I3.get(np.int64(0))

    def test_too_many_indices(self, I3):
        with pytest.raises(TypeError):
            I3[0, 0, 0]

    def test_write_out_of_range(self, I3):
        with pytest.raises(IndexOutOfBoundsError):
            I3[0, 3] = 1
        assert I3 == Mat[3, 3].identity()


# ═══════════════════════════════════════════════════════════════════════
# Writes
# ═══════════════════════════════════════════════════════════════════════


class TestWrite:

    def test_element_assignment(self):
        m = Mat[3, 3]()
        m[2, 2] = 1
        assert m != Mat[3, 3]()
        assert m.get(2, 2) == 1

    def test_row_view_writes_through(self):
        m = Mat[2, 2]()
        m.row(1)[0] = 5
        assert m[1, 0] == 5

    def test_row_assignment(self):
        m = Mat[2, 3]()
        m[1] = (7, 8, 9)
        assert m.tolist() == [[0, 0, 0], [7, 8, 9]]

    def test_row_assignment_wrong_length(self):
        m = Mat[2, 3]()
        with pytest.raises(DimensionError):
            m[0] = (1, 2)
        assert m == Mat[2, 3]()

    def test_row_assignment_needs_sequence(self):
        m = Mat[2, 3]()
        with pytest.raises(ValidationError):
            m[0] = 1

    def test_rows_view_writes_through(self):
        m = Mat[2, 2]()
        m.rows()[0, 1] = 3
        assert m[0, 1] == 3


# ═══════════════════════════════════════════════════════════════════════
# Read-only access
# ═══════════════════════════════════════════════════════════════════════


class TestReadOnly:

    def test_readonly_row(self):
        m = Mat[2, 2](1)
        row = m.row(0, readonly=True)
        with pytest.raises(ValueError):
            row[0] = 2
        assert m[0, 0] == 1

    def test_readonly_rows(self):
        m = Mat[2, 2](1)
        with pytest.raises(ValueError):
            m.rows(readonly=True)[0, 0] = 2

    def test_readonly_views_leave_matrix_writeable(self):
        m = Mat[2, 2](1)
        m.rows(readonly=True)
        m[0, 0] = 3
        assert m[0, 0] == 3

    def test_freeze(self):
        m = Mat[2, 2](1).freeze()
        assert m.frozen
        with pytest.raises(ReadOnlyError):
            m[0, 0] = 2
        with pytest.raises(ReadOnlyError):
            m[0] = (2, 2)
        with pytest.raises(ValueError):
            m.row(0)[0] = 2
        assert m == Mat[2, 2](1)

    def test_frozen_matrix_still_readable(self):
        m = Mat[2, 2]((1, 2), (3, 4)).freeze()
        assert m[1, 0] == 3
        assert m.transpose() == Mat[2, 2]((1, 3), (2, 4))
