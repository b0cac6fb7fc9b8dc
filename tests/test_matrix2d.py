"""Tests for data_structure/matrix2d.py"""

import numpy as np
import pytest

from data_structure.matrix2d import Matrix2D


class TestMatrix2D:
    def test_default_fill(self):
        matrix = Matrix2D(2, 3, 0)
        assert matrix.shape == (2, 3)
        assert matrix.rows == 2
        assert matrix.cols == 3
        assert all(matrix.at(r, c) == 0 for r in range(2) for c in range(3))

    def test_defaulted_is_none(self):
        matrix = Matrix2D.defaulted(2, 2)
        assert matrix.at(1, 1) is None

    def test_sequence_default_is_stored_as_is(self):
        """A tuple default fills cells, it is not broadcast across columns."""
        matrix = Matrix2D(2, 2, (1, 2))
        assert matrix.at(0, 1) == (1, 2)

    def test_set_and_at(self):
        matrix = Matrix2D(3, 3, None)
        matrix.set(1, 2, "x")
        assert matrix.at(1, 2) == "x"
        assert matrix.at(2, 1) is None

    def test_row_and_column(self):
        matrix = Matrix2D(2, 3, 0)
        for r in range(2):
            for c in range(3):
                matrix.set(r, c, r * 3 + c)
        assert matrix.row(1) == (3, 4, 5)
        assert list(matrix.column(2)) == [2, 5]

    def test_out_of_bound(self):
        matrix = Matrix2D(2, 2, 0)
        with pytest.raises(IndexError, match="row index out of bound"):
            matrix.at(2, 0)
        with pytest.raises(IndexError, match="col index out of bound"):
            matrix.set(0, 2, 1)
        with pytest.raises(IndexError, match="row index out of bound"):
            matrix.row(5)
        with pytest.raises(IndexError, match="col index out of bound"):
            matrix.column(-1)

    def test_negative_indices_rejected(self):
        matrix = Matrix2D(2, 2, 0)
        with pytest.raises(IndexError):
            matrix.at(-1, 0)

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            Matrix2D(-1, 2, 0)

    def test_empty_matrix(self):
        matrix = Matrix2D(0, 0, 0)
        assert matrix.shape == (0, 0)

    def test_equality_and_numpy(self):
        a = Matrix2D(2, 2, 1)
        b = Matrix2D(2, 2, 1)
        assert a == b
        b.set(0, 0, 2)
        assert a != b
        assert np.array_equal(a.to_numpy(), np.ones((2, 2), dtype=object))
