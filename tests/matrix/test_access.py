"""
Tests for Matrix element access, rendering and equality.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from lingebra import Matrix, MatrixIndexError
from lingebra.core.tolerances import FP64_LOOSE
from lingebra.matrix._render import format_element


# ═══════════════════════════════════════════════════════════════════════
# row / col / indexing
# ═══════════════════════════════════════════════════════════════════════


class TestRowCol:
    """row(i) and col(j) return copies in row order."""

    def test_row(self, sample_matrix):
        assert_array_equal(sample_matrix.row(1), [1.0, 0.0, 1.0, 0.0])

    def test_col(self, sample_matrix):
        assert_array_equal(sample_matrix.col(1), [1.0, 0.0, 5.0])

    def test_row_is_a_copy(self, sample_matrix):
        row = sample_matrix.row(0)
        row[0] = 100.0
        assert sample_matrix[0, 0] == 0.0

    def test_col_is_a_copy(self, sample_matrix):
        col = sample_matrix.col(3)
        col[:] = -1.0
        assert_array_equal(sample_matrix.col(3), [3.0, 0.0, 5.0])

    def test_row_out_of_range(self, sample_matrix):
        with pytest.raises(MatrixIndexError) as exc_info:
            sample_matrix.row(3)
        assert exc_info.value.axis == "row"
        assert exc_info.value.size == 3

    def test_col_out_of_range(self, sample_matrix):
        with pytest.raises(MatrixIndexError) as exc_info:
            sample_matrix.col(4)
        assert exc_info.value.axis == "column"
        assert exc_info.value.size == 4

    def test_negative_indices_rejected(self, sample_matrix):
        with pytest.raises(IndexError):
            sample_matrix.row(-1)
        with pytest.raises(IndexError):
            sample_matrix.col(-1)


class TestIndexing:
    """m[i] yields a row, m[i][j] and m[i, j] yield the scalar."""

    def test_row_then_column(self, sample_matrix):
        assert sample_matrix[2][1] == 5.0
        assert sample_matrix[0][3] == 3.0

    def test_tuple_index(self, sample_matrix):
        assert sample_matrix[0, 3] == 3.0
        assert type(sample_matrix[0, 3]) is float

    def test_row_index_out_of_range(self, sample_matrix):
        with pytest.raises(MatrixIndexError):
            sample_matrix[3]

    def test_tuple_column_out_of_range(self, sample_matrix):
        with pytest.raises(MatrixIndexError):
            sample_matrix[0, 4]

    def test_tuple_of_wrong_length(self, sample_matrix):
        with pytest.raises(TypeError):
            sample_matrix[0, 1, 2]

    def test_len_and_iteration(self, sample_matrix):
        assert len(sample_matrix) == 3
        rows = [row.tolist() for row in sample_matrix]
        assert rows == sample_matrix.to_list()

    def test_row_element_is_python_float(self, sample_matrix):
        assert type(sample_matrix[2][1]) is float

    def test_row_column_past_end_raises(self, sample_matrix):
        with pytest.raises(MatrixIndexError) as exc_info:
            sample_matrix[0][4]
        assert exc_info.value.axis == "column"
        assert exc_info.value.size == 4

    def test_row_negative_column_raises(self, sample_matrix):
        with pytest.raises(MatrixIndexError) as exc_info:
            sample_matrix[0][-1]
        assert exc_info.value.index == -1
        assert exc_info.value.axis == "column"

    def test_row_rejects_bool_column(self, sample_matrix):
        with pytest.raises(MatrixIndexError):
            sample_matrix[0][True]

    def test_row_behaves_as_sequence(self, sample_matrix):
        row = sample_matrix[1]
        assert len(row) == 4
        assert list(row) == [1.0, 0.0, 1.0, 0.0]
        assert_array_equal(np.asarray(row), [1.0, 0.0, 1.0, 0.0])


# ═══════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════


class TestRender:
    """str() gives a |-delimited block surrounded by blank lines."""

    def test_layout(self):
        m = Matrix.new([[0.0, 1.0, 55.0, 66.33], [1.0, 0.0, 1.0, 2.0]])
        assert str(m) == (
            "\n"
            "| 0  1  55  66.33 |\n"
            "| 1  0  1  2 |\n"
            "\n"
        )

    def test_identity(self):
        assert str(Matrix.identity(2)) == "\n| 1  0 |\n| 0  1 |\n\n"

    def test_column_vector(self):
        assert str(Matrix.column_vector([2.5, -1.0])) == "\n| 2.5 |\n| -1 |\n\n"

    @pytest.mark.parametrize("value,text", [
        (1.0, "1"),
        (2.1, "2.1"),
        (-3.0, "-3"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e-07, "0.0000001"),
        (-2.5e-10, "-0.00000000025"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "NaN"),
    ])
    def test_element_format(self, value, text):
        assert format_element(value) == text

    def test_small_values_not_in_exponent_notation(self):
        assert str(Matrix.new([[1e-07, 1e-05]])) == "\n| 0.0000001  0.00001 |\n\n"

    def test_repr(self):
        assert repr(Matrix.identity(2)) == "Matrix([[1.0, 0.0], [0.0, 1.0]])"


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:
    """Exact element-wise equality including dimensions."""

    def test_equal_to_identity(self):
        assert Matrix.new([[1.0, 0.0], [0.0, 1.0]]) == Matrix.identity(2)

    def test_identity_not_ones(self):
        assert Matrix.identity(2) != Matrix.ones(2, 2)

    def test_different_dimensions(self):
        assert Matrix.identity(2) != Matrix.zeroes(1, 1)
        assert Matrix.ones(1, 4) != Matrix.ones(4, 1)

    def test_no_tolerance(self):
        a = Matrix.new([[0.1 + 0.2]])
        b = Matrix.new([[0.3]])
        assert a != b

    def test_nan_is_not_equal(self):
        m = Matrix.new([[float("nan")]])
        assert m != Matrix.new([[float("nan")]])

    def test_signed_zero_is_equal(self):
        assert Matrix.new([[-0.0]]) == Matrix.new([[0.0]])

    def test_not_equal_to_other_types(self):
        assert Matrix.identity(2) != [[1.0, 0.0], [0.0, 1.0]]
        assert Matrix.identity(2) != np.eye(2)


class TestAllclose:
    """allclose is an explicit, tolerance-based comparison."""

    def test_rounding_is_close(self):
        assert Matrix.new([[0.1 + 0.2]]).allclose(Matrix.new([[0.3]]))

    def test_far_values_not_close(self):
        assert not Matrix.ones(2, 2).allclose(Matrix.identity(2))

    def test_different_dimensions_not_close(self):
        assert not Matrix.ones(1, 2).allclose(Matrix.ones(2, 1))

    def test_loose_tier(self):
        a = Matrix.new([[1.0]])
        b = Matrix.new([[1.0 + 1e-8]])
        assert not a.allclose(b)
        assert a.allclose(b, tolerance=FP64_LOOSE)

    def test_non_matrix_raises(self):
        with pytest.raises(TypeError):
            Matrix.identity(2).allclose(np.eye(2))
