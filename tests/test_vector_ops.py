"""
test_vector_ops.py
~~~~~~~~~~~~~~~~~~

Unit tests for the vector/matrix primitives.
"""

import numpy as np
import pytest

from scratchnet.helpers.vector_ops import (
    DimensionMismatchError,
    add_vectors,
    element_mult_vectors,
    matrix_vector_multiply,
    subtract_vectors,
    transpose,
)


@pytest.mark.unit
class TestMatrixVectorMultiply:
    """Test matrix-vector products."""

    def test_row_dot_products(self):
        m = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        result = matrix_vector_multiply(m, [1.0, 0.0, -1.0])
        np.testing.assert_array_equal(result, [-2.0, -2.0])

    def test_column_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError):
            matrix_vector_multiply([[1.0, 2.0]], [1.0, 2.0, 3.0])

    def test_mismatch_is_a_value_error(self):
        with pytest.raises(ValueError):
            matrix_vector_multiply(np.ones((2, 3)), np.ones(2))

    def test_zero_rows_returns_empty_vector(self):
        result = matrix_vector_multiply(np.zeros((0, 5)), [1.0, 2.0])
        assert result.shape == (0,)

    def test_does_not_modify_inputs(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0]])
        v = np.array([1.0, 1.0])
        result = matrix_vector_multiply(m, v)
        result[0] = 100.0
        np.testing.assert_array_equal(m, [[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(v, [1.0, 1.0])


@pytest.mark.unit
class TestElementwise:
    """Test element-wise vector operations."""

    def test_add(self):
        np.testing.assert_array_equal(add_vectors([1, 2], [3, 4]), [4.0, 6.0])

    def test_subtract(self):
        np.testing.assert_array_equal(subtract_vectors([1, 2], [3, 5]), [-2.0, -3.0])

    def test_element_mult(self):
        np.testing.assert_array_equal(element_mult_vectors([1, 2], [3, 4]), [3.0, 8.0])

    @pytest.mark.parametrize("op", [add_vectors, subtract_vectors, element_mult_vectors])
    def test_length_mismatch_raises(self, op):
        with pytest.raises(DimensionMismatchError):
            op([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_result_is_a_new_array(self):
        a = np.array([1.0, 2.0])
        b = np.array([0.0, 0.0])
        result = add_vectors(a, b)
        assert result is not a
        result[0] = 9.0
        assert a[0] == 1.0


@pytest.mark.unit
class TestTranspose:
    """Test matrix transposition."""

    def test_swaps_rows_and_columns(self):
        m = np.arange(6, dtype=float).reshape(2, 3)
        t = transpose(m)
        assert t.shape == (3, 2)
        assert t[2, 1] == m[1, 2]

    @pytest.mark.parametrize("shape", [(1, 1), (1, 4), (4, 1), (3, 7)])
    def test_transpose_twice_is_identity(self, shape):
        m = np.random.default_rng(1).standard_normal(shape)
        np.testing.assert_array_equal(transpose(transpose(m)), m)

    def test_transpose_then_multiply(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        result = matrix_vector_multiply(transpose(m), [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(result, [9.0, 12.0])

    def test_none_and_empty_give_empty_matrix(self):
        assert transpose(None).shape == (0, 0)
        assert transpose([]).shape == (0, 0)

    def test_result_does_not_alias_input(self):
        m = np.ones((2, 2))
        t = transpose(m)
        t[0, 1] = 5.0
        assert m[1, 0] == 1.0
