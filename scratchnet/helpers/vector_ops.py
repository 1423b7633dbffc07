# helpers/vector_ops.py
import numpy as np


class DimensionMismatchError(ValueError):
    """Raised when vector/matrix operands have incompatible shapes."""


def _as_vector(v):
    return np.asarray(v, dtype=np.float64)


def _check_same_length(a, b):
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            f"Vectors must have the same length ({a.shape[0]} != {b.shape[0]})."
        )


def matrix_vector_multiply(matrix, vector):
    """
    Result = matrix @ vector, returned as a new vector of length rows.

    A matrix with zero rows gives an empty vector without looking at columns.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    vector = _as_vector(vector)
    if matrix.ndim != 2 and matrix.size > 0:
        raise DimensionMismatchError(f"Expected a 2-D matrix, got shape {matrix.shape}.")
    rows = matrix.shape[0]
    if rows == 0:
        return np.zeros(0, dtype=np.float64)

    cols = matrix.shape[1]
    if cols != vector.shape[0]:
        raise DimensionMismatchError(
            f"Matrix columns ({cols}) must match vector length ({vector.shape[0]})."
        )
    return matrix @ vector


def add_vectors(a, b):
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a + b


def subtract_vectors(a, b):
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a - b


def element_mult_vectors(a, b):
    # Hadamard product
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a * b


def transpose(matrix):
    if matrix is None:
        return np.zeros((0, 0), dtype=np.float64)
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.size == 0 and matrix.shape[0] == 0:
        return np.zeros((0, 0), dtype=np.float64)
    # copy so the result never aliases the input
    return matrix.T.copy()
