"""Shared matrix helpers for the exponential and decompositions."""

from typing import Optional

import numpy as np

from state_space_math._internal.validation import (
    as_float_matrix,
    validate_positive_integer,
)


def identity(rows: int, cols: Optional[int] = None) -> np.ndarray:
    """Build an identity matrix.

    With one argument the result is square. With two the result is
    rows x cols with ones on the first min(rows, cols) diagonal entries.

    Args:
        rows: Number of rows
        cols: Number of columns, defaults to rows

    Returns:
        New float64 array

    Raises:
        ValueError: If a dimension is not a positive integer
    """
    if cols is None:
        cols = rows
    validate_positive_integer(rows, 'rows')
    validate_positive_integer(cols, 'cols')
    return np.eye(rows, cols)


def induced_one_norm(matrix) -> float:
    """Maximum absolute column sum of a matrix."""
    matrix = as_float_matrix(matrix, 'matrix')
    return float(np.linalg.norm(matrix, 1))
