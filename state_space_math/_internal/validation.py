"""Runtime contract validation utilities.

Internal module for matrix shape and parameter validation.
"""

import numpy as np

from state_space_math.exceptions import DimensionMismatchError


def as_float_matrix(matrix, name: str) -> np.ndarray:
    """Convert input to a new 2-D float64 array.

    Args:
        matrix: Array-like input
        name: Parameter name for error message

    Returns:
        Owned float64 copy of the input

    Raises:
        DimensionMismatchError: If input is not two-dimensional
    """
    converted = np.array(matrix, dtype=float, copy=True)
    if converted.ndim != 2:
        raise DimensionMismatchError(
            f"{name} must be two-dimensional, got shape {converted.shape}",
            converted.shape,
        )
    return converted


def validate_square(matrix: np.ndarray, name: str) -> None:
    """Validate that a matrix is square.

    Args:
        matrix: 2-D array to validate
        name: Parameter name for error message

    Raises:
        DimensionMismatchError: If rows != cols
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise DimensionMismatchError(
            f"{name} must be square, got shape {matrix.shape}",
            matrix.shape,
        )


def validate_positive_integer(value: int, name: str) -> None:
    """Validate that a value is a positive integer.

    Args:
        value: The value to validate
        name: Parameter name for error messages

    Raises:
        ValueError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
