"""Runtime contract validation utilities.

Internal module for parameter and input validation.
"""

import numpy as np


def validate_positive(value: float, name: str) -> None:
    """Validate that a value is strictly positive.

    Args:
        value: Value to validate
        name: Parameter name for error message

    Raises:
        ValueError: If value <= 0
    """
    if value <= 0:
        raise ValueError(
            f"{name} must be positive, got {value}"
        )


def validate_non_negative_vector(vector: np.ndarray, name: str) -> None:
    """Validate that every element of a vector is finite and >= 0.

    Args:
        vector: 1-D array to validate
        name: Parameter name for error message

    Raises:
        ValueError: If not 1-D, or any element is negative or non-finite
    """
    if vector.ndim != 1:
        raise ValueError(
            f"{name} must be one-dimensional, got shape {vector.shape}"
        )
    if not np.all(np.isfinite(vector)):
        raise ValueError(
            f"{name} contains non-finite values: {vector}"
        )
    if np.any(vector < 0):
        raise ValueError(
            f"{name} must be non-negative, got {vector}"
        )


def validate_vector(vector: np.ndarray, length: int, name: str) -> None:
    """Validate vector has shape (length,) and finite values.

    Args:
        vector: Vector to validate
        length: Required number of elements
        name: Parameter name for error message

    Raises:
        ValueError: If shape incorrect or contains non-finite values
    """
    if vector.shape != (length,):
        raise ValueError(
            f"{name} must have shape ({length},), got {vector.shape}"
        )

    if not np.all(np.isfinite(vector)):
        raise ValueError(
            f"{name} contains non-finite values: {vector}"
        )
