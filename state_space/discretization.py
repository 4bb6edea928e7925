"""Discretization of continuous-time dynamics.

Converts continuous linear systems to discrete-time.
Uses zero-order hold (ZOH) assumption via matrix exponential.
"""

from typing import Tuple

import numpy as np

from state_space._internal.validation import validate_positive
from state_space_math import DimensionMismatchError, expm


def _validate_square(state_matrix: np.ndarray) -> int:
    if state_matrix.ndim != 2 or state_matrix.shape[0] != state_matrix.shape[1]:
        raise DimensionMismatchError(
            f"State matrix must be square, got {state_matrix.shape}",
            state_matrix.shape,
        )
    return state_matrix.shape[0]


def discretize_a(
    state_matrix: np.ndarray,
    sampling_period_s: float
) -> np.ndarray:
    """Discretize an unforced system: A_d = exp(A·T_s).

    Args:
        state_matrix: Continuous state matrix A (n, n)
        sampling_period_s: Sampling period T_s in seconds

    Returns:
        Discrete state matrix A_d (n, n)

    Raises:
        DimensionMismatchError: If A is not square
        ValueError: If T_s <= 0
    """
    validate_positive(sampling_period_s, 'sampling_period_s')
    state_matrix = np.asarray(state_matrix, dtype=float)
    _validate_square(state_matrix)
    return expm(state_matrix * sampling_period_s)


def discretize_ab(
    state_matrix: np.ndarray,
    input_matrix: np.ndarray,
    sampling_period_s: float
) -> Tuple[np.ndarray, np.ndarray]:
    """Convert continuous linear dynamics to discrete-time using ZOH.

    Given continuous system: x_dot = A·x + B·u
    Computes discrete system: x[k+1] = A_d·x[k] + B_d·u[k]

    Uses exact discretization via matrix exponential:
    A_d = exp(A·T_s)
    B_d = ∫[0 to T_s] exp(A·τ) dτ · B

    Args:
        state_matrix: Continuous state matrix A (n, n)
        input_matrix: Continuous input matrix B (n, m)
        sampling_period_s: Sampling period T_s in seconds

    Returns:
        Tuple (A_d, B_d)

    Raises:
        DimensionMismatchError: If matrices have incompatible shapes
        ValueError: If T_s <= 0

    References:
        Franklin, Powell, Workman - Digital Control of Dynamic Systems
    """
    validate_positive(sampling_period_s, 'sampling_period_s')

    state_matrix = np.asarray(state_matrix, dtype=float)
    input_matrix = np.asarray(input_matrix, dtype=float)
    state_dimension = _validate_square(state_matrix)

    if input_matrix.ndim != 2 or input_matrix.shape[0] != state_dimension:
        raise DimensionMismatchError(
            f"Input matrix shape {input_matrix.shape} incompatible "
            f"with state matrix shape {state_matrix.shape}",
            input_matrix.shape,
        )
    input_dimension = input_matrix.shape[1]

    # Build augmented matrix for simultaneous discretization
    # M = [[A,  B],
    #      [0,  0]]
    augmented_dimension = state_dimension + input_dimension
    augmented_matrix = np.zeros((augmented_dimension, augmented_dimension))
    augmented_matrix[:state_dimension, :state_dimension] = state_matrix
    augmented_matrix[:state_dimension, state_dimension:] = input_matrix

    # exp(M·T_s) = [[A_d, B_d],
    #               [ 0,   I ]]
    augmented_exponential = expm(augmented_matrix * sampling_period_s)

    state_matrix_discrete = augmented_exponential[
        :state_dimension, :state_dimension
    ]
    input_matrix_discrete = augmented_exponential[
        :state_dimension, state_dimension:
    ]

    return state_matrix_discrete, input_matrix_discrete
