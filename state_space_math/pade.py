"""Pade approximants of the matrix exponential.

For order k the exponential is approximated by the rational function
r_k(A) = q_k(A)^-1 p_k(A). Splitting the polynomials into odd and even
parts gives p_k = V + U and q_k = V - U, with

    U = A * sum(b[2j+1] * A^(2j))
    V =     sum(b[2j]   * A^(2j))

Only even powers of A are ever formed. Coefficients are the classical
tables from Higham, "The Scaling and Squaring Method for the Matrix
Exponential Revisited", SIAM J. Matrix Anal. Appl. 26(4), 2005.
"""

from types import MappingProxyType
from typing import List, Tuple

import numpy as np

from state_space_math.matrix_utils import identity


PADE_3_COEFFICIENTS = (120.0, 60.0, 12.0, 1.0)

PADE_5_COEFFICIENTS = (30240.0, 15120.0, 3360.0, 420.0, 30.0, 1.0)

PADE_7_COEFFICIENTS = (
    17297280.0, 8648640.0, 1995840.0, 277200.0, 25200.0, 1512.0, 56.0, 1.0,
)

PADE_9_COEFFICIENTS = (
    17643225600.0, 8821612800.0, 2075673600.0, 302702400.0, 30270240.0,
    2162160.0, 110880.0, 3960.0, 90.0, 1.0,
)

PADE_13_COEFFICIENTS = (
    64764752532480000.0, 32382376266240000.0, 7771770303897600.0,
    1187353796428800.0, 129060195264000.0, 10559470521600.0,
    670442572800.0, 33522128640.0, 1323241920.0, 40840800.0, 960960.0,
    16380.0, 182.0, 1.0,
)

PADE_COEFFICIENTS = MappingProxyType({
    3: PADE_3_COEFFICIENTS,
    5: PADE_5_COEFFICIENTS,
    7: PADE_7_COEFFICIENTS,
    9: PADE_9_COEFFICIENTS,
    13: PADE_13_COEFFICIENTS,
})

SUPPORTED_ORDERS = tuple(PADE_COEFFICIENTS)


def _even_powers(matrix: np.ndarray, highest_power: int) -> List[np.ndarray]:
    """Return [I, A^2, A^4, ..., A^highest_power] by repeated multiplication."""
    matrix_squared = matrix @ matrix
    powers = [identity(*matrix.shape), matrix_squared]
    for _ in range(4, highest_power + 1, 2):
        powers.append(powers[-1] @ matrix_squared)
    return powers


def _weighted_sum(
    powers: List[np.ndarray],
    coefficients: Tuple[float, ...],
) -> np.ndarray:
    """Sum coefficients[j] * powers[j], highest power first."""
    total = np.zeros_like(powers[0])
    for power, coefficient in zip(reversed(powers), reversed(coefficients)):
        total = total + coefficient * power
    return total


def _pade_low_order(
    matrix: np.ndarray,
    coefficients: Tuple[float, ...],
) -> Tuple[np.ndarray, np.ndarray]:
    powers = _even_powers(matrix, len(coefficients) - 2)
    odd_part = _weighted_sum(powers, coefficients[1::2])
    even_part = _weighted_sum(powers, coefficients[0::2])
    return matrix @ odd_part, even_part


def _pade_13(matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    b = PADE_13_COEFFICIENTS
    ident, a2, a4, a6 = _even_powers(matrix, 6)

    odd_high = a6 @ (b[13] * a6 + b[11] * a4 + b[9] * a2)
    odd_low = b[7] * a6 + b[5] * a4 + b[3] * a2 + b[1] * ident
    u = matrix @ (odd_high + odd_low)

    even_high = a6 @ (b[12] * a6 + b[10] * a4 + b[8] * a2)
    even_low = b[6] * a6 + b[4] * a4 + b[2] * a2 + b[0] * ident
    v = even_high + even_low

    return u, v


def pade_approximant(
    matrix: np.ndarray,
    order: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the odd and even Pade polynomial parts (U, V) of a matrix.

    Order 13 evaluates its degree-12 terms as A^6 * (...) so that only
    A^2, A^4 and A^6 are formed explicitly.

    Args:
        matrix: Square matrix A (n, n)
        order: Pade order, one of 3, 5, 7, 9, 13

    Returns:
        Tuple (U, V) of new (n, n) arrays

    Raises:
        ValueError: If order is not supported
    """
    if order not in PADE_COEFFICIENTS:
        raise ValueError(
            f"order must be one of {SUPPORTED_ORDERS}, got {order}"
        )
    if order == 13:
        return _pade_13(matrix)
    return _pade_low_order(matrix, PADE_COEFFICIENTS[order])
