"""Matrix exponential by scaling and squaring with Pade approximation.

Used to discretize continuous-time dynamics: A_d = exp(A * T_s).

The Pade order is picked from the induced 1-norm of the input. Each
threshold is the largest norm for which that order meets double-precision
backward-error bounds (Higham 2005, Table 2.3). Above the order-9 bound
the matrix is halved until its norm is at most 5.371920351148152, the
order-13 bound, and the result is squared back up.
"""

import logging
import math
from typing import Tuple

import numpy as np
import scipy.linalg

from state_space_math._internal.validation import as_float_matrix, validate_square
from state_space_math.pade import pade_approximant


logger = logging.getLogger(__name__)

# (max 1-norm, Pade order), checked in order with a strict comparison
PADE_ORDER_THRESHOLDS = (
    (1.495585217958292e-002, 3),
    (2.539398330063230e-001, 5),
    (9.504178996162932e-001, 7),
    (2.097847961257068e+000, 9),
)

PADE_13_MAX_NORM = 5.371920351148152


def select_pade_order(one_norm: float) -> Tuple[int, int]:
    """Choose the Pade order and squaring count for a given 1-norm.

    Args:
        one_norm: Induced 1-norm of the matrix to exponentiate

    Returns:
        Tuple (order, squarings)
    """
    for max_norm, order in PADE_ORDER_THRESHOLDS:
        if one_norm < max_norm:
            return order, 0

    squarings = max(0, int(math.ceil(math.log2(one_norm / PADE_13_MAX_NORM))))
    return 13, squarings


def expm(matrix) -> np.ndarray:
    """Compute the matrix exponential e^A.

    The rational approximant is evaluated by solving (V - U) R = (V + U)
    with an LU solve rather than forming an inverse.

    A singular (V - U) is not guarded against. For exactly singular input
    scipy raises numpy.linalg.LinAlgError and for near-singular input it
    emits scipy.linalg.LinAlgWarning; both reach the caller unchanged. This
    only happens for pathological inputs.

    Args:
        matrix: Square matrix A (n, n). Not modified. A (0, 0) input
            gives an empty (0, 0) result.

    Returns:
        New (n, n) array holding exp(A)

    Raises:
        DimensionMismatchError: If A is not square
    """
    scaled = as_float_matrix(matrix, 'matrix')
    validate_square(scaled, 'matrix')
    if scaled.shape[0] == 0:
        return scaled

    one_norm = float(np.linalg.norm(scaled, 1))
    order, squarings = select_pade_order(one_norm)
    if squarings > 0:
        scaled = scaled / 2.0 ** squarings

    logger.debug(
        "expm: 1-norm=%.6e, Pade order %d, %d squarings",
        one_norm, order, squarings
    )

    odd_part, even_part = pade_approximant(scaled, order)
    numerator = even_part + odd_part
    denominator = even_part - odd_part

    result = scipy.linalg.solve(denominator, numerator)

    for _ in range(squarings):
        result = result @ result

    return result
