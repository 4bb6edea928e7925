"""Cholesky and Householder QR factorizations.

Cholesky factors turn covariance matrices into sampling factors for noise
injection. Householder QR is used for least-squares and square-root
covariance updates.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import scipy.linalg

from state_space_math._internal.validation import as_float_matrix, validate_square
from state_space_math.exceptions import DecompositionFailureError


logger = logging.getLogger(__name__)

# Entries below this magnitude count as zero for the degenerate Cholesky case
ZERO_MATRIX_TOLERANCE = 1e-6


class CholeskyOutcome(enum.Enum):
    """How a Cholesky factor was obtained."""

    FACTORED = 'factored'
    DEGENERATE_ZERO = 'degenerate_zero'


@dataclass(frozen=True)
class CholeskyResult:
    """Cholesky factor together with the outcome that produced it.

    Attributes:
        factor: Triangular factor (n, n)
        outcome: FACTORED, or DEGENERATE_ZERO when the input was
            numerically zero and the zero matrix was returned
    """

    factor: np.ndarray
    outcome: CholeskyOutcome

    @property
    def is_degenerate_zero(self) -> bool:
        return self.outcome is CholeskyOutcome.DEGENERATE_ZERO


def cholesky_decompose_with_outcome(matrix, lower: bool = False) -> CholeskyResult:
    """Cholesky-factor a symmetric positive-semidefinite matrix.

    A zero covariance (for example a noise-free process model) cannot be
    factored, but its factor is unambiguous. When factoring fails and every
    entry is below ZERO_MATRIX_TOLERANCE in magnitude, the zero matrix is
    returned with outcome DEGENERATE_ZERO.

    Args:
        matrix: Square symmetric matrix (n, n). Not modified.
        lower: Return lower-triangular L with L @ L.T == A if True,
            otherwise upper-triangular U with U.T @ U == A

    Returns:
        CholeskyResult holding the factor and outcome

    Raises:
        DimensionMismatchError: If matrix is not square
        DecompositionFailureError: If factoring fails on a nonzero matrix
    """
    source = as_float_matrix(matrix, 'matrix')
    validate_square(source, 'matrix')

    try:
        lower_factor = np.linalg.cholesky(source)
    except np.linalg.LinAlgError as exc:
        if np.all(np.abs(source) < ZERO_MATRIX_TOLERANCE):
            logger.debug(
                "Cholesky of numerically zero %s matrix, returning zeros",
                source.shape
            )
            return CholeskyResult(
                factor=np.zeros_like(source),
                outcome=CholeskyOutcome.DEGENERATE_ZERO,
            )
        raise DecompositionFailureError(
            "Cholesky decomposition failed!", source
        ) from exc

    factor = lower_factor if lower else np.ascontiguousarray(lower_factor.T)
    return CholeskyResult(factor=factor, outcome=CholeskyOutcome.FACTORED)


def cholesky_decompose(matrix, lower: bool = False) -> np.ndarray:
    """Cholesky-factor a matrix, returning only the triangular factor.

    See cholesky_decompose_with_outcome for the zero-matrix special case.

    Args:
        matrix: Square symmetric positive-semidefinite matrix (n, n)
        lower: Return the lower-triangular factor if True, else upper

    Returns:
        New (n, n) triangular factor

    Raises:
        DimensionMismatchError: If matrix is not square
        DecompositionFailureError: If factoring fails on a nonzero matrix
    """
    return cholesky_decompose_with_outcome(matrix, lower=lower).factor


def householder_qr_decompose(matrix) -> np.ndarray:
    """Householder QR factorization in LAPACK's compact form.

    The returned array has the shape of the input. R occupies the diagonal
    and everything above it. Below the diagonal each column holds the
    essential part of its Householder vector (implicit leading 1). Q is
    the product H_0 H_1 ... with H_k = I - tau_k v_k v_k^T.

    Args:
        matrix: Any 2-D matrix (m, n). Not modified.

    Returns:
        New (m, n) array with the reduced representation

    Raises:
        DecompositionFailureError: If the factorization does not complete
    """
    source = as_float_matrix(matrix, 'matrix')
    try:
        (reduced, _), _ = scipy.linalg.qr(source, mode='raw')
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise DecompositionFailureError(
            "Householder QR decomposition failed!", source
        ) from exc
    return np.ascontiguousarray(reduced)


def householder_qr_factors(matrix) -> Tuple[np.ndarray, np.ndarray]:
    """Householder QR factorization as explicit factors.

    Args:
        matrix: Any 2-D matrix (m, n). Not modified.

    Returns:
        Tuple (Q, R): Q orthogonal (m, m), R upper-triangular (m, n)

    Raises:
        DecompositionFailureError: If the factorization does not complete
    """
    source = as_float_matrix(matrix, 'matrix')
    try:
        q, r = scipy.linalg.qr(source)
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise DecompositionFailureError(
            "Householder QR decomposition failed!", source
        ) from exc
    return q, r
