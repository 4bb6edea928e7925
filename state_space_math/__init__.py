"""Numerical core for state-space robot control.

This module provides the matrix exponential used to discretize continuous
dynamics and the factorizations used for covariance handling and noise
sampling. All functions are pure: inputs are never modified and every
call returns new NumPy arrays.

Public API:
    - expm: Matrix exponential (scaling and squaring, Pade approximation)
    - pade_approximant: Odd/even Pade polynomial parts for a given order
    - identity: Square or rectangular identity matrix
    - induced_one_norm: Maximum absolute column sum
    - cholesky_decompose: Cholesky factor with zero-matrix special case
    - cholesky_decompose_with_outcome: Cholesky factor plus CholeskyOutcome
    - householder_qr_decompose: Householder QR in compact form
    - householder_qr_factors: Householder QR as explicit (Q, R)
    - DimensionMismatchError, DecompositionFailureError: Error types
"""

from state_space_math.exceptions import (
    DimensionMismatchError,
    DecompositionFailureError,
)
from state_space_math.matrix_utils import identity, induced_one_norm
from state_space_math.pade import PADE_COEFFICIENTS, pade_approximant
from state_space_math.matrix_exponential import expm, select_pade_order
from state_space_math.decompositions import (
    CholeskyOutcome,
    CholeskyResult,
    cholesky_decompose,
    cholesky_decompose_with_outcome,
    householder_qr_decompose,
    householder_qr_factors,
)

__all__ = [
    'DimensionMismatchError',
    'DecompositionFailureError',
    'identity',
    'induced_one_norm',
    'PADE_COEFFICIENTS',
    'pade_approximant',
    'expm',
    'select_pade_order',
    'CholeskyOutcome',
    'CholeskyResult',
    'cholesky_decompose',
    'cholesky_decompose_with_outcome',
    'householder_qr_decompose',
    'householder_qr_factors',
]
