"""Error types raised by the state-space math core.

DimensionMismatchError subclasses ValueError so callers that already guard
shape problems with ``except ValueError`` keep working.
"""

from typing import Tuple

import numpy as np


class DimensionMismatchError(ValueError):
    """Matrix shape does not satisfy an operation's shape requirement.

    Attributes:
        shape: Shape of the offending operand
    """

    def __init__(self, message: str, shape: Tuple[int, ...]) -> None:
        super().__init__(message)
        self.shape = tuple(shape)


class DecompositionFailureError(RuntimeError):
    """A Cholesky or QR factorization could not be completed.

    Attributes:
        matrix: Copy of the matrix that failed to decompose
    """

    def __init__(self, message: str, matrix: np.ndarray) -> None:
        self.matrix = np.array(matrix, dtype=float, copy=True)
        super().__init__(f"{message} Input matrix:\n{self.matrix}")
