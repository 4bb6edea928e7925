"""Continuous-time linear state-space model.

Represents:
    x_dot = A·x + B·u
    y     = C·x + D·u
"""

from dataclasses import dataclass

import numpy as np

from state_space._internal.validation import validate_vector
from state_space.discretization import discretize_ab
from state_space_math import DimensionMismatchError


@dataclass(frozen=True)
class LinearSystem:
    """Continuous linear plant matrices.

    Attributes:
        state_matrix: A matrix (n, n)
        input_matrix: B matrix (n, m)
        output_matrix: C matrix (p, n)
        feedthrough_matrix: D matrix (p, m)
    """
    state_matrix: np.ndarray
    input_matrix: np.ndarray
    output_matrix: np.ndarray
    feedthrough_matrix: np.ndarray

    def __post_init__(self):
        """Validate matrix dimensions."""
        for name in (
            'state_matrix', 'input_matrix', 'output_matrix', 'feedthrough_matrix'
        ):
            matrix = np.array(getattr(self, name), dtype=float)
            if matrix.ndim != 2:
                raise DimensionMismatchError(
                    f"{name} must be two-dimensional, got {matrix.shape}",
                    matrix.shape,
                )
            object.__setattr__(self, name, matrix)

        states = self.state_matrix.shape[0]
        expected_shapes = {
            'state_matrix': (states, states),
            'input_matrix': (states, self.input_matrix.shape[1]),
            'output_matrix': (self.output_matrix.shape[0], states),
            'feedthrough_matrix': (
                self.output_matrix.shape[0], self.input_matrix.shape[1]
            ),
        }
        for name, expected in expected_shapes.items():
            actual = getattr(self, name).shape
            if actual != expected:
                raise DimensionMismatchError(
                    f"{name} must be {expected}, got {actual}", actual
                )

    @property
    def state_dimension(self) -> int:
        return self.state_matrix.shape[0]

    @property
    def input_dimension(self) -> int:
        return self.input_matrix.shape[1]

    @property
    def output_dimension(self) -> int:
        return self.output_matrix.shape[0]

    def calculate_x(
        self,
        state: np.ndarray,
        control: np.ndarray,
        dt_s: float
    ) -> np.ndarray:
        """Advance the state one step of length dt_s under ZOH input.

        Args:
            state: Current state x (n,)
            control: Input held over the step u (m,)
            dt_s: Step length in seconds

        Returns:
            Next state (n,)
        """
        state = np.asarray(state, dtype=float)
        control = np.asarray(control, dtype=float)
        validate_vector(state, self.state_dimension, 'state')
        validate_vector(control, self.input_dimension, 'control')

        state_matrix_discrete, input_matrix_discrete = discretize_ab(
            self.state_matrix, self.input_matrix, dt_s
        )
        return state_matrix_discrete @ state + input_matrix_discrete @ control

    def calculate_y(self, state: np.ndarray, control: np.ndarray) -> np.ndarray:
        """Compute the output y = C·x + D·u."""
        state = np.asarray(state, dtype=float)
        control = np.asarray(control, dtype=float)
        validate_vector(state, self.state_dimension, 'state')
        validate_vector(control, self.input_dimension, 'control')
        return self.output_matrix @ state + self.feedthrough_matrix @ control
