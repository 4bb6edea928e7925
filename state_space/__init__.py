"""Linear state-space models built on the state_space_math core.

Public API:
    - LinearSystem: Continuous linear plant dataclass (A, B, C, D)
    - discretize_ab: ZOH discretization of (A, B)
    - discretize_a: Discretization of an unforced system
    - make_white_noise_vector: Gaussian noise sample from standard deviations
"""

from state_space.discretization import discretize_a, discretize_ab
from state_space.linear_system import LinearSystem
from state_space.noise import make_white_noise_vector

__all__ = [
    'LinearSystem',
    'discretize_a',
    'discretize_ab',
    'make_white_noise_vector',
]
