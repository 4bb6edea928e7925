from pathlib import Path

import numpy as np
import pytest


REPOSITORY_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def rng():
    """Seeded generator so random-matrix tests are reproducible."""
    return np.random.default_rng(20200914)


@pytest.fixture
def simulator_params_path():
    """Path to the default simulator YAML."""
    return REPOSITORY_ROOT / 'config' / 'simulator_params.yaml'


def random_matrix_with_norm(rng, size, one_norm):
    """Random (size, size) matrix scaled to an exact induced 1-norm."""
    matrix = rng.standard_normal((size, size))
    return matrix * (one_norm / np.linalg.norm(matrix, 1))
