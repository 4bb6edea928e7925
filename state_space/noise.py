"""Gaussian noise sampling for simulated measurements and process noise."""

from typing import Optional

import numpy as np

from state_space._internal.validation import validate_non_negative_vector
from state_space_math import cholesky_decompose


def make_white_noise_vector(
    std_devs: np.ndarray,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Draw a zero-mean Gaussian vector with independent components.

    The sampling factor is the lower Cholesky factor of diag(std_devs**2).
    All-zero standard deviations yield a zero factor and a zero vector;
    components with zero deviation are always exactly zero.

    Args:
        std_devs: Per-component standard deviations (n,)
        rng: Random generator; a fresh default generator if None

    Returns:
        Noise vector (n,)

    Raises:
        ValueError: If std_devs is not 1-D, negative or non-finite
    """
    std_devs = np.asarray(std_devs, dtype=float)
    validate_non_negative_vector(std_devs, 'std_devs')
    if rng is None:
        rng = np.random.default_rng()

    covariance = np.diag(std_devs ** 2)
    active = std_devs > 0
    if np.all(active) or not np.any(active):
        sampling_factor = cholesky_decompose(covariance, lower=True)
    else:
        # Zero-variance components make the full covariance singular
        noisy = np.ix_(active, active)
        sampling_factor = np.zeros_like(covariance)
        sampling_factor[noisy] = cholesky_decompose(covariance[noisy], lower=True)

    return sampling_factor @ rng.standard_normal(std_devs.shape[0])
