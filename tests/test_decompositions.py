"""Unit tests for Cholesky and Householder QR decompositions."""

import numpy as np
import pytest

from state_space_math import (
    CholeskyOutcome,
    DecompositionFailureError,
    DimensionMismatchError,
    cholesky_decompose,
    cholesky_decompose_with_outcome,
    householder_qr_decompose,
    householder_qr_factors,
)


@pytest.fixture
def lower_factor(rng):
    """Random 5x5 lower-triangular matrix with positive diagonal."""
    factor = np.tril(rng.standard_normal((5, 5)))
    np.fill_diagonal(factor, np.abs(np.diag(factor)) + 1.0)
    return factor


class TestCholeskyDecompose:
    """Tests for cholesky_decompose."""

    def test_lower_reconstructs_input(self, lower_factor):
        covariance = lower_factor @ lower_factor.T

        result = cholesky_decompose(covariance, lower=True)

        np.testing.assert_allclose(result @ result.T, covariance, rtol=0, atol=1e-9)
        np.testing.assert_array_equal(result, np.tril(result))

    def test_lower_recovers_unique_factor(self, lower_factor):
        covariance = lower_factor @ lower_factor.T

        result = cholesky_decompose(covariance, lower=True)

        np.testing.assert_allclose(result, lower_factor, rtol=0, atol=1e-9)

    def test_upper_reconstructs_input(self, lower_factor):
        covariance = lower_factor @ lower_factor.T

        result = cholesky_decompose(covariance, lower=False)

        np.testing.assert_allclose(result.T @ result, covariance, rtol=0, atol=1e-9)
        np.testing.assert_array_equal(result, np.triu(result))

    def test_default_is_upper(self, lower_factor):
        covariance = lower_factor @ lower_factor.T

        np.testing.assert_array_equal(
            cholesky_decompose(covariance),
            cholesky_decompose(covariance, lower=True).T,
        )

    def test_diagonal_variances(self):
        variances = np.array([4.0, 0.25, 9.0])

        result = cholesky_decompose(np.diag(variances), lower=True)

        np.testing.assert_allclose(result, np.diag([2.0, 0.5, 3.0]))

    @pytest.mark.parametrize('size', [1, 3, 6])
    @pytest.mark.parametrize('lower', [True, False])
    def test_zero_matrix_returns_zero(self, size, lower):
        result = cholesky_decompose(np.zeros((size, size)), lower=lower)
        np.testing.assert_array_equal(result, np.zeros((size, size)))

    def test_numerically_zero_indefinite_returns_zero(self):
        tiny = np.array([[1e-8, 0.0], [0.0, -1e-8]])
        np.testing.assert_array_equal(cholesky_decompose(tiny), np.zeros((2, 2)))

    def test_negative_diagonal_raises(self):
        matrix = np.diag([-1.0, -1.0, -1.0])

        with pytest.raises(DecompositionFailureError) as exc_info:
            cholesky_decompose(matrix, lower=True)

        np.testing.assert_array_equal(exc_info.value.matrix, matrix)
        assert isinstance(exc_info.value.__cause__, np.linalg.LinAlgError)
        assert 'Cholesky decomposition failed' in str(exc_info.value)

    def test_small_but_not_negligible_indefinite_raises(self):
        matrix = np.array([[1e-5, 0.0], [0.0, -1e-5]])
        with pytest.raises(DecompositionFailureError):
            cholesky_decompose(matrix)

    def test_failure_payload_is_a_copy(self):
        matrix = np.diag([-1.0, 2.0])
        with pytest.raises(DecompositionFailureError) as exc_info:
            cholesky_decompose(matrix)

        matrix[0, 0] = 5.0
        assert exc_info.value.matrix[0, 0] == -1.0

    def test_non_square_raises(self):
        with pytest.raises(DimensionMismatchError):
            cholesky_decompose(np.ones((2, 3)))

    def test_input_not_modified(self, lower_factor):
        covariance = lower_factor @ lower_factor.T
        original = covariance.copy()

        cholesky_decompose(covariance, lower=True)

        np.testing.assert_array_equal(covariance, original)


class TestCholeskyOutcome:
    """Tests for cholesky_decompose_with_outcome."""

    def test_factored_outcome(self):
        result = cholesky_decompose_with_outcome(np.eye(3), lower=True)

        assert result.outcome is CholeskyOutcome.FACTORED
        assert not result.is_degenerate_zero
        np.testing.assert_array_equal(result.factor, np.eye(3))

    def test_degenerate_zero_outcome(self):
        result = cholesky_decompose_with_outcome(np.zeros((4, 4)))

        assert result.outcome is CholeskyOutcome.DEGENERATE_ZERO
        assert result.is_degenerate_zero
        np.testing.assert_array_equal(result.factor, np.zeros((4, 4)))

    def test_failure_still_raises(self):
        with pytest.raises(DecompositionFailureError):
            cholesky_decompose_with_outcome(np.diag([1.0, -1.0]))


class TestHouseholderQR:
    """Tests for householder_qr_decompose and householder_qr_factors."""

    @staticmethod
    def _q_from_compact(reduced):
        """Accumulate Q = H_0 H_1 ... from the reflectors below the diagonal.

        Each H_k = I - tau v v^T with v = [1, reduced[k+1:, k]] and
        tau = 2 / (v^T v), or tau = 0 when the tail is all zero.
        """
        rows, cols = reduced.shape
        q = np.eye(rows)
        for k in range(min(rows - 1, cols)):
            v = np.zeros(rows)
            v[k] = 1.0
            v[k + 1:] = reduced[k + 1:, k]
            tail = reduced[k + 1:, k]
            tau = 0.0 if not np.any(tail) else 2.0 / (v @ v)
            q = q @ (np.eye(rows) - tau * np.outer(v, v))
        return q

    @pytest.mark.parametrize('shape', [(4, 4), (6, 3)])
    def test_compact_form_reconstructs_input(self, rng, shape):
        matrix = rng.standard_normal(shape)

        reduced = householder_qr_decompose(matrix)
        q = self._q_from_compact(reduced)

        np.testing.assert_allclose(q @ np.triu(reduced), matrix, rtol=0, atol=1e-9)
        np.testing.assert_allclose(q.T @ q, np.eye(shape[0]), rtol=0, atol=1e-12)

    @pytest.mark.parametrize('shape', [(4, 4), (6, 3), (3, 5)])
    def test_factors_reconstruct_input(self, rng, shape):
        matrix = rng.standard_normal(shape)

        q, r = householder_qr_factors(matrix)

        np.testing.assert_allclose(q @ r, matrix, rtol=0, atol=1e-9)
        np.testing.assert_allclose(q.T @ q, np.eye(shape[0]), rtol=0, atol=1e-12)
        np.testing.assert_array_equal(r, np.triu(r))

    def test_compact_form_shape(self, rng):
        matrix = rng.standard_normal((6, 3))
        assert householder_qr_decompose(matrix).shape == (6, 3)

    def test_compact_form_holds_r_in_upper_triangle(self, rng):
        matrix = rng.standard_normal((5, 5))

        reduced = householder_qr_decompose(matrix)
        _, r = householder_qr_factors(matrix)

        np.testing.assert_allclose(np.triu(reduced), r, rtol=0, atol=1e-12)

    def test_compact_form_preserves_column_norms(self, rng):
        """|R[0, 0]| is the norm of the first column."""
        matrix = rng.standard_normal((4, 4))

        reduced = householder_qr_decompose(matrix)

        assert abs(reduced[0, 0]) == pytest.approx(np.linalg.norm(matrix[:, 0]))

    def test_input_not_modified(self, rng):
        matrix = rng.standard_normal((4, 4))
        original = matrix.copy()

        householder_qr_decompose(matrix)

        np.testing.assert_array_equal(matrix, original)

    def test_non_finite_input_raises(self):
        matrix = np.array([[1.0, np.nan], [0.0, 1.0]])

        with pytest.raises(DecompositionFailureError) as exc_info:
            householder_qr_decompose(matrix)

        assert np.isnan(exc_info.value.matrix[0, 1])

    def test_factors_non_finite_input_raises(self):
        with pytest.raises(DecompositionFailureError):
            householder_qr_factors(np.array([[np.inf, 0.0], [0.0, 1.0]]))

    def test_vector_input_raises(self):
        with pytest.raises(DimensionMismatchError):
            householder_qr_decompose(np.ones(3))
