"""Tests for kernel activations and their normalization."""

import numpy as np
import pytest

from lwr import (
    compute_activations, normalize_activations, compute_normalized_activations,
    DimensionMismatch,
)


def test_compute_activations_shape():
    """Output shape (n, K), values in (0, 1]."""
    rng = np.random.RandomState(0)
    X = rng.randn(50, 3)
    centers = rng.randn(8, 3)
    widths = np.ones((8, 3))
    phi = compute_activations(X, centers, widths)
    assert phi.shape == (50, 8)
    assert np.all(phi > 0) and np.all(phi <= 1)


def test_activation_at_center_is_one():
    centers = np.array([[0.3, -0.2]])
    widths = np.array([[0.1, 2.0]])
    phi = compute_activations(centers, centers, widths)
    np.testing.assert_allclose(phi, [[1.0]])


def test_activations_known_values():
    """Midway between two kernels of equal width."""
    centers = np.array([[0.0], [1.0]])
    widths = np.array([[0.5], [0.5]])
    phi = compute_activations(np.array([[0.5]]), centers, widths)
    np.testing.assert_allclose(phi, [[np.exp(-0.5), np.exp(-0.5)]])
    np.testing.assert_allclose(normalize_activations(phi), [[0.5, 0.5]])


def test_activations_product_over_dims():
    centers = np.array([[0.0, 0.0]])
    widths = np.array([[1.0, 2.0]])
    X = np.array([[1.0, 2.0]])
    expected = np.exp(-0.5 * 1.0 / 1.0) * np.exp(-0.5 * 4.0 / 4.0)
    np.testing.assert_allclose(compute_activations(X, centers, widths), [[expected]])


def test_asymmetric_uses_previous_width_left_of_center():
    centers = np.array([[0.0], [1.0]])
    widths = np.array([[0.5], [2.0]])
    X = np.array([[-1.0], [2.0]])
    phi = compute_activations(X, centers, widths, asymmetric_kernels=True)
    # Left of center 1, the width of kernel 0 is used
    np.testing.assert_allclose(phi[0, 1], np.exp(-0.5 * 4.0 / 0.25))
    # Right of center 1, its own width
    np.testing.assert_allclose(phi[1, 1], np.exp(-0.5 * 1.0 / 4.0))


def test_asymmetric_first_kernel_uses_own_width():
    """Kernel 0 has no predecessor, even for inputs below its center."""
    centers = np.array([[0.0], [1.0]])
    widths = np.array([[0.5], [2.0]])
    X = np.array([[-1.0]])
    sym = compute_activations(X, centers, widths, asymmetric_kernels=False)
    asym = compute_activations(X, centers, widths, asymmetric_kernels=True)
    assert asym[0, 0] == sym[0, 0]
    np.testing.assert_allclose(asym[0, 0], np.exp(-2.0))


def test_normalized_rows_sum_to_one():
    rng = np.random.RandomState(0)
    X = rng.uniform(-2, 2, (100, 2))
    centers = rng.uniform(-2, 2, (6, 2))
    widths = rng.uniform(0.5, 1.5, (6, 2))
    normalized = compute_normalized_activations(X, centers, widths)
    np.testing.assert_allclose(normalized.sum(axis=1), np.ones(100))


def test_single_basis_function_normalizes_to_ones():
    X = np.array([[-100.0], [0.0], [3.0]])
    normalized = compute_normalized_activations(X, np.array([[0.0]]), np.array([[0.1]]))
    np.testing.assert_array_equal(normalized, np.ones((3, 1)))
    np.testing.assert_array_equal(normalize_activations(np.zeros((2, 1))), np.ones((2, 1)))


def test_zero_row_sum_gets_epsilon():
    """A zero row stays zero; other rows are divided by a slightly larger sum."""
    phi = np.array([[0.0, 0.0], [1.0, 1.0]])
    normalized = normalize_activations(phi)
    np.testing.assert_array_equal(normalized[0], [0.0, 0.0])
    expected = 1.0 / (2.0 + 2.0 / 100000.0)
    np.testing.assert_allclose(normalized[1], [expected, expected])
    assert normalized[1].sum() < 1.0


def test_all_zero_activations_remain_degenerate():
    """The epsilon cannot help when every row sum is zero."""
    normalized = normalize_activations(np.zeros((3, 2)))
    assert np.all(np.isnan(normalized))


def test_far_inputs_underflow_to_zero_row():
    centers = np.array([[0.0], [1.0]])
    widths = np.array([[0.01], [0.01]])
    X = np.array([[100.0], [0.0]])
    normalized = compute_normalized_activations(X, centers, widths)
    np.testing.assert_array_equal(normalized[0], [0.0, 0.0])
    np.testing.assert_allclose(normalized[1].sum(), 1.0, rtol=1e-4)


def test_shape_mismatch_raises():
    with pytest.raises(DimensionMismatch):
        compute_activations(np.zeros((4, 3)), np.zeros((2, 2)), np.ones((2, 2)))
    with pytest.raises(DimensionMismatch):
        compute_activations(np.zeros((4, 2)), np.zeros((2, 2)), np.ones((3, 2)))
