"""
Gaussian kernel activations for locally weighted regression.

All parameter classes should use these functions so that raw and
normalized activations are computed the same way everywhere.

Created: 11Oct26
"""

import numpy as np

from .errors import DimensionMismatch


def _check_kernel_shapes(inputs, centers, widths):
    if centers.ndim != 2 or centers.shape != widths.shape:
        raise DimensionMismatch(
            f"centers {centers.shape} and widths {widths.shape} must be "
            f"matrices of the same shape"
        )
    if inputs.ndim != 2 or inputs.shape[1] != centers.shape[1]:
        raise DimensionMismatch(
            f"inputs {inputs.shape} must have {centers.shape[1]} columns"
        )


def compute_activations(inputs, centers, widths, asymmetric_kernels=False):
    """
    Compute unnormalized Gaussian kernel activations.

    phi[i, b] = prod_d exp(-0.5 * (x[i,d] - c[b,d])^2 / w[b,d]^2)

    With asymmetric kernels, samples that lie below a center use the width
    of the previous basis function for that dimension. This assumes the
    basis functions are sorted by their center along dimension 0; the
    ordering is not checked. Basis function 0 has no predecessor and always
    uses its own width.

    Parameters
    ----------
    inputs : ndarray of shape (n_samples, n_dims)
        Input samples.
    centers : ndarray of shape (n_basis, n_dims)
        Kernel centers.
    widths : ndarray of shape (n_basis, n_dims)
        Per-dimension kernel widths.
    asymmetric_kernels : bool, default=False
        Use the previous basis function's width left of each center.

    Returns
    -------
    phi : ndarray of shape (n_samples, n_basis)
        Activation matrix.
    """
    inputs = np.asarray(inputs, dtype=np.float64)
    centers = np.asarray(centers, dtype=np.float64)
    widths = np.asarray(widths, dtype=np.float64)
    _check_kernel_shapes(inputs, centers, widths)

    n_samples = inputs.shape[0]
    n_basis = centers.shape[0]

    phi = np.ones((n_samples, n_basis))
    for b in range(n_basis):
        diff = inputs - centers[b]  # (n, d)
        w = np.broadcast_to(widths[b], diff.shape)
        if asymmetric_kernels and b > 0:
            w = np.where(diff < 0, widths[b - 1], widths[b])
        # Product of per-dimension exponentials, as for a diagonal covariance
        phi[:, b] = np.prod(np.exp(-0.5 * diff ** 2 / (w * w)), axis=1)

    return phi


def normalize_activations(activations):
    """
    Normalize kernel activations so that each row sums to one.

    With a single basis function the result is all ones: self-normalizing a
    lone Gaussian gives 1 everywhere and LWR degenerates to least squares.

    If any row sums to exactly zero, max(row sums)/1e5 is added to every
    row sum before dividing. This is a heuristic; a row of zeros when the
    maximum row sum is also zero still yields NaN.

    Parameters
    ----------
    activations : ndarray of shape (n_samples, n_basis)
        Raw kernel activations.

    Returns
    -------
    normalized : ndarray of shape (n_samples, n_basis)
        Normalized activations.
    """
    activations = np.asarray(activations, dtype=np.float64)
    if activations.ndim != 2:
        raise DimensionMismatch(
            f"activations must be a matrix, got shape {activations.shape}"
        )

    if activations.shape[1] == 1:
        return np.ones_like(activations)

    sums = activations.sum(axis=1, keepdims=True)  # (n, 1)
    if np.any(sums == 0):
        sums = sums + sums.max() / 100000.0

    with np.errstate(divide='ignore', invalid='ignore'):
        return activations / sums


def compute_normalized_activations(inputs, centers, widths, asymmetric_kernels=False):
    """
    Compute normalized kernel activations.

    Parameters
    ----------
    inputs : ndarray of shape (n_samples, n_dims)
        Input samples.
    centers : ndarray of shape (n_basis, n_dims)
        Kernel centers.
    widths : ndarray of shape (n_basis, n_dims)
        Per-dimension kernel widths.
    asymmetric_kernels : bool, default=False
        See compute_activations.

    Returns
    -------
    normalized : ndarray of shape (n_samples, n_basis)
        Activations normalized per sample.
    """
    centers = np.asarray(centers, dtype=np.float64)
    if centers.ndim == 2 and centers.shape[0] == 1:
        inputs = np.asarray(inputs, dtype=np.float64)
        _check_kernel_shapes(inputs, centers, np.asarray(widths, dtype=np.float64))
        return np.ones((inputs.shape[0], 1))

    phi = compute_activations(inputs, centers, widths, asymmetric_kernels)
    return normalize_activations(phi)
