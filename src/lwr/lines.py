"""
Local linear models ("lines") of an LWR model.

A line is y = a.x + b. In the pivoted representation the offset is the
value of the line at its basis function's center, i.e. y = a.(x - c) + b',
with b' = b + a.c.

Created: 11Oct26
"""

import numpy as np

from .errors import DimensionMismatch


def slopes_dot_centers(slopes, centers):
    """Return a.c for every basis function, shape (n_basis,)."""
    slopes = np.asarray(slopes, dtype=np.float64)
    centers = np.asarray(centers, dtype=np.float64)
    if slopes.shape != centers.shape:
        raise DimensionMismatch(
            f"slopes {slopes.shape} and centers {centers.shape} differ in shape"
        )
    return np.einsum('bd,bd->b', slopes, centers)


def compute_lines(inputs, slopes, offsets, centers=None, pivoted=False):
    """
    Evaluate every line at every input.

    Parameters
    ----------
    inputs : ndarray of shape (n_samples, n_dims)
        Input samples.
    slopes : ndarray of shape (n_basis, n_dims)
        Line slopes.
    offsets : ndarray of shape (n_basis, 1) or (n_basis,)
        Line offsets.
    centers : ndarray of shape (n_basis, n_dims), optional
        Required if pivoted is True.
    pivoted : bool, default=False
        Whether offsets are the line values at the centers.

    Returns
    -------
    lines : ndarray of shape (n_samples, n_basis)
        lines[i, b] is the value of line b at sample i.
    """
    inputs = np.asarray(inputs, dtype=np.float64)
    slopes = np.asarray(slopes, dtype=np.float64)
    offsets = np.asarray(offsets, dtype=np.float64).reshape(-1)
    if inputs.ndim != 2 or inputs.shape[1] != slopes.shape[1]:
        raise DimensionMismatch(
            f"inputs {inputs.shape} must have {slopes.shape[1]} columns"
        )

    lines = inputs @ slopes.T + offsets[None, :]

    if pivoted:
        if centers is None:
            raise ValueError("centers are required for pivoted lines")
        # y = a(x-c) + b = ax + b - ac, so ac still has to be subtracted
        lines = lines - slopes_dot_centers(slopes, centers)[None, :]

    return lines


def pivot_offsets(offsets, slopes, centers, to_pivoted):
    """
    Convert offsets between the origin and center representations.

    Only the encoding of the offsets changes; the lines themselves, and
    therefore the model predictions, stay the same.

    Parameters
    ----------
    offsets : ndarray of shape (n_basis, 1)
        Current offsets.
    slopes : ndarray of shape (n_basis, n_dims)
        Line slopes.
    centers : ndarray of shape (n_basis, n_dims)
        Kernel centers.
    to_pivoted : bool
        True to go from y = ax + b to y = a(x-c) + b', False for the reverse.

    Returns
    -------
    new_offsets : ndarray with the shape of offsets
    """
    offsets = np.asarray(offsets, dtype=np.float64)
    ac = slopes_dot_centers(slopes, centers).reshape(offsets.shape)
    if to_pivoted:
        return offsets + ac
    return offsets - ac
