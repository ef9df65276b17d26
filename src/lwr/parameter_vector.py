"""
Layout of the flat LWR parameter vector.

The vector is the concatenation of four groups, always in this order:

    centers (column-major), widths (column-major), offsets, slopes (column-major)

Column-major means all basis functions of dimension 0 first, then all of
dimension 1, and so on.

Created: 11Oct26
"""

import numpy as np

from .errors import DimensionMismatch

GROUP_ORDER = ('centers', 'widths', 'offsets', 'slopes')
GROUP_TAGS = {'centers': 1, 'widths': 2, 'offsets': 3, 'slopes': 4}


def group_sizes(n_basis, n_dims):
    """Return [(group, size), ...] in vector order."""
    return [
        ('centers', n_basis * n_dims),
        ('widths', n_basis * n_dims),
        ('offsets', n_basis),
        ('slopes', n_basis * n_dims),
    ]


def vector_size(n_basis, n_dims):
    return sum(size for _, size in group_sizes(n_basis, n_dims))


def flatten_parameters(centers, widths, offsets, slopes, slopes_as_angles=False):
    """
    Concatenate the parameter matrices into one vector.

    Parameters
    ----------
    centers, widths, slopes : ndarray of shape (n_basis, n_dims)
    offsets : ndarray of shape (n_basis, 1)
    slopes_as_angles : bool, default=False
        Store atan2(slope, 1) instead of the slope itself.

    Returns
    -------
    values : ndarray of shape (vector_size(n_basis, n_dims),)
    """
    slopes = np.asarray(slopes, dtype=np.float64)
    if slopes_as_angles:
        # The vector holds the angle with the x-axis instead of the slope
        slopes = np.arctan2(slopes, 1.0)

    return np.concatenate([
        np.asarray(centers, dtype=np.float64).ravel(order='F'),
        np.asarray(widths, dtype=np.float64).ravel(order='F'),
        np.asarray(offsets, dtype=np.float64).ravel(order='F'),
        slopes.ravel(order='F'),
    ])


def unflatten_parameters(values, n_basis, n_dims):
    """
    Split a parameter vector back into its matrices.

    Parameters
    ----------
    values : array-like of shape (vector_size(n_basis, n_dims),)
    n_basis : int
    n_dims : int

    Returns
    -------
    groups : dict
        'centers', 'widths', 'slopes' of shape (n_basis, n_dims) and
        'offsets' of shape (n_basis, 1).

    Raises
    ------
    DimensionMismatch
        If values has the wrong length.
    """
    values = np.asarray(values, dtype=np.float64).ravel()
    expected = vector_size(n_basis, n_dims)
    if values.size != expected:
        raise DimensionMismatch(
            f"parameter vector has {values.size} values, expected {expected}"
        )

    groups = {}
    offset = 0
    for name, size in group_sizes(n_basis, n_dims):
        segment = values[offset:offset + size]
        n_cols = 1 if name == 'offsets' else n_dims
        groups[name] = segment.reshape((n_basis, n_cols), order='F').copy()
        offset += size

    return groups


def parameter_vector_mask(selected_labels, n_basis, n_dims):
    """
    Tag every vector position with its group if the group is selected.

    Parameters
    ----------
    selected_labels : iterable of str
        Groups to select. Labels that are not groups select nothing.
    n_basis : int
    n_dims : int

    Returns
    -------
    mask : ndarray of int
        0 for unselected positions, otherwise 1 (centers), 2 (widths),
        3 (offsets) or 4 (slopes).
    """
    selected = set(selected_labels)
    mask = np.zeros(vector_size(n_basis, n_dims), dtype=int)

    offset = 0
    for name, size in group_sizes(n_basis, n_dims):
        if name in selected:
            mask[offset:offset + size] = GROUP_TAGS[name]
        offset += size

    return mask
