"""
Grid diagnostics for LWR models.

Evaluates a model on a regular 1-D or 2-D grid and writes the lines,
model output and activations as plain-text tables, one file per quantity,
for plotting.

Created: 11Oct26
"""

import logging
import os

import numpy as np

from .errors import DimensionMismatch, UnsupportedOperation

logger = logging.getLogger(__name__)

GRID_TABLES = (
    'n_samples_per_dim',
    'inputs_grid',
    'lines',
    'weighted_lines',
    'activations',
    'activations_normalized',
)


def make_grid(min_values, max_values, n_samples_per_dim):
    """
    Regular grid of input samples.

    Parameters
    ----------
    min_values, max_values : array-like of shape (n_dims,)
        Range per dimension.
    n_samples_per_dim : array-like of int, shape (n_dims,)
        Number of samples per dimension.

    Returns
    -------
    inputs : ndarray of shape (prod(n_samples_per_dim), n_dims)
        For 2-D grids, row i*n2 + j holds (x1[i], x2[j]).
    """
    min_values = np.atleast_1d(np.asarray(min_values, dtype=np.float64))
    max_values = np.atleast_1d(np.asarray(max_values, dtype=np.float64))
    n_samples_per_dim = np.atleast_1d(np.asarray(n_samples_per_dim, dtype=int))

    n_dims = min_values.size
    if max_values.size != n_dims or n_samples_per_dim.size != n_dims:
        raise DimensionMismatch(
            f"min ({n_dims}), max ({max_values.size}) and n_samples_per_dim "
            f"({n_samples_per_dim.size}) must have the same length"
        )

    axes = [np.linspace(lo, hi, n)
            for lo, hi, n in zip(min_values, max_values, n_samples_per_dim)]

    if n_dims == 1:
        return axes[0].reshape(-1, 1)
    if n_dims == 2:
        x1, x2 = np.meshgrid(axes[0], axes[1], indexing='ij')
        return np.column_stack([x1.ravel(), x2.ravel()])

    raise UnsupportedOperation(f"Grids are only supported for 1 or 2 dimensions, got {n_dims}")


def compute_grid_data(parameters, min_values, max_values, n_samples_per_dim):
    """
    Evaluate a model on a grid.

    Parameters
    ----------
    parameters : ModelParametersLWR
        Model to evaluate.
    min_values, max_values, n_samples_per_dim
        See make_grid.

    Returns
    -------
    tables : dict
        Keys as in GRID_TABLES, in that order. 'weighted_lines' is the model
        output as a single column.
    """
    inputs = make_grid(min_values, max_values, n_samples_per_dim)

    return {
        'n_samples_per_dim': np.atleast_1d(np.asarray(n_samples_per_dim, dtype=int)),
        'inputs_grid': inputs,
        'lines': parameters.get_lines(inputs),
        'weighted_lines': parameters.locally_weighted_lines(inputs).reshape(-1, 1),
        'activations': parameters.kernel_activations(inputs),
        'activations_normalized': parameters.normalized_kernel_activations(inputs),
    }


def save_grid_data(parameters, min_values, max_values, n_samples_per_dim,
                   save_directory, overwrite=False):
    """
    Evaluate a model on a grid and save each table to <name>.txt.

    Parameters
    ----------
    parameters : ModelParametersLWR
        Model to evaluate.
    min_values, max_values, n_samples_per_dim
        See make_grid.
    save_directory : str or path-like
        Output directory, created if needed. If empty, nothing is done.
    overwrite : bool, default=False
        Replace existing files.

    Returns
    -------
    bool
        True once the tables have been written (or nothing was requested).

    Raises
    ------
    FileExistsError
        If a table file exists and overwrite is False. No file is written.
    """
    if not save_directory:
        return True

    tables = compute_grid_data(parameters, min_values, max_values, n_samples_per_dim)
    paths = {name: os.path.join(save_directory, f'{name}.txt') for name in tables}

    if not overwrite:
        existing = [p for p in paths.values() if os.path.exists(p)]
        if existing:
            raise FileExistsError(f"Grid data already exists: {existing[0]}")

    os.makedirs(save_directory, exist_ok=True)
    for name, table in tables.items():
        fmt = '%d' if np.issubdtype(table.dtype, np.integer) else '%.18e'
        np.savetxt(paths[name], table, fmt=fmt)

    logger.debug(f"Saved LWR grid data to {save_directory}")
    return True
