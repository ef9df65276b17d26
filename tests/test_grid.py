"""Tests for grid diagnostics."""

import numpy as np
import pytest

from lwr import (
    make_grid, compute_grid_data, DimensionMismatch, UnsupportedOperation,
)
from lwr.grid import GRID_TABLES


def test_make_grid_1d():
    grid = make_grid([0.0], [1.0], [5])
    np.testing.assert_allclose(grid[:, 0], np.linspace(0, 1, 5))
    assert grid.shape == (5, 1)


def test_make_grid_2d_order():
    grid = make_grid([0.0, 10.0], [1.0, 20.0], [2, 3])
    assert grid.shape == (6, 2)
    np.testing.assert_allclose(grid, [[0, 10], [0, 15], [0, 20],
                                      [1, 10], [1, 15], [1, 20]])


def test_make_grid_3d_unsupported():
    with pytest.raises(UnsupportedOperation):
        make_grid([0, 0, 0], [1, 1, 1], [2, 2, 2])


def test_make_grid_length_mismatch():
    with pytest.raises(DimensionMismatch):
        make_grid([0, 0], [1], [2, 2])


def test_compute_grid_data(params_2d):
    tables = compute_grid_data(params_2d, [-1, -1], [1, 1], [4, 3])
    assert tuple(tables) == GRID_TABLES
    assert tables['inputs_grid'].shape == (12, 2)
    assert tables['lines'].shape == (12, 5)
    assert tables['weighted_lines'].shape == (12, 1)
    assert tables['activations'].shape == (12, 5)
    np.testing.assert_allclose(tables['activations_normalized'].sum(axis=1), np.ones(12))
    np.testing.assert_array_equal(tables['n_samples_per_dim'], [4, 3])


def test_save_grid_data(params_1d, tmp_path):
    directory = tmp_path / 'grid'
    assert params_1d.save_grid_data([0.0], [1.0], [11], str(directory))
    for name in GRID_TABLES:
        assert (directory / f'{name}.txt').exists()

    inputs = np.loadtxt(directory / 'inputs_grid.txt')
    np.testing.assert_allclose(inputs, np.linspace(0, 1, 11))
    weighted = np.loadtxt(directory / 'weighted_lines.txt')
    np.testing.assert_allclose(weighted, params_1d.predict(inputs))


def test_save_grid_data_no_overwrite(params_1d, tmp_path):
    params_1d.save_grid_data([0.0], [1.0], [3], str(tmp_path))
    with pytest.raises(FileExistsError):
        params_1d.save_grid_data([0.0], [1.0], [3], str(tmp_path))
    assert params_1d.save_grid_data([0.0], [2.0], [4], str(tmp_path), overwrite=True)
    assert np.loadtxt(tmp_path / 'inputs_grid.txt').shape == (4,)


def test_save_grid_data_empty_directory_is_noop(params_1d):
    assert params_1d.save_grid_data([0.0], [1.0], [3], '')


def test_zero_sample_grid(params_2d):
    tables = compute_grid_data(params_2d, [-1, -1], [1, 1], [0, 3])
    assert tables['inputs_grid'].shape == (0, 2)
    assert tables['lines'].shape == (0, 5)
    assert tables['weighted_lines'].shape == (0, 1)
    assert tables['activations'].shape == (0, 5)
    assert tables['activations_normalized'].shape == (0, 5)
