import numpy as np
import pytest

from lwr import ModelParametersLWR


@pytest.fixture
def params_1d():
    """Two kernels on [0, 1] with unit slopes."""
    return ModelParametersLWR(
        centers=np.array([[0.0], [1.0]]),
        widths=np.array([[0.5], [0.5]]),
        slopes=np.array([[1.0], [1.0]]),
        offsets=np.array([[0.0], [0.0]]),
    )


@pytest.fixture
def params_2d():
    """Five kernels in 2-D, sorted by center along dimension 0."""
    rng = np.random.RandomState(0)
    centers = np.column_stack([np.linspace(-1, 1, 5), rng.uniform(-1, 1, 5)])
    widths = rng.uniform(0.3, 0.8, (5, 2))
    slopes = rng.randn(5, 2)
    offsets = rng.randn(5, 1)
    return ModelParametersLWR(centers, widths, slopes, offsets)


@pytest.fixture
def inputs_2d():
    rng = np.random.RandomState(1)
    return rng.uniform(-1.5, 1.5, (40, 2))
