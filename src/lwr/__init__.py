"""
LWR - Locally Weighted Regression model parameters

Gaussian kernel activations, local linear models and the flat parameter
vector of an LWR function approximator, for use with black-box optimizers.
"""

from .parameters import ModelParametersLWR
from .base import FunctionApproximatorParameters
from .activations import (
    compute_activations, normalize_activations, compute_normalized_activations
)
from .cache import ActivationCache
from .lines import compute_lines, pivot_offsets
from .parameter_vector import GROUP_TAGS, parameter_vector_mask
from .grid import make_grid, compute_grid_data, save_grid_data
from .serialization import to_dict, from_dict, to_json, from_json
from .errors import DimensionMismatch, UnsupportedOperation

__all__ = [
    'ModelParametersLWR',
    'FunctionApproximatorParameters',
    'compute_activations',
    'normalize_activations',
    'compute_normalized_activations',
    'ActivationCache',
    'compute_lines',
    'pivot_offsets',
    'GROUP_TAGS',
    'parameter_vector_mask',
    'make_grid',
    'compute_grid_data',
    'save_grid_data',
    'to_dict',
    'from_dict',
    'to_json',
    'from_json',
    'DimensionMismatch',
    'UnsupportedOperation',
]

__version__ = '0.1.0'
