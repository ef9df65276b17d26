"""
ModelParametersLWR: parameters and evaluation of an LWR model.

The model output is a blend of local linear models ("lines"), weighted by
normalized Gaussian kernel activations:

    y(x) = sum_b phi_b(x) * (a_b . x + b_b)

Created: 11Oct26
"""

import logging

import numpy as np
import pandas as pd
from sklearn.utils import check_array

from .base import FunctionApproximatorParameters
from .activations import compute_activations, compute_normalized_activations
from .cache import ActivationCache
from .errors import DimensionMismatch, UnsupportedOperation
from .grid import save_grid_data
from .lines import compute_lines, pivot_offsets
from .parameter_vector import (
    GROUP_ORDER, flatten_parameters, parameter_vector_mask, unflatten_parameters,
)

logger = logging.getLogger(__name__)


class ModelParametersLWR(FunctionApproximatorParameters):
    """
    Model parameters of a Locally Weighted Regression function approximator.

    Parameters
    ----------
    centers : array-like of shape (n_basis, n_dims)
        Centers of the Gaussian kernels.
    widths : array-like of shape (n_basis, n_dims)
        Per-dimension widths of the kernels.
    slopes : array-like of shape (n_basis, n_dims)
        Slopes of the local linear models.
    offsets : array-like of shape (n_basis, 1) or (n_basis,)
        Offsets of the local linear models.
    asymmetric_kernels : bool, default=False
        Left of a center, use the width of the previous kernel. Requires the
        kernels to be sorted by center along dimension 0.
    lines_pivot_at_max_activation : bool, default=False
        If True, offsets are the values of the lines at the kernel centers
        rather than at the origin.

    Attributes
    ----------
    cache : ActivationCache
        Cache for normalized_kernel_activations(). Not part of the
        parameters; clone() starts with an empty cache.

    Examples
    --------
    >>> import numpy as np
    >>> from lwr import ModelParametersLWR
    >>> params = ModelParametersLWR(
    ...     centers=[[0.0], [1.0]], widths=[[0.5], [0.5]],
    ...     slopes=[[1.0], [1.0]], offsets=[0.0, 0.0])
    >>> params.predict(np.array([[0.5]]))
    array([0.5])
    """

    def __init__(
        self,
        centers,
        widths,
        slopes,
        offsets,
        asymmetric_kernels=False,
        lines_pivot_at_max_activation=False,
    ):
        super().__init__()

        centers = check_array(centers, dtype=np.float64, copy=True)
        n_basis, n_dims = centers.shape

        widths = check_array(widths, dtype=np.float64, copy=True)
        slopes = check_array(slopes, dtype=np.float64, copy=True)
        offsets = np.asarray(offsets, dtype=np.float64)
        if offsets.ndim == 1:
            offsets = offsets.reshape(-1, 1)
        offsets = check_array(offsets, dtype=np.float64, copy=True)

        for name, matrix, shape in [
            ('widths', widths, (n_basis, n_dims)),
            ('slopes', slopes, (n_basis, n_dims)),
            ('offsets', offsets, (n_basis, 1)),
        ]:
            if matrix.shape != shape:
                raise DimensionMismatch(
                    f"{name} has shape {matrix.shape}, expected {shape}"
                )

        self._centers = centers
        self._widths = widths
        self._slopes = slopes
        self._offsets = offsets
        self._asymmetric_kernels = bool(asymmetric_kernels)
        self._lines_pivot_at_max_activation = bool(lines_pivot_at_max_activation)
        self._slopes_as_angles = False

        self._all_values_vector_size = (
            centers.size + widths.size + offsets.size + slopes.size
        )

        self.cache = ActivationCache(enabled=True)

    def clone(self):
        """Return an independent copy with an empty activation cache."""
        cloned = ModelParametersLWR(
            self._centers, self._widths, self._slopes, self._offsets,
            asymmetric_kernels=self._asymmetric_kernels,
            lines_pivot_at_max_activation=self._lines_pivot_at_max_activation,
        )
        cloned.caching = self.caching
        if self._selected_values_labels is not None:
            cloned.set_selected_parameters(self._selected_values_labels)
        return cloned

    # ------------------------------------------------------------------
    # State

    @property
    def centers(self):
        return self._centers.copy()

    @property
    def widths(self):
        return self._widths.copy()

    @property
    def slopes(self):
        return self._slopes.copy()

    @property
    def offsets(self):
        return self._offsets.copy()

    @property
    def n_basis_functions(self):
        return self._centers.shape[0]

    @property
    def n_dims(self):
        return self._centers.shape[1]

    @property
    def asymmetric_kernels(self):
        return self._asymmetric_kernels

    @property
    def lines_pivot_at_max_activation(self):
        return self._lines_pivot_at_max_activation

    @property
    def slopes_as_angles(self):
        return self._slopes_as_angles

    @property
    def caching(self):
        return self.cache.enabled

    @caching.setter
    def caching(self, value):
        self.cache.enabled = value

    def clear_cache(self):
        self.cache.invalidate()

    def set_lines_pivot_at_max_activation(self, lines_pivot_at_max_activation):
        """
        Switch the representation of the offsets.

        Representation "y = ax + b" becomes "y = a(x-c) + b'" with
        b' = b + ac, and vice versa. The lines themselves do not change.
        """
        lines_pivot_at_max_activation = bool(lines_pivot_at_max_activation)
        if lines_pivot_at_max_activation == self._lines_pivot_at_max_activation:
            return

        self._offsets = pivot_offsets(
            self._offsets, self._slopes, self._centers,
            to_pivoted=lines_pivot_at_max_activation,
        )
        self._lines_pivot_at_max_activation = lines_pivot_at_max_activation

    def set_slopes_as_angles(self, slopes_as_angles):
        """
        Request slopes to be exposed as angles in the parameter vector.

        Not implemented: requesting True leaves the setting False and
        raises UnsupportedOperation.
        """
        self._slopes_as_angles = False
        if slopes_as_angles:
            logger.warning("slopes_as_angles is not implemented; keeping slopes as slopes")
            raise UnsupportedOperation("slopes_as_angles is not implemented")

    def _set_parameter_vector_modifier(self, modifier, new_value):
        if modifier == 'lines_pivot_at_max_activation':
            self.set_lines_pivot_at_max_activation(new_value)
            return True
        if modifier == 'slopes_as_angles':
            self.set_slopes_as_angles(new_value)
            return True
        return False

    # ------------------------------------------------------------------
    # Evaluation

    def _validate_inputs(self, inputs):
        inputs = np.asarray(inputs, dtype=np.float64)
        if inputs.ndim == 1 and self.n_dims == 1:
            inputs = inputs.reshape(-1, 1)
        if inputs.ndim != 2:
            raise DimensionMismatch(
                f"inputs must be a matrix with {self.n_dims} columns, got shape {inputs.shape}"
            )
        inputs = check_array(inputs, dtype=np.float64, ensure_min_samples=0)
        if inputs.shape[1] != self.n_dims:
            raise DimensionMismatch(
                f"inputs have {inputs.shape[1]} columns, expected {self.n_dims}"
            )
        return inputs

    def kernel_activations(self, inputs):
        """
        Unnormalized kernel activations.

        Parameters
        ----------
        inputs : array-like of shape (n_samples, n_dims)

        Returns
        -------
        activations : ndarray of shape (n_samples, n_basis)
        """
        inputs = self._validate_inputs(inputs)
        return compute_activations(
            inputs, self._centers, self._widths, self._asymmetric_kernels
        )

    def _compute_normalized_kernel_activations(self, inputs):
        return compute_normalized_activations(
            inputs, self._centers, self._widths, self._asymmetric_kernels
        )

    def normalized_kernel_activations(self, inputs):
        """
        Kernel activations normalized to sum to one per sample.

        Served from the activation cache when the inputs are identical to
        those of the previous call.

        Parameters
        ----------
        inputs : array-like of shape (n_samples, n_dims)

        Returns
        -------
        activations : ndarray of shape (n_samples, n_basis)
        """
        inputs = self._validate_inputs(inputs)
        return self.cache.get_or_compute(
            inputs, self._compute_normalized_kernel_activations
        )

    def get_lines(self, inputs):
        """Values of each local line at each input, shape (n_samples, n_basis)."""
        inputs = self._validate_inputs(inputs)
        return compute_lines(
            inputs, self._slopes, self._offsets, self._centers,
            pivoted=self._lines_pivot_at_max_activation,
        )

    def locally_weighted_lines(self, inputs):
        """
        Model output: lines weighted by the normalized activations.

        Parameters
        ----------
        inputs : array-like of shape (n_samples, n_dims)

        Returns
        -------
        outputs : ndarray of shape (n_samples,)
        """
        inputs = self._validate_inputs(inputs)
        lines = compute_lines(
            inputs, self._slopes, self._offsets, self._centers,
            pivoted=self._lines_pivot_at_max_activation,
        )
        activations = self.cache.get_or_compute(
            inputs, self._compute_normalized_kernel_activations
        )
        return np.sum(lines * activations, axis=1)

    def predict(self, inputs):
        """Alias of locally_weighted_lines()."""
        return self.locally_weighted_lines(inputs)

    # ------------------------------------------------------------------
    # Parameter vector

    def get_selectable_parameters(self):
        return set(GROUP_ORDER)

    def get_parameter_vector_mask(self, selected_values_labels):
        return parameter_vector_mask(
            selected_values_labels, self.n_basis_functions, self.n_dims
        )

    def get_parameter_vector_all_size(self):
        return self._all_values_vector_size

    def get_parameter_vector_all(self):
        """
        All parameters as one vector.

        Order: centers, widths, offsets, slopes; matrices column by column.
        """
        return flatten_parameters(
            self._centers, self._widths, self._offsets, self._slopes,
            slopes_as_angles=self._slopes_as_angles,
        )

    def set_parameter_vector_all(self, values):
        """
        Overwrite all parameters from a vector laid out as in get_parameter_vector_all().

        Raises
        ------
        DimensionMismatch
            If values has the wrong length. Nothing is changed in that case.
        """
        values = np.asarray(values, dtype=np.float64).ravel()
        if values.size != self._all_values_vector_size:
            raise DimensionMismatch(
                f"parameter vector has {values.size} values, "
                f"expected {self._all_values_vector_size}"
            )

        groups = unflatten_parameters(values, self.n_basis_functions, self.n_dims)

        # Normalized activations depend on centers and widths only
        if (not np.array_equal(groups['centers'], self._centers)
                or not np.array_equal(groups['widths'], self._widths)):
            self.clear_cache()

        self._centers[...] = groups['centers']
        self._widths[...] = groups['widths']
        self._offsets[...] = groups['offsets']
        self._slopes[...] = groups['slopes']

    # ------------------------------------------------------------------
    # Diagnostics

    def save_grid_data(self, min_values, max_values, n_samples_per_dim,
                       save_directory, overwrite=False):
        """Evaluate the model on a grid and write the tables; see lwr.grid."""
        return save_grid_data(
            self, min_values, max_values, n_samples_per_dim,
            save_directory, overwrite=overwrite,
        )

    def parameter_summary(self):
        """Per-basis-function parameters.

        Returns
        -------
        df : DataFrame
            One row per basis function. Columns: center_<d>, width_<d>,
            slope_<d> for each dimension d, and offset.
        """
        data = {}
        for name, matrix in [('center', self._centers),
                             ('width', self._widths),
                             ('slope', self._slopes)]:
            for d in range(self.n_dims):
                data[f'{name}_{d}'] = matrix[:, d]
        data['offset'] = self._offsets[:, 0]
        return pd.DataFrame(data)

    def to_dict(self):
        from .serialization import to_dict
        return to_dict(self)

    def to_string(self):
        from .serialization import to_json
        return to_json(self)

    def __repr__(self):
        fields = ', '.join(f'{k}={v!r}' for k, v in self.to_dict().items()
                           if k not in ('class', 'format_version'))
        return f"ModelParametersLWR({fields})"
