"""
Base class for function approximator model parameters.

Defines the interface an optimizer uses to read and write the parameters
of a function approximator as one flat vector, and implements the
selection of parameter subsets on top of it.

Subclasses: ModelParametersLWR

Created: 11Oct26
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .errors import DimensionMismatch

logger = logging.getLogger(__name__)


class FunctionApproximatorParameters(ABC):
    """
    Base class for the model parameters of a function approximator.

    Subclasses implement the full parameter vector (get/set, size and the
    per-group mask). This class provides:
    - Selection of the parameter groups an optimizer may change
    - Reading and writing only the selected part of the vector
    - Named modifiers that change how parameters are represented
    """

    def __init__(self):
        self._selected_values_labels = None

    @abstractmethod
    def clone(self):
        """Return an independent copy of these parameters."""

    @abstractmethod
    def get_selectable_parameters(self):
        """Return the set of group labels that can be selected."""

    @abstractmethod
    def get_parameter_vector_mask(self, selected_values_labels):
        """Return the per-position group tags for the selected labels."""

    @abstractmethod
    def get_parameter_vector_all_size(self):
        """Return the length of the full parameter vector."""

    @abstractmethod
    def get_parameter_vector_all(self):
        """Return the full parameter vector."""

    @abstractmethod
    def set_parameter_vector_all(self, values):
        """Overwrite all parameters from a full parameter vector."""

    def _set_parameter_vector_modifier(self, modifier, new_value):
        """Apply a named modifier. Returns False if the name is unknown."""
        return False

    def set_selected_parameters(self, selected_values_labels):
        """
        Select which parameter groups the selected vector exposes.

        Parameters
        ----------
        selected_values_labels : iterable of str
            Group labels. Labels that are not selectable are ignored.
        """
        labels = set(selected_values_labels)
        unknown = labels - set(self.get_selectable_parameters())
        if unknown:
            logger.warning(
                f"Ignoring unknown parameter labels: {sorted(unknown)}"
            )
        self._selected_values_labels = labels - unknown

    def get_selected_parameters(self):
        if self._selected_values_labels is None:
            return set(self.get_selectable_parameters())
        return set(self._selected_values_labels)

    def _selected_mask(self):
        return self.get_parameter_vector_mask(self.get_selected_parameters())

    def get_parameter_vector_selected_size(self):
        return int(np.count_nonzero(self._selected_mask()))

    def get_parameter_vector_selected(self):
        """Return the values of the selected groups, in vector order."""
        values = self.get_parameter_vector_all()
        return values[self._selected_mask() > 0]

    def set_parameter_vector_selected(self, values):
        """
        Overwrite the selected groups, leaving the others unchanged.

        Raises
        ------
        DimensionMismatch
            If values does not have get_parameter_vector_selected_size() entries.
        """
        values = np.asarray(values, dtype=np.float64).ravel()
        mask = self._selected_mask()
        n_selected = int(np.count_nonzero(mask))
        if values.size != n_selected:
            raise DimensionMismatch(
                f"selected vector has {values.size} values, expected {n_selected}"
            )

        all_values = self.get_parameter_vector_all()
        all_values[mask > 0] = values
        self.set_parameter_vector_all(all_values)

    def get_parameter_vector_selected_min_max(self):
        """
        Range of each selected group, broadcast to the group's positions.

        Returns
        -------
        min_values, max_values : ndarray of shape (n_selected,)
        """
        values = self.get_parameter_vector_all()
        mask = self._selected_mask()

        min_all = np.zeros_like(values)
        max_all = np.zeros_like(values)
        for tag in np.unique(mask[mask > 0]):
            in_group = mask == tag
            min_all[in_group] = values[in_group].min()
            max_all[in_group] = values[in_group].max()

        return min_all[mask > 0], max_all[mask > 0]

    def set_parameter_vector_modifier(self, modifier, new_value):
        """
        Change a named representation setting.

        Unknown modifier names are logged and ignored.
        """
        if not self._set_parameter_vector_modifier(modifier, new_value):
            logger.warning(f"Ignoring unknown parameter vector modifier: {modifier}")
