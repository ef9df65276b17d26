"""
Single-slot cache for normalized kernel activations.

Optimizers and trajectory integrators evaluate the same input matrix many
times while only offsets or slopes change, so remembering the last
(inputs, activations) pair avoids recomputing the kernels.

Created: 11Oct26
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class ActivationCache:
    """
    Remember the result of the most recent activation computation.

    The slot is reused only when the queried inputs are identical to the
    stored inputs in shape and in every element. The owner must call
    invalidate() whenever centers or widths change.

    Parameters
    ----------
    enabled : bool, default=True
        If False, every query is recomputed and nothing is stored.
    on_compute : callable or None
        Called with the inputs each time a value is recomputed.

    Attributes
    ----------
    n_hits : int
        Number of queries answered from the slot.
    n_misses : int
        Number of queries that required a computation.
    """

    def __init__(self, enabled=True, on_compute=None):
        self._enabled = bool(enabled)
        self.on_compute = on_compute
        self.n_hits = 0
        self.n_misses = 0
        self._inputs = None
        self._result = None

    @property
    def enabled(self):
        return self._enabled

    @enabled.setter
    def enabled(self, value):
        self._enabled = bool(value)
        if not self._enabled:
            self.invalidate()

    @property
    def is_empty(self):
        return self._inputs is None

    def matches(self, inputs):
        """Whether the slot holds a result for exactly these inputs."""
        if self._inputs is None:
            return False
        return (self._inputs.shape == inputs.shape
                and bool(np.all(self._inputs == inputs)))

    def get_or_compute(self, inputs, compute):
        """
        Return the cached result for inputs, computing it if needed.

        Parameters
        ----------
        inputs : ndarray
            Query matrix.
        compute : callable
            compute(inputs) -> ndarray, called on a cache miss.

        Returns
        -------
        result : ndarray
            A copy of the cached or freshly computed result.
        """
        inputs = np.asarray(inputs)
        if self._enabled and self.matches(inputs):
            self.n_hits += 1
            return self._result.copy()

        self.n_misses += 1
        if self.on_compute is not None:
            self.on_compute(inputs)
        result = compute(inputs)

        if self._enabled:
            self._inputs = inputs.copy()
            self._result = result.copy()
        return result

    def invalidate(self):
        """Empty the slot."""
        if self._inputs is not None:
            logger.debug("Clearing activation cache")
        self._inputs = None
        self._result = None
