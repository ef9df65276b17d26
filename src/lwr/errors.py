"""
Exceptions raised by the LWR parameter classes.

Created: 11Oct26
"""


class DimensionMismatch(ValueError):
    """A matrix or parameter vector does not have the expected shape."""


class UnsupportedOperation(NotImplementedError):
    """A requested mode or operation is recognised but not implemented."""
