"""
Versioned encoding of ModelParametersLWR.

The encoded form is a plain dict (JSON-compatible) holding the fields of
FIELD_ORDER, in that order. Keep the order stable: text formats built on
top of it depend on it.

Created: 11Oct26
"""

import json

import numpy as np

from .errors import DimensionMismatch

FORMAT_VERSION = 1
CLASS_NAME = 'ModelParametersLWR'

FIELD_ORDER = (
    'centers',
    'widths',
    'slopes',
    'offsets',
    'asymmetric_kernels',
    'lines_pivot_at_max_activation',
    'slopes_as_angles',
    'all_values_vector_size',
    'caching',
)


def to_dict(parameters):
    """
    Encode parameters as a dict.

    Returns
    -------
    data : dict
        'class', 'format_version', then the fields of FIELD_ORDER.
    """
    data = {'class': CLASS_NAME, 'format_version': FORMAT_VERSION}
    data['centers'] = parameters.centers.tolist()
    data['widths'] = parameters.widths.tolist()
    data['slopes'] = parameters.slopes.tolist()
    data['offsets'] = parameters.offsets.tolist()
    data['asymmetric_kernels'] = parameters.asymmetric_kernels
    data['lines_pivot_at_max_activation'] = parameters.lines_pivot_at_max_activation
    data['slopes_as_angles'] = parameters.slopes_as_angles
    data['all_values_vector_size'] = parameters.get_parameter_vector_all_size()
    data['caching'] = parameters.caching
    return data


def from_dict(data):
    """
    Decode parameters encoded with to_dict().

    Raises
    ------
    ValueError
        If the class, version or field set is not recognised.
    DimensionMismatch
        If all_values_vector_size does not match the matrices.
    """
    from .parameters import ModelParametersLWR

    if data.get('class') != CLASS_NAME:
        raise ValueError(f"Cannot decode class {data.get('class')!r} as {CLASS_NAME}")
    if data.get('format_version') != FORMAT_VERSION:
        raise ValueError(f"Unsupported format version: {data.get('format_version')!r}")
    missing = [name for name in FIELD_ORDER if name not in data]
    if missing:
        raise ValueError(f"Missing fields: {missing}")

    parameters = ModelParametersLWR(
        centers=np.asarray(data['centers'], dtype=np.float64),
        widths=np.asarray(data['widths'], dtype=np.float64),
        slopes=np.asarray(data['slopes'], dtype=np.float64),
        offsets=np.asarray(data['offsets'], dtype=np.float64),
        asymmetric_kernels=data['asymmetric_kernels'],
        lines_pivot_at_max_activation=data['lines_pivot_at_max_activation'],
    )

    if data['all_values_vector_size'] != parameters.get_parameter_vector_all_size():
        raise DimensionMismatch(
            f"all_values_vector_size is {data['all_values_vector_size']}, "
            f"matrices give {parameters.get_parameter_vector_all_size()}"
        )

    parameters.set_slopes_as_angles(data['slopes_as_angles'])
    parameters.caching = data['caching']
    return parameters


def to_json(parameters, **kwargs):
    return json.dumps(to_dict(parameters), **kwargs)


def from_json(text):
    return from_dict(json.loads(text))
