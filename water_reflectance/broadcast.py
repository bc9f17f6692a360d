"""
Element-wise recycling of mixed length inputs.

The reflectance models accept scalars or one dimensional sequences for every
input. Inputs of different lengths are combined element-wise by recycling:
every input is flattened and repeated cyclically up to the length of the
longest one. A spectrum of absorption coefficients can then be combined with
a single Sun angle, or a single set of optical properties with a sweep of
Sun angles.
"""

from typing import List, Union

import numpy as np
from numpy.typing import ArrayLike

Numeric = Union[float, np.ndarray]


def recycle(*values: ArrayLike) -> List[np.ndarray]:
    """
    Recycle inputs to a common length.

    Parameters
    ----------
    *values : scalar or array_like
        Inputs to combine. Multi-dimensional inputs are flattened.

    Returns
    -------
    list of ndarray
        If every input is a scalar, 0-d arrays. Otherwise 1-d arrays, all of
        the length of the longest input (or empty if any input is empty).

    Notes
    -----
    Shorter inputs are repeated cyclically, so for lengths 2 and 5 the
    shorter input is used as ``[x0, x1, x0, x1, x0]``. No check is made that
    the longer length is a multiple of the shorter ones.

    Examples
    --------
    >>> a, b = recycle([1.0, 2.0, 3.0], 0.5)
    >>> b
    array([0.5, 0.5, 0.5])
    """
    arrays = [np.asarray(value) for value in values]

    if all(array.ndim == 0 for array in arrays):
        return arrays

    flat = [array.ravel() for array in arrays]
    sizes = [array.size for array in flat]
    n = 0 if min(sizes) == 0 else max(sizes)

    return [np.resize(array, n) for array in flat]


def as_result(value: np.ndarray) -> Numeric:
    """Return a 0-d array as a numpy scalar, other arrays unchanged."""
    value = np.asarray(value)
    if value.ndim == 0:
        return value[()]
    return value
