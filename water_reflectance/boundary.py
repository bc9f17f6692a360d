"""
Propagation of remote sensing reflectance across the air-water boundary.

References
----------
.. [1] Lee, Z.-P., Carder, K.L. and Arnone, R.A. (2002). Deriving inherent
       optical properties from water color: a multiband quasi-analytical
       algorithm for optically deep waters. Applied Optics, 41:5755-5772.
"""

from typing import Union

import numpy as np

from water_reflectance.broadcast import as_result
from water_reflectance.constants import (
    RRS_INTERNAL_REFLECTION_FACTOR,
    RRS_TRANSMISSION_FACTOR,
)


def propagate_r(rrs: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """
    Propagate subsurface remote sensing reflectance above the surface.

    Parameters
    ----------
    rrs : float or array_like
        Subsurface remote sensing reflectance [1/sr].

    Returns
    -------
    float or ndarray
        Above surface remote sensing reflectance Rrs [1/sr].

    Notes
    -----
    .. math::

        R_{rs} = \\frac{0.518 \\, r_{rs}}{1 - 1.562 \\, r_{rs}}

    The expression is singular at :math:`r_{rs} = 1/1.562`. This is not
    guarded: values at or near the pole are infinite or arbitrarily large.

    Examples
    --------
    >>> print(f"{propagate_r(0.01):.5f}")
    0.00526
    """
    rrs = np.asarray(rrs, dtype=float)
    Rrs = RRS_TRANSMISSION_FACTOR * rrs / (1 - RRS_INTERNAL_REFLECTION_FACTOR * rrs)
    return as_result(Rrs)


def unpropagate_r(Rrs: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """
    Propagate above surface remote sensing reflectance below the surface.

    Inverse of :func:`propagate_r`.

    Parameters
    ----------
    Rrs : float or array_like
        Above surface remote sensing reflectance [1/sr].

    Returns
    -------
    float or ndarray
        Subsurface remote sensing reflectance rrs [1/sr].

    Notes
    -----
    .. math::

        r_{rs} = \\frac{R_{rs}}{0.518 + 1.562 \\, R_{rs}}
    """
    Rrs = np.asarray(Rrs, dtype=float)
    rrs = Rrs / (RRS_TRANSMISSION_FACTOR + RRS_INTERNAL_REFLECTION_FACTOR * Rrs)
    return as_result(rrs)
