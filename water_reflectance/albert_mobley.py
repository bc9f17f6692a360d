"""
Albert & Mobley (2003) subsurface reflectance model.

The parametrization was fitted to Hydrolight simulations of case-2 waters
and includes:

- A third order polynomial in the back-scattering albedo
- Corrections for Sun zenith angle, view angle and wind speed
- Separate coefficient sets for remote sensing reflectance and irradiance
  reflectance
- An optically shallow water term driven by bottom albedo and depth

References
----------
.. [1] Albert, A. and Mobley, C.D. (2003). An analytical model for subsurface
       irradiance and remote sensing reflectance in deep and shallow case-2
       waters. Optics Express, 11(22):2873-2890. DOI: 10.1364/oe.11.002873
"""

from typing import Optional, Union

import numpy as np

from water_reflectance.broadcast import as_result, recycle
from water_reflectance.constants import AM03_COEFFICIENTS
from water_reflectance.inputs import ReflectanceKind


def rta_am03(
    a: Union[float, np.ndarray],
    bb: Union[float, np.ndarray],
    theta_s: Union[float, np.ndarray] = 0.0,
    theta_v: Union[float, np.ndarray] = 0.0,
    wsp: Union[float, np.ndarray] = 0.0,
    depth: Union[float, np.ndarray] = np.inf,
    rho_b: Optional[Union[float, np.ndarray]] = None,
    aop: Union[str, ReflectanceKind] = ReflectanceKind.RRS,
) -> Union[float, np.ndarray]:
    """
    Calculate subsurface reflectance with the Albert & Mobley (2003) model.

    Inputs are not validated; use :func:`water_reflectance.rta_sa` for the
    checked interface.

    Parameters
    ----------
    a : float or array_like
        Total absorption coefficient [1/m].
    bb : float or array_like
        Total back-scattering coefficient [1/m].
    theta_s : float or array_like, optional
        Refracted Sun zenith angle [rad]. Default is 0.
    theta_v : float or array_like, optional
        Refracted view nadir angle [rad]. Default is 0.
    wsp : float or array_like, optional
        Wind speed [m/s]. Default is 0.
    depth : float or array_like, optional
        Bottom depth [m]. ``np.inf`` for optically deep water (default).
    rho_b : float or array_like, optional
        Bottom bi-hemispherical reflectance. Only used where depth is
        finite; missing values give NaN there.
    aop : {'rrs', 'rho'} or ReflectanceKind, optional
        Reflectance to calculate. Default is 'rrs'.

    Returns
    -------
    float or ndarray
        Subsurface remote sensing reflectance [1/sr] or irradiance
        reflectance [unitless]. Inputs of different lengths are recycled.

    Notes
    -----
    The optically deep reflectance is (Eq. 9 of [1]):

    .. math::

        R_0 = p_1 (1 + p_2 u + p_3 u^2 + p_4 u^3)
              \\left(1 + \\frac{p_5}{\\cos\\theta_s}\\right)
              (1 + p_6 U)
              \\left(1 + \\frac{p_7}{\\cos\\theta_v}\\right) u

    with :math:`u = b_b / (a + b_b)`. Where the depth :math:`z` is finite
    (Eq. 10-13 of [1]), with :math:`k = a + b_b`:

    .. math::

        R = R_0 \\left[1 - A_1 e^{-(K_d + k_{uW}) z}\\right]
            + A_2 \\rho_b e^{-(K_d + k_{uB}) z}

    The cosines are not guarded: grazing angles give infinite values.
    """
    kind = ReflectanceKind.from_token(aop)
    c = AM03_COEFFICIENTS[kind.value]

    if rho_b is None:
        rho_b = np.nan

    a, bb, theta_s, theta_v, wsp, depth, rho_b = recycle(
        a, bb, theta_s, theta_v, wsp, depth, rho_b
    )

    k = a + bb
    u = bb / k
    mu_s = np.cos(theta_s)
    mu_v = np.cos(theta_v)

    R = (
        c["p1"]
        * (1 + c["p2"] * u + c["p3"] * u**2 + c["p4"] * u**3)
        * (1 + c["p5"] / mu_s)
        * (1 + c["p6"] * wsp)
        * (1 + c["p7"] / mu_v)
        * u
    )

    shallow = np.isfinite(depth)
    if np.any(shallow):
        z = np.where(shallow, depth, 0.0)
        kd = c["k0"] * k / mu_s
        kuw = k * (1 + u) ** c["k1w"] * (1 + c["k2w"] / mu_s)
        kub = k * (1 + u) ** c["k1b"] * (1 + c["k2b"] / mu_s)
        R_shallow = (
            R * (1 - c["A1"] * np.exp(-(kd + kuw) * z))
            + c["A2"] * rho_b * np.exp(-(kd + kub) * z)
        )
        R = np.where(shallow, R_shallow, R)

    return as_result(R)
