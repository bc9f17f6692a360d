"""
Lee et al. (1998, 1999) subsurface reflectance model.

The model is parametrized for subsurface remote sensing reflectance only and
is an average fit over three Sun zenith angles (0, 30 and 60 degrees in air).
Irradiance reflectance is derived by assuming the upwelling radiance field
is Lambertian.

References
----------
.. [1] Lee, Z.-P., Carder, K.L., Mobley, C.D., Steward, R.G. and Patch, J.S.
       (1998). Hyperspectral remote sensing for shallow waters. I. A
       semianalytical model. Applied Optics, 37(27):6329-6338.
       DOI: 10.1364/AO.37.006329
.. [2] Lee, Z.-P., Carder, K.L., Mobley, C.D., Steward, R.G. and Patch, J.S.
       (1999). Hyperspectral remote sensing for shallow waters: 2. Deriving
       bottom depths and water properties by optimization. Applied Optics,
       38(18):3831-3843. DOI: 10.1364/AO.38.003831
"""

from typing import Optional, Union

import numpy as np

from water_reflectance.broadcast import as_result, recycle
from water_reflectance.constants import (
    L98_COEFFICIENTS,
    L98_OFF_NADIR_OFFSET,
    L98_OFF_NADIR_SLOPE,
)
from water_reflectance.inputs import ReflectanceKind


def off_nadir_backscattering(
    bb: Union[float, np.ndarray],
    bbp: Union[float, np.ndarray],
    theta_s: Union[float, np.ndarray],
    theta_v: Union[float, np.ndarray],
) -> Union[float, np.ndarray]:
    """
    Enhance particle back-scattering for off-nadir views.

    Parameters
    ----------
    bb : float or array_like
        Total back-scattering coefficient [1/m].
    bbp : float or array_like
        Particle back-scattering coefficient [1/m].
    theta_s : float or array_like
        Refracted Sun zenith angle [rad].
    theta_v : float or array_like
        Refracted view nadir angle [rad].

    Returns
    -------
    float or ndarray
        Effective total back-scattering coefficient [1/m].

    Notes
    -----
    From Lee et al. (1999), Eq. 3:

    .. math::

        b_b' = (b_b - b_{bp}) + b_{bp}
               \\left[1 + \\left(0.1 + 0.8 \\frac{b_{bp}}{b_b}\\right)
               \\sin\\theta_s \\sin\\theta_v\\right]

    The factor is 1 at nadir, so ``bb`` is returned unchanged there.
    """
    bb = np.asarray(bb, dtype=float)
    bbp = np.asarray(bbp, dtype=float)
    e = 1 + (L98_OFF_NADIR_OFFSET + L98_OFF_NADIR_SLOPE * bbp / bb) * \
        np.sin(theta_s) * np.sin(theta_v)
    return (bb - bbp) + e * bbp


def rta_l98(
    a: Union[float, np.ndarray],
    bb: Union[float, np.ndarray],
    theta_s: Union[float, np.ndarray] = 0.0,
    theta_v: Union[float, np.ndarray] = 0.0,
    depth: Union[float, np.ndarray] = np.inf,
    rho_b: Optional[Union[float, np.ndarray]] = None,
    bbp: Optional[Union[float, np.ndarray]] = None,
    aop: Union[str, ReflectanceKind] = ReflectanceKind.RRS,
) -> Union[float, np.ndarray]:
    """
    Calculate subsurface reflectance with the Lee et al. (1998, 1999) model.

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
        Refracted view nadir angle [rad]. Default is 0. Set to 0 for 'rho'.
    depth : float or array_like, optional
        Bottom depth [m]. ``np.inf`` for optically deep water (default).
    rho_b : float or array_like, optional
        Bottom bi-hemispherical reflectance. Only used where depth is
        finite; missing values give NaN there.
    bbp : float or array_like, optional
        Particle back-scattering coefficient [1/m]. Only used where
        ``theta_v != 0``; missing values give NaN there.
    aop : {'rrs', 'rho'} or ReflectanceKind, optional
        Reflectance to calculate. Default is 'rrs'.

    Returns
    -------
    float or ndarray
        Subsurface remote sensing reflectance [1/sr] or irradiance
        reflectance [unitless]. Inputs of different lengths are recycled.

    Notes
    -----
    The optically deep reflectance is :math:`R_0 = q_1 (p_1 + p_2 u) u`, with
    :math:`q_1 = 1` for 'rrs' and :math:`q_1 = \\pi` for 'rho'. Where the
    depth :math:`z` is finite (Lee et al., 1999, Eq. 9):

    .. math::

        R = R_0 \\left[1 - e^{-(1/\\cos\\theta_s + D_u^C/\\cos\\theta_v)
            k z}\\right] + \\frac{\\rho_b}{\\pi}
            e^{-(1/\\cos\\theta_s + D_u^B/\\cos\\theta_v) k z}

    with :math:`D_u^C = 1.03 \\sqrt{1 + 2.04 u}` and
    :math:`D_u^B = 1.04 \\sqrt{1 + 5.04 u}`. The bottom term keeps
    :math:`\\rho_b / \\pi` for both reflectance kinds.
    """
    kind = ReflectanceKind.from_token(aop)
    c = L98_COEFFICIENTS

    if rho_b is None:
        rho_b = np.nan
    if bbp is None:
        bbp = np.nan

    a, bb, theta_s, theta_v, depth, rho_b, bbp = recycle(
        a, bb, theta_s, theta_v, depth, rho_b, bbp
    )
    bb = bb.astype(float)

    if kind is ReflectanceKind.RHO:
        theta_v = np.zeros_like(theta_v, dtype=float)

    off_nadir = theta_v != 0
    if np.any(off_nadir):
        bb = np.where(
            off_nadir, off_nadir_backscattering(bb, bbp, theta_s, theta_v), bb
        )

    q1 = np.pi if kind is ReflectanceKind.RHO else 1.0

    k = a + bb
    u = bb / k

    R = q1 * (c["p1"] + c["p2"] * u) * u

    shallow = np.isfinite(depth)
    if np.any(shallow):
        z = np.where(shallow, depth, 0.0)
        mu_s = np.cos(theta_s)
        mu_v = np.cos(theta_v)
        du_w = c["k1w"] * np.sqrt(1 + c["k2w"] * u)
        du_b = c["k1b"] * np.sqrt(1 + c["k2b"] * u)
        R_shallow = (
            R * (1 - np.exp(-(1 / mu_s + du_w / mu_v) * k * z))
            + rho_b / np.pi * np.exp(-(1 / mu_s + du_b / mu_v) * k * z)
        )
        R = np.where(shallow, R_shallow, R)

    return as_result(R)
