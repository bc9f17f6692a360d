"""
Decomposition of complex refraction angles.

When light enters an absorbing medium, the refractive index of the medium is
complex and Snell's law returns a complex refraction angle. The transmitted
wave is then inhomogeneous: its planes of constant phase and its planes of
constant amplitude are no longer parallel. This module recovers the real
angles of both families of planes from the complex angle.

The Snell solver producing the complex angle and the Fresnel reflectance
function consuming the angles are supplied by the caller. Their call
signatures are given by :data:`SnellSolver` and :data:`FresnelReflectance`.

References
----------
.. [1] Liu, Y., Qian, J. and Tian, Y. (2003). Closed form decomposition of
       the complex refraction angle into angles of constant phase and
       constant amplitude.
.. [2] Born, M. and Wolf, E. (1999). Principles of Optics, 7th ed.,
       Section 14.2. Cambridge University Press.
"""

from dataclasses import dataclass
from typing import Callable, Union

import numpy as np
from numpy.typing import ArrayLike

from water_reflectance.broadcast import as_result, recycle

#: Caller supplied Snell solver: ``snell(theta_i, n_i, n_r) -> theta_r``,
#: returning a real or complex refraction angle [rad]
SnellSolver = Callable[[ArrayLike, ArrayLike, ArrayLike], ArrayLike]

#: Caller supplied Fresnel power reflectance: ``fresnel(theta_i, n_i, n_r)``
FresnelReflectance = Callable[[ArrayLike, ArrayLike, ArrayLike], ArrayLike]


@dataclass(frozen=True)
class AngleDecomposition:
    """
    Real angles of an inhomogeneous refracted wave.

    Attributes
    ----------
    theta_kp : float or ndarray
        Angle of constant phase [rad], between the boundary normal and the
        normal of the planes of constant phase.
    theta_ka : float or ndarray
        Angle of constant amplitude [rad], between the boundary normal and
        the normal of the planes of constant amplitude.
    """

    theta_kp: Union[float, np.ndarray]
    theta_ka: Union[float, np.ndarray]

    def as_array(self) -> np.ndarray:
        """Return the angles as columns (theta_kp, theta_ka)."""
        return np.stack(
            [np.asarray(self.theta_kp), np.asarray(self.theta_ka)], axis=-1
        )

    @property
    def is_homogeneous(self) -> Union[bool, np.ndarray]:
        """True where phase and amplitude planes are parallel."""
        return np.asarray(self.theta_kp) == np.asarray(self.theta_ka)


def snell_decomp(
    theta_r: ArrayLike,
    n_r: ArrayLike,
) -> AngleDecomposition:
    """
    Decompose a complex refraction angle.

    Parameters
    ----------
    theta_r : complex or array_like
        Refraction angle [rad] as returned by a Snell solver. Real angles
        are accepted.
    n_r : complex or array_like
        Refractive index of the refraction medium, real or complex
        (n + i kappa).

    Returns
    -------
    AngleDecomposition
        Angles of constant phase and of constant amplitude [rad]. Inputs of
        different lengths are recycled; NaN propagates element-wise.

    Notes
    -----
    The transmitted wave vector, in units of the vacuum wave number, has
    tangential and normal components

    .. math::

        p = N \\sin\\theta_r, \\qquad q = N \\cos\\theta_r

    Its real part is normal to the planes of constant phase and its imaginary
    part is normal to the planes of constant amplitude, so

    .. math::

        \\tan\\theta_{kp} = \\frac{\\Re(p)}{\\Re(q)}, \\qquad
        \\tan\\theta_{ka} = \\frac{\\Im(p)}{\\Im(q)}

    The amplitude normal is oriented into the refraction medium
    (:math:`\\Im(q) \\ge 0`). For a homogeneous wave (:math:`\\Im(p) =
    \\Im(q) = 0`) there is no amplitude gradient and the amplitude planes
    are taken as parallel to the phase planes. When the incident medium is
    not absorbing, :math:`p` is real and :math:`\\theta_{ka} = 0`: the
    amplitude planes are parallel to the boundary.

    Examples
    --------
    >>> n_r = 1.33 + 0.01j
    >>> theta_r = np.arcsin(np.sin(np.deg2rad(45.0)) / n_r)
    >>> angles = snell_decomp(theta_r, n_r)
    """
    theta_r, n_r = recycle(theta_r, n_r)
    theta_r = theta_r.astype(complex)
    n_r = n_r.astype(complex)

    p = n_r * np.sin(theta_r)
    q = n_r * np.cos(theta_r)

    theta_kp = np.arctan2(p.real, q.real)

    sign = np.where(q.imag < 0, -1.0, 1.0)
    homogeneous = (p.imag == 0) & (q.imag == 0)
    theta_ka = np.where(
        homogeneous,
        theta_kp,
        np.arctan2(sign * p.imag, sign * q.imag),
    )

    return AngleDecomposition(
        theta_kp=as_result(theta_kp),
        theta_ka=as_result(theta_ka),
    )
