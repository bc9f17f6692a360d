"""
Input value types for the reflectance models.

The dataclasses group the arguments of :func:`water_reflectance.rta_sa` by
what they describe: the water column inherent optical properties, the
illumination and viewing geometry, and the bottom. Optional members that are
required only in some configurations default to ``None`` and are checked by
the dispatcher, not here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from water_reflectance.broadcast import recycle
from water_reflectance.exceptions import InvalidArgumentError


class ReflectanceKind(Enum):
    """
    Subsurface reflectance quantity.

    RRS
        Hemispherical-directional reflectance (remote sensing
        reflectance), 1/sr.
    RHO
        Bi-hemispherical reflectance (irradiance reflectance), unitless.
    """

    RRS = "rrs"
    RHO = "rho"

    @classmethod
    def from_token(cls, value: Union[str, "ReflectanceKind"]) -> "ReflectanceKind":
        """
        Parse a reflectance token.

        Raises
        ------
        InvalidArgumentError
            If the token is not 'rrs' or 'rho'.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            for member in cls:
                if member.value == token:
                    return member
        raise InvalidArgumentError(
            f"aop must be one of 'rrs' or 'rho', got {value!r}"
        )


class ModelChoice(Enum):
    """Semi-analytical parametrization."""

    ALBERT_MOBLEY_03 = "Albert-Mobley03"
    LEE_98 = "Lee98"

    @classmethod
    def from_token(cls, value: Union[str, "ModelChoice"]) -> "ModelChoice":
        """
        Parse a model token.

        Matching is case insensitive; 'AM03' and 'L98' are accepted as short
        names.

        Raises
        ------
        InvalidArgumentError
            If the token names no known model.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            if token in _MODEL_ALIASES:
                return cls(_MODEL_ALIASES[token])
        raise InvalidArgumentError(
            f"model must be one of 'Albert-Mobley03' or 'Lee98', got {value!r}"
        )


_MODEL_ALIASES = {
    "albert-mobley03": "Albert-Mobley03",
    "am03": "Albert-Mobley03",
    "lee98": "Lee98",
    "l98": "Lee98",
}


@dataclass(frozen=True)
class OpticalProperties:
    """
    Inherent optical properties of the water column.

    Attributes
    ----------
    a : float or ndarray
        Total absorption coefficient [1/m].
    bb : float or ndarray
        Total back-scattering coefficient [1/m].
    bbp : float or ndarray, optional
        Particle back-scattering coefficient [1/m], part of ``bb``. Needed
        by model Lee98 for off-nadir views.
    """

    a: Optional[Union[float, np.ndarray]] = None
    bb: Optional[Union[float, np.ndarray]] = None
    bbp: Optional[Union[float, np.ndarray]] = None

    @property
    def backscattering_albedo(self) -> Union[float, np.ndarray]:
        """
        Single scattering back-scattering albedo u = bb / (a + bb).

        ``a`` and ``bb`` of different lengths are recycled to the longest.
        """
        a, bb = recycle(self.a, self.bb)
        a = a.astype(float)
        return bb / (a + bb)


@dataclass(frozen=True)
class Geometry:
    """
    Illumination and viewing geometry, refracted into the water.

    Attributes
    ----------
    theta_s : float or ndarray
        Refracted Sun zenith angle [rad]. Default is 0.
    theta_v : float or ndarray
        Refracted view nadir angle [rad]. Default is 0.
    wsp : float or ndarray
        Wind speed [m/s]. Used only by model Albert-Mobley03. Default is 0.
    """

    theta_s: Union[float, np.ndarray] = 0.0
    theta_v: Union[float, np.ndarray] = 0.0
    wsp: Union[float, np.ndarray] = 0.0


@dataclass(frozen=True)
class BottomCondition:
    """
    Bottom boundary of the water column.

    Attributes
    ----------
    depth : float or ndarray
        Bottom depth [m], positive downwards. ``np.inf`` marks an optically
        deep (semi-infinite) water column. Default is ``np.inf``.
    rho_b : float or ndarray, optional
        Bottom bi-hemispherical reflectance, between 0 and 1. Required when
        any depth is finite.
    """

    depth: Union[float, np.ndarray] = np.inf
    rho_b: Optional[Union[float, np.ndarray]] = None

    @property
    def is_optically_deep(self) -> bool:
        """True if no element of the depth is finite."""
        return not np.any(np.isfinite(self.depth))
