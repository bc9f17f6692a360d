"""
water_reflectance: Semi-analytical Subsurface Reflectance of Natural Waters
===========================================================================

A Python implementation of semi-analytical approximations to the radiative
transfer in natural waters, computing subsurface water-leaving reflectance
from inherent optical properties, geometry and bottom conditions.

This package implements the parametrizations documented in:

    Albert, A. and Mobley, C.D. (2003). An analytical model for subsurface
    irradiance and remote sensing reflectance in deep and shallow case-2
    waters. Optics Express, 11(22):2873-2890.

    Lee, Z.-P., Carder, K.L., Mobley, C.D., Steward, R.G. and Patch, J.S.
    (1998, 1999). Hyperspectral remote sensing for shallow waters, I and II.
    Applied Optics, 37(27):6329-6338 and 38(18):3831-3843.

Main Functions
--------------
rta_sa
    Subsurface reflectance with model selection and domain checks.
compute
    Same as rta_sa, with inputs grouped in dataclasses.
propagate_r
    Subsurface to above surface remote sensing reflectance.
snell_decomp
    Angles of constant phase and amplitude of a complex refraction angle.

Modules
-------
semianalytical
    Input validation, model selection and domain diagnostics.
albert_mobley
    Albert & Mobley (2003) model.
lee
    Lee et al. (1998, 1999) model.
refraction
    Complex refraction angle decomposition.
boundary
    Propagation of reflectance across the air-water boundary.
constants
    Fitted coefficients and validity limits.

Example
-------
>>> import numpy as np
>>> from water_reflectance import rta_sa, propagate_r
>>> rrs = rta_sa(a=0.5, bb=0.1, theta_s=np.deg2rad(20.0))
>>> print(f"Above surface Rrs: {propagate_r(rrs):.5f} 1/sr")
"""

__version__ = "0.1.0"

from water_reflectance.semianalytical import rta_sa, compute
from water_reflectance.albert_mobley import rta_am03
from water_reflectance.lee import rta_l98
from water_reflectance.boundary import propagate_r, unpropagate_r
from water_reflectance.refraction import AngleDecomposition, snell_decomp
from water_reflectance.inputs import (
    BottomCondition,
    Geometry,
    ModelChoice,
    OpticalProperties,
    ReflectanceKind,
)
from water_reflectance.exceptions import (
    AssumptionOverrideWarning,
    Diagnostic,
    DomainExtrapolationWarning,
    InvalidArgumentError,
    MissingArgumentError,
    OutOfRangeError,
    ReflectanceInputError,
    ReflectanceWarning,
)

__all__ = [
    "rta_sa",
    "compute",
    "rta_am03",
    "rta_l98",
    "propagate_r",
    "unpropagate_r",
    "snell_decomp",
    "AngleDecomposition",
    "BottomCondition",
    "Geometry",
    "ModelChoice",
    "OpticalProperties",
    "ReflectanceKind",
    "AssumptionOverrideWarning",
    "Diagnostic",
    "DomainExtrapolationWarning",
    "InvalidArgumentError",
    "MissingArgumentError",
    "OutOfRangeError",
    "ReflectanceInputError",
    "ReflectanceWarning",
    "__version__",
]
