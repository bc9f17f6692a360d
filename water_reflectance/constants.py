"""
Fitted coefficients and validity limits for the semi-analytical models.

This module contains constants used by the subsurface reflectance
parametrizations, including:

- Albert & Mobley (2003) coefficient tables for 'rrs' and 'rho'
- Lee et al. (1998, 1999) fixed coefficients
- Validity envelope of each parametrization
- Empirical air-water propagation coefficients for remote sensing reflectance

References
----------
.. [1] Albert, A. and Mobley, C.D. (2003). An analytical model for subsurface
       irradiance and remote sensing reflectance in deep and shallow case-2
       waters. Optics Express, 11(22):2873-2890.
.. [2] Lee, Z.-P., et al. (1998). Hyperspectral remote sensing for shallow
       waters. I. A semianalytical model. Applied Optics, 37(27):6329-6338.
.. [3] Lee, Z.-P., et al. (1999). Hyperspectral remote sensing for shallow
       waters. 2. Deriving bottom depths and water properties by
       optimization. Applied Optics, 38(18):3831-3843.
.. [4] Lee, Z.-P., Carder, K.L. and Arnone, R.A. (2002). Deriving inherent
       optical properties from water color: a multiband quasi-analytical
       algorithm for optically deep waters. Applied Optics, 41:5755-5772.
"""

from typing import Dict

# =============================================================================
# Albert & Mobley (2003)
# =============================================================================

#: Fitted coefficients for subsurface remote sensing reflectance (Table 2).
#: Fit uncertainties are given in the trailing comments.
AM03_RRS: Dict[str, float] = {
    "p1": 0.0512,    # (+- 0.0001)
    "p2": 4.6659,    # (+- 0.0174)
    "p3": -7.8387,   # (+- 0.0434)
    "p4": 5.4571,    # (+- 0.0345)
    "p5": 0.1098,    # (+- 0.0018)
    "p6": -0.0044,   # (+- 0.0000)
    "p7": 0.4021,    # (+- 0.0020)
    "A1": 1.1576,    # (+- 0.0014)
    "k0": 1.0546,    # (+- 0.0001)
    "k1w": 3.5421,   # (+- 0.0152)
    "k2w": -0.2786,  # (+- 0.0030)
    "A2": 1.0389,    # (+- 0.0013)
    "k1b": 2.2658,   # (+- 0.0076)
    "k2b": 0.0577,   # (+- 0.0009)
}

#: Fitted coefficients for subsurface irradiance reflectance (Table 2).
#: p7 is zero: irradiance reflectance has no view angle dependence.
AM03_RHO: Dict[str, float] = {
    "p1": 0.1034,    # (+- 0.0014)
    "p2": 3.3586,    # (+- 0.0305)
    "p3": -6.5358,   # (+- 0.0808)
    "p4": 4.6638,    # (+- 0.0649)
    "p5": 2.4121,    # (+- 0.0443)
    "p6": -0.0005,   # (+- 0.0001)
    "p7": 0.0000,
    "A1": 1.0546,    # (+- 0.0038)
    "k0": 1.0546,    # (+- 0.0001)
    "k1w": 1.9991,   # (+- 0.0305)
    "k2w": 0.2995,   # (+- 0.0122)
    "A2": 0.9755,    # (+- 0.0013)
    "k1b": 1.2441,   # (+- 0.0209)
    "k2b": 0.5182,   # (+- 0.0036)
}

#: Coefficient tables keyed by reflectance kind token
AM03_COEFFICIENTS: Dict[str, Dict[str, float]] = {
    "rrs": AM03_RRS,
    "rho": AM03_RHO,
}

#: Maximum back-scattering albedo bb/(a+bb) of the AM03 fit
AM03_MAX_ALBEDO: float = 0.8

#: Maximum refracted Sun zenith angle [rad] (46 deg in water, 80 deg in air)
AM03_MAX_SUN_ZENITH: float = 0.8028515

#: Maximum refracted view nadir angle [rad] (46 deg in water, 80 deg in air)
AM03_MAX_VIEW_NADIR: float = 0.8028515

# =============================================================================
# Lee et al. (1998, 1999)
# =============================================================================

#: Fixed coefficients of the deep water term and the attenuation
#: factors for water column (w) and bottom (b) contributions
L98_COEFFICIENTS: Dict[str, float] = {
    "p1": 0.084,
    "p2": 0.17,
    "k1w": 1.03,
    "k2w": 2.04,
    "k1b": 1.04,
    "k2b": 5.04,
}

#: Maximum back-scattering albedo bb/(a+bb) of the L98 fit
L98_MAX_ALBEDO: float = 0.6

#: Maximum refracted Sun zenith angle [rad] (40 deg in water, 60 deg in air)
L98_MAX_SUN_ZENITH: float = 0.7090946

#: Maximum refracted view nadir angle [rad] (35 deg in water, 50 deg in air)
L98_MAX_VIEW_NADIR: float = 0.6137942

#: Off-nadir particle back-scattering enhancement, e = 1 + (a + b bbp/bb) ...
L98_OFF_NADIR_OFFSET: float = 0.1
L98_OFF_NADIR_SLOPE: float = 0.8

# =============================================================================
# Air-water boundary
# =============================================================================

#: Transmission factor of below to above surface Rrs (Lee et al., 2002)
RRS_TRANSMISSION_FACTOR: float = 0.518

#: Internal reflection factor of below to above surface Rrs (Lee et al., 2002)
RRS_INTERNAL_REFLECTION_FACTOR: float = 1.562
