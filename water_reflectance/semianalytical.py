"""
Radiative transfer semi-analytical approximations.

Entry point for the subsurface bi-hemispherical ('rho') and hemispherical-
directional ('rrs') water-leaving reflectance over optically deep or
optically shallow waters. This module validates the inputs, selects the
parametrization and checks the inputs against the domain each
parametrization was fitted on.

In hydrologic optics the two quantities are commonly named irradiance
reflectance (R) and remote sensing reflectance (Rrs). Lower case names are
used here for the subsurface quantities, at depth 0 just below the surface;
:func:`water_reflectance.boundary.propagate_r` carries 'rrs' above the
surface.

Model 'Albert-Mobley03' (default) covers an extended range of water
properties, the effect of wind speed, and has specific coefficients for
'rho' and 'rrs'. Model 'Lee98' is parametrized for 'rrs' only; 'rho' is
obtained by assuming the upwelling radiance is Lambertian. Both models can
calculate off-nadir 'rrs'; 'Lee98' then needs the particle back-scattering
``bbp`` separately.

Inputs outside the fitted domain of a model give values with a
:class:`~water_reflectance.exceptions.DomainExtrapolationWarning`. Although
the data used to fit both models include inelastic scattering (Raman
scattering by water, fluorescence of pigments and dissolved organic matter),
the approximations do not model it, and errors are larger where it matters.

References
----------
.. [1] Albert, A. and Mobley, C.D. (2003). Optics Express, 11(22):2873-2890.
.. [2] Lee, Z.-P., et al. (1998). Applied Optics, 37(27):6329-6338.
.. [3] Lee, Z.-P., et al. (1999). Applied Optics, 38(18):3831-3843.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from water_reflectance import constants
from water_reflectance.albert_mobley import rta_am03
from water_reflectance.exceptions import (
    Diagnostic,
    DiagnosticLog,
    MissingArgumentError,
    OutOfRangeError,
)
from water_reflectance.inputs import (
    BottomCondition,
    Geometry,
    ModelChoice,
    OpticalProperties,
    ReflectanceKind,
)
from water_reflectance.lee import rta_l98

logger = logging.getLogger(__name__)

Numeric = Union[float, np.ndarray]

# add <- override/extrapolation <- check helper <- _dispatch <- public function
_DIAGNOSTIC_STACKLEVEL = 6


@dataclass(frozen=True)
class ModelEngine:
    """
    A reflectance parametrization and its validity envelope.

    Attributes
    ----------
    run : callable
        Engine called as ``run(a, bb, theta_s, theta_v, wsp, depth, rho_b,
        bbp, kind)``.
    max_albedo : float
        Maximum back-scattering albedo of the fit.
    max_sun_zenith : float
        Maximum refracted Sun zenith angle [rad] of the fit.
    max_view_nadir : float
        Maximum refracted view nadir angle [rad] of the fit.
    sun_zenith_text : str
        Sun zenith limit in degrees, in water and in air, for messages.
    view_nadir_text : str
        View nadir limit in degrees, in water and in air, for messages.
    """

    run: Callable[..., Numeric]
    max_albedo: float
    max_sun_zenith: float
    max_view_nadir: float
    sun_zenith_text: str
    view_nadir_text: str


def _run_am03(a, bb, theta_s, theta_v, wsp, depth, rho_b, bbp, kind):
    return rta_am03(
        a, bb, theta_s=theta_s, theta_v=theta_v, wsp=wsp,
        depth=depth, rho_b=rho_b, aop=kind,
    )


def _run_l98(a, bb, theta_s, theta_v, wsp, depth, rho_b, bbp, kind):
    return rta_l98(
        a, bb, theta_s=theta_s, theta_v=theta_v,
        depth=depth, rho_b=rho_b, bbp=bbp, aop=kind,
    )


#: Engine selection table
ENGINES: Dict[ModelChoice, ModelEngine] = {
    ModelChoice.ALBERT_MOBLEY_03: ModelEngine(
        run=_run_am03,
        max_albedo=constants.AM03_MAX_ALBEDO,
        max_sun_zenith=constants.AM03_MAX_SUN_ZENITH,
        max_view_nadir=constants.AM03_MAX_VIEW_NADIR,
        sun_zenith_text="46 degrees in water, 80 degrees in air",
        view_nadir_text="46 degrees in water, 80 degrees in air",
    ),
    ModelChoice.LEE_98: ModelEngine(
        run=_run_l98,
        max_albedo=constants.L98_MAX_ALBEDO,
        max_sun_zenith=constants.L98_MAX_SUN_ZENITH,
        max_view_nadir=constants.L98_MAX_VIEW_NADIR,
        sun_zenith_text="40 degrees in water, 60 degrees in air",
        view_nadir_text="35 degrees in water, 50 degrees in air",
    ),
}


def _check_bottom(depth: np.ndarray, rho_b: Optional[Numeric]) -> None:
    if np.any(np.isfinite(depth)) and rho_b is None:
        raise MissingArgumentError(
            "For finite bottom depth, rho_b must be specified"
        )
    if rho_b is not None:
        rho_b = np.asarray(rho_b, dtype=float)
        if np.any((rho_b < 0) | (rho_b > 1)):
            raise OutOfRangeError("rho_b must be between 0 and 1")


def _check_view_angle(
    kind: ReflectanceKind,
    theta_v: np.ndarray,
    log: DiagnosticLog,
) -> np.ndarray:
    """Force nadir view for irradiance reflectance."""
    if kind is ReflectanceKind.RHO and np.any(theta_v > 0):
        log.override(
            "View angle ignored for bi-hemispherical reflectance: "
            "irradiance reflectance is fixed to theta_v = 0"
        )
        return np.zeros_like(theta_v)
    return theta_v


def _check_lee_inputs(
    theta_v: np.ndarray,
    wsp: np.ndarray,
    bbp: Optional[Numeric],
    log: DiagnosticLog,
) -> None:
    if np.any(theta_v != 0) and bbp is None:
        raise MissingArgumentError(
            "bbp required for non-nadir Lee98: for non-nadir view angles, "
            "bbp must be provided for model Lee98"
        )
    if np.any(wsp > 0):
        log.override("Wind speed unused by Lee98: effect not parametrized")


def _check_domain(
    choice: ModelChoice,
    kind: ReflectanceKind,
    a: Numeric,
    bb: Numeric,
    theta_s: np.ndarray,
    theta_v: np.ndarray,
    log: DiagnosticLog,
) -> None:
    engine = ENGINES[choice]

    if choice is ModelChoice.LEE_98 and kind is ReflectanceKind.RHO:
        log.override(
            "The Lee98 model is parametrized only for 'rrs', so 'rho' "
            "calculation assumes diffuse reflectance is Lambertian "
            "(i.e., rho = rrs * pi)"
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        u = OpticalProperties(a=a, bb=bb).backscattering_albedo

    if np.any(u > engine.max_albedo):
        log.extrapolation(
            "Back-scattering albedo is beyond model domain "
            f"(max = {engine.max_albedo})"
        )
    if np.any(theta_s > engine.max_sun_zenith):
        log.extrapolation(
            "Refracted Sun zenith angle is beyond model domain "
            f"(max = {engine.sun_zenith_text})"
        )
    if np.any(theta_v > engine.max_view_nadir):
        log.extrapolation(
            "Refracted observation angle is beyond model domain "
            f"(max = {engine.view_nadir_text})"
        )


def _dispatch(
    a: Optional[Numeric],
    bb: Optional[Numeric],
    theta_s: Numeric,
    depth: Numeric,
    rho_b: Optional[Numeric],
    theta_v: Numeric,
    wsp: Numeric,
    aop: Union[str, ReflectanceKind],
    model: Union[str, ModelChoice],
    bbp: Optional[Numeric],
) -> Tuple[Numeric, Tuple[Diagnostic, ...]]:
    if a is None or bb is None:
        raise MissingArgumentError("At least a and bb must be specified")

    kind = ReflectanceKind.from_token(aop)
    choice = ModelChoice.from_token(model)
    log = DiagnosticLog(stacklevel=_DIAGNOSTIC_STACKLEVEL)

    depth = np.asarray(depth, dtype=float)
    theta_s = np.asarray(theta_s, dtype=float)
    theta_v = np.asarray(theta_v, dtype=float)
    wsp = np.asarray(wsp, dtype=float)

    _check_bottom(depth, rho_b)
    theta_v = _check_view_angle(kind, theta_v, log)
    if choice is ModelChoice.LEE_98:
        _check_lee_inputs(theta_v, wsp, bbp, log)

    depth = np.abs(depth)
    _check_domain(choice, kind, a, bb, theta_s, theta_v, log)

    logger.debug(
        "Calculating subsurface %s with model %s (%d diagnostics)",
        kind.value, choice.value, len(log),
    )
    R = ENGINES[choice].run(
        a, bb, theta_s, theta_v, wsp, depth, rho_b, bbp, kind
    )
    return R, log.as_tuple()


def rta_sa(
    a: Optional[Numeric] = None,
    bb: Optional[Numeric] = None,
    theta_s: Numeric = 0.0,
    depth: Numeric = np.inf,
    rho_b: Optional[Numeric] = None,
    theta_v: Numeric = 0.0,
    wsp: Numeric = 0.0,
    aop: Union[str, ReflectanceKind] = ReflectanceKind.RRS,
    model: Union[str, ModelChoice] = ModelChoice.ALBERT_MOBLEY_03,
    bbp: Optional[Numeric] = None,
    return_diagnostics: bool = False,
) -> Union[Numeric, Tuple[Numeric, Tuple[Diagnostic, ...]]]:
    """
    Calculate subsurface water-leaving reflectance.

    Parameters
    ----------
    a : float or array_like
        Total absorption coefficient [1/m]. Required.
    bb : float or array_like
        Total back-scattering coefficient [1/m]. Required.
    theta_s : float or array_like, optional
        Sun zenith angle refracted underwater [rad]. Default is 0.
    depth : float or array_like, optional
        Bottom depth, positive downwards [m]. Default is ``np.inf``
        (optically deep). Negative depths are taken as their magnitude.
    rho_b : float or array_like, optional
        Bottom bi-hemispherical reflectance, in [0, 1]. Required if any
        depth is finite.
    theta_v : float or array_like, optional
        Observation nadir angle refracted underwater [rad]. Default is 0.
        Forced to 0 for ``aop='rho'``.
    wsp : float or array_like, optional
        Wind speed [m/s]. Only used by model 'Albert-Mobley03'. Default
        is 0.
    aop : {'rrs', 'rho'} or ReflectanceKind, optional
        Reflectance to calculate. Default is 'rrs'.
    model : {'Albert-Mobley03', 'Lee98'} or ModelChoice, optional
        Semi-analytical parametrization. Default is 'Albert-Mobley03'.
    bbp : float or array_like, optional
        Particle back-scattering [1/m]. Required by model 'Lee98' for
        off-nadir views.
    return_diagnostics : bool, optional
        If True, also return the non-fatal diagnostics. Default is False.

    Returns
    -------
    float or ndarray
        Subsurface irradiance reflectance ('rho', unitless) or remote
        sensing reflectance ('rrs', 1/sr). Inputs of different lengths are
        recycled to the longest. If ``return_diagnostics`` is True, a tuple
        ``(reflectance, diagnostics)``.

    Raises
    ------
    MissingArgumentError
        If ``a`` or ``bb`` is missing, ``rho_b`` is missing for a finite
        depth, or ``bbp`` is missing for an off-nadir 'Lee98' view.
    OutOfRangeError
        If ``rho_b`` is outside [0, 1].
    InvalidArgumentError
        If ``aop`` or ``model`` is not recognized.

    Warns
    -----
    DomainExtrapolationWarning
        If inputs are outside the fitted domain of the model.
    AssumptionOverrideWarning
        If the view angle is ignored for 'rho', wind speed is ignored by
        'Lee98', or 'rho' is derived from 'rrs' by 'Lee98'.

    Examples
    --------
    >>> theta_s = np.deg2rad(np.arange(0, 60, 0.5))
    >>> theta_sw = np.arcsin(np.sin(theta_s) / 1.33)
    >>> r_am = rta_sa(a=1, bb=0.5, theta_s=theta_sw, model="Albert-Mobley03")
    >>> r_lee = rta_sa(a=1, bb=0.5, theta_s=theta_sw, model="Lee98")
    """
    R, diagnostics = _dispatch(
        a, bb, theta_s, depth, rho_b, theta_v, wsp, aop, model, bbp
    )
    if return_diagnostics:
        return R, diagnostics
    return R


def compute(
    optical: OpticalProperties,
    geometry: Optional[Geometry] = None,
    bottom: Optional[BottomCondition] = None,
    aop: Union[str, ReflectanceKind] = ReflectanceKind.RRS,
    model: Union[str, ModelChoice] = ModelChoice.ALBERT_MOBLEY_03,
    return_diagnostics: bool = False,
) -> Union[Numeric, Tuple[Numeric, Tuple[Diagnostic, ...]]]:
    """
    Calculate subsurface water-leaving reflectance from grouped inputs.

    Same as :func:`rta_sa`, with the arguments grouped by
    :class:`OpticalProperties`, :class:`Geometry` and
    :class:`BottomCondition`. Missing groups take their defaults (sun at
    zenith, nadir view, no wind, optically deep water).

    Parameters
    ----------
    optical : OpticalProperties
        Absorption ``a`` and back-scattering ``bb`` [1/m], both required,
        and particle back-scattering ``bbp`` [1/m] for off-nadir 'Lee98'.
    geometry : Geometry, optional
        Refracted Sun zenith and view nadir angles [rad] and wind speed
        [m/s].
    bottom : BottomCondition, optional
        Bottom depth [m] and bottom bi-hemispherical reflectance.
    aop : {'rrs', 'rho'} or ReflectanceKind, optional
        Reflectance to calculate. Default is 'rrs'.
    model : {'Albert-Mobley03', 'Lee98'} or ModelChoice, optional
        Semi-analytical parametrization. Default is 'Albert-Mobley03'.
    return_diagnostics : bool, optional
        If True, also return the non-fatal diagnostics. Default is False.

    Returns
    -------
    float or ndarray
        Subsurface reflectance, or ``(reflectance, diagnostics)`` if
        ``return_diagnostics`` is True. See :func:`rta_sa`.

    Raises
    ------
    MissingArgumentError, OutOfRangeError, InvalidArgumentError
        Under the same conditions as :func:`rta_sa`.

    Warns
    -----
    DomainExtrapolationWarning, AssumptionOverrideWarning
        Under the same conditions as :func:`rta_sa`.

    Examples
    --------
    >>> optical = OpticalProperties(a=0.5, bb=0.1)
    >>> bottom = BottomCondition(depth=3.0, rho_b=0.2)
    >>> rrs = compute(optical, bottom=bottom, model="Lee98")
    """
    if geometry is None:
        geometry = Geometry()
    if bottom is None:
        bottom = BottomCondition()

    R, diagnostics = _dispatch(
        optical.a, optical.bb, geometry.theta_s, bottom.depth, bottom.rho_b,
        geometry.theta_v, geometry.wsp, aop, model, optical.bbp,
    )
    if return_diagnostics:
        return R, diagnostics
    return R
