"""
Tests for the Albert & Mobley (2003) model.

Tests cover:
- Golden deep water value from the fitted polynomial
- Sun, view and wind speed corrections
- Shallow water limits
- Recycling of mixed length inputs
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from water_reflectance.albert_mobley import rta_am03
from water_reflectance.constants import AM03_RHO, AM03_RRS
from water_reflectance.inputs import ReflectanceKind


def deep_rrs(u, theta_s=0.0, theta_v=0.0, wsp=0.0, c=AM03_RRS):
    """Closed form deep water term, written out independently."""
    return (c["p1"] * (1 + c["p2"] * u + c["p3"] * u**2 + c["p4"] * u**3)
            * (1 + c["p5"] / np.cos(theta_s)) * (1 + c["p6"] * wsp)
            * (1 + c["p7"] / np.cos(theta_v)) * u)


class TestDeepWater:
    """Tests for optically deep water."""

    def test_golden_value(self, clear_water):
        """a = 0.5, bb = 0.1, Sun at zenith, nadir view, no wind."""
        rrs = rta_am03(**clear_water)

        u = 0.1 / 0.6
        expected = (0.0512 * (1 + 4.6659 * u - 7.8387 * u**2 + 5.4571 * u**3)
                    * (1 + 0.1098) * (1 + 0.4021) * u)
        assert rrs == pytest.approx(expected, rel=1e-12)
        assert rrs == pytest.approx(0.0210484, rel=1e-5)

    def test_scalar_input_gives_scalar(self, clear_water):
        rrs = rta_am03(**clear_water)
        assert np.ndim(rrs) == 0

    def test_rho_coefficients(self, clear_water):
        """Irradiance reflectance uses its own table."""
        rho = rta_am03(**clear_water, aop="rho")
        u = 0.1 / 0.6
        assert rho == pytest.approx(deep_rrs(u, c=AM03_RHO), rel=1e-12)

    def test_rho_accepts_enum(self, clear_water):
        rho_token = rta_am03(**clear_water, aop="rho")
        rho_enum = rta_am03(**clear_water, aop=ReflectanceKind.RHO)
        assert rho_token == rho_enum

    def test_rho_has_no_view_dependence(self, clear_water):
        nadir = rta_am03(**clear_water, aop="rho")
        oblique = rta_am03(**clear_water, theta_v=0.5, aop="rho")
        assert nadir == oblique

    def test_sun_zenith_increases_rrs(self, clear_water, sun_sweep):
        """(1 + p5/cos(theta_s)) grows with Sun zenith angle."""
        rrs = rta_am03(**clear_water, theta_s=sun_sweep)
        assert np.all(np.diff(rrs) > 0)

    def test_view_angle_increases_rrs(self, clear_water):
        nadir = rta_am03(**clear_water, theta_v=0.0)
        oblique = rta_am03(**clear_water, theta_v=0.4)
        assert oblique > nadir

    def test_wind_speed_decreases_rrs(self, clear_water):
        """p6 is negative."""
        calm = rta_am03(**clear_water, wsp=0.0)
        windy = rta_am03(**clear_water, wsp=10.0)
        assert windy == pytest.approx(calm * (1 - 0.0044 * 10.0), rel=1e-12)

    def test_increasing_with_albedo(self):
        """The polynomial is increasing over the low albedo range."""
        bb = np.linspace(0.005, 0.5, 50)
        rrs = rta_am03(a=0.5, bb=bb)
        assert np.all(np.diff(rrs) > 0)

    def test_albedo_matches_direct_computation(self):
        """u = bb / (a + bb) is used as computed from the inputs."""
        a = np.array([0.05, 0.3, 1.2])
        bb = np.array([0.01, 0.02, 0.4])
        rrs = rta_am03(a=a, bb=bb)
        assert_allclose(rrs, deep_rrs(bb / (a + bb)), rtol=1e-12)

    def test_independent_of_bottom(self, clear_water):
        """Bottom reflectance has no effect on optically deep water."""
        r1 = rta_am03(**clear_water, rho_b=0.0)
        r2 = rta_am03(**clear_water, rho_b=1.0)
        r3 = rta_am03(**clear_water)
        assert r1 == r2 == r3


class TestShallowWater:
    """Tests for optically shallow water."""

    def test_zero_depth(self, clear_water):
        """At zero depth R = R0 (1 - A1) + A2 rho_b."""
        R0 = rta_am03(**clear_water)
        R = rta_am03(**clear_water, depth=0.0, rho_b=0.3)
        expected = R0 * (1 - AM03_RRS["A1"]) + AM03_RRS["A2"] * 0.3
        assert R == pytest.approx(expected, rel=1e-12)

    def test_converges_to_deep(self, clear_water):
        R0 = rta_am03(**clear_water)
        R = rta_am03(**clear_water, depth=500.0, rho_b=0.3)
        assert R == pytest.approx(R0, rel=1e-12)

    def test_bright_bottom_increases_rrs(self, clear_water, sand_bottom):
        dark = rta_am03(**clear_water, depth=sand_bottom['depth'], rho_b=0.0)
        bright = rta_am03(**clear_water, **sand_bottom)
        assert bright > dark

    def test_closed_form(self, turbid_water, sand_bottom):
        """Shallow water equations written out at an oblique Sun."""
        a, bb = turbid_water['a'], turbid_water['bb']
        z, rho_b = sand_bottom['depth'], sand_bottom['rho_b']
        theta_s = 0.3
        c = AM03_RRS

        k = a + bb
        u = bb / k
        mu_s = np.cos(theta_s)
        kd = c["k0"] * k / mu_s
        kuw = k * (1 + u) ** c["k1w"] * (1 + c["k2w"] / mu_s)
        kub = k * (1 + u) ** c["k1b"] * (1 + c["k2b"] / mu_s)
        R0 = deep_rrs(u, theta_s=theta_s)
        expected = (R0 * (1 - c["A1"] * np.exp(-(kd + kuw) * z))
                    + c["A2"] * rho_b * np.exp(-(kd + kub) * z))

        R = rta_am03(a, bb, theta_s=theta_s, depth=z, rho_b=rho_b)
        assert R == pytest.approx(expected, rel=1e-12)

    def test_mixed_depths(self, clear_water):
        """Deep and shallow elements are evaluated element-wise."""
        depth = np.array([np.inf, 1.0, np.inf])
        R = rta_am03(**clear_water, depth=depth, rho_b=0.5)
        R0 = rta_am03(**clear_water)
        assert R[0] == pytest.approx(R0, rel=1e-12)
        assert R[2] == pytest.approx(R0, rel=1e-12)
        assert R[1] != pytest.approx(R0, rel=1e-3)

    def test_missing_bottom_gives_nan(self, clear_water):
        """Without validation, a missing rho_b makes shallow values NaN."""
        R = rta_am03(**clear_water, depth=np.array([np.inf, 1.0]))
        assert np.isfinite(R[0])
        assert np.isnan(R[1])


class TestRecycling:
    """Tests for inputs of different lengths."""

    def test_sun_sweep_shape(self, clear_water, sun_sweep):
        rrs = rta_am03(**clear_water, theta_s=sun_sweep)
        assert rrs.shape == sun_sweep.shape

    def test_spectrum_with_single_angle(self):
        a = np.array([0.01, 0.05, 0.3, 2.0])
        rrs = rta_am03(a=a, bb=0.01, theta_s=0.2)
        assert rrs.shape == (4,)

    def test_cycling(self):
        """Shorter inputs are repeated cyclically."""
        rrs = rta_am03(a=[0.5, 1.0], bb=0.1, theta_s=[0.0, 0.1, 0.2, 0.3])
        expected = [rta_am03(a=a, bb=0.1, theta_s=t)
                    for a, t in zip([0.5, 1.0, 0.5, 1.0], [0.0, 0.1, 0.2, 0.3])]
        assert_allclose(rrs, expected, rtol=1e-12)
