"""
Pytest configuration and shared fixtures for water_reflectance tests.
"""

import numpy as np
import pytest


@pytest.fixture
def clear_water():
    """Inherent optical properties of clear, low albedo water [1/m]."""
    return {
        'a': 0.5,
        'bb': 0.1,
    }


@pytest.fixture
def turbid_water():
    """Inherent optical properties of turbid water [1/m]."""
    return {
        'a': 1.0,
        'bb': 0.5,
        'bbp': 0.45,
    }


@pytest.fixture
def sand_bottom():
    """Bright sandy bottom at moderate depth."""
    return {
        'rho_b': 0.2,
        'depth': 2.0,
    }


@pytest.fixture
def refracted_geometry():
    """Sun at 30 degrees and view at 20 degrees in air, refracted."""
    n_w = 1.33
    return {
        'theta_s': np.arcsin(np.sin(np.deg2rad(30.0)) / n_w),
        'theta_v': np.arcsin(np.sin(np.deg2rad(20.0)) / n_w),
    }


@pytest.fixture
def sun_sweep():
    """Refracted Sun zenith angles from 0 to 60 degrees in air."""
    return np.arcsin(np.sin(np.deg2rad(np.arange(0.0, 61.0, 5.0))) / 1.33)


@pytest.fixture(params=['Albert-Mobley03', 'Lee98'])
def model(request):
    """Parametrized fixture for both parametrizations."""
    return request.param
