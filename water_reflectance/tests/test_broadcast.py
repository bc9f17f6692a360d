"""
Tests for input recycling.
"""

import numpy as np
from numpy.testing import assert_array_equal

from water_reflectance.broadcast import as_result, recycle


class TestRecycle:

    def test_scalars_stay_scalars(self):
        a, b = recycle(1.0, 2.0)
        assert a.ndim == 0 and b.ndim == 0

    def test_scalar_repeated(self):
        a, b = recycle([1.0, 2.0, 3.0], 0.5)
        assert_array_equal(b, [0.5, 0.5, 0.5])

    def test_cyclic(self):
        a, b = recycle([1, 2], [1, 2, 3, 4, 5])
        assert_array_equal(a, [1, 2, 1, 2, 1])
        assert_array_equal(b, [1, 2, 3, 4, 5])

    def test_flattened(self):
        (a,) = recycle(np.ones((2, 3)))
        assert a.shape == (6,)

    def test_empty(self):
        a, b = recycle([], [1.0, 2.0])
        assert a.size == 0 and b.size == 0


class TestAsResult:

    def test_zero_dimensional(self):
        value = as_result(np.asarray(2.5))
        assert np.ndim(value) == 0
        assert not isinstance(value, np.ndarray)

    def test_array_unchanged(self):
        value = np.array([1.0, 2.0])
        assert as_result(value) is value
