"""
Unit tests for the closed-form starting weights.
"""

import numpy as np
import pytest

from gdregression.estimators import starting_weights
from gdregression.exceptions import DegenerateInputError, ShapeError


class TestStartingWeights:
    """Tests for `starting_weights`."""

    def test_exact_line(self):
        x = list(range(100))
        y = [3 * xi - 4 for xi in x]
        params = starting_weights(x, y)
        assert params.slopes == pytest.approx((3.0,))
        assert params.intercept == pytest.approx(-4.0)

    def test_row_input(self):
        params = starting_weights([[0], [1], [2]], [1, 3, 5])
        assert params.slopes == pytest.approx((2.0,))
        assert params.intercept == pytest.approx(1.0)

    def test_matches_polyfit(self):
        rng = np.random.default_rng(seed=1)
        x = rng.uniform(-5, 5, size=40)
        y = 0.7 * x + 1.2 + rng.normal(scale=0.3, size=40)

        params = starting_weights(x, y)
        slope_expected, intercept_expected = np.polyfit(x, y, 1)

        np.testing.assert_allclose(params.slopes[0], slope_expected, rtol=1e-10)
        np.testing.assert_allclose(params.intercept, intercept_expected, rtol=1e-10)

    def test_constant_features(self):
        with pytest.raises(DegenerateInputError):
            starting_weights([2, 2, 2, 2], [1, 2, 3, 4])

    def test_single_sample(self):
        with pytest.raises(DegenerateInputError):
            starting_weights([5], [1])

    def test_multi_feature(self):
        with pytest.raises(ShapeError):
            starting_weights([[1, 2], [3, 4], [5, 7]], [1, 2, 3])
