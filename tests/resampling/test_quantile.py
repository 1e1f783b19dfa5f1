"""
Tests for the Hyndman & Fan sample quantiles.

Types with a NumPy counterpart are checked against np.quantile; the
discontinuous types also against hand-computed values.
"""

import numpy as np
import pytest

from pyresampling.core.exceptions import InvalidParameterError
from pyresampling.resampling._quantile import DEFAULT_QTYPE, quantile

NUMPY_METHODS = {
    1: "inverted_cdf",
    2: "averaged_inverted_cdf",
    4: "interpolated_inverted_cdf",
    5: "hazen",
    6: "weibull",
    7: "linear",
    8: "median_unbiased",
    9: "normal_unbiased",
}

PROBS = [0.1, 0.33, 0.5, 0.77, 0.95]


@pytest.fixture
def data(rng):
    return np.sort(rng.normal(0.0, 1.0, size=13))


class TestAgainstNumpy:

    @pytest.mark.parametrize("qtype", sorted(NUMPY_METHODS))
    def test_matches_numpy(self, data, qtype):
        got = quantile(data, PROBS, qtype)
        expected = np.quantile(data, PROBS, method=NUMPY_METHODS[qtype])
        np.testing.assert_allclose(got, expected, rtol=1e-12, atol=1e-14)

    def test_default_is_linear(self, data):
        assert DEFAULT_QTYPE == 7
        np.testing.assert_allclose(quantile(data, PROBS), np.quantile(data, PROBS))


class TestDiscontinuousTypes:

    def test_type1_on_order_statistic(self):
        x = np.arange(1.0, 11.0)
        assert quantile(x, [0.5], 1)[0] == 5.0

    def test_type2_averages_at_discontinuity(self):
        x = np.arange(1.0, 11.0)
        assert quantile(x, [0.5], 2)[0] == 5.5

    def test_type2_between_points(self):
        x = np.arange(1.0, 11.0)
        assert quantile(x, [0.42], 2)[0] == 5.0

    def test_type3_nearest_even(self):
        # n * p - 0.5 = 2 exactly -> order statistic 2 (even)
        x = np.arange(1.0, 11.0)
        assert quantile(x, [0.25], 3)[0] == 2.0


class TestEdges:

    @pytest.mark.parametrize("qtype", range(1, 10))
    def test_extreme_probabilities(self, data, qtype):
        lo, hi = quantile(data, [0.0, 1.0], qtype)
        assert lo == pytest.approx(data[0], rel=1e-14)
        assert hi == pytest.approx(data[-1], rel=1e-14)

    @pytest.mark.parametrize("qtype", range(1, 10))
    def test_single_value(self, qtype):
        np.testing.assert_allclose(quantile([3.5], [0.0, 0.4, 1.0], qtype), 3.5, rtol=1e-14)

    def test_monotone_in_p(self, data):
        probs = np.linspace(0.0, 1.0, 101)
        q = quantile(data, probs)
        assert np.all(np.diff(q) >= -1e-12)

    def test_scalar_probability(self, data):
        assert quantile(data, 0.5).shape == (1,)


class TestQuantileValidation:

    def test_bad_type(self, data):
        with pytest.raises(InvalidParameterError, match="qtype"):
            quantile(data, [0.5], 0)

    @pytest.mark.parametrize("p", [-0.01, 1.01])
    def test_probability_out_of_range(self, data, p):
        with pytest.raises(InvalidParameterError, match="probs"):
            quantile(data, [p])
