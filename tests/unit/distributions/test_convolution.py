from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_inference.distributions.convolution import (
    convoluted,
    convoluted_binomial,
    convoluted_multinomial,
    discrete_convolution,
)
from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import DegenerateParameterError


class TestDiscreteConvolution:
    def test_two_fair_coins(self):
        coin = DiscreteDistribution.binomial(0.5)
        result = discrete_convolution(coin, coin)
        assert result.outcomes == (0, 1, 2)
        assert result.probabilities == pytest.approx((0.25, 0.5, 0.25))

    def test_zero_probability_outcomes_are_dropped(self):
        even = DiscreteDistribution([0, 2], [0.5, 0.5])
        result = discrete_convolution(even, even)
        assert result.outcomes == (0, 2, 4)
        assert result.probabilities == pytest.approx((0.25, 0.5, 0.25))

    def test_shifted_supports(self):
        x = DiscreteDistribution([-1, 1], [0.5, 0.5])
        y = DiscreteDistribution([3, 6], [0.25, 0.75])
        result = discrete_convolution(x, y)
        assert result.outcomes == (2, 4, 5, 7)
        assert result.probabilities == pytest.approx((0.125, 0.125, 0.375, 0.375))

    def test_is_commutative(self):
        x = DiscreteDistribution.multinomial([0.1, 0.6, 0.3])
        y = DiscreteDistribution.binomial(0.2, 3)
        xy = discrete_convolution(x, y)
        yx = discrete_convolution(y, x)
        assert xy.outcomes == yx.outcomes
        assert xy.probabilities == pytest.approx(yx.probabilities)

    def test_rejects_non_integer_outcomes(self):
        halves = DiscreteDistribution([0.5, 1.5], [0.5, 0.5])
        with pytest.raises(DegenerateParameterError):
            discrete_convolution(halves, DiscreteDistribution.binomial(0.5))


class TestConvoluted:
    def test_convoluted_binomial_hundred_trials(self):
        result = convoluted_binomial(100, 0.5)
        assert len(result) == 101
        assert result.probabilities[0] == pytest.approx(0.5**100, rel=1e-9)
        assert result.pmf(50) == pytest.approx(0.0795892373871787, rel=1e-9)

    @pytest.mark.parametrize("n", [2, 7, 12])
    def test_convoluted_binomial_matches_closed_form(self, n):
        result = convoluted_binomial(n, 0.3)
        expected = DiscreteDistribution.binomial(0.3, n)
        assert result.outcomes == expected.outcomes
        assert result.probabilities == pytest.approx(expected.probabilities)

    def test_single_summand_is_the_base(self):
        assert convoluted(1, DiscreteDistribution.binomial, 0.4) == DiscreteDistribution.binomial(
            0.4
        )

    def test_convoluted_multinomial(self):
        result = convoluted_multinomial(2, [0.5, 0.5])
        assert result.outcomes == (0, 1, 2)
        assert result.probabilities == pytest.approx((0.25, 0.5, 0.25))

    def test_rejects_non_positive_count(self):
        with pytest.raises(DegenerateParameterError):
            convoluted(0, DiscreteDistribution.binomial, 0.5)
