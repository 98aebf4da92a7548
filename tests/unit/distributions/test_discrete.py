from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from math import comb

import pytest

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import (
    DegenerateParameterError,
    DimensionMismatchError,
    DistributionError,
    DuplicateOutcomeError,
    InvalidProbabilityError,
)
from pysatl_inference.types import Kind
from tests.utils.mocks import FixedRandomSource


class TestConstruction:
    def test_valid_distribution(self):
        dist = DiscreteDistribution(["a", "b", "c"], [0.1, 0.2, 0.7])
        assert dist.outcomes == ("a", "b", "c")
        assert dist.probabilities == (0.1, 0.2, 0.7)
        assert abs(sum(dist.probabilities) - 1.0) < 1e-10
        assert dist.kind == Kind.DISCRETE
        assert len(dist) == 3

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            DiscreteDistribution([1, 2], [1.0])

    @pytest.mark.parametrize(
        "probabilities",
        [[1.2, -0.2], [0.5, 0.4], [0.6, 0.6], [float("nan"), 1.0]],
        ids=["negative", "sum_below_one", "sum_above_one", "nan"],
    )
    def test_invalid_probabilities(self, probabilities):
        with pytest.raises(InvalidProbabilityError):
            DiscreteDistribution([1, 2], probabilities)

    def test_negative_noise_within_tolerance_is_accepted(self):
        dist = DiscreteDistribution([0, 1], [1.0 + 5e-11, -5e-11])
        assert dist.pmf(1) == -5e-11

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            DiscreteDistribution([1], [0.5])
        assert issubclass(InvalidProbabilityError, DistributionError)

    def test_is_immutable(self):
        dist = DiscreteDistribution([0, 1], [0.5, 0.5])
        with pytest.raises(dataclasses.FrozenInstanceError):
            dist.outcomes = (2, 3)  # type: ignore[misc]

    def test_iteration_yields_pairs(self):
        dist = DiscreteDistribution([0, 1], [0.25, 0.75])
        assert list(dist) == [(0, 0.25), (1, 0.75)]


class TestPmfAndMeasure:
    dist = DiscreteDistribution(["a", "b", "c"], [0.1, 0.2, 0.7])

    @pytest.mark.parametrize(
        "outcome, expected",
        [("a", 0.1), ("b", 0.2), ("c", 0.7), ("d", 0.0)],
    )
    def test_pmf(self, outcome, expected):
        assert self.dist.pmf(outcome) == expected

    def test_pmf_reports_first_duplicate(self):
        dist = DiscreteDistribution([1, 1], [0.3, 0.7])
        assert dist.pmf(1) == 0.3

    def test_measure(self):
        assert self.dist.measure(["a", "c"]) == pytest.approx(0.8)
        assert self.dist.measure(["a", "b", "c"]) == pytest.approx(1.0)

    def test_measure_ignores_absent_outcomes(self):
        assert self.dist.measure(["b", "z"]) == pytest.approx(0.2)

    def test_measure_rejects_duplicates(self):
        with pytest.raises(DuplicateOutcomeError):
            self.dist.measure(["a", "a"])


class TestSampling:
    dist = DiscreteDistribution([0, 1, 2], [0.5, 0.0, 0.5])

    @pytest.mark.parametrize(
        "u, expected",
        [(0.0, 0), (0.25, 0), (0.5, 0), (0.6, 2), (0.999, 2)],
    )
    def test_walk(self, u, expected):
        assert self.dist.sample(FixedRandomSource(u)) == expected

    def test_zero_probability_outcome_is_never_sampled(self, rng):
        draws = {self.dist.sample(rng) for _ in range(2000)}
        assert draws == {0, 2}

    def test_residue_past_last_outcome_warns(self):
        dist = DiscreteDistribution([0, 1, 2], [0.5, 0.5 - 5e-11, 0.0])
        with pytest.warns(RuntimeWarning):
            assert dist.sample(FixedRandomSource(1.0 - 1e-12)) == 1


class TestConstructors:
    def test_multinomial(self):
        dist = DiscreteDistribution.multinomial([0.2, 0.3, 0.5])
        assert dist.outcomes == (0, 1, 2)
        assert dist.probabilities == (0.2, 0.3, 0.5)

    def test_bernoulli(self):
        dist = DiscreteDistribution.binomial(0.3)
        assert dist.outcomes == (0, 1)
        assert dist.probabilities == pytest.approx((0.7, 0.3))

    @pytest.mark.parametrize("n", [2, 5, 12])
    def test_binomial_trials(self, n):
        p = 0.4
        dist = DiscreteDistribution.binomial(p, n)
        assert dist.outcomes == tuple(range(n + 1))
        expected = [comb(n, k) * p**k * (1 - p) ** (n - k) for k in range(n + 1)]
        assert dist.probabilities == pytest.approx(expected)

    @pytest.mark.parametrize(
        "p, n",
        [(-0.1, 1), (1.1, 1), (0.5, 0), (0.5, 13)],
        ids=["p_below_zero", "p_above_one", "no_trials", "too_many_trials"],
    )
    def test_binomial_rejects_parameters(self, p, n):
        with pytest.raises(DegenerateParameterError):
            DiscreteDistribution.binomial(p, n)

    def test_from_samples(self):
        dist = DiscreteDistribution.from_samples([2, 1, 2, 3])
        assert dist.outcomes == (1, 2, 3)
        assert dist.probabilities == (0.25, 0.5, 0.25)

    def test_from_samples_requires_data(self):
        with pytest.raises(DegenerateParameterError):
            DiscreteDistribution.from_samples([])
