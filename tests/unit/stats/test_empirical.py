from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats as sp_stats

from pysatl_inference.errors import DegenerateParameterError, DimensionMismatchError
from pysatl_inference.stats import (
    empirical_central_moment,
    empirical_covariance,
    empirical_moment,
    empirical_standardized_moment,
    pearson_correlation,
)


class TestEmpiricalMoments:
    samples = [1.0, 2.0, 3.0, 4.0]

    @pytest.mark.parametrize("n, expected", [(0, 1.0), (1, 2.5), (2, 7.5)])
    def test_raw_moments(self, n, expected) -> None:
        assert empirical_moment(n, self.samples) == pytest.approx(expected)

    def test_central_moments_are_biased(self) -> None:
        assert empirical_central_moment(1, self.samples) == pytest.approx(0.0)
        assert empirical_central_moment(2, self.samples) == pytest.approx(1.25)

    def test_standardized_moments_match_scipy(self, rng) -> None:
        samples = rng.exponential(size=1000)
        assert empirical_standardized_moment(3, samples) == pytest.approx(
            sp_stats.skew(samples)
        )
        assert empirical_standardized_moment(4, samples) == pytest.approx(
            sp_stats.kurtosis(samples, fisher=False)
        )

    def test_standardized_moment_of_constant_sample(self) -> None:
        with pytest.raises(DegenerateParameterError):
            empirical_standardized_moment(3, [2.0, 2.0])

    @pytest.mark.parametrize("samples", [[], [[1.0, 2.0]]], ids=["empty", "two_dimensional"])
    def test_rejects_malformed_samples(self, samples) -> None:
        with pytest.raises(DegenerateParameterError):
            empirical_moment(1, samples)


class TestCorrelation:
    def test_covariance(self) -> None:
        assert empirical_covariance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]) == pytest.approx(4.0 / 3.0)

    @pytest.mark.parametrize(
        "ys, expected",
        [([2.0, 4.0, 6.0, 8.0], 1.0), ([8.0, 6.0, 4.0, 2.0], -1.0)],
        ids=["increasing", "decreasing"],
    )
    def test_perfect_linear_relation(self, ys, expected) -> None:
        assert pearson_correlation([1.0, 2.0, 3.0, 4.0], ys) == pytest.approx(expected)

    def test_matches_numpy(self, rng) -> None:
        xs = rng.normal(size=500)
        ys = xs + rng.normal(size=500)
        assert pearson_correlation(xs, ys) == pytest.approx(np.corrcoef(xs, ys)[0, 1])

    def test_length_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError):
            empirical_covariance([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_constant_sample(self) -> None:
        with pytest.raises(DegenerateParameterError):
            pearson_correlation([1.0, 1.0, 1.0], [1.0, 2.0, 3.0])
