from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.distributions.support import (
    ContinuousSupport,
    ExplicitTableDiscreteSupport,
    Support,
)
from pysatl_inference.types import ContinuousSupportShape1D


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    def test_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(1, 0), ContinuousSupportShape1D.EMPTY),
            (ContinuousSupport(0, 1), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(1, 1), ContinuousSupportShape1D.SINGLE_POINT),
        ],
        ids=["empty", "bounded", "ray_right", "ray_left", "real_line", "single_point"],
    )
    def test_shape(self, support, expected_shape):
        assert support.shape == expected_shape

    def test_as_tuple(self):
        assert ContinuousSupport(left=2.0).as_tuple() == (2.0, inf)

    def test_satisfies_support_protocol(self):
        assert isinstance(self.support_example, Support)


class TestExplicitTableDiscreteSupport:
    support_example = ExplicitTableDiscreteSupport([3, 1, 2, 2, 5])

    def test_table_is_sorted_and_deduplicated(self):
        np.testing.assert_array_equal(self.support_example.points, np.array([1, 2, 3, 5]))
        assert len(self.support_example) == 4

    @pytest.mark.parametrize(
        "point, expected_result",
        [(2, True), (4, False), (2.0, True), (2.5, False)],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result

    def test_contains_array(self):
        result = self.support_example.contains(np.array([0, 1, 2, 3, 4, 5]))
        assert result.tolist() == [False, True, True, True, False, True]

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            ExplicitTableDiscreteSupport([])

    def test_first_last_and_iteration(self):
        assert self.support_example.first() == 1
        assert self.support_example.last() == 5
        assert list(self.support_example) == [1, 2, 3, 5]

    def test_points_property_returns_copy(self):
        pts_copy = self.support_example.points
        pts_copy[0] = -999
        np.testing.assert_array_equal(self.support_example.points, np.array([1, 2, 3, 5]))

    def test_support_of_discrete_distribution(self):
        dist = DiscreteDistribution([2, 0, 2], [0.25, 0.5, 0.25])
        assert list(dist.support) == [0, 2]
        assert 1 not in dist.support
