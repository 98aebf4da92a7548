from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_inference.errors import DegenerateParameterError
from pysatl_inference.stats import decision_beliefs, decision_entropy, softmax


class TestSoftmax:
    def test_sums_to_one(self) -> None:
        result = softmax([1.0, 2.0, 3.0])
        assert result.sum() == pytest.approx(1.0)
        assert np.all(np.diff(result) > 0)

    def test_is_shift_invariant_and_stable(self) -> None:
        np.testing.assert_allclose(softmax([1000.0, 1001.0]), softmax([0.0, 1.0]))

    def test_empty(self) -> None:
        with pytest.raises(DegenerateParameterError):
            softmax([])


class TestDecision:
    def test_equal_errors_are_undecided(self) -> None:
        assert decision_entropy([0.3, 0.3, 0.3, 0.3]).value == pytest.approx(2.0)

    def test_clear_winner(self) -> None:
        beliefs = decision_beliefs([0.0, 1.0])
        assert beliefs.pmf(0) == pytest.approx(1.0)
        assert decision_entropy([0.0, 1.0]).value == pytest.approx(0.0, abs=1e-12)

    def test_lower_error_gets_higher_belief(self) -> None:
        beliefs = decision_beliefs([2.0, 1.0, 4.0])
        assert beliefs.outcomes == (0, 1, 2)
        assert beliefs.pmf(1) > beliefs.pmf(0) > beliefs.pmf(2)

    def test_epsilon_regularises_zero_errors(self) -> None:
        assert decision_entropy([0.0, 0.0], epsilon=1.0).value == pytest.approx(1.0)

    def test_negative_errors(self) -> None:
        with pytest.raises(DegenerateParameterError):
            decision_beliefs([0.1, -0.1])
