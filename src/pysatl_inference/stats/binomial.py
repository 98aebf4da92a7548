"""
Bernoulli parameter estimation and the Wilson-score distinction test.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import sqrt
from typing import TYPE_CHECKING

from pysatl_inference.config import DEFAULTS
from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import DegenerateParameterError

if TYPE_CHECKING:
    from collections.abc import Sequence


def estimate_binomial(samples: Sequence[int]) -> DiscreteDistribution[int]:
    """
    Method-of-moments fit of a Bernoulli distribution to 0/1 samples.

    Returns
    -------
    DiscreteDistribution[int]
        ``binomial(mean(samples))`` over the outcomes ``(0, 1)``.

    Raises
    ------
    DegenerateParameterError
        If ``samples`` is empty or its mean lies outside ``[0, 1]``.
    """
    if len(samples) == 0:
        raise DegenerateParameterError("Binomial estimation requires at least one sample.")
    return DiscreteDistribution.binomial(sum(samples) / len(samples))


def wilson_score_interval(h: float, n: int, z: float | None = None) -> tuple[float, float]:
    """
    Wilson score interval of a binomial proportion.

    Parameters
    ----------
    h : float
        Observed relative frequency of successes.
    n : int
        Number of trials.
    z : float, optional
        Normal quantile, defaults to ``DEFAULTS.wilson_z`` (1.96).

    Returns
    -------
    tuple[float, float]
        Lower and upper bound.
    """
    if n <= 0:
        raise DegenerateParameterError(f"Number of trials must be positive, got {n}.")
    z = DEFAULTS.wilson_z if z is None else z

    z2 = z * z
    center = 2.0 * h * n + z2
    spread = sqrt(max(z2 * z2 + 4.0 * h * n * z2 - 4.0 * h * h * n * z2, 0.0))
    denominator = 2.0 * (n + z2)
    return (center - spread) / denominator, (center + spread) / denominator


def binomial_distinction_test(
    test_dist: DiscreteDistribution[int],
    samples: Sequence[int],
    z: float | None = None,
) -> bool:
    """
    Check whether 0/1 samples are consistent with a Bernoulli distribution.

    Returns ``True`` iff ``test_dist.pmf(1)`` lies inside the Wilson score
    interval of the observed success frequency.
    """
    h = estimate_binomial(samples).pmf(1)
    low, high = wilson_score_interval(h, len(samples), z)
    return low <= test_dist.pmf(1) <= high


__all__ = [
    "estimate_binomial",
    "wilson_score_interval",
    "binomial_distinction_test",
]
