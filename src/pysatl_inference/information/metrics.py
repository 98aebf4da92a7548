"""
Information Metrics
===================

Entropy, divergences and mutual information of discrete distributions, all
reported in bits.

Notes
-----
- Outcomes with zero probability contribute exactly zero to every sum.
- ``kullback_leibler(P, Q)`` is ``+inf`` when ``Q`` assigns zero probability
  to an outcome that ``P`` does not. The value is returned, not raised.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import fsum, log
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.special import entr, rel_entr

from pysatl_inference.distributions.combinatorics import joint_distribution
from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.information.units import InformationUnit

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_inference.types import FloatArray


LN_2 = log(2.0)


def _non_negative(probabilities: Iterable[float]) -> FloatArray:
    # Construction admits negative noise down to -tolerance.
    return np.clip(np.fromiter(probabilities, dtype=np.float64), 0.0, None)


def _union(*distributions: DiscreteDistribution[Any]) -> list[Any]:
    return list(dict.fromkeys(x for dist in distributions for x in dist.outcomes))


def entropy(dist: DiscreteDistribution[Any]) -> InformationUnit:
    """
    Shannon entropy ``-sum(p * log2(p))`` in bits.

    Parameters
    ----------
    dist : DiscreteDistribution
        Any discrete distribution.

    Returns
    -------
    InformationUnit
        Entropy in bits.

    Examples
    --------
    >>> round(entropy(DiscreteDistribution.multinomial([0.25] * 4)).value, 12)
    2.0
    """
    nats = fsum(entr(_non_negative(dist.probabilities)).tolist())
    return InformationUnit.bits(nats / LN_2)


def kullback_leibler(
    dist_p: DiscreteDistribution[Any], dist_q: DiscreteDistribution[Any]
) -> InformationUnit:
    """
    Kullback-Leibler divergence ``KL(P || Q)`` in bits.

    The sum runs over the union of outcomes of both distributions.

    Returns
    -------
    InformationUnit
        Divergence in bits; ``+inf`` if ``Q(x) = 0 < P(x)`` for some ``x``.
    """
    outcomes = _union(dist_p, dist_q)
    p = _non_negative(dist_p.pmf(x) for x in outcomes)
    q = _non_negative(dist_q.pmf(x) for x in outcomes)
    nats = fsum(rel_entr(p, q).tolist())
    return InformationUnit.bits(nats / LN_2)


def average_distributions(
    dist_p: DiscreteDistribution[Any], dist_q: DiscreteDistribution[Any]
) -> DiscreteDistribution[Any]:
    """
    Outcome-wise average ``(P + Q) / 2`` over the union of outcomes.

    Outcomes keep their order of first appearance, ``P`` first.
    """
    outcomes = _union(dist_p, dist_q)
    return DiscreteDistribution(
        outcomes, [(dist_p.pmf(x) + dist_q.pmf(x)) / 2.0 for x in outcomes]
    )


def jensen_shannon(
    dist_p: DiscreteDistribution[Any], dist_q: DiscreteDistribution[Any]
) -> InformationUnit:
    """
    Jensen-Shannon divergence in bits.

    ``JS(P, Q) = (KL(P || M) + KL(Q || M)) / 2`` with ``M`` the average of
    ``P`` and ``Q``. The result is symmetric and lies in ``[0, 1]``.
    """
    mixture = average_distributions(dist_p, dist_q)
    return (kullback_leibler(dist_p, mixture) + kullback_leibler(dist_q, mixture)) / 2.0


def mutual_information(
    dist_x: DiscreteDistribution[Any],
    dist_y: DiscreteDistribution[Any],
    joint: DiscreteDistribution[Any],
) -> InformationUnit:
    """``I(X; Y) = H(X) + H(Y) - H(X, Y)`` in bits."""
    return entropy(dist_x) + entropy(dist_y) - entropy(joint)


def joint_entropy(*distributions: DiscreteDistribution[Any]) -> InformationUnit:
    """Entropy of the joint distribution of independent distributions."""
    return entropy(joint_distribution(*distributions))


__all__ = [
    "entropy",
    "kullback_leibler",
    "average_distributions",
    "jensen_shannon",
    "mutual_information",
    "joint_entropy",
]
