"""
Convolution
===========

Distribution of the sum of independent integer-valued random variables.

Examples
--------
>>> x = DiscreteDistribution([1, 2], [0.5, 0.5])
>>> y = DiscreteDistribution([3, 6], [0.5, 0.5])
>>> discrete_convolution(x, y).outcomes
(4, 5, 7, 8)
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import fsum
from numbers import Integral
from typing import TYPE_CHECKING, Any

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import DegenerateParameterError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def _require_integer_outcomes(dist: DiscreteDistribution[Any], name: str) -> None:
    if not all(isinstance(x, Integral) for x in dist.outcomes):
        raise DegenerateParameterError(f"Convolution requires integer outcomes in {name}.")


def discrete_convolution(
    dist_x: DiscreteDistribution[int], dist_y: DiscreteDistribution[int]
) -> DiscreteDistribution[int]:
    """
    Convolution of two independent integer-valued distributions.

    Every integer ``z`` between ``min(X) + min(Y)`` and ``max(X) + max(Y)`` is
    enumerated and receives ``sum_k pmf_X(k) * pmf_Y(z - k)`` over the
    outcomes ``k`` of ``X``. Outcomes with zero probability are dropped.

    Parameters
    ----------
    dist_x, dist_y : DiscreteDistribution[int]
        Distributions of the summands.

    Returns
    -------
    DiscreteDistribution[int]
        Distribution of ``X + Y`` with increasing outcomes.

    Raises
    ------
    DegenerateParameterError
        If either distribution has a non-integer outcome.

    Notes
    -----
    The enumeration assumes dense integer supports; sparse supports cost more
    work but give the same result.
    """
    _require_integer_outcomes(dist_x, "dist_x")
    _require_integer_outcomes(dist_y, "dist_y")

    # First occurrence wins, matching DiscreteDistribution.pmf.
    pmf_x: dict[int, float] = {}
    for k, p in dist_x:
        pmf_x.setdefault(int(k), p)
    pmf_y: dict[int, float] = {}
    for k, p in dist_y:
        pmf_y.setdefault(int(k), p)

    low = min(pmf_x) + min(pmf_y)
    high = max(pmf_x) + max(pmf_y)

    outcomes: list[int] = []
    probabilities: list[float] = []
    for z in range(low, high + 1):
        p = fsum(p_k * pmf_y.get(z - k, 0.0) for k, p_k in pmf_x.items())
        if p > 0.0:
            outcomes.append(z)
            probabilities.append(p)

    return DiscreteDistribution(outcomes, probabilities)


def convoluted(
    n: int,
    constructor: Callable[..., DiscreteDistribution[int]],
    *params: Any,
) -> DiscreteDistribution[int]:
    """
    ``n``-fold self-convolution of ``constructor(*params)``.

    Parameters
    ----------
    n : int
        Number of independent summands, ``n >= 1``.
    constructor : Callable[..., DiscreteDistribution[int]]
        Factory of the base distribution, e.g.
        :meth:`DiscreteDistribution.binomial`.
    *params
        Arguments forwarded to ``constructor``.

    Raises
    ------
    DegenerateParameterError
        If ``n < 1``.
    """
    if n < 1:
        raise DegenerateParameterError(f"Number of summands must be positive, got {n}.")

    base = constructor(*params)
    result = base
    for _ in range(n - 1):
        result = discrete_convolution(result, base)
    return result


def convoluted_binomial(n: int, p: float) -> DiscreteDistribution[int]:
    """Binomial distribution of ``n`` trials as a sum of ``n`` Bernoulli variables."""
    return convoluted(n, DiscreteDistribution.binomial, p)


def convoluted_multinomial(n: int, probabilities: Sequence[float]) -> DiscreteDistribution[int]:
    """Sum of ``n`` independent draws from ``multinomial(probabilities)``."""
    return convoluted(n, DiscreteDistribution.multinomial, probabilities)


__all__ = [
    "discrete_convolution",
    "convoluted",
    "convoluted_binomial",
    "convoluted_multinomial",
]
