"""
L2 distances between distributions.

Both distances are the square root of the summed (discrete) or integrated
(continuous) squared difference of the mass or density functions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import fsum, sqrt
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_inference.config import DEFAULTS
from pysatl_inference.distributions.integration import integrate_density

if TYPE_CHECKING:
    from pysatl_inference.distributions.discrete import DiscreteDistribution
    from pysatl_inference.distributions.distribution import ContinuousDistribution
    from pysatl_inference.families.builtins.continuous.normal import NormalDistribution
    from pysatl_inference.types import FloatArray


def discrete_l2_distance(
    dist_x: DiscreteDistribution[Any], dist_y: DiscreteDistribution[Any]
) -> float:
    """
    L2 distance between two discrete distributions.

    The sum runs over the union of outcomes; each outcome is counted once.
    """
    domain = dict.fromkeys((*dist_x.outcomes, *dist_y.outcomes))
    return sqrt(fsum((dist_x.pmf(x) - dist_y.pmf(x)) ** 2 for x in domain))


def continuous_l2_distance(
    dist_x: ContinuousDistribution,
    dist_y: ContinuousDistribution,
    interval: tuple[float, float],
    *,
    steps: int | None = None,
) -> float:
    """
    L2 distance between two densities over a finite window.

    Parameters
    ----------
    dist_x, dist_y : ContinuousDistribution
        Distributions whose densities are compared.
    interval : tuple[float, float]
        Finite integration window ``(left, right)``.
    steps : int, optional
        Number of Simpson steps.

    Returns
    -------
    float
        ``sqrt(integral((pdf_x - pdf_y)**2))`` over ``interval``.
    """

    def _squared_difference(x: FloatArray) -> FloatArray:
        return np.square(dist_x.pdf(x) - dist_y.pdf(x))

    left, right = interval
    return sqrt(max(integrate_density(_squared_difference, left, right, steps=steps), 0.0))


def normal_l2_distance(
    dist_x: NormalDistribution,
    dist_y: NormalDistribution,
    *,
    tail_sigmas: float | None = None,
) -> float:
    """
    L2 distance between two normal densities.

    The window is ``[min(mu - k*sigma), max(mu + k*sigma)]`` taken over both
    distributions, with ``k = DEFAULTS.l2_tail_sigmas`` unless overridden.
    """
    k = DEFAULTS.l2_tail_sigmas if tail_sigmas is None else tail_sigmas
    left = min(dist_x.mean - k * dist_x.std, dist_y.mean - k * dist_y.std)
    right = max(dist_x.mean + k * dist_x.std, dist_y.mean + k * dist_y.std)
    return continuous_l2_distance(dist_x, dist_y, (left, right))


__all__ = [
    "discrete_l2_distance",
    "continuous_l2_distance",
    "normal_l2_distance",
]
