"""
Distributions subpackage

Value types and operators for probability distributions used by
PySATL Inference:

- discrete distribution value type (:mod:`.discrete`);
- cartesian products and joint distributions (:mod:`.combinatorics`);
- convolution of integer-valued distributions (:mod:`.convolution`);
- continuous distribution protocol (:mod:`.distribution`);
- moments and L2 distances (:mod:`.moments`, :mod:`.metrics`);
- randomness source and sample producers (:mod:`.sampling`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .combinatorics import cartesian_product, joint_distribution, mixed_radix_digits
from .convolution import (
    convoluted,
    convoluted_binomial,
    convoluted_multinomial,
    discrete_convolution,
)
from .discrete import DiscreteDistribution
from .distribution import ContinuousDistribution
from .integration import cumulative_integrate, integrate_density, simpson_grid
from .metrics import continuous_l2_distance, discrete_l2_distance, normal_l2_distance
from .moments import central_moment, mean, moment, variance
from .sampling import RandomSource, continuous_sample, discrete_sample
from .support import ContinuousSupport, ExplicitTableDiscreteSupport, Support

__all__ = [
    # value types
    "DiscreteDistribution",
    "ContinuousDistribution",
    # combinators
    "cartesian_product",
    "mixed_radix_digits",
    "joint_distribution",
    "discrete_convolution",
    "convoluted",
    "convoluted_binomial",
    "convoluted_multinomial",
    # moments and distances
    "moment",
    "central_moment",
    "mean",
    "variance",
    "discrete_l2_distance",
    "continuous_l2_distance",
    "normal_l2_distance",
    "integrate_density",
    "cumulative_integrate",
    "simpson_grid",
    # sampling
    "RandomSource",
    "discrete_sample",
    "continuous_sample",
    # supports
    "Support",
    "ContinuousSupport",
    "ExplicitTableDiscreteSupport",
]
