"""
Numerical Defaults
==================

Tolerances and fixed iteration counts used across the package.

Every operation that depends on one of these values accepts a keyword
override; the defaults below are used when the keyword is omitted.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NumericalDefaults:
    """
    Container for numerical defaults.

    Parameters
    ----------
    probability_tolerance : float
        Allowed negative noise of a single probability and allowed deviation
        of the probability total from 1.
    integration_steps : int
        Number of (even) Simpson steps used by fixed-grid integration.
    normal_tail_sigmas : float
        Infinite bounds of normal integrals are clipped to ``mean ± k·sigma``.
    l2_tail_sigmas : float
        Half-width (in sigmas) of the window used by the normal L2 distance.
    ks_grid_steps : int
        Number of grid points used to approximate the KS statistic.
    ks_threshold : float
        Distance below which a KS validation passes.
    wilson_z : float
        Normal quantile of the Wilson score interval (two-sided 95%).
    decision_epsilon : float
        Regulariser of the pseudo-likelihood ``1 / (error + epsilon)``.
    max_binomial_trials : int
        Largest ``n`` accepted by the combinatorial binomial constructor.
    """

    probability_tolerance: float = 1e-10
    integration_steps: int = 10_000
    normal_tail_sigmas: float = 12.0
    l2_tail_sigmas: float = 5.0
    ks_grid_steps: int = 1000
    ks_threshold: float = 0.05
    wilson_z: float = 1.96
    decision_epsilon: float = 1e-10
    max_binomial_trials: int = 12


DEFAULTS = NumericalDefaults()
"""Package-wide numerical defaults."""


__all__ = [
    "NumericalDefaults",
    "DEFAULTS",
]
