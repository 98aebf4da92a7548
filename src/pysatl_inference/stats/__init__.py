"""
Statistics subpackage

Empirical estimation and testing on samples:

- empirical moments and correlation (:mod:`.empirical`);
- Kolmogorov-Smirnov goodness of fit (:mod:`.goodness_of_fit`);
- Bernoulli estimation and the Wilson distinction test (:mod:`.binomial`);
- softmax decision entropy (:mod:`.decision`);
- repeated-trial fidelity studies (:mod:`.studies`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binomial import binomial_distinction_test, estimate_binomial, wilson_score_interval
from .decision import decision_beliefs, decision_entropy, softmax
from .empirical import (
    empirical_central_moment,
    empirical_covariance,
    empirical_moment,
    empirical_standardized_moment,
    pearson_correlation,
)
from .goodness_of_fit import EmpiricalCDF, ks_distance, ks_empirical_cdf, ks_validate
from .studies import (
    DistinctionCurves,
    average_curves,
    binomial_distinction_curve,
    binomial_estimation_fidelity,
    ks_fidelity_curve,
    model_distinction_curves,
    run_trials,
)

__all__ = [
    # empirical
    "empirical_moment",
    "empirical_central_moment",
    "empirical_standardized_moment",
    "empirical_covariance",
    "pearson_correlation",
    # goodness of fit
    "EmpiricalCDF",
    "ks_empirical_cdf",
    "ks_distance",
    "ks_validate",
    # binomial
    "estimate_binomial",
    "wilson_score_interval",
    "binomial_distinction_test",
    # decision
    "softmax",
    "decision_beliefs",
    "decision_entropy",
    # studies
    "DistinctionCurves",
    "run_trials",
    "average_curves",
    "ks_fidelity_curve",
    "binomial_estimation_fidelity",
    "binomial_distinction_curve",
    "model_distinction_curves",
]
