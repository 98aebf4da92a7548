"""
Repeated-Trial Studies
======================

Monte-Carlo studies of estimator and test fidelity. Each study returns
``(x, y)`` curves ready to be averaged across trials and handed to any
plotting collaborator.

Notes
-----
- Every trial receives its own :class:`numpy.random.Generator` spawned from a
  single :class:`numpy.random.SeedSequence`; the same ``seed`` reproduces the
  same curves whether trials run sequentially or on an executor.
- Trials share no state, so any :class:`concurrent.futures.Executor` can run
  them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from math import fsum, sqrt
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.distributions.metrics import discrete_l2_distance
from pysatl_inference.distributions.sampling import (
    continuous_sample,
    discrete_sample,
    resolve_rng,
)
from pysatl_inference.errors import DegenerateParameterError, DimensionMismatchError
from pysatl_inference.families.builtins.continuous.normal import NormalDistribution
from pysatl_inference.families.builtins.continuous.power_law import PowerLawDistribution
from pysatl_inference.stats.binomial import binomial_distinction_test, estimate_binomial
from pysatl_inference.stats.decision import decision_entropy
from pysatl_inference.stats.empirical import empirical_central_moment
from pysatl_inference.stats.goodness_of_fit import ks_distance

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from concurrent.futures import Executor

    from pysatl_inference.distributions.distribution import ContinuousDistribution
    from pysatl_inference.distributions.sampling import RandomSource
    from pysatl_inference.types import Curve

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistinctionCurves:
    """
    Curves recorded while telling a normal model from a power-law model.

    Every curve is indexed by the number of samples seen so far.

    Attributes
    ----------
    normal_ks : Curve
        KS distance of the fitted normal distribution.
    power_law_ks : Curve
        KS distance of the fitted power law.
    std_dev : Curve
        Sample standard deviation.
    decision_entropy : Curve
        Entropy (bits) of the model-selection beliefs.
    """

    normal_ks: Curve
    power_law_ks: Curve
    std_dev: Curve
    decision_entropy: Curve


R = TypeVar("R")


def run_trials(
    trial: Callable[[np.random.Generator], R],
    n_trials: int,
    *,
    seed: int | np.random.SeedSequence | None = None,
    executor: Executor | None = None,
) -> list[R]:
    """
    Run independent trials, each with its own random generator.

    Parameters
    ----------
    trial : Callable[[numpy.random.Generator], R]
        One trial of a study.
    n_trials : int
        Number of trials.
    seed : int or numpy.random.SeedSequence, optional
        Root seed; ``None`` draws fresh entropy.
    executor : concurrent.futures.Executor, optional
        Executor to fan the trials out on. Trials run sequentially when
        omitted.

    Returns
    -------
    list
        Trial results in trial order.
    """
    if n_trials < 1:
        raise DegenerateParameterError(f"Number of trials must be positive, got {n_trials}.")

    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    generators = [np.random.default_rng(child) for child in root.spawn(n_trials)]

    logger.debug("Running %d trials (executor=%s)", n_trials, type(executor).__name__)
    if executor is None:
        results = [trial(rng) for rng in generators]
    else:
        results = list(executor.map(trial, generators))
    logger.debug("Finished %d trials", len(results))
    return results


def average_curves(curves: Sequence[Curve]) -> Curve:
    """
    Point-wise average of equally long curves.

    Both coordinates are averaged, so curves sampled at identical ``x``
    values keep them.

    Raises
    ------
    DimensionMismatchError
        If no curve is given or the curves differ in length.
    """
    if not curves:
        raise DimensionMismatchError("At least one curve is required for averaging.")
    length = len(curves[0])
    if any(len(curve) != length for curve in curves):
        raise DimensionMismatchError("Averaged curves must all have the same length.")

    logger.debug("Averaging %d curves of %d points", len(curves), length)
    n = len(curves)
    return [
        (fsum(curve[i][0] for curve in curves) / n, fsum(curve[i][1] for curve in curves) / n)
        for i in range(length)
    ]


def ks_fidelity_curve(
    dist: ContinuousDistribution,
    batch_size: int,
    n_batches: int,
    rng: RandomSource | None = None,
) -> Curve:
    """
    KS distance of a distribution against its own growing sample.

    After every batch of ``batch_size`` new samples one point
    ``(number of samples, ks_distance)`` is recorded.
    """
    if batch_size < 1 or n_batches < 1:
        raise DegenerateParameterError("batch_size and n_batches must be positive.")

    source = resolve_rng(rng)
    batches: list[np.ndarray] = []
    curve: Curve = []
    for _ in range(n_batches):
        batches.append(continuous_sample(batch_size, dist, source))
        samples = np.concatenate(batches)
        curve.append((float(samples.size), ks_distance(dist, samples)))
    return curve


def binomial_estimation_fidelity(
    p: float,
    sample_sizes: Iterable[int],
    rng: RandomSource | None = None,
) -> Curve:
    """
    L2 distance between a Bernoulli distribution and its estimate.

    For every sample size a fresh sample is drawn and fitted with
    :func:`~pysatl_inference.stats.binomial.estimate_binomial`.
    """
    source = resolve_rng(rng)
    dist = DiscreteDistribution.binomial(p)
    curve: Curve = []
    for n in sample_sizes:
        estimate = estimate_binomial(discrete_sample(n, dist, source))
        curve.append((float(n), discrete_l2_distance(dist, estimate)))
    return curve


def binomial_distinction_curve(
    test_p: float,
    sample_p: float,
    sample_sizes: Iterable[int],
    rng: RandomSource | None = None,
) -> Curve:
    """
    Outcome of the Wilson distinction test as the sample grows.

    Samples are drawn from ``binomial(sample_p)`` and tested against
    ``binomial(test_p)``; ``y`` is ``1.0`` when the test accepts and ``0.0``
    when it rejects. Averaging many such curves gives the acceptance rate.
    """
    source = resolve_rng(rng)
    test_dist = DiscreteDistribution.binomial(test_p)
    sample_dist = DiscreteDistribution.binomial(sample_p)
    curve: Curve = []
    for n in sample_sizes:
        samples = discrete_sample(n, sample_dist, source)
        accepted = binomial_distinction_test(test_dist, samples)
        curve.append((float(n), 1.0 if accepted else 0.0))
    return curve


def model_distinction_curves(
    sample_dist: ContinuousDistribution,
    n_start: int = 20,
    n_end: int = 200,
    rng: RandomSource | None = None,
) -> DistinctionCurves:
    """
    Fit a normal and a power-law model to a growing sample.

    Starting from ``n_start`` samples, one sample is added at a time until
    ``n_end`` samples are collected. At every step both models are
    re-estimated and their KS distances, the sample standard deviation and
    the decision entropy of the two distances are recorded.

    Parameters
    ----------
    sample_dist : ContinuousDistribution
        Source of strictly positive samples (required by the power-law fit).
    n_start : int, default 20
        Initial sample size, at least 2.
    n_end : int, default 200
        Final sample size.
    rng : RandomSource, optional
        Randomness source.
    """
    if not 2 <= n_start <= n_end:
        raise DegenerateParameterError(
            f"Expected 2 <= n_start <= n_end, got n_start={n_start}, n_end={n_end}."
        )

    source = resolve_rng(rng)
    samples = continuous_sample(n_start, sample_dist, source).tolist()

    normal_ks: Curve = []
    power_law_ks: Curve = []
    std_dev: Curve = []
    entropy_curve: Curve = []
    while True:
        x = float(len(samples))
        normal_distance = ks_distance(NormalDistribution.estimate(samples), samples)
        power_law_distance = ks_distance(PowerLawDistribution.estimate(samples), samples)

        normal_ks.append((x, normal_distance))
        power_law_ks.append((x, power_law_distance))
        std_dev.append((x, sqrt(empirical_central_moment(2, samples))))
        entropy_curve.append((x, decision_entropy([normal_distance, power_law_distance]).value))

        if len(samples) >= n_end:
            break
        samples.append(sample_dist.sample(source))

    return DistinctionCurves(
        normal_ks=normal_ks,
        power_law_ks=power_law_ks,
        std_dev=std_dev,
        decision_entropy=entropy_curve,
    )


__all__ = [
    "DistinctionCurves",
    "run_trials",
    "average_curves",
    "ks_fidelity_curve",
    "binomial_estimation_fidelity",
    "binomial_distinction_curve",
    "model_distinction_curves",
]
