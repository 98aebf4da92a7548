"""
Kolmogorov-Smirnov Goodness of Fit
==================================

Empirical distribution functions and a grid approximation of the
Kolmogorov-Smirnov statistic between a sample and a continuous distribution.

Notes
-----
- The distance is evaluated on ``num_steps - 1`` interior points of a uniform
  grid spanning ``[min(samples), max(samples)]``, not at the sample jumps, so
  it approximates the exact statistic from below up to the grid resolution.
- Validation outcomes are booleans; a failed validation never raises.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_inference.config import DEFAULTS
from pysatl_inference.errors import DegenerateParameterError
from pysatl_inference.types import FloatArray

if TYPE_CHECKING:
    from pysatl_inference.distributions.distribution import ContinuousDistribution
    from pysatl_inference.types import Number, NumericArray, SampleSequence


@dataclass(frozen=True, slots=True, eq=False)
class EmpiricalCDF:
    """
    Right-continuous step function of a sample.

    Parameters
    ----------
    points : FloatArray
        Sorted unique sample values.
    values : FloatArray
        Fraction of samples ``<= points[i]``; the last value is 1.
    """

    points: FloatArray
    values: FloatArray

    @overload
    def __call__(self, x: Number) -> float: ...
    @overload
    def __call__(self, x: NumericArray) -> FloatArray: ...

    def __call__(self, x: Number | NumericArray) -> float | FloatArray:
        arr = np.asarray(x, dtype=np.float64)
        idx = np.searchsorted(self.points, arr, side="right")
        result = np.where(idx > 0, self.values[np.maximum(idx - 1, 0)], 0.0)

        if np.ndim(arr) == 0:
            return float(result)
        return cast(FloatArray, result)

    def __len__(self) -> int:
        return int(self.points.size)


def ks_empirical_cdf(samples: SampleSequence) -> EmpiricalCDF:
    """
    Empirical distribution function of a sample.

    Raises
    ------
    DegenerateParameterError
        If ``samples`` is empty.

    Examples
    --------
    >>> ecdf = ks_empirical_cdf([3.0, 1.0, 2.0, 2.0])
    >>> ecdf.points.tolist(), ecdf.values.tolist()
    ([1.0, 2.0, 3.0], [0.25, 0.75, 1.0])
    """
    arr = np.asarray(samples, dtype=np.float64).ravel()
    if arr.size == 0:
        raise DegenerateParameterError("Empirical cdf requires at least one sample.")
    points, counts = np.unique(arr, return_counts=True)
    values = np.cumsum(counts) / arr.size
    return EmpiricalCDF(points=points, values=values)


def ks_distance(
    dist: ContinuousDistribution,
    samples: SampleSequence,
    *,
    num_steps: int | None = None,
) -> float:
    """
    Grid approximation of the Kolmogorov-Smirnov distance.

    Parameters
    ----------
    dist : ContinuousDistribution
        Reference distribution; its ``cdf`` must accept arrays.
    samples : SampleSequence
        Observed sample.
    num_steps : int, optional
        Grid resolution, defaults to ``DEFAULTS.ks_grid_steps``.

    Returns
    -------
    float
        ``max |F_emp(x) - F_dist(x)|`` over the grid.
    """
    steps = DEFAULTS.ks_grid_steps if num_steps is None else num_steps
    if steps < 2:
        raise DegenerateParameterError(f"KS grid needs at least two steps, got {steps}.")

    ecdf = ks_empirical_cdf(samples)
    low, high = float(ecdf.points[0]), float(ecdf.points[-1])
    grid = low + (high - low) / steps * np.arange(1, steps, dtype=np.float64)
    return float(np.max(np.abs(np.asarray(dist.cdf(grid)) - ecdf(grid))))


def ks_validate(
    dist: ContinuousDistribution,
    samples: SampleSequence,
    *,
    threshold: float | None = None,
    num_steps: int | None = None,
) -> bool:
    """``True`` iff ``ks_distance(dist, samples)`` is below ``threshold`` (0.05)."""
    limit = DEFAULTS.ks_threshold if threshold is None else threshold
    return ks_distance(dist, samples, num_steps=num_steps) < limit


__all__ = [
    "EmpiricalCDF",
    "ks_empirical_cdf",
    "ks_distance",
    "ks_validate",
]
