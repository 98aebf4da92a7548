"""
Empirical moments and correlation of real-valued samples.

All moments use the biased ``1/n`` normalisation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_inference.errors import DegenerateParameterError, DimensionMismatchError

if TYPE_CHECKING:
    from pysatl_inference.types import FloatArray, SampleSequence


def _as_samples(samples: SampleSequence) -> FloatArray:
    arr = np.asarray(samples, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise DegenerateParameterError("Expected a non-empty one-dimensional sample.")
    return arr


def empirical_moment(n: int, samples: SampleSequence) -> float:
    """``n``-th raw sample moment ``mean(x**n)``."""
    return float(np.mean(_as_samples(samples) ** n))


def empirical_central_moment(n: int, samples: SampleSequence) -> float:
    """``n``-th central sample moment ``mean((x - mean(x))**n)``."""
    arr = _as_samples(samples)
    return float(np.mean((arr - arr.mean()) ** n))


def empirical_standardized_moment(n: int, samples: SampleSequence) -> float:
    """
    ``n``-th standardized sample moment.

    The central moment divided by ``std**n``; ``n = 3`` gives the skewness
    and ``n = 4`` the (raw) kurtosis.

    Raises
    ------
    DegenerateParameterError
        If all samples are equal.
    """
    arr = _as_samples(samples)
    std = float(arr.std())
    if std == 0.0:
        raise DegenerateParameterError("Standardized moment of a constant sample is undefined.")
    return float(np.mean((arr - arr.mean()) ** n)) / std**n


def empirical_covariance(xs: SampleSequence, ys: SampleSequence) -> float:
    """
    Biased sample covariance of paired observations.

    Raises
    ------
    DimensionMismatchError
        If ``xs`` and ``ys`` differ in length.
    """
    x = _as_samples(xs)
    y = _as_samples(ys)
    if x.size != y.size:
        raise DimensionMismatchError(
            f"Paired samples must have the same length, got {x.size} and {y.size}."
        )
    return float(np.mean((x - x.mean()) * (y - y.mean())))


def pearson_correlation(xs: SampleSequence, ys: SampleSequence) -> float:
    """
    Pearson correlation coefficient of paired observations.

    Raises
    ------
    DegenerateParameterError
        If either sample is constant.
    """
    x = _as_samples(xs)
    y = _as_samples(ys)
    covariance = empirical_covariance(x, y)
    scale = float(x.std() * y.std())
    if scale == 0.0:
        raise DegenerateParameterError("Correlation with a constant sample is undefined.")
    return covariance / scale


__all__ = [
    "empirical_moment",
    "empirical_central_moment",
    "empirical_standardized_moment",
    "empirical_covariance",
    "pearson_correlation",
]
