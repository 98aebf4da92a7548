"""
Sampling Interfaces
===================

This module defines the randomness-source protocol threaded into every
``sample`` call, and the convenience producers that draw ``n`` independent
values from a distribution.

Notes
-----
- A :class:`numpy.random.Generator` satisfies :class:`RandomSource`.
- Passing ``rng=None`` anywhere in the package means "use a fresh
  ``numpy.random.default_rng()``"; pass a seeded generator for reproducible
  draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

import numpy as np

from pysatl_inference.errors import DegenerateParameterError

if TYPE_CHECKING:
    from pysatl_inference.types import FloatArray


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for injected randomness.

    Methods
    -------
    random()
        Uniform variate in ``[0, 1)``.
    standard_normal()
        Standard normal variate.
    """

    def random(self) -> float: ...
    def standard_normal(self) -> float: ...


T = TypeVar("T")


class DiscreteSampleable(Protocol[T]):
    def sample(self, rng: RandomSource | None = None) -> T: ...


class ContinuousSampleable(Protocol):
    def sample(self, rng: RandomSource | None = None) -> float: ...


def resolve_rng(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` or a freshly seeded default generator."""
    return np.random.default_rng() if rng is None else rng


def _check_count(n: int) -> None:
    if n < 0:
        raise DegenerateParameterError(f"Number of samples must be non-negative, got {n}.")


def discrete_sample(
    n: int, dist: DiscreteSampleable[T], rng: RandomSource | None = None
) -> list[T]:
    """
    Draw ``n`` independent outcomes from a discrete distribution.

    Parameters
    ----------
    n : int
        Number of draws.
    dist : DiscreteSampleable
        Distribution exposing ``sample(rng)``.
    rng : RandomSource, optional
        Randomness source shared by all draws.

    Returns
    -------
    list
        The drawn outcomes in draw order.
    """
    _check_count(n)
    source = resolve_rng(rng)
    return [dist.sample(source) for _ in range(n)]


def continuous_sample(
    n: int, dist: ContinuousSampleable, rng: RandomSource | None = None
) -> FloatArray:
    """
    Draw ``n`` independent values from a continuous distribution.

    Returns
    -------
    numpy.ndarray
        1D float array of shape ``(n,)``.
    """
    _check_count(n)
    source = resolve_rng(rng)
    return np.fromiter((dist.sample(source) for _ in range(n)), dtype=np.float64, count=n)


__all__ = [
    "RandomSource",
    "DiscreteSampleable",
    "ContinuousSampleable",
    "resolve_rng",
    "discrete_sample",
    "continuous_sample",
]
