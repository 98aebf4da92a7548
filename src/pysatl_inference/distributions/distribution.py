"""
Continuous Distribution Interface
=================================

This module defines the :class:`ContinuousDistribution` protocol: the
capability set every univariate continuous distribution in the package
exposes. Consumers (goodness-of-fit, distances, studies) depend on this
protocol only, never on a concrete family.

Notes
-----
- ``pdf`` and ``cdf`` accept a scalar or an array and return the same shape.
- ``measure((a, b))`` is the probability of the interval ``[a, b]``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

if TYPE_CHECKING:
    from pysatl_inference.distributions.sampling import RandomSource
    from pysatl_inference.distributions.support import ContinuousSupport
    from pysatl_inference.types import FloatArray, Interval1D, Kind, Number, NumericArray


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Public interface of univariate continuous distributions."""

    @property
    def kind(self) -> Kind: ...

    @property
    def domain(self) -> ContinuousSupport: ...

    @property
    def range(self) -> Interval1D: ...

    @overload
    def pdf(self, x: Number) -> float: ...
    @overload
    def pdf(self, x: NumericArray) -> FloatArray: ...

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: NumericArray) -> FloatArray: ...

    def measure(self, interval: tuple[float, float]) -> float: ...

    def sample(self, rng: RandomSource | None = None) -> float: ...


__all__ = [
    "ContinuousDistribution",
]
