from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import fsum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_inference.distributions.discrete import DiscreteDistribution
    from pysatl_inference.types import Number


def moment(n: int, dist: DiscreteDistribution[Number]) -> float:
    """``n``-th raw moment ``E[X**n]`` of a numeric discrete distribution."""
    return fsum(float(x) ** n * p for x, p in dist)


def central_moment(n: int, dist: DiscreteDistribution[Number]) -> float:
    """``n``-th central moment ``E[(X - E[X])**n]`` of a numeric discrete distribution."""
    mean = moment(1, dist)
    return fsum((float(x) - mean) ** n * p for x, p in dist)


def mean(dist: DiscreteDistribution[Number]) -> float:
    return moment(1, dist)


def variance(dist: DiscreteDistribution[Number]) -> float:
    return central_moment(2, dist)


__all__ = [
    "moment",
    "central_moment",
    "mean",
    "variance",
]
