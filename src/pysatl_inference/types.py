"""
Core Type Definitions
=====================

Fundamental types and aliases shared by the distribution, information and
statistics subpackages.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays (samples, grids)."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

Outcome: TypeAlias = Hashable
"""Type alias for outcomes of discrete distributions used as dictionary keys."""

Point: TypeAlias = tuple[float, float]
"""Type alias for an ``(x, y)`` pair of a curve."""

Curve: TypeAlias = list[Point]
"""Type alias for an ordered sequence of ``(x, y)`` pairs."""

SampleSequence: TypeAlias = Sequence[float] | FloatArray
"""Type alias for one-dimensional real-valued samples."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class ContinuousSupportShape1D(Enum):
    """
    Enumeration of 1D continuous support shapes.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Right-bounded ray (-∞, b] or (-∞, b).
    RAY_RIGHT
        Left-bounded ray [a, ∞) or (a, ∞).
    BOUNDED_INTERVAL
        Bounded interval [a, b], (a, b], [a, b), or (a, b).
    EMPTY
        Empty support.
    SINGLE_POINT
        Single point {a}.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Used both as the domain of a continuous distribution and as the range of
    its density.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def as_tuple(self) -> tuple[float, float]:
        """Return the ``(left, right)`` endpoints."""
        return self.left, self.right

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """
        Get the topological shape of the interval.

        Returns
        -------
        ContinuousSupportShape1D
            Classification of the interval's shape.
        """
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY

        if self.left == self.right and self.left_closed and self.right_closed:
            return ContinuousSupportShape1D.SINGLE_POINT

        if self.left == -inf and self.right == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.left == -inf and self.right < inf:
            return ContinuousSupportShape1D.RAY_LEFT
        if self.left > -inf and self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


class FamilyName(StrEnum):
    NORMAL = "Normal"
    POWER_LAW = "PowerLaw"


__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "Outcome",
    "Point",
    "Curve",
    "SampleSequence",
    "ScalarFunc",
    "ContinuousSupportShape1D",
    "Interval1D",
    "FamilyName",
]
