from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_inference.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


class ExplicitTableDiscreteSupport(Support):
    """
    Finite sorted set of numeric support points.

    Built from the outcomes of a numeric discrete distribution; duplicates are
    collapsed.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number], assume_sorted: bool = False) -> None:
        arr = np.array(list(points))

        if arr.size == 0:
            raise ValueError("Points must be non-empty")

        if not assume_sorted:
            arr.sort()

        unique_mask = np.empty(arr.size, dtype=bool)
        unique_mask[0] = True
        unique_mask[1:] = arr[1:] != arr[:-1]

        self._points = arr[unique_mask]

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        idx = np.searchsorted(self._points, arr, side="left")

        size = self._points.size
        in_bounds = (idx >= 0) & (idx < size)

        idx_clipped = np.minimum(idx, size - 1)
        eq = self._points[idx_clipped] == arr

        result = in_bounds & eq

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return int(self._points.size)

    def iter_points(self) -> Iterator[Number]:
        return iter(self._points)

    def first(self) -> Number:
        return cast(Number, self._points[0])

    def last(self) -> Number:
        return cast(Number, self._points[-1])

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "ExplicitTableDiscreteSupport",
]
