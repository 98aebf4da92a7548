"""
Fixed-grid numerical integration of densities.

Continuous characteristics without a closed form (the normal ``measure`` and
``cdf``, the L2 distance between densities) are integrated on a uniform grid
with a fixed number of composite Simpson steps. The result is deterministic:
the same bounds always give the same value, independent of any adaptive
error control.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import ceil, isfinite
from typing import TYPE_CHECKING

import numpy as np
from scipy import integrate as _sp_integrate

from pysatl_inference.config import DEFAULTS
from pysatl_inference.errors import DegenerateParameterError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_inference.types import FloatArray


def simpson_grid(left: float, right: float, steps: int | None = None) -> FloatArray:
    """
    Uniform integration grid of ``steps + 1`` nodes on ``[left, right]``.

    An odd ``steps`` is rounded up so the composite Simpson rule applies
    exactly.
    """
    n = DEFAULTS.integration_steps if steps is None else steps
    if n < 2:
        raise DegenerateParameterError(f"At least two integration steps are required, got {n}.")
    n += n % 2
    return np.linspace(left, right, n + 1)


def integrate_density(
    func: Callable[[FloatArray], FloatArray],
    left: float,
    right: float,
    *,
    steps: int | None = None,
) -> float:
    """
    Integrate a vectorized function over a finite interval.

    Parameters
    ----------
    func : Callable[[numpy.ndarray], numpy.ndarray]
        Function evaluated on the whole grid at once.
    left, right : float
        Finite bounds; ``left > right`` flips the sign of the result.
    steps : int, optional
        Number of Simpson steps, defaults to
        ``DEFAULTS.integration_steps``.

    Returns
    -------
    float
        Composite Simpson approximation of the integral.

    Raises
    ------
    DegenerateParameterError
        If a bound is not finite.
    """
    if not (isfinite(left) and isfinite(right)):
        raise DegenerateParameterError(
            f"Integration bounds must be finite, got ({left}, {right})."
        )
    if left == right:
        return 0.0

    grid = simpson_grid(left, right, steps)
    values = np.asarray(func(grid), dtype=np.float64)
    return float(_sp_integrate.simpson(values, x=grid))


def cumulative_integrate(
    func: Callable[[FloatArray], FloatArray],
    left: float,
    right: float,
    breakpoints: FloatArray,
    *,
    steps: int | None = None,
) -> FloatArray:
    """
    Integrals of ``func`` from ``left`` to each of ``breakpoints``.

    The window ``[left, right]`` is split at the sorted breakpoints and every
    piece is integrated with a number of Simpson steps proportional to its
    length, so the node spacing never exceeds that of a single
    ``steps``-step integration over the whole window.

    Parameters
    ----------
    func : Callable[[numpy.ndarray], numpy.ndarray]
        Vectorized integrand.
    left, right : float
        Finite window; breakpoints are clipped into it.
    breakpoints : numpy.ndarray
        Upper limits, in any order.
    steps : int, optional
        Step count of the whole window, defaults to
        ``DEFAULTS.integration_steps``.

    Returns
    -------
    numpy.ndarray
        Array shaped like ``breakpoints``.
    """
    n = DEFAULTS.integration_steps if steps is None else steps
    points = np.clip(np.asarray(breakpoints, dtype=np.float64), left, right)
    order = np.argsort(points, axis=None)
    flat = points.ravel()[order]

    spacing = (right - left) / n
    result = np.empty(flat.size, dtype=np.float64)
    total = 0.0
    previous = left
    for i, upper in enumerate(flat):
        if upper > previous:
            piece_steps = max(2, ceil((upper - previous) / spacing))
            total += integrate_density(func, previous, float(upper), steps=piece_steps)
            previous = float(upper)
        result[i] = total

    unsorted = np.empty_like(result)
    unsorted[order] = result
    return unsorted.reshape(points.shape)


__all__ = [
    "simpson_grid",
    "integrate_density",
    "cumulative_integrate",
]
