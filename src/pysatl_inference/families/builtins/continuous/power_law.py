"""
Shifted power-law (Pareto type) distribution implementation.

All characteristics are closed-form; sampling uses the inverse transform.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_inference.distributions.sampling import resolve_rng
from pysatl_inference.distributions.support import ContinuousSupport
from pysatl_inference.errors import DegenerateParameterError
from pysatl_inference.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_inference.types import FamilyName, FloatArray, Interval1D, Kind

if TYPE_CHECKING:
    from pysatl_inference.distributions.sampling import RandomSource
    from pysatl_inference.types import Number, NumericArray, SampleSequence


@parametrization(name="shiftExponentMin")
class PowerLawParameters(Parametrization):
    """
    Parametrization of the shifted power law.

    Parameters
    ----------
    shift : float
        Location of the pole of the density.
    exponent : float
        Tail exponent
    min_x : float
        Left end of the support
    """

    shift: float
    exponent: float
    min_x: float

    @constraint(description="1 < exponent < inf")
    def check_exponent(self) -> bool:
        return 1.0 < self.exponent < math.inf

    @constraint(description="shift < min_x")
    def check_shift_below_min(self) -> bool:
        return self.shift < self.min_x

    @constraint(description="shift and min_x are finite")
    def check_finite(self) -> bool:
        return math.isfinite(self.shift) and math.isfinite(self.min_x)


class PowerLawDistribution:
    """
    Power law shifted by ``shift`` and supported on ``[min_x, inf)``.

    Probability density function:
        f(x) = factor * (x - shift)**(-exponent),  x >= min_x
        factor = (exponent - 1) * (min_x - shift)**(exponent - 1)

    Parameters
    ----------
    shift : float
        Location of the pole, ``shift < min_x``.
    exponent : float
        Tail exponent, ``exponent > 1``.
    min_x : float
        Left end of the support.

    Raises
    ------
    DegenerateParameterError
        If ``exponent <= 1`` or ``shift >= min_x``.

    Examples
    --------
    >>> d = PowerLawDistribution(shift=0.0, exponent=2.0, min_x=1.0)
    >>> d.cdf(2.0)
    0.5
    """

    __slots__ = ("_parameters", "_factor")

    family = FamilyName.POWER_LAW

    def __init__(self, shift: float, exponent: float, min_x: float) -> None:
        parameters = cast(
            PowerLawParameters,
            PowerLawParameters(  # type: ignore[call-arg]
                shift=float(shift), exponent=float(exponent), min_x=float(min_x)
            ),
        )
        parameters.validate()
        self._parameters = parameters
        self._factor = (parameters.exponent - 1.0) * (parameters.min_x - parameters.shift) ** (
            parameters.exponent - 1.0
        )

    def __repr__(self) -> str:
        return (
            f"PowerLawDistribution(shift={self.shift!r}, exponent={self.exponent!r}, "
            f"min_x={self.min_x!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PowerLawDistribution):
            return NotImplemented
        return self._parameters == other._parameters

    def __hash__(self) -> int:
        return hash((self.family, self.shift, self.exponent, self.min_x))

    @property
    def parameters(self) -> PowerLawParameters:
        return self._parameters

    @property
    def shift(self) -> float:
        return self._parameters.shift

    @property
    def exponent(self) -> float:
        return self._parameters.exponent

    @property
    def min_x(self) -> float:
        return self._parameters.min_x

    @property
    def factor(self) -> float:
        """Normalising constant of the density."""
        return self._factor

    @property
    def kind(self) -> Kind:
        return Kind.CONTINUOUS

    @property
    def domain(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.min_x)

    @property
    def range(self) -> Interval1D:
        """Range of the density, ``[0, pdf(min_x)]``."""
        return Interval1D(0.0, self.pdf(self.min_x))

    @overload
    def pdf(self, x: Number) -> float: ...
    @overload
    def pdf(self, x: NumericArray) -> FloatArray: ...

    def pdf(self, x: Number | NumericArray) -> float | FloatArray:
        """Probability density, zero below ``min_x``."""
        arr = np.asarray(x, dtype=np.float64)
        # Clamp before the power so points below the pole stay finite.
        offset = np.maximum(arr, self.min_x) - self.shift
        result = np.where(arr >= self.min_x, self._factor * offset ** (-self.exponent), 0.0)

        if np.ndim(arr) == 0:
            return float(result)
        return cast(FloatArray, result)

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: NumericArray) -> FloatArray: ...

    def cdf(self, x: Number | NumericArray) -> float | FloatArray:
        """
        Cumulative distribution function.

        ``F(x) = 1 - ((x - shift) / (min_x - shift))**(1 - exponent)`` for
        ``x >= min_x`` and ``0`` below.
        """
        arr = np.asarray(x, dtype=np.float64)
        ratio = (np.maximum(arr, self.min_x) - self.shift) / (self.min_x - self.shift)
        result = np.where(arr >= self.min_x, 1.0 - ratio ** (1.0 - self.exponent), 0.0)

        if np.ndim(arr) == 0:
            return float(result)
        return cast(FloatArray, result)

    def measure(self, interval: tuple[float, float]) -> float:
        """
        Probability of the interval ``[a, b]``, ``cdf(b) - cdf(a)``.

        Raises
        ------
        DegenerateParameterError
            If ``a > b`` or a bound is NaN.
        """
        a, b = (float(v) for v in interval)
        if math.isnan(a) or math.isnan(b) or a > b:
            raise DegenerateParameterError(f"Invalid measure interval ({a}, {b}).")
        return max(self.cdf(b) - self.cdf(a), 0.0)

    def sample(self, rng: RandomSource | None = None) -> float:
        """Draw one value by inverting the cdf at a uniform variate."""
        u = float(resolve_rng(rng).random())
        return (self.min_x - self.shift) * (1.0 - u) ** (1.0 / (1.0 - self.exponent)) + self.shift

    @classmethod
    def estimate(cls, samples: SampleSequence) -> PowerLawDistribution:
        """
        Fit with the Hill estimator.

        ``min_x`` is the sample minimum, ``shift = min_x - 1`` and
        ``exponent = 1 + n / sum(log(x_i / min_x))``.

        Raises
        ------
        DegenerateParameterError
            If ``samples`` is empty, contains a non-positive value, or all
            samples are equal.
        """
        arr = np.asarray(samples, dtype=np.float64)
        if arr.size == 0:
            raise DegenerateParameterError("Power-law estimation requires at least one sample.")
        if np.any(arr <= 0.0):
            raise DegenerateParameterError("Power-law estimation requires positive samples.")

        min_x = float(arr.min())
        log_sum = float(np.sum(np.log(arr / min_x)))
        if log_sum <= 0.0:
            raise DegenerateParameterError(
                "Power-law estimation requires samples that are not all equal."
            )
        return cls(shift=min_x - 1.0, exponent=1.0 + arr.size / log_sum, min_x=min_x)


__all__ = [
    "PowerLawParameters",
    "PowerLawDistribution",
]
