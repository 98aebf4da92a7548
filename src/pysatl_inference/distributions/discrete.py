"""
Discrete Distributions
======================

This module defines :class:`DiscreteDistribution`, an immutable table of
outcomes paired index-for-index with probabilities, together with its named
constructors (multinomial, binomial, empirical).

Notes
-----
- Invariants are checked once, at construction; the value is never mutated
  afterwards. Derived distributions (convolutions, joints, averages) are new
  values.
- Outcomes need not be unique. :meth:`DiscreteDistribution.pmf` reports the
  probability of the first matching outcome.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from collections import Counter
from dataclasses import dataclass
from math import comb, fsum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pysatl_inference.config import DEFAULTS
from pysatl_inference.distributions.sampling import resolve_rng
from pysatl_inference.distributions.support import ExplicitTableDiscreteSupport
from pysatl_inference.errors import (
    DegenerateParameterError,
    DimensionMismatchError,
    DuplicateOutcomeError,
    InvalidProbabilityError,
)
from pysatl_inference.types import Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from pysatl_inference.distributions.sampling import RandomSource


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiscreteDistribution(Generic[T]):
    """
    Validated discrete probability distribution.

    Parameters
    ----------
    outcomes : Sequence[T]
        Ordered outcomes.
    probabilities : Sequence[float]
        Probabilities paired index-for-index with ``outcomes``.

    Raises
    ------
    DimensionMismatchError
        If the two sequences differ in length.
    InvalidProbabilityError
        If a probability is below ``-tolerance`` or the total differs from 1
        by ``tolerance`` or more (``tolerance = 1e-10``).

    Examples
    --------
    >>> d = DiscreteDistribution(["a", "b", "c"], [0.1, 0.2, 0.7])
    >>> d.pmf("b")
    0.2
    >>> d.pmf("d")
    0.0
    """

    outcomes: tuple[T, ...]
    probabilities: tuple[float, ...]

    def __init__(self, outcomes: Iterable[T], probabilities: Iterable[float]) -> None:
        outcomes = tuple(outcomes)
        probabilities = tuple(float(p) for p in probabilities)
        _validate(outcomes, probabilities)
        object.__setattr__(self, "outcomes", outcomes)
        object.__setattr__(self, "probabilities", probabilities)

    @property
    def kind(self) -> Kind:
        return Kind.DISCRETE

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        """
        Sorted set of distinct outcomes.

        Only defined for numeric outcomes.
        """
        return ExplicitTableDiscreteSupport(self.outcomes)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[tuple[T, float]]:
        """Iterate over ``(outcome, probability)`` pairs."""
        return zip(self.outcomes, self.probabilities)

    def pmf(self, x: T) -> float:
        """
        Probability mass at ``x``.

        Returns the probability of the first matching outcome, or ``0.0`` if
        ``x`` is not an outcome.
        """
        for outcome, p in zip(self.outcomes, self.probabilities):
            if outcome == x:
                return p
        return 0.0

    def measure(self, subset: Sequence[T]) -> float:
        """
        Total probability of a set of outcomes.

        Parameters
        ----------
        subset : Sequence[T]
            Pairwise-distinct outcomes. Outcomes absent from the
            distribution contribute zero.

        Raises
        ------
        DuplicateOutcomeError
            If ``subset`` contains repeated outcomes.
        """
        if len(set(subset)) != len(subset):
            raise DuplicateOutcomeError("Measured subset must not contain duplicate outcomes.")
        return fsum(self.pmf(x) for x in subset)

    def sample(self, rng: RandomSource | None = None) -> T:
        """
        Draw one outcome.

        A uniform ``u`` in ``[0, 1)`` is reduced by successive probabilities
        until it drops to zero or below; zero-probability outcomes are never
        returned.
        """
        u = float(resolve_rng(rng).random())
        last_positive = None
        for i, p in enumerate(self.probabilities):
            if p <= 0.0:
                continue
            last_positive = i
            u -= p
            if u <= 0.0:
                return self.outcomes[i]

        # Rounding left a residue past the final positive outcome.
        warnings.warn(
            f"Sampling walked past the last outcome with residue {u:.3e}; "
            "returning the last outcome with positive probability.",
            RuntimeWarning,
            stacklevel=2,
        )
        assert last_positive is not None
        return self.outcomes[last_positive]

    @classmethod
    def multinomial(cls, probabilities: Sequence[float]) -> DiscreteDistribution[int]:
        """
        Distribution over the integers ``0 … len(probabilities) - 1``.
        """
        return DiscreteDistribution(range(len(probabilities)), probabilities)

    @classmethod
    def binomial(cls, p: float, n: int = 1) -> DiscreteDistribution[int]:
        """
        Binomial distribution of ``n`` trials with success probability ``p``.

        Parameters
        ----------
        p : float
            Success probability in ``[0, 1]``.
        n : int, default 1
            Number of trials, ``1 <= n <= 12``. With ``n = 1`` the result is
            the two-outcome distribution ``multinomial([1 - p, p])``.

        Raises
        ------
        DegenerateParameterError
            If ``p`` is outside ``[0, 1]`` or ``n`` is outside ``[1, 12]``.

        Notes
        -----
        The trial count is capped because the coefficients are built by
        direct combinatorial weighting; use
        :func:`~pysatl_inference.distributions.convolution.convoluted_binomial`
        for larger ``n``.
        """
        if not 0.0 <= p <= 1.0:
            raise DegenerateParameterError(f"p must lie in [0, 1], got {p}.")
        if n < 1:
            raise DegenerateParameterError(f"n must be positive, got {n}.")
        if n > DEFAULTS.max_binomial_trials:
            raise DegenerateParameterError(
                f"n must not exceed {DEFAULTS.max_binomial_trials}, got {n}."
            )
        if n == 1:
            return cls.multinomial([1.0 - p, p])

        probabilities = [comb(n, k) * p**k * (1.0 - p) ** (n - k) for k in range(n + 1)]
        return DiscreteDistribution(range(n + 1), probabilities)

    @classmethod
    def from_samples(cls, samples: Iterable[Any]) -> DiscreteDistribution[Any]:
        """
        Empirical (maximum-likelihood) distribution of observed samples.

        Outcomes are the distinct sample values in sorted order; each
        probability is the relative frequency of its outcome.

        Raises
        ------
        DegenerateParameterError
            If ``samples`` is empty.
        """
        counts = Counter(samples)
        total = sum(counts.values())
        if total == 0:
            raise DegenerateParameterError("Empirical distribution requires at least one sample.")
        outcomes = sorted(counts)
        return DiscreteDistribution(outcomes, [counts[x] / total for x in outcomes])


def _validate(outcomes: tuple[Any, ...], probabilities: tuple[float, ...]) -> None:
    tolerance = DEFAULTS.probability_tolerance
    if len(outcomes) != len(probabilities):
        raise DimensionMismatchError(
            f"outcomes and probabilities must have the same length, "
            f"got {len(outcomes)} and {len(probabilities)}."
        )
    if any(not p >= -tolerance for p in probabilities):
        raise InvalidProbabilityError("probabilities must be non-negative.")
    total = fsum(probabilities)
    if not abs(total - 1.0) < tolerance:
        raise InvalidProbabilityError(f"probabilities must sum to 1, got {total!r}.")


__all__ = [
    "DiscreteDistribution",
]
