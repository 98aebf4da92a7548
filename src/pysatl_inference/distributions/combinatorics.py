"""
Sequence Combinator
===================

Cartesian products of ordered sequences via mixed-radix enumeration, and the
joint distribution of independent discrete distributions built on top of it.

Index ``i`` of a product over sequences of sizes ``n_0, …, n_{k-1}`` maps to
the tuple ``(v_0[i_0], …, v_{k-1}[i_{k-1}])`` where ``f_0 = 1``,
``f_j = f_{j-1} * n_{j-1}`` and ``i_j = (i // f_j) % n_j``. The first sequence
therefore varies fastest.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import prod
from typing import TYPE_CHECKING, Any, TypeVar

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import DimensionMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _floors(sizes: Sequence[int]) -> list[int]:
    floors = [1]
    for size in sizes[:-1]:
        floors.append(floors[-1] * size)
    return floors


def mixed_radix_digits(index: int, sizes: Sequence[int]) -> tuple[int, ...]:
    """
    Decompose a linear product index into per-dimension indices.

    Parameters
    ----------
    index : int
        Linear index in ``[0, prod(sizes))``.
    sizes : Sequence[int]
        Sizes of the multiplied sequences.

    Returns
    -------
    tuple[int, ...]
        Index into each sequence.

    Raises
    ------
    IndexError
        If ``index`` is outside the product.
    """
    total = prod(sizes)
    if not 0 <= index < total:
        raise IndexError(f"Index {index} out of range for a product of size {total}.")
    return tuple((index // floor) % size for floor, size in zip(_floors(sizes), sizes))


T = TypeVar("T")


def cartesian_product(sequences: Sequence[Sequence[T]]) -> list[tuple[T, ...]]:
    """
    Cartesian product of ordered sequences in mixed-radix order.

    Parameters
    ----------
    sequences : Sequence[Sequence[T]]
        Ordered sequences to multiply.

    Returns
    -------
    list[tuple[T, ...]]
        ``prod(len(s) for s in sequences)`` tuples.

    Examples
    --------
    >>> cartesian_product([[1, 2], [4, 5]])
    [(1, 4), (2, 4), (1, 5), (2, 5)]
    """
    sizes = [len(seq) for seq in sequences]
    if not sizes:
        return [()]

    floors = _floors(sizes)
    product: list[tuple[T, ...]] = []
    for i in range(prod(sizes)):
        product.append(
            tuple(seq[(i // floor) % size] for seq, floor, size in zip(sequences, floors, sizes))
        )
    return product


def joint_distribution(
    *distributions: DiscreteDistribution[Any],
) -> DiscreteDistribution[tuple[Any, ...]]:
    """
    Joint distribution of independent discrete distributions.

    Outcomes and probabilities go through the same :func:`cartesian_product`,
    so the joint outcome at index ``i`` pairs with the product of the
    probability tuple at index ``i``.

    Parameters
    ----------
    *distributions : DiscreteDistribution
        At least one distribution.

    Returns
    -------
    DiscreteDistribution[tuple]
        Distribution over outcome tuples.

    Raises
    ------
    DimensionMismatchError
        If no distribution is given.
    """
    if not distributions:
        raise DimensionMismatchError("Joint distribution requires at least one distribution.")

    outcomes = cartesian_product([dist.outcomes for dist in distributions])
    probability_tuples = cartesian_product([dist.probabilities for dist in distributions])
    probabilities = [prod(probs) for probs in probability_tuples]
    return DiscreteDistribution(outcomes, probabilities)


__all__ = [
    "mixed_radix_digits",
    "cartesian_product",
    "joint_distribution",
]
