"""
Model-selection beliefs from estimation errors.

Lower estimation error means higher belief: errors are mapped to
pseudo-likelihoods ``1 / (error + epsilon)`` and normalised with a softmax.
The entropy of the resulting beliefs measures how undecided the selection is
(0 bits for a clear winner, ``log2(k)`` bits for ``k`` equal candidates).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import special as _sp_special

from pysatl_inference.config import DEFAULTS
from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.errors import DegenerateParameterError
from pysatl_inference.information.metrics import entropy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_inference.information.units import InformationUnit
    from pysatl_inference.types import FloatArray


def softmax(x: Sequence[float] | FloatArray) -> FloatArray:
    """
    Numerically stable softmax.

    The maximum is subtracted before exponentiation, so large inputs never
    overflow.

    Raises
    ------
    DegenerateParameterError
        If ``x`` is empty.
    """
    arr = np.asarray(x, dtype=np.float64)
    if arr.size == 0:
        raise DegenerateParameterError("softmax of an empty vector is undefined.")
    return cast("FloatArray", _sp_special.softmax(arr))


def decision_beliefs(
    errors: Sequence[float] | FloatArray, epsilon: float | None = None
) -> DiscreteDistribution[int]:
    """Beliefs ``softmax(1 / (errors + epsilon))`` as a multinomial distribution."""
    eps = DEFAULTS.decision_epsilon if epsilon is None else epsilon
    arr = np.asarray(errors, dtype=np.float64)
    if np.any(arr < 0.0):
        raise DegenerateParameterError("Estimation errors must be non-negative.")
    return DiscreteDistribution.multinomial(softmax(1.0 / (arr + eps)).tolist())


def decision_entropy(
    errors: Sequence[float] | FloatArray, epsilon: float | None = None
) -> InformationUnit:
    """
    Entropy (bits) of the model-selection beliefs.

    Parameters
    ----------
    errors : Sequence[float]
        Non-negative estimation error of each candidate model.
    epsilon : float, optional
        Regulariser, defaults to ``DEFAULTS.decision_epsilon``.
    """
    return entropy(decision_beliefs(errors, epsilon))


__all__ = [
    "softmax",
    "decision_beliefs",
    "decision_entropy",
]
