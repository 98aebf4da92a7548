"""
Error Taxonomy
==============

Typed exceptions raised when a caller-controlled parameter violates a
precondition. All of them derive from :class:`ValueError`, so code that
validates parameters by catching ``ValueError`` keeps working.

Statistical test outcomes (KS validation, binomial distinction) are plain
booleans and never raise.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(ValueError):
    """Base class for all precondition violations in this package."""


class DimensionMismatchError(DistributionError):
    """Paired sequences (outcomes/probabilities, curves) differ in length."""


class InvalidProbabilityError(DistributionError):
    """A probability is negative beyond tolerance or the total is not 1."""


class DegenerateParameterError(DistributionError):
    """A distribution or estimator parameter lies outside its admissible set."""


class DuplicateOutcomeError(DistributionError):
    """An outcome subset that must be pairwise distinct contains repeats."""


__all__ = [
    "DistributionError",
    "DimensionMismatchError",
    "InvalidProbabilityError",
    "DegenerateParameterError",
    "DuplicateOutcomeError",
]
