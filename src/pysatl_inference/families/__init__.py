"""
Parametric families of continuous distributions.

This package provides the parametrization framework (parameters declared
with validated constraints) and the built-in Normal and PowerLaw
distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    NormalDistribution,
    NormalParameters,
    PowerLawDistribution,
    PowerLawParameters,
)
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "NormalDistribution",
    "NormalParameters",
    "PowerLawDistribution",
    "PowerLawParameters",
]
