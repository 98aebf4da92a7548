"""
Built-in continuous distributions.

This module contains implementations of continuous parametric distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_inference.families.builtins.continuous.normal import (
    NormalDistribution,
    NormalParameters,
)
from pysatl_inference.families.builtins.continuous.power_law import (
    PowerLawDistribution,
    PowerLawParameters,
)

__all__ = [
    "NormalDistribution",
    "NormalParameters",
    "PowerLawDistribution",
    "PowerLawParameters",
]
