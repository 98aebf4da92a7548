"""
Built-in distribution families for PySATL Inference.

This package contains implementations of the statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_inference.families.builtins.continuous import (
    NormalDistribution,
    NormalParameters,
    PowerLawDistribution,
    PowerLawParameters,
)

__all__ = [
    "NormalDistribution",
    "NormalParameters",
    "PowerLawDistribution",
    "PowerLawParameters",
]
