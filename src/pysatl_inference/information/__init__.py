"""
Information subpackage

Tagged information quantities (:mod:`.units`) and information-theoretic
measures of discrete distributions (:mod:`.metrics`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .metrics import (
    average_distributions,
    entropy,
    jensen_shannon,
    joint_entropy,
    kullback_leibler,
    mutual_information,
)
from .units import InformationUnit, Unit

__all__ = [
    "Unit",
    "InformationUnit",
    "entropy",
    "kullback_leibler",
    "average_distributions",
    "jensen_shannon",
    "mutual_information",
    "joint_entropy",
]
