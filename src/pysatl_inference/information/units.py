"""
Information Units
=================

Tagged quantities of information. An :class:`InformationUnit` carries a
float value and a :class:`Unit` tag; arithmetic between two quantities with
different tags converts both to bits first.

Examples
--------
>>> InformationUnit.bits(1.0) + InformationUnit.bits(2.0)
InformationUnit(value=3.0, unit=<Unit.BIT: 'bit'>)
>>> (InformationUnit.nats(1.0) + InformationUnit.bits(0.0)).unit
<Unit.BIT: 'bit'>
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_inference.types import ScalarFunc


LOG2_E = math.log2(math.e)
"""Number of bits in one nat."""


class Unit(StrEnum):
    """
    Enumeration of information units.

    Attributes
    ----------
    BIT : str
        Base-2 unit.
    NAT : str
        Base-e unit.
    """

    BIT = "bit"
    NAT = "nat"


@dataclass(frozen=True, slots=True)
class InformationUnit:
    """
    Quantity of information tagged with its unit.

    Parameters
    ----------
    value : float
        Magnitude in ``unit``.
    unit : Unit
        Unit of ``value``.
    """

    value: float
    unit: Unit

    @classmethod
    def bits(cls, value: float) -> InformationUnit:
        return cls(float(value), Unit.BIT)

    @classmethod
    def nats(cls, value: float) -> InformationUnit:
        return cls(float(value), Unit.NAT)

    def to_bits(self) -> InformationUnit:
        """Convert to bits; identity when already in bits."""
        if self.unit is Unit.BIT:
            return self
        return InformationUnit(self.value * LOG2_E, Unit.BIT)

    def to_nats(self) -> InformationUnit:
        """Convert to nats; identity when already in nats."""
        if self.unit is Unit.NAT:
            return self
        return InformationUnit(self.value / LOG2_E, Unit.NAT)

    def apply(self, func: ScalarFunc) -> InformationUnit:
        """Transform the value and keep the tag."""
        return InformationUnit(float(func(self.value)), self.unit)

    def isclose(
        self, other: InformationUnit, *, rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        """Compare two quantities in bits with :func:`math.isclose`."""
        return math.isclose(
            self.to_bits().value, other.to_bits().value, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def _align(self, other: InformationUnit) -> tuple[float, float, Unit]:
        if self.unit is other.unit:
            return self.value, other.value, self.unit
        return self.to_bits().value, other.to_bits().value, Unit.BIT

    def __add__(self, other: object) -> InformationUnit:
        if not isinstance(other, InformationUnit):
            return NotImplemented
        x, y, unit = self._align(other)
        return InformationUnit(x + y, unit)

    def __sub__(self, other: object) -> InformationUnit:
        if not isinstance(other, InformationUnit):
            return NotImplemented
        x, y, unit = self._align(other)
        return InformationUnit(x - y, unit)

    def __neg__(self) -> InformationUnit:
        return InformationUnit(-self.value, self.unit)

    def __mul__(self, scalar: object) -> InformationUnit:
        if not isinstance(scalar, Real):
            return NotImplemented
        return InformationUnit(self.value * float(scalar), self.unit)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> InformationUnit:
        if not isinstance(scalar, Real):
            return NotImplemented
        return InformationUnit(self.value / float(scalar), self.unit)

    def __float__(self) -> float:
        return self.value


__all__ = [
    "LOG2_E",
    "Unit",
    "InformationUnit",
]
