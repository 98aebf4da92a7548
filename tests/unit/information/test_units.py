from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_inference.information.units import LOG2_E, InformationUnit, Unit


class TestInformationUnit:
    def test_constructors_tag_units(self) -> None:
        assert InformationUnit.bits(1).unit is Unit.BIT
        assert InformationUnit.nats(1).unit is Unit.NAT
        assert isinstance(InformationUnit.bits(1).value, float)

    def test_one_nat_in_bits(self) -> None:
        assert InformationUnit.nats(1.0).to_bits().value == pytest.approx(LOG2_E)
        assert InformationUnit.bits(LOG2_E).to_nats().value == pytest.approx(1.0)

    def test_conversion_to_own_unit_is_identity(self) -> None:
        q = InformationUnit.bits(3.0)
        assert q.to_bits() is q

    def test_same_unit_arithmetic_keeps_unit(self) -> None:
        total = InformationUnit.nats(1.0) + InformationUnit.nats(2.0)
        assert total == InformationUnit.nats(3.0)
        assert (InformationUnit.nats(1.0) - InformationUnit.nats(2.0)).value == -1.0

    def test_mixed_unit_arithmetic_is_in_bits(self) -> None:
        total = InformationUnit.nats(1.0) + InformationUnit.bits(1.0)
        assert total.unit is Unit.BIT
        assert total.value == pytest.approx(LOG2_E + 1.0)

    def test_scalar_arithmetic(self) -> None:
        q = InformationUnit.bits(3.0)
        assert (q * 2).value == 6.0
        assert (2 * q).value == 6.0
        assert (q / 2).value == 1.5
        assert (-q).value == -3.0
        assert float(q) == 3.0

    def test_adding_a_plain_number_is_unsupported(self) -> None:
        with pytest.raises(TypeError):
            InformationUnit.bits(1.0) + 1.0  # type: ignore[operator]

    def test_apply_keeps_unit(self) -> None:
        q = InformationUnit.nats(4.0).apply(math.sqrt)
        assert q == InformationUnit.nats(2.0)

    def test_isclose_across_units(self) -> None:
        assert InformationUnit.nats(1.0).isclose(InformationUnit.bits(LOG2_E))
        assert not InformationUnit.nats(1.0).isclose(InformationUnit.bits(1.0))
