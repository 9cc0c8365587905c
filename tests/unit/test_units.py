"""
Tests for the unit registry.

The scale table is fixed at 9/9/18: gwei is 10^9 wei and eth is 10^18 wei.
"""

from decimal import Decimal

import pytest

from ethval.exceptions import UnrecognizedUnitError
from ethval.units import Unit, UnitInfo, UnitRegistry


class TestScaleTable:
    def test_decimals(self):
        assert UnitRegistry.get_decimals(Unit.WEI) == 0
        assert UnitRegistry.get_decimals(Unit.GWEI) == 9
        assert UnitRegistry.get_decimals(Unit.ETH) == 18

    def test_wei_factors(self):
        assert UnitRegistry.get_info("gwei").wei_factor == Decimal("1000000000")
        assert UnitRegistry.get_info("eth").wei_factor == Decimal(10) ** 18

    @pytest.mark.parametrize(
        "source,target,expected",
        [
            (Unit.WEI, Unit.GWEI, -9),
            (Unit.GWEI, Unit.ETH, -9),
            (Unit.WEI, Unit.ETH, -18),
            (Unit.ETH, Unit.WEI, 18),
            (Unit.ETH, Unit.GWEI, 9),
            (Unit.GWEI, Unit.GWEI, 0),
        ],
    )
    def test_shift(self, source, target, expected):
        assert UnitRegistry.shift(source, target) == expected

    def test_all_units(self):
        assert UnitRegistry.all_units() == (Unit.WEI, Unit.GWEI, Unit.ETH)

    def test_info_type(self):
        info = UnitRegistry.get_info(Unit.ETH)
        assert isinstance(info, UnitInfo)
        assert info.name == "Ether"


class TestLabels:
    def test_canonical_labels(self):
        for unit in Unit:
            assert UnitRegistry.validate(unit.value) is unit

    def test_normalization(self):
        assert UnitRegistry.validate(" GWEI ") is Unit.GWEI
        assert UnitRegistry.validate("Ether") is Unit.ETH

    @pytest.mark.parametrize("label", ["bad", "finney", "", None, 18, "kwei"])
    def test_unknown_labels(self, label):
        assert not UnitRegistry.is_valid(label)
        with pytest.raises(UnrecognizedUnitError):
            UnitRegistry.validate(label)

    def test_unit_str(self):
        assert str(Unit.GWEI) == "gwei"
        assert Unit("eth") is Unit.ETH
