"""Units -- the three fixed Ether denominations and their scale table."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

from ethval.exceptions import UnrecognizedUnitError


class Unit(str, Enum):
    """Fixed denominations. Values are the canonical lowercase labels."""

    WEI = "wei"
    GWEI = "gwei"
    ETH = "eth"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnitInfo:
    """Information about a single denomination."""

    unit: Unit
    decimals: int
    name: str

    @property
    def wei_factor(self) -> Decimal:
        """Number of wei in one of this unit."""
        return Decimal(10) ** self.decimals


class UnitRegistry:
    """Registry of denominations and their exponents relative to wei."""

    # 9/9/18 split: wei -> gwei is 10^9, gwei -> eth is 10^9, wei -> eth is 10^18
    _UNITS: ClassVar[dict[Unit, UnitInfo]] = {
        Unit.WEI: UnitInfo(Unit.WEI, 0, "Wei"),
        Unit.GWEI: UnitInfo(Unit.GWEI, 9, "Gigawei"),
        Unit.ETH: UnitInfo(Unit.ETH, 18, "Ether"),
    }

    _ALIASES: ClassVar[dict[str, Unit]] = {
        "wei": Unit.WEI,
        "gwei": Unit.GWEI,
        "eth": Unit.ETH,
        "ether": Unit.ETH,
    }

    @classmethod
    def lookup(cls, label: Any) -> Unit | None:
        """Resolve a label to a Unit, or None when it is not recognized."""
        if isinstance(label, Unit):
            return label
        if not label or not isinstance(label, str):
            return None
        return cls._ALIASES.get(label.lower().strip())

    @classmethod
    def is_valid(cls, label: Any) -> bool:
        """Check if a label names one of the fixed denominations."""
        return cls.lookup(label) is not None

    @classmethod
    def validate(cls, label: Any) -> Unit:
        """Resolve a label to a Unit, raising for unknown labels."""
        unit = cls.lookup(label)
        if unit is None:
            raise UnrecognizedUnitError(label)
        return unit

    @classmethod
    def get_info(cls, label: Any) -> UnitInfo:
        return cls._UNITS[cls.validate(label)]

    @classmethod
    def get_decimals(cls, label: Any) -> int:
        """Exponent of the unit relative to wei."""
        return cls.get_info(label).decimals

    @classmethod
    def shift(cls, source: Any, target: Any) -> int:
        """
        Power of ten separating two units.

        A positive result means the magnitude must be multiplied by
        ``10**shift`` when moving from ``source`` to ``target``; a negative
        result means it must be divided.
        """
        return cls.get_decimals(source) - cls.get_decimals(target)

    @classmethod
    def all_units(cls) -> tuple[Unit, ...]:
        return tuple(cls._UNITS)
