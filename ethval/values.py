"""
Values -- the immutable, unit-aware Ether amount.

Responsibility:
    Provides ``EthValue``: an exact decimal magnitude tagged with one of the
    three fixed denominations (wei, gwei, eth). Construction, conversion,
    arithmetic, comparison, rounding and rendering all return new instances.

Architecture position:
    Top of the package. Delegates parsing, arithmetic and rendering to
    ``ethval.engine`` and the scale table to ``ethval.units``.

Invariants enforced:
    - magnitude is always a finite Decimal (never float)
    - conversions never round; scaling by 10**n is exact in both directions
    - arithmetic and comparison against another EthValue first convert the
      operand into the receiver's unit; the result keeps the receiver's unit
    - round() is the only lossy operation and keeps the unit

Failure modes:
    - ParseError on malformed, non-finite or unsupported input
    - UncertainUnitError when a value with an unknown unit label is converted
    - UnrecognizedUnitError when asked to convert to an unknown label
    - DivisionByZeroError on div() by zero
    - NonIntegralValueError / UnsupportedBaseError on rendering
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, SupportsIndex

from ethval import engine
from ethval.config import get_settings
from ethval.exceptions import UncertainUnitError, UnsupportedBaseError
from ethval.logging_config import get_logger
from ethval.units import Unit, UnitRegistry

logger = get_logger("values")

Operand = Any  # EthValue | Decimal | int | float | str | SupportsIndex


@dataclass(frozen=True, slots=True, eq=False)
class EthValue:
    """
    Ether amount value object.

    Contract:
        Pairs an exact Decimal magnitude with its denomination. Values in
        different denominations compare and combine after converting the
        right-hand operand to the left-hand unit.

    Guarantees:
        - Immutable (frozen dataclass with slots)
        - magnitude is always a finite Decimal
        - unit is a ``Unit`` whenever the label was recognized; otherwise the
          raw label is kept and unit-specific conversions raise
          ``UncertainUnitError``
        - Equal values hash equally across denominations

    Non-goals:
        - Does NOT support denominations beyond wei, gwei and eth
        - Does NOT convert to fiat currencies
    """

    magnitude: Decimal
    unit: Unit | str = Unit.WEI

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", engine.to_decimal(self.magnitude))
        resolved = UnitRegistry.lookup(self.unit)
        if resolved is None:
            logger.warning("unrecognized_unit_label", extra={"unit": repr(self.unit)})
        else:
            object.__setattr__(self, "unit", resolved)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, source: Operand, unit: Unit | str = Unit.WEI) -> EthValue:
        """
        Build a value from any supported source.

        An existing EthValue is copied with its own unit and ``unit`` is
        ignored. Everything else is coerced by ``engine.to_decimal``: ints,
        Decimals, floats (via their shortest repr), decimal strings,
        ``0x``/``0b``/``0o`` strings and objects implementing ``__index__``.

        Raises:
            ParseError: If the source is malformed or not finite.
        """
        if isinstance(source, EthValue):
            return cls.from_value(source)
        return cls(magnitude=engine.to_decimal(source), unit=unit)

    @classmethod
    def from_string(cls, text: str, unit: Unit | str = Unit.WEI) -> EthValue:
        """Parse a decimal string or a prefixed integer literal."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        return cls(magnitude=engine.parse_string(text), unit=unit)

    @classmethod
    def from_hex(cls, text: str, unit: Unit | str = Unit.WEI) -> EthValue:
        """Parse an unsigned ``0x``-prefixed hexadecimal string."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        return cls(magnitude=engine.parse_hex(text), unit=unit)

    @classmethod
    def from_integer(cls, value: int, unit: Unit | str = Unit.WEI) -> EthValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        return cls(magnitude=Decimal(value), unit=unit)

    @classmethod
    def from_big_integer(
        cls, value: SupportsIndex, unit: Unit | str = Unit.WEI
    ) -> EthValue:
        """Build from any integer type implementing ``__index__``."""
        return cls(magnitude=Decimal(operator.index(value)), unit=unit)

    @classmethod
    def from_number(
        cls, value: int | float | Decimal, unit: Unit | str = Unit.WEI
    ) -> EthValue:
        if not isinstance(value, (int, float, Decimal)):
            raise TypeError(f"value must be a number, got {type(value).__name__}")
        return cls(magnitude=engine.to_decimal(value), unit=unit)

    @classmethod
    def from_value(cls, other: EthValue) -> EthValue:
        """Copy another value, keeping its unit."""
        if not isinstance(other, EthValue):
            raise TypeError(f"other must be EthValue, got {type(other).__name__}")
        return cls(magnitude=other.magnitude, unit=other.unit)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def is_wei(self) -> bool:
        return self.unit is Unit.WEI

    @property
    def is_gwei(self) -> bool:
        return self.unit is Unit.GWEI

    @property
    def is_eth(self) -> bool:
        return self.unit is Unit.ETH

    @property
    def has_known_unit(self) -> bool:
        return isinstance(self.unit, Unit)

    @property
    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    @property
    def is_positive(self) -> bool:
        return self.magnitude > 0

    @property
    def is_negative(self) -> bool:
        return self.magnitude < 0

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def _convert(self, target: Unit) -> EthValue:
        if not self.has_known_unit:
            raise UncertainUnitError(self.unit)
        if self.unit is target:
            return EthValue.from_value(self)
        shift = UnitRegistry.shift(self.unit, target)
        scaled = self.scale_down(shift) if shift >= 0 else self.scale_up(-shift)
        return replace(scaled, unit=target)

    def to_wei(self) -> EthValue:
        return self._convert(Unit.WEI)

    def to_gwei(self) -> EthValue:
        return self._convert(Unit.GWEI)

    def to_eth(self) -> EthValue:
        return self._convert(Unit.ETH)

    def to(self, unit: Unit | str) -> EthValue:
        """
        Convert to ``unit``.

        Raises:
            UnrecognizedUnitError: If ``unit`` is not a known label.
            UncertainUnitError: If this value's own unit is unknown.
        """
        return self._convert(UnitRegistry.validate(unit))

    # -------------------------------------------------------------------------
    # Scaling and rounding
    # -------------------------------------------------------------------------

    def scale_down(self, exponent: SupportsIndex) -> EthValue:
        """Multiply the magnitude by ``10**exponent``; the unit is kept."""
        return EthValue(engine.scale(self.magnitude, operator.index(exponent)), self.unit)

    def scale_up(self, exponent: SupportsIndex) -> EthValue:
        """Divide the magnitude by ``10**exponent``; the unit is kept."""
        return EthValue(engine.scale(self.magnitude, -operator.index(exponent)), self.unit)

    def round(self) -> EthValue:
        """
        Round to zero fractional digits with the configured rounding mode
        (ROUND_HALF_UP unless reconfigured). The unit is kept.
        """
        rounded = engine.quantize(self.magnitude, 0, get_settings().rounding)
        return EthValue(rounded, self.unit)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _coerce(self, operand: Operand) -> Decimal:
        if isinstance(operand, EthValue):
            return operand.to(self.unit).magnitude
        return engine.to_decimal(operand)

    def add(self, operand: Operand) -> EthValue:
        return EthValue(engine.add(self.magnitude, self._coerce(operand)), self.unit)

    def sub(self, operand: Operand) -> EthValue:
        return EthValue(engine.subtract(self.magnitude, self._coerce(operand)), self.unit)

    def mul(self, operand: Operand) -> EthValue:
        return EthValue(engine.multiply(self.magnitude, self._coerce(operand)), self.unit)

    def div(self, operand: Operand) -> EthValue:
        """
        Divide by ``operand``.

        Raises:
            DivisionByZeroError: If the divisor is zero.
        """
        quotient = engine.divide(self.magnitude, self._coerce(operand), get_settings())
        return EthValue(quotient, self.unit)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def gt(self, operand: Operand) -> bool:
        return self.magnitude > self._coerce(operand)

    def gte(self, operand: Operand) -> bool:
        return self.magnitude >= self._coerce(operand)

    def lt(self, operand: Operand) -> bool:
        return self.magnitude < self._coerce(operand)

    def lte(self, operand: Operand) -> bool:
        return self.magnitude <= self._coerce(operand)

    def eq(self, operand: Operand) -> bool:
        return self.magnitude == self._coerce(operand)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self, base: int | None = None) -> str:
        """
        Render the magnitude.

        Args:
            base: 10 (default) for an exact plain decimal string, 16 for a
                ``0x``-prefixed hex string, 2 for unprefixed binary digits of
                the absolute value. Bases 2 and 16 need an integral magnitude.

        Raises:
            UnsupportedBaseError: For any other base.
            NonIntegralValueError: For base 2 or 16 with a fractional value.
        """
        if base is None or base == 10:
            return engine.to_plain_string(self.magnitude)
        if base == 16:
            return engine.to_hex_string(self.magnitude)
        if base == 2:
            return engine.to_binary_string(self.magnitude)
        raise UnsupportedBaseError(base)

    def to_fixed(self, places: int | None = None) -> str:
        """Render with exactly ``places`` fractional digits."""
        if places is None:
            return engine.to_plain_string(self.magnitude)
        if isinstance(places, bool) or not isinstance(places, int) or places < 0:
            raise ValueError(f"places must be a non-negative int, got {places!r}")
        return engine.to_fixed_string(self.magnitude, places, get_settings().rounding)

    def to_number(self) -> float:
        """
        Convert to a float.

        NOT exact: floats carry about 17 significant digits, so large wei
        amounts and long fractions lose precision.
        """
        return float(self.magnitude)

    def to_wei_integer(self) -> int:
        """
        Convert to wei and return the amount as a Python int.

        Raises:
            UncertainUnitError: If this value's unit is unknown.
            NonIntegralValueError: If the wei amount has a fractional part.
        """
        return engine.to_integer(self.to_wei().magnitude, "wei integer")

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EthValue):
            return NotImplemented
        if not (self.has_known_unit and other.has_known_unit):
            return self.magnitude == other.magnitude and self.unit == other.unit
        return self.eq(other)

    def __hash__(self) -> int:
        if not self.has_known_unit:
            return hash((self.magnitude, self.unit))
        return hash(self.to_wei().magnitude)

    def __lt__(self, other: EthValue) -> bool:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: EthValue) -> bool:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: EthValue) -> bool:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: EthValue) -> bool:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: EthValue) -> EthValue:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: EthValue) -> EthValue:
        if not isinstance(other, EthValue):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: EthValue | Decimal | int | str) -> EthValue:
        if not isinstance(factor, (EthValue, Decimal, int, str)):
            return NotImplemented
        return self.mul(factor)

    def __rmul__(self, factor: Decimal | int | str) -> EthValue:
        return self.__mul__(factor)

    def __truediv__(self, divisor: EthValue | Decimal | int | str) -> EthValue:
        if not isinstance(divisor, (EthValue, Decimal, int, str)):
            return NotImplemented
        return self.div(divisor)

    def __neg__(self) -> EthValue:
        return EthValue(self.magnitude.copy_negate(), self.unit)

    def __abs__(self) -> EthValue:
        return EthValue(self.magnitude.copy_abs(), self.unit)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"EthValue({self.to_string()!r}, {str(self.unit)!r})"
