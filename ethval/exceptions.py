"""
Typed Exception Hierarchy for ethval.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Token amounts move between wallets, contracts and accounting code. Callers
need to tell a malformed amount apart from an unknown denomination or a zero
divisor without parsing message strings:

    try:
        fee = EthValue.of(raw_fee, unit)
    except UnrecognizedUnitError as e:
        reject(field="unit", code=e.code, unit=e.unit)
    except ParseError as e:
        reject(field="amount", code=e.code, source=e.source)

Every exception has:
  1. A TYPED class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. Structured DATA attributes (not just a message string)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    EthValError (base)
    |
    +-- ParseError
    |
    +-- UnitError
    |   +-- UncertainUnitError
    |   +-- UnrecognizedUnitError
    |
    +-- ValueArithmeticError
    |   +-- DivisionByZeroError
    |
    +-- FormatError
    |   +-- NonIntegralValueError
    |   +-- UnsupportedBaseError
    |
    +-- SettingsError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                 | When Raised
----------------|----------------------|-----------------------------------------
Parse           | PARSE_ERROR          | Malformed or non-finite numeric input
----------------|----------------------|-----------------------------------------
Unit            | UNCERTAIN_UNIT       | Receiver carries an unknown unit label
                | UNRECOGNIZED_UNIT    | Requested target unit is unknown
----------------|----------------------|-----------------------------------------
Arithmetic      | DIVISION_BY_ZERO     | div() with a zero divisor
----------------|----------------------|-----------------------------------------
Format          | NON_INTEGRAL_VALUE   | Integer rendering of a fractional amount
                | UNSUPPORTED_BASE     | to_string() with a base other than 2/10/16
----------------|----------------------|-----------------------------------------
Settings        | INVALID_SETTINGS     | Precision or rounding mode rejected

===============================================================================
DESIGN DECISIONS
===============================================================================

1. WHY INHERIT FROM Exception (not ValueError, etc.)?
   Library errors should be catchable as a group with ``except EthValError``.

2. WHY NOT CATCH ANYTHING INTERNALLY?
   ethval is a pure computation library. Errors surface synchronously to the
   immediate caller; engine errors are re-raised as the typed error with the
   original chained as ``__cause__``.

===============================================================================
"""

from typing import Any


class EthValError(Exception):
    """
    Base exception for all ethval errors.

    All subclasses have a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "ETHVAL_ERROR"


# Parse exceptions


class ParseError(EthValError):
    """Numeric input could not be parsed into an exact decimal."""

    code: str = "PARSE_ERROR"

    def __init__(self, source: Any, reason: str = "not a finite number"):
        self.source = repr(source)
        self.reason = reason
        super().__init__(f"Cannot parse {source!r}: {reason}")


# Unit exceptions


class UnitError(EthValError):
    """Base exception for denomination errors."""

    code: str = "UNIT_ERROR"


class UncertainUnitError(UnitError):
    """
    The value's own unit label is not one of the fixed denominations.

    Raised by unit-specific conversions on a value that was constructed
    with an unknown label.
    """

    code: str = "UNCERTAIN_UNIT"

    def __init__(self, unit: Any):
        self.unit = str(unit)
        super().__init__(f"Unit of measurement uncertain: {unit!r}")


class UnrecognizedUnitError(UnitError):
    """A requested unit label is not one of the fixed denominations."""

    code: str = "UNRECOGNIZED_UNIT"

    def __init__(self, unit: Any):
        self.unit = str(unit)
        super().__init__(f"Unrecognized unit: {unit!r}")


# Arithmetic exceptions


class ValueArithmeticError(EthValError):
    """Base exception for arithmetic errors."""

    code: str = "ARITHMETIC_ERROR"


class DivisionByZeroError(ValueArithmeticError):
    """Division with a zero divisor."""

    code: str = "DIVISION_BY_ZERO"

    def __init__(self, dividend: str):
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


# Format exceptions


class FormatError(EthValError):
    """Base exception for output rendering errors."""

    code: str = "FORMAT_ERROR"


class NonIntegralValueError(FormatError):
    """An integer rendering was requested for a fractional magnitude."""

    code: str = "NON_INTEGRAL_VALUE"

    def __init__(self, magnitude: str, target: str):
        self.magnitude = magnitude
        self.target = target
        super().__init__(
            f"Cannot render {magnitude} as {target}: magnitude is not integral"
        )


class UnsupportedBaseError(FormatError):
    """to_string() was called with a base other than 2, 10 or 16."""

    code: str = "UNSUPPORTED_BASE"

    def __init__(self, base: Any):
        self.base = base
        super().__init__(f"Unsupported base: {base!r} (expected 2, 10 or 16)")


# Settings exceptions


class SettingsError(EthValError):
    """Arithmetic settings failed validation."""

    code: str = "INVALID_SETTINGS"

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = repr(value)
        self.reason = reason
        super().__init__(f"Invalid setting {field}={value!r}: {reason}")
