"""
ethval - exact, unit-aware Ether amounts.

An immutable decimal value type for wei, gwei and eth with:
- Lossless conversion between the three denominations
- Unit-normalizing arithmetic and comparison
- Decimal, hexadecimal, binary and fixed-point rendering
"""

from ethval.config import (
    ArithmeticSettings,
    configure,
    get_settings,
    load_settings,
    reset_settings,
)
from ethval.exceptions import (
    DivisionByZeroError,
    EthValError,
    FormatError,
    NonIntegralValueError,
    ParseError,
    SettingsError,
    UncertainUnitError,
    UnitError,
    UnrecognizedUnitError,
    UnsupportedBaseError,
    ValueArithmeticError,
)
from ethval.logging_config import configure_logging, get_logger, reset_logging
from ethval.units import Unit, UnitInfo, UnitRegistry
from ethval.values import EthValue

__version__ = "0.1.0"

__all__ = [
    "ArithmeticSettings",
    "DivisionByZeroError",
    "EthValError",
    "EthValue",
    "FormatError",
    "NonIntegralValueError",
    "ParseError",
    "SettingsError",
    "UncertainUnitError",
    "Unit",
    "UnitError",
    "UnitInfo",
    "UnitRegistry",
    "UnrecognizedUnitError",
    "UnsupportedBaseError",
    "ValueArithmeticError",
    "configure",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
    "reset_logging",
    "reset_settings",
]
