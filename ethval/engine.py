"""
Engine -- binding to the ``decimal`` module.

Responsibility:
    Parses every accepted input shape into a finite ``Decimal``, performs the
    arithmetic ethval needs, and renders magnitudes as decimal, hexadecimal,
    binary and fixed-point strings.

Exactness:
    ``add``, ``subtract``, ``multiply`` and ``scale`` build a context whose
    precision is large enough to hold the exact result, so they never round.
    ``divide`` is exact whenever the quotient terminates within
    ``max(settings.precision, digits(a) + digits(b))`` significant digits and
    is otherwise rounded with ``settings.rounding``. ``quantize`` is the only
    deliberately lossy operation.

    Every operation uses an explicit ``decimal.Context``; the thread-local
    context of the caller is never read or modified.

Failure modes:
    - ParseError for malformed, non-finite or unsupported input
    - DivisionByZeroError for a zero divisor
    - NonIntegralValueError when an integer rendering meets a fraction
"""

from __future__ import annotations

import decimal
import operator
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from ethval.config import ArithmeticSettings
from ethval.exceptions import DivisionByZeroError, NonIntegralValueError, ParseError

_PREFIXED_INTEGER = re.compile(r"^0([xXbBoO])([0-9a-fA-F]+)$")
_PREFIX_BASES = {"x": 16, "b": 2, "o": 8}


# =============================================================================
# Contexts
# =============================================================================


def _context(precision: int, rounding: str = decimal.ROUND_HALF_UP) -> decimal.Context:
    return decimal.Context(
        prec=max(precision, 1),
        rounding=rounding,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _span(*values: Decimal) -> int:
    """Digits needed to place every operand on one common exponent grid."""
    top = max(v.adjusted() for v in values)
    bottom = min(v.as_tuple().exponent for v in values)
    return top - bottom + 1


# =============================================================================
# Parsing
# =============================================================================


def _finite(value: Decimal, source: Any) -> Decimal:
    if not value.is_finite():
        raise ParseError(source, "not a finite number")
    return value


def parse_prefixed_integer(text: str) -> Decimal:
    """
    Parse an unsigned ``0x``/``0b``/``0o`` integer literal.

    Raises:
        ParseError: If the text is not a prefixed literal or a digit is out
            of range for its base.
    """
    match = _PREFIXED_INTEGER.match(text.strip())
    if match is None:
        raise ParseError(text, "not a prefixed integer literal")
    base = _PREFIX_BASES[match.group(1).lower()]
    try:
        return Decimal(int(match.group(2), base))
    except ValueError as e:
        raise ParseError(text, f"invalid base-{base} digits") from e


def parse_hex(text: str) -> Decimal:
    """Parse an unsigned ``0x``-prefixed hexadecimal string."""
    stripped = text.strip()
    if not stripped[:2].lower() == "0x":
        raise ParseError(text, "missing 0x prefix")
    return parse_prefixed_integer(stripped)


def parse_string(text: str) -> Decimal:
    """
    Parse a decimal string or a prefixed integer literal.

    Decimal strings may carry a sign, a fractional part and an exponent.
    Surrounding whitespace is ignored.
    """
    stripped = text.strip()
    if _PREFIXED_INTEGER.match(stripped):
        return parse_prefixed_integer(stripped)
    try:
        value = Decimal(stripped)
    except InvalidOperation as e:
        raise ParseError(text, "not a decimal number") from e
    return _finite(value, text)


def to_decimal(source: Any) -> Decimal:
    """
    Coerce a raw numeric input to an exact, finite Decimal.

    Accepted: Decimal, int, float (via its shortest repr), str (see
    ``parse_string``) and any object implementing ``__index__``.
    """
    if isinstance(source, bool):
        raise ParseError(source, "booleans are not amounts")
    if isinstance(source, Decimal):
        return _finite(source, source)
    if isinstance(source, int):
        return Decimal(source)
    if isinstance(source, float):
        return _finite(Decimal(repr(source)), source)
    if isinstance(source, str):
        return parse_string(source)
    if hasattr(source, "__index__"):
        return Decimal(operator.index(source))
    raise ParseError(source, f"unsupported type {type(source).__name__}")


# =============================================================================
# Arithmetic
# =============================================================================


def add(a: Decimal, b: Decimal) -> Decimal:
    return _context(_span(a, b) + 1).add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return _context(_span(a, b) + 1).subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    return _context(_digits(a) + _digits(b)).multiply(a, b)


def divide(a: Decimal, b: Decimal, settings: ArithmeticSettings) -> Decimal:
    """Divide ``a`` by ``b``; see the module docstring for exactness."""
    if b.is_zero():
        raise DivisionByZeroError(str(a))
    precision = max(settings.precision, _digits(a) + _digits(b))
    return _context(precision, settings.rounding).divide(a, b)


def scale(value: Decimal, exponent: int) -> Decimal:
    """Multiply ``value`` by ``10**exponent`` without rounding."""
    return value.scaleb(exponent, _context(_digits(value)))


def quantize(value: Decimal, places: int, rounding: str) -> Decimal:
    """Round ``value`` to ``places`` fractional digits."""
    target = Decimal((0, (1,), -places))
    precision = max(value.adjusted(), 0) + places + 2
    return value.quantize(target, context=_context(precision, rounding))


def is_integral(value: Decimal) -> bool:
    return value.as_tuple().exponent >= 0 or value == value.to_integral_value()


def to_integer(value: Decimal, target: str = "integer") -> int:
    if not is_integral(value):
        raise NonIntegralValueError(to_plain_string(value), target)
    return int(value)


# =============================================================================
# Rendering
# =============================================================================


def to_plain_string(value: Decimal) -> str:
    """Exact decimal string: no exponent, no trailing fractional zeros."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def to_hex_string(value: Decimal) -> str:
    """``0x``-prefixed lowercase hexadecimal of an integral value."""
    return hex(to_integer(value, "hexadecimal"))


def to_binary_string(value: Decimal) -> str:
    """Binary digits of the absolute value of an integral value, no prefix."""
    return format(abs(to_integer(value, "binary")), "b")


def to_fixed_string(value: Decimal, places: int, rounding: str) -> str:
    """Decimal string with exactly ``places`` fractional digits."""
    return format(quantize(value, places, rounding), "f")
