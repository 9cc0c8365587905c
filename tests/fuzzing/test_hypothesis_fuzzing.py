"""
Hypothesis-Based Property Tests.

Properties checked:
- Round trip: v.to(u1).to(u2).to(v.unit) reproduces v exactly
- Scaling: scale_up(n).scale_down(n) is the identity
- Ordering: gt/lt/gte/lte/eq agree with each other across units
- Arithmetic: add/sub/mul match exact integer arithmetic on wei
- Rendering: to_string() parses back to the same magnitude
"""

from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from ethval import EthValue, Unit

units = st.sampled_from(list(Unit))

magnitudes = st.decimals(
    min_value=Decimal("-1e40"),
    max_value=Decimal("1e40"),
    allow_nan=False,
    allow_infinity=False,
    places=24,
)

wei_amounts = st.integers(min_value=-(2**256), max_value=2**256)


@st.composite
def eth_values(draw):
    return EthValue.of(draw(magnitudes), draw(units))


@given(eth_values(), units, units)
@settings(max_examples=200)
def test_round_trip_conversion(value, u1, u2):
    back = value.to(u1).to(u2).to(value.unit)
    assert back.magnitude == value.magnitude
    assert back.unit is value.unit


@given(eth_values(), st.integers(min_value=0, max_value=60))
def test_scaling_is_reversible(value, n):
    assert value.scale_up(n).scale_down(n).magnitude == value.magnitude
    assert value.scale_down(n).scale_up(n).magnitude == value.magnitude


@given(eth_values(), eth_values())
@settings(max_examples=200)
def test_comparisons_are_consistent(a, b):
    assert a.eq(b) == b.eq(a)
    assert a.gt(b) == b.lt(a)
    assert a.gte(b) == b.lte(a)
    assert a.gte(b) == (a.gt(b) or a.eq(b))
    assert sum([a.gt(b), a.lt(b), a.eq(b)]) == 1


@given(eth_values(), eth_values(), eth_values())
def test_ordering_is_transitive(a, b, c):
    if a.lte(b) and b.lte(c):
        assert a.lte(c)


@given(wei_amounts, wei_amounts, units)
def test_arithmetic_matches_integer_wei(x, y, unit):
    a = EthValue.of(x).to(unit)
    b = EthValue.of(y)

    assert a.add(b).to_wei_integer() == x + y
    assert a.sub(b).to_wei_integer() == x - y
    assert EthValue.of(x).mul(y).to_wei_integer() == x * y


@given(eth_values())
def test_string_rendering_round_trips(value):
    text = value.to_string()
    assert "E" not in text and "e" not in text
    assert EthValue.of(text, value.unit) == value


@given(st.integers(min_value=0, max_value=2**256))
def test_hex_rendering_round_trips(n):
    assert EthValue.of(EthValue.of(n).to_string(16)).to_wei_integer() == n


@given(eth_values())
def test_round_keeps_unit(value):
    rounded = value.round()
    assert rounded.unit is value.unit
    assert abs(rounded.magnitude - value.magnitude) <= Decimal("0.5")
