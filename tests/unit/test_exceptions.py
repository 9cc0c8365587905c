"""Tests for the typed exception hierarchy."""

import pytest

from ethval import exceptions
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


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls,parent",
        [
            (ParseError, EthValError),
            (UncertainUnitError, UnitError),
            (UnrecognizedUnitError, UnitError),
            (DivisionByZeroError, ValueArithmeticError),
            (NonIntegralValueError, FormatError),
            (UnsupportedBaseError, FormatError),
            (SettingsError, EthValError),
        ],
    )
    def test_parentage(self, cls, parent):
        assert issubclass(cls, parent)
        assert issubclass(cls, EthValError)

    def test_codes_are_unique(self):
        classes = [
            obj for obj in vars(exceptions).values()
            if isinstance(obj, type) and issubclass(obj, EthValError)
        ]
        codes = [cls.code for cls in classes]
        assert len(codes) == len(set(codes))

    def test_not_builtin_value_errors(self):
        """Library errors are caught as a group, not mixed with ValueError."""
        assert not issubclass(ParseError, ValueError)


class TestStructuredData:
    def test_uncertain_unit(self):
        err = UncertainUnitError("bad")
        assert err.unit == "bad"
        assert "uncertain" in str(err)

    def test_unsupported_base(self):
        err = UnsupportedBaseError(8)
        assert err.base == 8
        assert err.code == "UNSUPPORTED_BASE"
