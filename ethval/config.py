"""
Arithmetic settings (``ethval.config``).

Responsibility
--------------
Holds the precision and rounding mode used wherever an ethval operation can
be inexact: division with a non-terminating quotient, ``round()`` and
``to_fixed()``. Conversions, scaling, addition, subtraction and
multiplication never consult these settings; they are always exact.

The single runtime accessor is ``get_settings()``. ``load_settings()``
parses a YAML file into an ``ArithmeticSettings`` instance;
``configure()`` installs one.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys, precision below the minimum, unknown rounding mode
  -> ``SettingsError``.
"""

from __future__ import annotations

import decimal
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ethval.exceptions import SettingsError
from ethval.logging_config import get_logger

logger = get_logger("config")

# 78 significant digits hold any uint256 amount exactly.
DEFAULT_PRECISION = 78
MIN_PRECISION = 30
DEFAULT_ROUNDING = decimal.ROUND_HALF_UP

ROUNDING_MODES: frozenset[str] = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})


@dataclass(frozen=True)
class ArithmeticSettings:
    """Precision and rounding for the inexact operations."""

    precision: int = DEFAULT_PRECISION
    rounding: str = DEFAULT_ROUNDING

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise SettingsError("precision", self.precision, "must be an integer")
        if self.precision < MIN_PRECISION:
            raise SettingsError(
                "precision", self.precision, f"must be at least {MIN_PRECISION}"
            )
        if self.rounding not in ROUNDING_MODES:
            raise SettingsError(
                "rounding", self.rounding, "must be a decimal rounding constant"
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ArithmeticSettings:
        """Build settings from a plain dict, rejecting unknown keys."""
        unknown = set(data) - {"precision", "rounding"}
        if unknown:
            raise SettingsError(
                ", ".join(sorted(unknown)), data, "unknown setting"
            )
        return cls(
            precision=data.get("precision", DEFAULT_PRECISION),
            rounding=data.get("rounding", DEFAULT_ROUNDING),
        )


def load_settings(path: Path | str) -> ArithmeticSettings:
    """
    Load settings from a YAML file.

    The file holds a mapping with optional ``precision`` and ``rounding``
    keys, for example::

        precision: 96
        rounding: ROUND_HALF_EVEN

    An empty file yields the defaults.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise SettingsError("<root>", data, "expected a mapping")
    return ArithmeticSettings.from_mapping(data)


_active = ArithmeticSettings()
_lock = threading.Lock()


def get_settings() -> ArithmeticSettings:
    """Return the active settings."""
    return _active


def configure(settings: ArithmeticSettings) -> None:
    """Install ``settings`` as the active settings."""
    global _active
    if not isinstance(settings, ArithmeticSettings):
        raise TypeError(
            f"settings must be ArithmeticSettings, got {type(settings).__name__}"
        )
    with _lock:
        previous = _active
        _active = settings
    logger.info(
        "arithmetic_settings_changed",
        extra={
            "precision": settings.precision,
            "rounding": settings.rounding,
            "previous_precision": previous.precision,
            "previous_rounding": previous.rounding,
        },
    )


def reset_settings() -> None:
    """Restore the default settings. FOR TESTING ONLY."""
    global _active
    with _lock:
        _active = ArithmeticSettings()
