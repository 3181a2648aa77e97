"""Data models for the BMI calculator."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from health_bmi.config import CONFIG_KEYS, DEFAULT_HEIGHT_UNIT, DEFAULT_MASS_UNIT
from health_bmi.exceptions import ConfigErrorReason, ConfigurationError


class _UnitEnum(Enum):
    """Enum of unit tokens with case-insensitive parsing."""

    @classmethod
    def parse(cls, token) -> Optional["_UnitEnum"]:
        """Return the member matching ``token`` exactly (ignoring case), or None."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token.lower())
        except ValueError:
            return None

    @classmethod
    def tokens(cls) -> list:
        return [member.value for member in cls]


class MassUnit(_UnitEnum):
    KILOGRAM = "kg"
    POUND = "lb"
    STONE = "st"

    @property
    def label(self) -> str:
        return self.name.lower()


class HeightUnit(_UnitEnum):
    METER = "m"
    INCH = "in"
    FOOT = "ft"

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class UnitConfig:
    """Units a Calculator reads its mass and height inputs in."""
    mass_unit: MassUnit = MassUnit(DEFAULT_MASS_UNIT)
    height_unit: HeightUnit = HeightUnit(DEFAULT_HEIGHT_UNIT)

    @classmethod
    def from_mapping(cls, config) -> "UnitConfig":
        """Validate a ``{"mass_unit": ..., "height_unit": ...}`` mapping.

        The mapping must hold exactly those two keys, each with one of its
        family's three unit tokens. Raises ConfigurationError naming the
        first problem found.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                ConfigErrorReason.NOT_A_MAPPING,
                f"Unit configuration has to be a mapping, got {type(config).__name__}.",
            )
        if "mass_unit" not in config:
            raise ConfigurationError(
                ConfigErrorReason.MISSING_MASS_UNIT, "Missing key mass_unit."
            )
        if "height_unit" not in config:
            raise ConfigurationError(
                ConfigErrorReason.MISSING_HEIGHT_UNIT, "Missing key height_unit."
            )
        extra = [key for key in config if key not in CONFIG_KEYS]
        if extra:
            raise ConfigurationError(
                ConfigErrorReason.UNEXPECTED_KEYS,
                f"Unexpected keys in unit configuration: {', '.join(map(str, extra))}.",
            )

        mass_unit = MassUnit.parse(config["mass_unit"])
        if mass_unit is None:
            raise ConfigurationError(
                ConfigErrorReason.INVALID_MASS_UNIT,
                f"Invalid value for mass_unit: {config['mass_unit']!r} "
                f"(expected one of {', '.join(MassUnit.tokens())}).",
            )
        height_unit = HeightUnit.parse(config["height_unit"])
        if height_unit is None:
            raise ConfigurationError(
                ConfigErrorReason.INVALID_HEIGHT_UNIT,
                f"Invalid value for height_unit: {config['height_unit']!r} "
                f"(expected one of {', '.join(HeightUnit.tokens())}).",
            )
        return cls(mass_unit=mass_unit, height_unit=height_unit)


@dataclass(frozen=True)
class BMICategory:
    """A weight-status band. Lower bounds inclusive, upper bounds exclusive."""
    label: str
    lower: Optional[float]
    upper: Optional[float]
    prime_lower: Optional[float]
    prime_upper: Optional[float]

    def contains(self, bmi) -> bool:
        if self.lower is not None and bmi < self.lower:
            return False
        if self.upper is not None and bmi >= self.upper:
            return False
        return True

    @property
    def bmi_range(self) -> str:
        return _format_range(self.lower, self.upper)

    @property
    def prime_range(self) -> str:
        return _format_range(self.prime_lower, self.prime_upper)


def _format_range(lower, upper) -> str:
    if lower is None:
        return f"< {upper:g}"
    if upper is None:
        return f">= {lower:g}"
    return f"{lower:g} to {upper:g}"


@dataclass
class BMIReport:
    """Snapshot of a Calculator's results."""
    mass_unit: MassUnit
    height_unit: HeightUnit
    bmi: Decimal
    bmi_prime: Decimal
    category: str
