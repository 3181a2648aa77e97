"""Unit conversion utilities for mass and height.

Mass:   kilogram (kg), pound (lb), stone (st)
Height: meter (m), inch (in), foot (ft)

Kilograms and meters are the canonical units BMI is computed in.
"""

from health_bmi.config import HEIGHT_FACTORS, MASS_FACTORS
from health_bmi.models import HeightUnit, MassUnit


def _convert(value: float, from_unit, to_unit, factors: dict) -> float:
    if from_unit is to_unit:
        return value
    return value * factors[(from_unit.value, to_unit.value)]


def _mass_unit(unit) -> MassUnit:
    parsed = MassUnit.parse(unit)
    if parsed is None:
        raise ValueError(f"Invalid unit for mass: {unit!r}")
    return parsed


def _height_unit(unit) -> HeightUnit:
    parsed = HeightUnit.parse(unit)
    if parsed is None:
        raise ValueError(f"Invalid unit for height: {unit!r}")
    return parsed


def convert_mass(value: float, from_unit, to_unit) -> float:
    """Convert a mass between kg, lb and st. Same-unit conversion is a no-op."""
    return _convert(value, _mass_unit(from_unit), _mass_unit(to_unit), MASS_FACTORS)


def convert_height(value: float, from_unit, to_unit) -> float:
    """Convert a height between m, in and ft. Same-unit conversion is a no-op."""
    return _convert(value, _height_unit(from_unit), _height_unit(to_unit), HEIGHT_FACTORS)


def to_kilograms(value: float, unit) -> float:
    return convert_mass(value, unit, MassUnit.KILOGRAM)


def to_meters(value: float, unit) -> float:
    return convert_height(value, unit, HeightUnit.METER)
