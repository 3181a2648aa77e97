"""Body Mass Index, BMI Prime and weight-status category calculator."""

from health_bmi.calculator import Calculator, categorize, format_report
from health_bmi.exceptions import (
    BMIError,
    ConfigErrorReason,
    ConfigurationError,
    MissingArgumentError,
    PrecomputationRequiredError,
)
from health_bmi.models import BMICategory, BMIReport, HeightUnit, MassUnit, UnitConfig

__version__ = "0.1.0"

__all__ = [
    "BMICategory",
    "BMIError",
    "BMIReport",
    "Calculator",
    "ConfigErrorReason",
    "ConfigurationError",
    "HeightUnit",
    "MassUnit",
    "MissingArgumentError",
    "PrecomputationRequiredError",
    "UnitConfig",
    "categorize",
    "format_report",
]
