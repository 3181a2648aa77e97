"""
Custom exceptions for the BMI calculator.

Every failure is local and synchronous: errors propagate straight to the
caller, and each one identifies the exact condition that triggered it.
"""

from enum import Enum


class ConfigErrorReason(Enum):
    NOT_A_MAPPING = "not_a_mapping"
    MISSING_MASS_UNIT = "missing_mass_unit"
    MISSING_HEIGHT_UNIT = "missing_height_unit"
    UNEXPECTED_KEYS = "unexpected_keys"
    INVALID_MASS_UNIT = "invalid_mass_unit"
    INVALID_HEIGHT_UNIT = "invalid_height_unit"


class BMIError(Exception):
    """Base class for all calculator errors."""
    pass


class ConfigurationError(BMIError, ValueError):
    """
    Raised when a Calculator is constructed with an unusable unit configuration.

    The ``reason`` attribute tells apart the distinct sub-cases: wrong
    shape, a missing key, an extra key, or an unrecognized unit token.
    """

    def __init__(self, reason: ConfigErrorReason, message: str):
        super().__init__(message)
        self.reason = reason


class MissingArgumentError(BMIError, TypeError):
    """
    Raised when a BMI computation is missing its mass or height.

    ``argument`` is either ``"mass"`` or ``"height"``.
    """

    def __init__(self, argument: str):
        super().__init__(f"Missing data for {argument}.")
        self.argument = argument


class PrecomputationRequiredError(BMIError, RuntimeError):
    """
    Raised when a derived value is requested before any BMI was computed.
    """

    def __init__(self, message: str = "Please calculate BMI/BMI Prime first."):
        super().__init__(message)
