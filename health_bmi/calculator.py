"""BMI calculation engine.

BMI       = mass(kg) / height(m)^2
BMI Prime = BMI / 25, the ratio of actual BMI to the upper limit of the
            normal range; dimensionless.

Inputs are read in the units a Calculator is configured with and normalized
to kilograms and meters before computing. Results are Decimals fixed to two
decimal places, rounded half-up.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from health_bmi.config import CATEGORY_TABLE, RESULT_PRECISION, UPPER_LIMIT_BMI
from health_bmi.exceptions import (
    ConfigErrorReason,
    ConfigurationError,
    MissingArgumentError,
    PrecomputationRequiredError,
)
from health_bmi.models import BMICategory, BMIReport, HeightUnit, MassUnit, UnitConfig
from health_bmi.units import convert_height, convert_mass, to_kilograms, to_meters

logger = logging.getLogger(__name__)

BMI_CATEGORIES = [BMICategory(*row) for row in CATEGORY_TABLE]


def round_result(value) -> Decimal:
    """Fix a value to two decimal places, rounding half-up.

    Infinities pass through unchanged. NaN raises ValueError.
    """
    result = Decimal(str(value))
    if result.is_nan():
        raise ValueError(f"Cannot round {value!r}: not a number")
    if result.is_infinite():
        return result
    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, result.adjusted() + 3)
        return result.quantize(RESULT_PRECISION, rounding=ROUND_HALF_UP)


def categorize(bmi) -> BMICategory:
    """Return the weight-status band a BMI (kg/m2) falls in."""
    for category in BMI_CATEGORIES:
        if category.contains(bmi):
            return category
    raise ValueError(f"No category for BMI {bmi!r}")


class Calculator:
    """Unit-aware BMI calculator.

    Configure once with the units inputs are given in::

        calc = Calculator({"mass_unit": "st", "height_unit": "ft"})
        calc.compute_bmi(6, 5)      # Decimal('16.40')
        calc.compute_bmi_prime()    # Decimal('0.66')
        calc.category()             # 'Underweight'

    The last BMI is cached on the instance and reused by compute_bmi_prime()
    and category(). Note that once a BMI is cached, compute_bmi_prime()
    ignores any mass/height it is given; call compute_bmi() to recompute.

    Instances hold mutable state without locking and are meant to be used
    from a single thread.
    """

    def __init__(self, config=None, **kwargs):
        if kwargs:
            raise ConfigurationError(
                ConfigErrorReason.NOT_A_MAPPING,
                f"Unit configuration has to be passed as a single mapping, "
                f"got keyword arguments: {', '.join(kwargs)}.",
            )
        if config is None:
            self._units = UnitConfig()
        elif isinstance(config, UnitConfig):
            self._units = config
        else:
            self._units = UnitConfig.from_mapping(config)
        self._bmi: Optional[Decimal] = None
        self._bmi_prime: Optional[Decimal] = None
        logger.debug(
            "Calculator configured: mass_unit=%s height_unit=%s",
            self.mass_unit.value, self.height_unit.value,
        )

    def __repr__(self) -> str:
        return (
            f"Calculator(mass_unit={self.mass_unit.value!r}, "
            f"height_unit={self.height_unit.value!r}, last_bmi={self._bmi})"
        )

    @property
    def mass_unit(self) -> MassUnit:
        return self._units.mass_unit

    @property
    def height_unit(self) -> HeightUnit:
        return self._units.height_unit

    @property
    def last_bmi(self) -> Optional[Decimal]:
        return self._bmi

    @property
    def last_bmi_prime(self) -> Optional[Decimal]:
        return self._bmi_prime

    def convert_mass(self, value: float, to_unit) -> float:
        """Convert a mass from the configured unit into ``to_unit``."""
        return convert_mass(value, self.mass_unit, to_unit)

    def convert_height(self, value: float, to_unit) -> float:
        """Convert a height from the configured unit into ``to_unit``."""
        return convert_height(value, self.height_unit, to_unit)

    def compute_bmi(self, mass: Optional[float] = None, height: Optional[float] = None) -> Decimal:
        """Compute, cache and return the BMI for a mass and height in the configured units.

        Raises MissingArgumentError if either value is None.
        """
        if mass is None:
            raise MissingArgumentError("mass")
        if height is None:
            raise MissingArgumentError("height")

        mass_kg = to_kilograms(float(mass), self.mass_unit)
        height_m = to_meters(float(height), self.height_unit)
        self._bmi = round_result(mass_kg / height_m ** 2)

        logger.debug(
            "BMI computed: mass=%s%s height=%s%s -> %.4f kg / %.4f m -> %s",
            mass, self.mass_unit.value, height, self.height_unit.value,
            mass_kg, height_m, self._bmi,
        )
        return self._bmi

    def compute_bmi_prime(self, mass: Optional[float] = None, height: Optional[float] = None) -> Decimal:
        """Compute, cache and return BMI Prime (BMI / 25).

        If no BMI is cached yet, one is computed from ``mass`` and ``height``
        first. If a BMI is already cached it is reused and the arguments
        are ignored.
        """
        if self._bmi is None:
            self.compute_bmi(mass, height)
        elif mass is not None or height is not None:
            logger.warning(
                "Reusing cached BMI %s; ignoring mass=%s height=%s",
                self._bmi, mass, height,
            )

        self._bmi_prime = round_result(self._bmi / UPPER_LIMIT_BMI)
        logger.debug("BMI Prime computed: %s / %s -> %s", self._bmi, UPPER_LIMIT_BMI, self._bmi_prime)
        return self._bmi_prime

    def category(self) -> str:
        """Return the weight-status label for the cached BMI.

        Raises PrecomputationRequiredError if no BMI has been computed.
        """
        if self._bmi is None:
            raise PrecomputationRequiredError()
        return categorize(self._bmi).label

    def report(self) -> BMIReport:
        """Return a snapshot of the cached results, deriving BMI Prime if needed."""
        if self._bmi is None:
            raise PrecomputationRequiredError()
        if self._bmi_prime is None:
            self.compute_bmi_prime()
        return BMIReport(
            mass_unit=self.mass_unit,
            height_unit=self.height_unit,
            bmi=self._bmi,
            bmi_prime=self._bmi_prime,
            category=self.category(),
        )


def format_report(report: BMIReport) -> str:
    """Format a BMI report for display."""
    lines = [
        f"Units:     {report.mass_unit.value} / {report.height_unit.value}",
        f"BMI:       {report.bmi} kg/m2",
        f"BMI Prime: {report.bmi_prime}",
        f"Category:  {report.category}",
    ]
    return "\n".join(lines)
