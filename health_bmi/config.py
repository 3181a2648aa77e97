"""Calculator configuration and constants."""

from decimal import Decimal

# Default units (canonical)
DEFAULT_MASS_UNIT = "kg"
DEFAULT_HEIGHT_UNIT = "m"

# Recognized configuration keys
CONFIG_KEYS = ("mass_unit", "height_unit")

# BMI Prime is measured against this upper limit of the normal range
UPPER_LIMIT_BMI = Decimal(25)

# Results are fixed to 2 decimal places
RESULT_PRECISION = Decimal("0.01")

# Mass conversion factors, keyed by (from_unit, to_unit)
MASS_FACTORS = {
    ("lb", "kg"): 0.45359237,
    ("st", "kg"): 6.35029318,
    ("kg", "lb"): 2.20462262,
    ("st", "lb"): 14,
    ("kg", "st"): 0.157473044,
    ("lb", "st"): 0.0714285714,
}

# Height conversion factors, keyed by (from_unit, to_unit)
HEIGHT_FACTORS = {
    ("in", "m"): 0.0254,
    ("ft", "m"): 0.3048,
    ("m", "in"): 39.3700787,
    ("ft", "in"): 12,
    ("m", "ft"): 3.2808399,
    ("in", "ft"): 0.0833333333,
}

# Weight-status categories: (label, bmi_lower, bmi_upper, prime_lower, prime_upper)
# Lower bounds are inclusive, upper bounds exclusive, for BMI and BMI Prime alike.
# None means unbounded.
CATEGORY_TABLE = [
    ("Severely underweight", None, 16.0, None, 0.66),
    ("Underweight", 16.0, 18.5, 0.66, 0.74),
    ("Normal", 18.5, 25.0, 0.74, 1.0),
    ("Overweight", 25.0, 30.0, 1.0, 1.2),
    ("Obese Class I", 30.0, 35.0, 1.2, 1.4),
    ("Obese Class II", 35.0, 40.0, 1.4, 1.6),
    ("Obese Class III", 40.0, None, 1.6, None),
]

# Gauge colours for the front end, one per category
CATEGORY_COLORS = {
    "Severely underweight": "#5DADE2",
    "Underweight": "#AED6F1",
    "Normal": "#58D68D",
    "Overweight": "#F9E79F",
    "Obese Class I": "#F5B041",
    "Obese Class II": "#EB984E",
    "Obese Class III": "#E74C3C",
}
