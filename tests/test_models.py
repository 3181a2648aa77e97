"""Tests for data models."""

import dataclasses
import unittest

from health_bmi.calculator import BMI_CATEGORIES
from health_bmi.exceptions import ConfigErrorReason, ConfigurationError
from health_bmi.models import BMICategory, HeightUnit, MassUnit, UnitConfig


class TestUnitEnums(unittest.TestCase):
    def test_parse_tokens(self):
        self.assertEqual(MassUnit.parse("kg"), MassUnit.KILOGRAM)
        self.assertEqual(MassUnit.parse("St"), MassUnit.STONE)
        self.assertEqual(HeightUnit.parse("FT"), HeightUnit.FOOT)

    def test_parse_member(self):
        self.assertIs(HeightUnit.parse(HeightUnit.INCH), HeightUnit.INCH)

    def test_parse_rejects_unknown(self):
        self.assertIsNone(MassUnit.parse("kgs"))
        self.assertIsNone(MassUnit.parse(" kg "))
        self.assertIsNone(HeightUnit.parse("m\n"))
        self.assertIsNone(MassUnit.parse(1))
        self.assertIsNone(HeightUnit.parse("cm"))
        self.assertIsNone(HeightUnit.parse(MassUnit.KILOGRAM))

    def test_tokens(self):
        self.assertEqual(MassUnit.tokens(), ["kg", "lb", "st"])
        self.assertEqual(HeightUnit.tokens(), ["m", "in", "ft"])

    def test_labels(self):
        self.assertEqual(MassUnit.POUND.label, "pound")
        self.assertEqual(HeightUnit.METER.label, "meter")


class TestUnitConfig(unittest.TestCase):
    def test_defaults(self):
        config = UnitConfig()
        self.assertEqual(config.mass_unit, MassUnit.KILOGRAM)
        self.assertEqual(config.height_unit, HeightUnit.METER)

    def test_is_immutable(self):
        config = UnitConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.mass_unit = MassUnit.POUND

    def test_from_mapping(self):
        config = UnitConfig.from_mapping({"height_unit": "in", "mass_unit": "lb"})
        self.assertEqual(config, UnitConfig(MassUnit.POUND, HeightUnit.INCH))

    def test_from_mapping_rejects_empty(self):
        with self.assertRaises(ConfigurationError) as ctx:
            UnitConfig.from_mapping({})
        self.assertEqual(ctx.exception.reason, ConfigErrorReason.MISSING_MASS_UNIT)


class TestBMICategory(unittest.TestCase):
    def test_seven_ordered_bands(self):
        labels = [c.label for c in BMI_CATEGORIES]
        self.assertEqual(labels, [
            "Severely underweight",
            "Underweight",
            "Normal",
            "Overweight",
            "Obese Class I",
            "Obese Class II",
            "Obese Class III",
        ])

    def test_bands_are_contiguous(self):
        for below, above in zip(BMI_CATEGORIES, BMI_CATEGORIES[1:]):
            self.assertEqual(below.upper, above.lower)

    def test_prime_bands_are_half_open_and_contiguous(self):
        for below, above in zip(BMI_CATEGORIES, BMI_CATEGORIES[1:]):
            self.assertEqual(below.prime_upper, above.prime_lower)
        # Normal ends where BMI Prime reaches 1.0, so 0.99 is its last value
        self.assertEqual(BMI_CATEGORIES[2].prime_upper, 1.0)

    def test_contains_is_half_open(self):
        normal = BMICategory("Normal", 18.5, 25.0, 0.74, 1.0)
        self.assertTrue(normal.contains(18.5))
        self.assertTrue(normal.contains(24.99))
        self.assertFalse(normal.contains(25))
        self.assertFalse(normal.contains(18.49))

    def test_ranges(self):
        self.assertEqual(BMI_CATEGORIES[0].bmi_range, "< 16")
        self.assertEqual(BMI_CATEGORIES[2].bmi_range, "18.5 to 25")
        self.assertEqual(BMI_CATEGORIES[2].prime_range, "0.74 to 1")
        self.assertEqual(BMI_CATEGORIES[-1].bmi_range, ">= 40")


if __name__ == "__main__":
    unittest.main()
