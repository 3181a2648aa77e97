"""Tests for the Plotly chart builders."""

import unittest
from decimal import Decimal

from pages.components.charts import GAUGE_MAX, create_bmi_gauge, create_category_table


class TestBMIGauge(unittest.TestCase):
    def test_gauge_value(self):
        fig = create_bmi_gauge(Decimal("16.40"), "Underweight")
        indicator = fig.data[0]
        self.assertAlmostEqual(indicator.value, 16.4)
        self.assertIn("Underweight", indicator.title.text)

    def test_one_step_per_category(self):
        fig = create_bmi_gauge(22.0, "Normal")
        self.assertEqual(len(fig.data[0].gauge.steps), 7)

    def test_marker_clamped_to_dial(self):
        fig = create_bmi_gauge(62.5, "Obese Class III")
        self.assertEqual(fig.data[0].gauge.threshold.value, GAUGE_MAX)


class TestCategoryTable(unittest.TestCase):
    def test_shape_and_rows(self):
        df = create_category_table()
        self.assertEqual(df.shape, (7, 3))
        normal = df[df['Category'] == 'Normal'].iloc[0]
        self.assertEqual(normal['BMI range [kg/m2]'], '18.5 to 25')
        self.assertEqual(normal['BMI Prime'], '0.74 to 1')
        self.assertEqual(df.iloc[-1]['BMI Prime'], '>= 1.6')


if __name__ == "__main__":
    unittest.main()
