"""BMI display components for Streamlit pages."""

import streamlit as st
from health_bmi.models import BMIReport
from pages.components.charts import create_bmi_gauge


def render_bmi_report(report: BMIReport):
    """Render BMI, BMI Prime and category metrics with a gauge.

    Args:
        report: BMIReport from a Calculator
    """
    st.markdown("### Results")
    cols = st.columns(3)
    cols[0].metric("BMI", f"{report.bmi} kg/m²")
    cols[1].metric("BMI Prime", f"{report.bmi_prime}")
    cols[2].metric("Category", report.category)

    st.plotly_chart(create_bmi_gauge(report.bmi, report.category), use_container_width=True)
    st.caption(f"Inputs in {report.mass_unit.label} ({report.mass_unit.value}) "
               f"and {report.height_unit.label} ({report.height_unit.value}).")
