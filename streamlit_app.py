"""Streamlit frontend for the BMI Calculator.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from health_bmi import BMIError, Calculator, HeightUnit, MassUnit
from pages.components.bmi_display import render_bmi_report

st.set_page_config(
    page_title="BMI Calculator",
    page_icon="⚖️",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Initialize session state variables
if 'bmi_report' not in st.session_state:
    st.session_state.bmi_report = None

st.title("⚖️ BMI Calculator")
st.markdown("Body Mass Index, BMI Prime and weight-status category from your mass and height.")

st.markdown("#### Units")
col1, col2 = st.columns(2)
with col1:
    mass_unit = st.selectbox(
        "Mass unit",
        MassUnit.tokens(),
        format_func=lambda token: MassUnit(token).label,
    )
with col2:
    height_unit = st.selectbox(
        "Height unit",
        HeightUnit.tokens(),
        format_func=lambda token: HeightUnit(token).label,
    )

# Sensible starting values per unit
default_mass = {"kg": 70.0, "lb": 155.0, "st": 11.0}
default_height = {"m": 1.75, "in": 69.0, "ft": 5.75}

with st.form("bmi_form"):
    st.markdown("#### Measurements")
    col1, col2 = st.columns(2)
    with col1:
        mass = st.number_input(
            f"Mass ({mass_unit})*",
            min_value=0.0,
            value=default_mass[mass_unit],
            step=0.1,
        )
    with col2:
        height = st.number_input(
            f"Height ({height_unit})*",
            min_value=0.0,
            value=default_height[height_unit],
            step=0.01,
        )

    submitted = st.form_submit_button("Calculate", use_container_width=True)

    if submitted:
        if mass <= 0 or height <= 0:
            st.error("⚠️ Mass and height must be greater than zero")
        else:
            try:
                calculator = Calculator({"mass_unit": mass_unit, "height_unit": height_unit})
                calculator.compute_bmi(mass, height)
                st.session_state.bmi_report = calculator.report()
            except BMIError as e:
                st.error(f"❌ {e}")

if st.session_state.bmi_report:
    render_bmi_report(st.session_state.bmi_report)

st.markdown("---")
st.caption("💡 **Tip:** BMI is a statistical proxy for adults and does not measure body fat. "
           "See the Categories page for the ranges used.")
