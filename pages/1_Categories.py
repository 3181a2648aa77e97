"""Weight-status Categories Page.

Reference table of BMI and BMI Prime ranges.
"""

import streamlit as st
from health_bmi.config import UPPER_LIMIT_BMI
from pages.components.charts import create_category_table

st.set_page_config(page_title="Categories | BMI Calculator", page_icon="📊", layout="wide")
st.title("📊 Weight-status Categories")

st.markdown(
    "The WHO regards a BMI below 18.5 as underweight, above 25 as overweight "
    "and above 30 as obese. Lower bounds belong to the band they open: "
    "a BMI of exactly 25 is *Overweight*."
)

st.dataframe(create_category_table(), hide_index=True, use_container_width=True)

st.markdown(
    f"**BMI Prime** is BMI divided by {UPPER_LIMIT_BMI}, the upper limit of the normal range. "
    "Values below 1.0 fall under that limit. As with BMI, each BMI Prime range "
    "includes its lower bound and excludes its upper bound: *0.74 to 1* covers "
    "0.74 up to 0.99."
)
