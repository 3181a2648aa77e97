"""Chart components using Plotly for BMI visualization."""

import plotly.graph_objects as go
import pandas as pd
from health_bmi.calculator import BMI_CATEGORIES
from health_bmi.config import CATEGORY_COLORS

# Visible span of the BMI gauge (kg/m2)
GAUGE_MIN = 10
GAUGE_MAX = 45


def _gauge_steps():
    steps = []
    for category in BMI_CATEGORIES:
        lower = category.lower if category.lower is not None else GAUGE_MIN
        upper = category.upper if category.upper is not None else GAUGE_MAX
        steps.append({'range': [lower, upper], 'color': CATEGORY_COLORS[category.label]})
    return steps


def create_bmi_gauge(bmi: float, category: str):
    """Create gauge chart placing a BMI among the weight-status bands.

    Args:
        bmi: BMI value (kg/m2)
        category: Category label for the title

    Returns:
        Plotly figure
    """
    value = float(bmi)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=value,
        number={'valueformat': '.2f'},
        title={'text': f"BMI: {category}"},
        gauge={
            'axis': {'range': [GAUGE_MIN, GAUGE_MAX]},
            'bar': {'color': "black", 'thickness': 0.2},
            'steps': _gauge_steps(),
            'threshold': {
                'line': {'color': "black", 'width': 4},
                'thickness': 0.75,
                # Keep the marker on the dial for out-of-range values
                'value': min(max(value, GAUGE_MIN), GAUGE_MAX),
            }
        }
    ))

    fig.update_layout(height=300)

    return fig


def create_category_table() -> pd.DataFrame:
    """Build the weight-status reference table.

    Returns:
        DataFrame with Category, BMI range and BMI Prime range columns
    """
    rows = [
        {
            'Category': c.label,
            'BMI range [kg/m2]': c.bmi_range,
            'BMI Prime': c.prime_range,
        }
        for c in BMI_CATEGORIES
    ]
    return pd.DataFrame(rows, columns=['Category', 'BMI range [kg/m2]', 'BMI Prime'])
