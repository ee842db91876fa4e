# ui/components/charts.py
from typing import Any, Dict, List

import pandas as pd
import plotly.express as px
import streamlit as st

from ui.theme import chart_colors


def render_weekly_chart(series: List[Dict[str, Any]], theme: str, title: str = "Performance Semanal"):
    st.subheader(title)
    df = pd.DataFrame(series, columns=["day", "completed", "total"])
    colors = chart_colors(theme)
    fig = px.bar(df, x="day", y=["completed", "total"], barmode="group",
                 color_discrete_sequence=[colors[0], colors[-1]])
    fig.update_layout(height=360, xaxis_title="", yaxis_title="", legend_title="")
    st.plotly_chart(fig, use_container_width=True)


def render_category_chart(breakdown: List[Dict[str, Any]], theme: str):
    st.subheader("Alocação")
    if not breakdown:
        st.caption("Sem dados")
        return
    df = pd.DataFrame(breakdown, columns=["category", "count"])
    fig = px.pie(df, names="category", values="count", hole=0.55,
                 color_discrete_sequence=chart_colors(theme))
    fig.update_layout(height=360, legend_title="")
    st.plotly_chart(fig, use_container_width=True)
