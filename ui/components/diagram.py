# ui/components/diagram.py
from typing import Any, Dict, List

import plotly.graph_objects as go
import streamlit as st

from services.strategy_service import node_position
from ui.theme import chart_colors


def render_diagram(blocks: List[Dict[str, Any]], edges: List[Dict[str, Any]], theme: str, key: str):
    """Plot a project's blocks at their positions with arrows for edges."""
    if not blocks:
        st.caption("Sem elementos")
        return
    pos = {b["id"]: node_position(b, i) for i, b in enumerate(blocks)}
    color = chart_colors(theme)[0]

    fig = go.Figure()
    for e in edges:
        a, b = pos.get(e.get("source")), pos.get(e.get("target"))
        if a is None or b is None:
            continue
        fig.add_annotation(x=b["x"], y=b["y"], ax=a["x"], ay=a["y"],
                           xref="x", yref="y", axref="x", ayref="y",
                           showarrow=True, arrowhead=3, arrowsize=1.2, arrowwidth=1.5,
                           arrowcolor=color, standoff=18, startstandoff=18)
    fig.add_trace(go.Scatter(
        x=[pos[b["id"]]["x"] for b in blocks],
        y=[pos[b["id"]]["y"] for b in blocks],
        mode="markers+text",
        text=[f"<b>{b.get('title', '')}</b><br>{b.get('type', '')}" for b in blocks],
        textposition="bottom center",
        hovertext=[b.get("description", "") for b in blocks],
        marker=dict(size=34, symbol="square", color=color, line=dict(width=2, color="white")),
    ))
    fig.update_yaxes(autorange="reversed", visible=False)
    fig.update_xaxes(visible=False)
    fig.update_layout(height=460, showlegend=False, margin=dict(l=10, r=10, t=10, b=10))
    st.plotly_chart(fig, use_container_width=True, key=key)
