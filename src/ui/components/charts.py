"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
STATUS_COLORS = {
    "Pendente": "#eab308",
    "Em Andamento": "#3b82f6",
    "Concluída": "#22c55e",
    "Pago": "#16a34a",
}
DEFAULT_COLOR_SEQUENCE = ["#3b82f6", "#eab308", "#22c55e", "#a855f7", "#ef4444"]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        margin=dict(l=40, r=20, t=60, b=40),
        separators=",.",
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    fig.update_xaxes(showgrid=False, title=None)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    barmode: str = "group",
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    color_map: Optional[Dict[str, str]] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    text_auto: bool = False,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        barmode=barmode,
        color_discrete_map=color_map or STATUS_COLORS,
        category_orders=category_orders,
        text_auto=text_auto,
    )
    fig = _configure_layout(fig, title, yaxis_title, yaxis_tickformat)
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig
