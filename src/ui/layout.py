"""
Layout helpers for the Streamlit application (page config, sidebar).
"""

from __future__ import annotations

import streamlit as st

from src.config import Settings
from src.data.session import initial_snapshot
from src.data.store import DataStore


def setup_page(settings: Settings) -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=settings.app_name,
        layout="wide",
        page_icon=":bar_chart:",
    )


def sidebar(settings: Settings, store: DataStore) -> None:
    st.sidebar.header(settings.app_name)
    st.sidebar.caption("Gestão de funcionários, tarefas e finanças municipais.")

    st.sidebar.metric("Funcionários", len(store.employees))
    st.sidebar.metric("Tarefas", len(store.tasks))
    st.sidebar.metric("Municípios", len(store.finance_data))

    st.sidebar.divider()
    st.sidebar.caption(f"Modelo de IA: `{settings.ai_model}`")
    if st.sidebar.button("🔄 Restaurar dados iniciais", type="primary", key="sidebar_reset"):
        store.reset(initial_snapshot(settings))
        st.rerun()
