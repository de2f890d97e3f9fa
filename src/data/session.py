from __future__ import annotations

import streamlit as st

from src.config import Settings
from src.data.models import DataSnapshot
from src.data.seed import demo_snapshot
from src.data.store import DataStore

STORE_STATE_KEY = "infoco_store"


def initial_snapshot(settings: Settings) -> DataSnapshot:
    return demo_snapshot() if settings.seed_demo_data else DataSnapshot()


def get_store(settings: Settings) -> DataStore:
    """Return the store owned by the current browser session, creating it on first use."""
    store = st.session_state.get(STORE_STATE_KEY)
    if store is None:
        store = DataStore(initial_snapshot(settings))
        st.session_state[STORE_STATE_KEY] = store
    return store
