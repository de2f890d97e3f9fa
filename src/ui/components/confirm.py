from __future__ import annotations

from typing import Callable

import streamlit as st


def confirm_delete(
    state_key: str,
    message: str,
    on_confirm: Callable[[int], None],
) -> None:
    """Show a confirmation box while ``st.session_state[state_key]`` holds a pending id."""
    pending_id = st.session_state.get(state_key)
    if pending_id is None:
        return

    def _clear() -> None:
        st.session_state[state_key] = None

    def _confirm() -> None:
        _clear()
        on_confirm(pending_id)

    with st.container(border=True):
        st.warning(f"**Confirmar Exclusão.** {message}")
        col_confirm, col_cancel, _ = st.columns([1, 1, 4])
        col_confirm.button("Excluir", key=f"{state_key}_confirm", type="primary", on_click=_confirm)
        col_cancel.button("Cancelar", key=f"{state_key}_cancel", on_click=_clear)
