"""
Session-state plumbing shared by the CRUD tabs: which record is being edited,
which one awaits delete confirmation, and one-shot feedback messages.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import streamlit as st

from src.data.store import RecordNotFoundError

NEW_RECORD = "new"

EditTarget = Union[int, str, None]


def editing_key(scope: str) -> str:
    return f"{scope}_editing"


def deleting_key(scope: str) -> str:
    return f"{scope}_deleting"


def _flash_key(scope: str) -> str:
    return f"{scope}_flash"


def get_editing(scope: str) -> EditTarget:
    return st.session_state.get(editing_key(scope))


def open_form(scope: str, target: EditTarget = NEW_RECORD) -> None:
    st.session_state[editing_key(scope)] = target


def close_form(scope: str) -> None:
    st.session_state[editing_key(scope)] = None


def request_delete(scope: str, record_id: int) -> None:
    st.session_state[deleting_key(scope)] = record_id


def flash(scope: str, level: str, message: str) -> None:
    st.session_state[_flash_key(scope)] = (level, message)


def show_flash(scope: str) -> None:
    pending = st.session_state.pop(_flash_key(scope), None)
    if pending is None:
        return
    level, message = pending
    renderer = {"success": st.success, "warning": st.warning, "error": st.error}.get(level, st.info)
    renderer(message)


def run_mutation(scope: str, action: Callable[..., Any], *args: Any, success: Optional[str] = None) -> bool:
    """Apply a store mutation, turning store errors into a flash message for the next render."""
    try:
        action(*args)
    except RecordNotFoundError as exc:
        flash(scope, "warning", str(exc))
        return False
    except ValueError as exc:
        flash(scope, "error", str(exc))
        return False
    if success:
        flash(scope, "success", success)
    return True
