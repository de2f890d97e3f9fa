"""
Reusable list view: renders records from column descriptors, with optional
per-row edit/delete actions.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

import pandas as pd
import streamlit as st

T = TypeVar("T")


@dataclass(frozen=True)
class Column(Generic[T]):
    key: str
    header: str
    render: Optional[Callable[[T], Any]] = None
    style: Optional[str] = None  # CSS declarations, e.g. "text-align: right; color: #16a34a;"


def cell_value(column: Column[T], row: T) -> Any:
    if column.render is not None:
        return column.render(row)
    if isinstance(row, dict):
        return row.get(column.key)
    return getattr(row, column.key, None)


def _check_headers(columns: Sequence[Column[T]]) -> None:
    headers = [column.header for column in columns]
    duplicates = sorted({h for h in headers if headers.count(h) > 1})
    if duplicates:
        raise ValueError(f"Cabeçalhos de coluna duplicados: {duplicates}")


def build_table_frame(columns: Sequence[Column[T]], rows: Sequence[T]) -> pd.DataFrame:
    """Rows -> DataFrame with one column per descriptor, labelled with its header.

    Headers must be unique; a repeated header would silently merge two columns.
    """
    _check_headers(columns)
    data = {column.header: [cell_value(column, row) for row in rows] for column in columns}
    return pd.DataFrame(data, columns=[column.header for column in columns])


def _styled(frame: pd.DataFrame, columns: Sequence[Column[T]]):
    styled_cols = [c for c in columns if c.style]
    if not styled_cols or frame.empty:
        return frame
    styler = frame.style
    for column in styled_cols:
        styler = styler.map(lambda _v, css=column.style: css, subset=[column.header])
    return styler


def _row_id(row: Any) -> Any:
    return row.get("id") if isinstance(row, dict) else getattr(row, "id", None)


def _row_ids(rows: Sequence[Any]) -> List[Any]:
    """Ids used in the action-button keys; each row needs its own."""
    ids = [_row_id(row) for row in rows]
    if any(row_id is None for row_id in ids):
        raise ValueError("Linhas com ações de editar/excluir precisam de um 'id'.")
    if len(set(ids)) != len(ids):
        raise ValueError("Ids de linha duplicados na tabela.")
    return ids


def cell_html(text: str, style: str) -> str:
    return f'<span style="{html.escape(style)}">{html.escape(text)}</span>'


def render_table(
    columns: Sequence[Column[T]],
    rows: Sequence[T],
    key: str,
    on_edit: Optional[Callable[[T], None]] = None,
    on_delete: Optional[Callable[[Any], None]] = None,
    empty_message: str = "Nenhum registro encontrado.",
    height: Optional[int] = None,
) -> None:
    rows = list(rows)
    if not rows:
        st.info(empty_message)
        return

    if on_edit is None and on_delete is None:
        frame = build_table_frame(columns, rows)
        kwargs = {"height": height} if height else {}
        st.dataframe(_styled(frame, columns), use_container_width=True, hide_index=True, **kwargs)
        return

    _check_headers(columns)
    row_ids = _row_ids(rows)

    # st.dataframe cannot host buttons, so action rows are laid out with columns.
    widths: List[float] = [2.0] * len(columns) + [1.0]
    header_cols = st.columns(widths)
    for col, column in zip(header_cols, columns):
        col.markdown(f"**{column.header}**")
    header_cols[-1].markdown("**Ações**")

    for row, row_id in zip(rows, row_ids):
        cells = st.columns(widths, vertical_alignment="center")
        for col, column in zip(cells, columns):
            value = cell_value(column, row)
            text = "" if value is None else str(value)
            if column.style:
                col.markdown(cell_html(text, column.style), unsafe_allow_html=True)
            else:
                col.text(text)
        with cells[-1]:
            edit_col, delete_col = st.columns(2)
            if on_edit is not None:
                edit_col.button(
                    "✏️",
                    key=f"{key}_edit_{row_id}",
                    help="Editar",
                    on_click=on_edit,
                    args=(row,),
                )
            if on_delete is not None:
                delete_col.button(
                    "🗑️",
                    key=f"{key}_delete_{row_id}",
                    help="Excluir",
                    on_click=on_delete,
                    args=(row_id,),
                )
