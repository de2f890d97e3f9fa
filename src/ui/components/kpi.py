from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from src.ui.components.formatting import format_currency, format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    currency: bool = False
    decimals: int = 0
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    if card.currency:
        return format_currency(card.value)
    return format_number(card.value, decimals=card.decimals)


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=_format_value(card), help=card.help_text, border=True)
