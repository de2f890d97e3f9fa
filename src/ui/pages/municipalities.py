from __future__ import annotations

import streamlit as st

from src.data.aggregates import finance_frame, finance_totals
from src.data.models import FinanceData
from src.data.store import RecordNotFoundError
from src.ui.components.charts import bar_chart, render_plotly
from src.ui.components.confirm import confirm_delete
from src.ui.components.formatting import format_currency
from src.ui.components.kpi import KpiCard, render_kpi_cards
from src.ui.components.tables import Column, render_table
from src.ui.pages.context import PageContext
from src.ui.pages.helpers import (
    NEW_RECORD,
    close_form,
    deleting_key,
    flash,
    get_editing,
    open_form,
    request_delete,
    run_mutation,
    show_flash,
)

SCOPE = "municipalities"

COLUMNS = [
    Column("municipality", "Município", style="font-weight: 600;"),
    Column("paid", "Valor Pago", render=lambda r: format_currency(r.paid), style="color: #16a34a;"),
    Column("pending", "Valor Pendente", render=lambda r: format_currency(r.pending), style="color: #ca8a04;"),
]


def _render_form(context: PageContext) -> None:
    target = get_editing(SCOPE)
    if target is None:
        return
    current = None if target == NEW_RECORD else context.store.get_municipality(int(target))
    if target != NEW_RECORD and current is None:
        flash(SCOPE, "warning", "O município selecionado não existe mais.")
        close_form(SCOPE)
        st.rerun()

    title = "Editar Município" if current else "Adicionar Município"
    with st.form(f"{SCOPE}_form", border=True):
        st.markdown(f"#### {title}")
        name = st.text_input("Nome do Município", value=current.municipality if current else "")
        col_paid, col_pending = st.columns(2)
        paid = col_paid.number_input(
            "Valor Pago", min_value=0.0, step=0.01, format="%.2f", value=current.paid if current else 0.0
        )
        pending = col_pending.number_input(
            "Valor Pendente", min_value=0.0, step=0.01, format="%.2f", value=current.pending if current else 0.0
        )
        col_save, col_cancel, _ = st.columns([1, 1, 4])
        submitted = col_save.form_submit_button("Salvar", type="primary")
        cancelled = col_cancel.form_submit_button("Cancelar")

    if cancelled:
        close_form(SCOPE)
        st.rerun()
    if not submitted:
        return

    data = {"municipality": name, "paid": paid, "pending": pending}
    try:
        if current is None:
            context.store.add_municipality(data)
            flash(SCOPE, "success", "Município adicionado.")
        else:
            context.store.update_municipality(FinanceData.from_dict({**data, "id": current.id}))
            flash(SCOPE, "success", "Município atualizado.")
    except ValueError as exc:
        st.error(str(exc))
        return
    except RecordNotFoundError as exc:
        flash(SCOPE, "warning", str(exc))
    close_form(SCOPE)
    st.rerun()


def render(context: PageContext) -> None:
    store = context.store
    header_col, button_col = st.columns([4, 1])
    header_col.subheader("Gerenciar Municípios")
    button_col.button("➕ Adicionar Município", key=f"{SCOPE}_new", on_click=open_form, args=(SCOPE,))

    show_flash(SCOPE)
    confirm_delete(
        deleting_key(SCOPE),
        "Tem certeza que deseja excluir este município? Esta ação não pode ser desfeita.",
        lambda record_id: run_mutation(SCOPE, store.delete_municipality, record_id, success="Município excluído."),
    )
    _render_form(context)

    records = store.finance_data
    total_paid, total_pending = finance_totals(records)
    render_kpi_cards(
        [
            KpiCard("Total Pago", value=total_paid, currency=True),
            KpiCard("Total Pendente", value=total_pending, currency=True),
            KpiCard("Municípios", value=len(records)),
        ],
        columns=3,
    )

    render_table(
        COLUMNS,
        records,
        key=SCOPE,
        on_edit=lambda record: open_form(SCOPE, record.id),
        on_delete=lambda record_id: request_delete(SCOPE, record_id),
        empty_message="Nenhum município encontrado.",
    )

    if records:
        render_plotly(
            bar_chart(
                finance_frame(records),
                x="Município",
                y="Valor",
                color="Situação",
                title="Pago x Pendente por Município",
                yaxis_title="R$",
                color_map={"Pago": "#16a34a", "Pendente": "#eab308"},
            )
        )
