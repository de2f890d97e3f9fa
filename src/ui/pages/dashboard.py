from __future__ import annotations

from typing import List

import streamlit as st

from src.data.aggregates import completed_count, open_count, recent_tasks, status_breakdown
from src.data.models import Task, TaskStatus
from src.ui.components.charts import bar_chart, render_plotly
from src.ui.components.formatting import employee_name, format_date
from src.ui.components.kpi import KpiCard, render_kpi_cards
from src.ui.components.tables import Column, render_table
from src.ui.pages.context import PageContext


def _recent_columns(context: PageContext) -> List[Column[Task]]:
    employees = context.store.employees
    return [
        Column("employee", "Funcionário", render=lambda t: employee_name(t.employee_id, employees),
               style="font-weight: 600;"),
        Column("title", "Tarefa"),
        Column("date", "Data", render=lambda t: format_date(t.date)),
        Column("status", "Status", render=lambda t: t.status.value),
    ]


def render(context: PageContext) -> None:
    store = context.store
    tasks = store.tasks

    render_kpi_cards(
        [
            KpiCard("Funcionários Ativos", value=len(store.employees)),
            KpiCard("Tarefas Totais", value=len(tasks)),
            KpiCard("Tarefas Concluídas", value=completed_count(tasks)),
            KpiCard("Tarefas Pendentes", value=open_count(tasks), help_text="Pendentes + em andamento."),
        ],
        columns=4,
    )

    col_recent, col_chart = st.columns([3, 2])
    with col_recent:
        st.subheader("Tarefas Recentes")
        render_table(
            _recent_columns(context),
            recent_tasks(tasks),
            key="dashboard_recent",
            empty_message="Nenhuma tarefa recente encontrada.",
        )
    with col_chart:
        st.subheader("Tarefas por Status")
        if not tasks:
            st.info("Sem tarefas cadastradas.")
            return
        fig = bar_chart(
            status_breakdown(tasks),
            x="Status",
            y="Tarefas",
            color="Status",
            category_orders={"Status": [s.value for s in TaskStatus]},
            text_auto=True,
        )
        fig.update_layout(showlegend=False)
        render_plotly(fig)
