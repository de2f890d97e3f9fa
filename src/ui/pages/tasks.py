from __future__ import annotations

import datetime as dt
from typing import List

import streamlit as st

from src.data.models import Task, TaskStatus
from src.data.store import RecordNotFoundError
from src.ui.components.confirm import confirm_delete
from src.ui.components.formatting import employee_name, format_date, format_number
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

SCOPE = "tasks"
ALL_STATUSES = "Todos"


def _columns(context: PageContext) -> List[Column[Task]]:
    employees = context.store.employees
    return [
        Column("employee", "Funcionário", render=lambda t: employee_name(t.employee_id, employees),
               style="font-weight: 600;"),
        Column("title", "Tarefa"),
        Column("date", "Data", render=lambda t: format_date(t.date)),
        Column("status", "Status", render=lambda t: t.status.value),
        Column("hours", "Horas", render=lambda t: format_number(t.hours, 1), style="text-align: right;"),
    ]


def _render_form(context: PageContext) -> None:
    target = get_editing(SCOPE)
    if target is None:
        return
    store = context.store
    current = None if target == NEW_RECORD else store.get_task(int(target))
    if target != NEW_RECORD and current is None:
        flash(SCOPE, "warning", "A tarefa selecionada não existe mais.")
        close_form(SCOPE)
        st.rerun()

    employees = store.employees
    if not employees and current is None:
        st.warning("Cadastre um funcionário antes de criar tarefas.")
        close_form(SCOPE)
        return

    employee_ids = [e.id for e in employees]
    # Keep a dangling employee_id selectable so editing does not silently reassign the task.
    if current is not None and current.employee_id not in employee_ids:
        employee_ids.append(current.employee_id)
    statuses = list(TaskStatus)

    with st.form(f"{SCOPE}_form", border=True):
        st.markdown("#### Editar Tarefa" if current else "#### Adicionar Tarefa")
        title = st.text_input("Título", value=current.title if current else "")
        employee_id = st.selectbox(
            "Funcionário",
            options=employee_ids,
            index=employee_ids.index(current.employee_id) if current else 0,
            format_func=lambda eid: employee_name(eid, employees),
        )
        col_date, col_status, col_hours = st.columns(3)
        date = col_date.date_input("Data", value=current.date if current else dt.date.today(), format="DD/MM/YYYY")
        status = col_status.selectbox(
            "Status",
            options=statuses,
            index=statuses.index(current.status) if current else 0,
            format_func=lambda s: s.value,
        )
        hours = col_hours.number_input(
            "Horas", min_value=0.0, step=0.5, value=float(current.hours) if current else 0.0
        )
        description = st.text_area("Descrição", value=current.description if current else "")
        col_save, col_cancel, _ = st.columns([1, 1, 4])
        submitted = col_save.form_submit_button("Salvar", type="primary")
        cancelled = col_cancel.form_submit_button("Cancelar")

    if cancelled:
        close_form(SCOPE)
        st.rerun()
    if not submitted:
        return

    data = {
        "employee_id": employee_id,
        "title": title,
        "date": date,
        "status": status,
        "hours": hours,
        "description": description,
    }
    try:
        if current is None:
            store.add_task(data)
            flash(SCOPE, "success", "Tarefa adicionada.")
        else:
            store.update_task(Task.from_dict({**data, "id": current.id}))
            flash(SCOPE, "success", "Tarefa atualizada.")
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
    header_col.subheader("Gerenciar Tarefas")
    button_col.button("➕ Adicionar Tarefa", key=f"{SCOPE}_new", on_click=open_form, args=(SCOPE,))

    show_flash(SCOPE)
    confirm_delete(
        deleting_key(SCOPE),
        "Tem certeza que deseja excluir esta tarefa? Esta ação não pode ser desfeita.",
        lambda task_id: run_mutation(SCOPE, store.delete_task, task_id, success="Tarefa excluída."),
    )
    _render_form(context)

    status_filter = st.radio(
        "Filtrar por status",
        options=[ALL_STATUSES] + [s.value for s in TaskStatus],
        horizontal=True,
        key=f"{SCOPE}_status_filter",
    )
    tasks = sorted(store.tasks, key=lambda t: t.date, reverse=True)
    if status_filter != ALL_STATUSES:
        tasks = [t for t in tasks if t.status.value == status_filter]

    render_table(
        _columns(context),
        tasks,
        key=SCOPE,
        on_edit=lambda task: open_form(SCOPE, task.id),
        on_delete=lambda task_id: request_delete(SCOPE, task_id),
        empty_message="Nenhuma tarefa encontrada.",
    )
