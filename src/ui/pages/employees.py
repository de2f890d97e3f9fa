from __future__ import annotations

import streamlit as st

from src.data.models import Employee
from src.data.store import RecordNotFoundError
from src.ui.components.confirm import confirm_delete
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

SCOPE = "employees"

COLUMNS = [
    Column("name", "Nome", style="font-weight: 600;"),
    Column("role", "Cargo"),
    Column("department", "Departamento"),
    Column("email", "E-mail"),
]


def _render_form(context: PageContext) -> None:
    target = get_editing(SCOPE)
    if target is None:
        return
    current = None if target == NEW_RECORD else context.store.get_employee(int(target))
    if target != NEW_RECORD and current is None:
        flash(SCOPE, "warning", "O funcionário selecionado não existe mais.")
        close_form(SCOPE)
        st.rerun()

    with st.form(f"{SCOPE}_form", border=True):
        st.markdown("#### Editar Funcionário" if current else "#### Adicionar Funcionário")
        name = st.text_input("Nome", value=current.name if current else "")
        col_role, col_dept = st.columns(2)
        role = col_role.text_input("Cargo", value=current.role if current else "")
        department = col_dept.text_input("Departamento", value=current.department if current else "")
        email = st.text_input("E-mail", value=current.email if current else "")
        col_save, col_cancel, _ = st.columns([1, 1, 4])
        submitted = col_save.form_submit_button("Salvar", type="primary")
        cancelled = col_cancel.form_submit_button("Cancelar")

    if cancelled:
        close_form(SCOPE)
        st.rerun()
    if not submitted:
        return

    data = {"name": name, "role": role, "department": department, "email": email}
    try:
        if current is None:
            context.store.add_employee(data)
            flash(SCOPE, "success", "Funcionário adicionado.")
        else:
            context.store.update_employee(Employee.from_dict({**data, "id": current.id}))
            flash(SCOPE, "success", "Funcionário atualizado.")
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
    header_col.subheader("Gerenciar Funcionários")
    button_col.button("➕ Adicionar Funcionário", key=f"{SCOPE}_new", on_click=open_form, args=(SCOPE,))

    show_flash(SCOPE)
    confirm_delete(
        deleting_key(SCOPE),
        "Tem certeza que deseja excluir este funcionário? As tarefas atribuídas a ele não serão removidas.",
        lambda employee_id: run_mutation(SCOPE, store.delete_employee, employee_id, success="Funcionário excluído."),
    )
    _render_form(context)

    render_table(
        COLUMNS,
        sorted(store.employees, key=lambda e: e.name.lower()),
        key=SCOPE,
        on_edit=lambda employee: open_form(SCOPE, employee.id),
        on_delete=lambda employee_id: request_delete(SCOPE, employee_id),
        empty_message="Nenhum funcionário encontrado.",
    )
