# tests/test_ui.py

from __future__ import annotations

from streamlit.testing.v1 import AppTest

from src.config import Settings
from src.data.models import Employee
from src.services.ai_analysis import COMMUNICATION_ERROR_MESSAGE
from src.ui.pages.ai_analysis import BLANK_QUESTION_MESSAGE
from tests.fakes import FakeChatClient


def _table_app() -> None:
    import streamlit as st

    from src.ui.components.tables import Column, render_table

    def _on_edit(row) -> None:
        st.session_state["edited"] = row

    def _on_delete(row_id) -> None:
        st.session_state["deleted"] = row_id

    render_table(
        [Column("name", "Nome", style="font-weight: 600;"), Column("role", "Cargo")],
        st.session_state["rows"],
        key="emp",
        on_edit=_on_edit,
        on_delete=_on_delete,
        empty_message="Nenhum funcionário cadastrado.",
    )


def _ai_app() -> None:
    import streamlit as st

    from src.data.seed import demo_snapshot
    from src.data.store import DataStore
    from src.services.ai_analysis import AiAnalysisService
    from src.ui.pages import ai_analysis
    from src.ui.pages.context import PageContext

    settings = st.session_state["settings"]
    service = AiAnalysisService(settings, client=st.session_state["client"])
    ai_analysis.render(PageContext(store=DataStore(demo_snapshot()), settings=settings, ai_service=service))


def _submit_app() -> None:
    from src.ui.pages import ai_analysis

    ai_analysis._submit()


def _table(rows) -> AppTest:
    at = AppTest.from_function(_table_app)
    at.session_state["rows"] = rows
    return at.run()


def _ai(settings: Settings, client: FakeChatClient) -> AppTest:
    at = AppTest.from_function(_ai_app)
    at.session_state["settings"] = settings
    at.session_state["client"] = client
    return at.run()


def _ask_button(at: AppTest):
    return next(b for b in at.button if b.label == "Analisar")


def test_render_table_shows_placeholder_for_no_rows() -> None:
    at = _table([])
    assert not at.exception
    assert at.info[0].value == "Nenhum funcionário cadastrado."
    assert len(at.button) == 0


def test_render_table_buttons_pass_record_and_id_to_callbacks() -> None:
    ana = Employee(1, "Ana", "Analista")
    bruno = Employee(2, "Bruno", "Auditor")
    at = _table([ana, bruno])

    at.button(key="emp_delete_2").click().run()
    assert at.session_state["deleted"] == 2

    at.button(key="emp_edit_1").click().run()
    assert at.session_state["edited"] == ana


def test_render_table_escapes_styled_cells_and_keeps_plain_cells_literal() -> None:
    at = _table([Employee(1, "<b>Ana</b>", "Cargo *chefe*")])

    assert not at.exception
    bodies = [m.value for m in at.markdown]
    assert '<span style="font-weight: 600;">&lt;b&gt;Ana&lt;/b&gt;</span>' in bodies
    assert "Cargo *chefe*" in [t.value for t in at.text]


def test_render_table_with_actions_rejects_rows_without_unique_ids() -> None:
    assert _table([{"name": "Ana"}, {"name": "Bruno"}]).exception
    assert _table([{"id": 1, "name": "Ana"}, {"id": 1, "name": "Bruno"}]).exception


def test_ai_tab_shows_error_when_service_fails(settings: Settings) -> None:
    at = _ai(settings, FakeChatClient(error=ConnectionError("down")))

    at.text_area(key="ai_question").input("Resumo?")
    _ask_button(at).click().run()

    assert not at.exception
    assert at.error[0].value == COMMUNICATION_ERROR_MESSAGE
    assert len(at.session_state["client"].calls) == 1
    assert at.session_state["ai_pending"] is False
    assert not _ask_button(at).disabled
    assert at.session_state["ai_history"] == []


def test_ai_tab_answers_on_first_click_after_typing(settings: Settings) -> None:
    at = _ai(settings, FakeChatClient(text="**3** tarefas pendentes."))

    at.text_area(key="ai_question").input("Quantas pendentes?")
    _ask_button(at).click().run()

    assert not at.exception
    assert len(at.session_state["client"].calls) == 1
    assert at.session_state["ai_history"] == [("Quantas pendentes?", "**3** tarefas pendentes.")]
    assert "**3** tarefas pendentes." in [m.value for m in at.markdown]


def test_ai_tab_blank_question_warns_without_calling_service(settings: Settings) -> None:
    at = _ai(settings, FakeChatClient())

    _ask_button(at).click().run()

    assert at.warning[0].value == BLANK_QUESTION_MESSAGE
    assert at.session_state["client"].calls == []


def test_submit_is_ignored_while_a_request_is_pending() -> None:
    at = AppTest.from_function(_submit_app)
    at.session_state["ai_pending"] = True
    at.session_state["ai_question"] = "Outra pergunta?"
    at.run()

    assert not at.exception
    assert "ai_request" not in at.session_state


def test_submit_queues_question_and_marks_pending() -> None:
    at = AppTest.from_function(_submit_app)
    at.session_state["ai_question"] = "  Resumo?  "
    at.run()

    assert at.session_state["ai_pending"] is True
    assert at.session_state["ai_request"] == "Resumo?"
