from __future__ import annotations

import streamlit as st

from src.services.ai_analysis import AiServiceError
from src.ui.pages.context import PageContext
from src.ui.pages.helpers import flash, show_flash

SCOPE = "ai"
HISTORY_KEY = "ai_history"
QUESTION_KEY = "ai_question"
PENDING_KEY = "ai_pending"
REQUEST_KEY = "ai_request"

BLANK_QUESTION_MESSAGE = "Digite uma pergunta antes de analisar."

SUGGESTED_QUESTIONS = [
    "Quais funcionários têm mais tarefas pendentes?",
    "Qual município tem o maior valor pendente?",
    "Quantas horas foram registradas em tarefas concluídas?",
]


def _use_suggestion(question: str) -> None:
    st.session_state[QUESTION_KEY] = question


def _clear_history() -> None:
    st.session_state[HISTORY_KEY] = []


def _submit() -> None:
    """Queue the typed question; ignored while a request is still running."""
    if st.session_state.get(PENDING_KEY):
        return
    question = (st.session_state.get(QUESTION_KEY) or "").strip()
    if not question:
        flash(SCOPE, "warning", BLANK_QUESTION_MESSAGE)
        return
    st.session_state[PENDING_KEY] = True
    st.session_state[REQUEST_KEY] = question


def _run_request(context: PageContext, question: str, history: list) -> None:
    try:
        with st.spinner("Analisando os dados..."):
            answer = context.ai_service.analyze(question, context.store.snapshot())
    except AiServiceError as exc:
        flash(SCOPE, "error", str(exc))
    else:
        history.insert(0, (question, answer))
    finally:
        st.session_state[PENDING_KEY] = False


def render(context: PageContext) -> None:
    st.subheader("Análise de Dados com IA")
    st.caption(
        "Faça perguntas sobre funcionários, tarefas e municípios. "
        "A resposta é gerada apenas a partir dos dados cadastrados nesta sessão."
    )
    if not context.settings.ai_api_key:
        st.warning("Chave da API de IA não configurada. Defina INFOCO_AI_API_KEY no arquivo .env.")

    history = st.session_state.setdefault(HISTORY_KEY, [])
    request = st.session_state.pop(REQUEST_KEY, None)
    if request is None:
        st.session_state[PENDING_KEY] = False
    pending = st.session_state[PENDING_KEY]

    show_flash(SCOPE)

    suggestion_cols = st.columns(len(SUGGESTED_QUESTIONS))
    for idx, (col, suggestion) in enumerate(zip(suggestion_cols, SUGGESTED_QUESTIONS)):
        col.button(
            suggestion,
            key=f"ai_suggestion_{idx}",
            on_click=_use_suggestion,
            args=(suggestion,),
            disabled=pending,
        )

    # The form commits the text together with the click, so one press is enough.
    with st.form("ai_form", border=False):
        st.text_area("Sua pergunta", key=QUESTION_KEY, height=100)
        st.form_submit_button("Analisar", type="primary", on_click=_submit, disabled=pending)
    st.button("Limpar conversa", key="ai_clear", on_click=_clear_history, disabled=pending or not history)

    if request is not None:
        _run_request(context, request, history)
        st.rerun()

    for asked, answer in history:
        with st.container(border=True):
            st.markdown(f"**Pergunta:** {asked}")
            st.markdown(answer)
