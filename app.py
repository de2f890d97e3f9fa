import src.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from src.config import TABS, get_settings
from src.data.session import get_store
from src.logging_setup import setup_logging
from src.services.ai_analysis import AiAnalysisService
from src.ui.layout import setup_page, sidebar
from src.ui.pages import (
    ai_analysis,
    dashboard,
    employees,
    municipalities,
    tasks,
)
from src.ui.pages.context import PageContext

logger = logging.getLogger("app")

PAGE_RENDERERS = {
    "dashboard": dashboard.render,
    "employees": employees.render,
    "tasks": tasks.render,
    "municipalities": municipalities.render,
    "ai_analysis": ai_analysis.render,
}

AI_SERVICE_STATE_KEY = "infoco_ai_service"


def _ai_service(settings) -> AiAnalysisService:
    service = st.session_state.get(AI_SERVICE_STATE_KEY)
    if service is None:
        service = AiAnalysisService(settings)
        st.session_state[AI_SERVICE_STATE_KEY] = service
    return service


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    setup_page(settings)
    st.title(settings.app_name)

    store = get_store(settings)
    sidebar(settings, store)

    context = PageContext(
        store=store,
        settings=settings,
        ai_service=_ai_service(settings),
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            logger.warning("no renderer for tab %s", tab_config.key)
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
