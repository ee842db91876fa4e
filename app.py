# app.py
import logging

import streamlit as st

from core.config import APP_TITLE, PAGE_ICON
from services.auth_service import CHECKLIST, DASHBOARD, STRATEGY, available_views, resolve_view
from ui.components.login import render_login
from ui.session import current_session, logout, sync_caption
from ui.theme import apply_theme
from ui.tabs.dashboard_tab import render_dashboard_tab
from ui.tabs.checklist_tab import render_checklist_tab
from ui.tabs.strategy_tab import render_strategy_tab

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title=APP_TITLE, page_icon=PAGE_ICON, layout="wide")

VIEW_LABELS = {DASHBOARD: "📊 Painel Geral", CHECKLIST: "📋 Checklist", STRATEGY: "✨ Estratégia"}
RENDERERS = {DASHBOARD: render_dashboard_tab, CHECKLIST: render_checklist_tab, STRATEGY: render_strategy_tab}

session = current_session()
if session is None:
    render_login()
    st.stop()

apply_theme(session.user["theme"])

if not session.sync.loaded:
    with st.spinner("Sincronizando..."):
        session.start()

# Sidebar
st.sidebar.title(f"{session.user['name']} FOCO")
views = available_views(session.user)
requested = st.session_state.get("view", DASHBOARD)
current = resolve_view(session.user, requested)
view = st.sidebar.radio("Navegação", views, index=views.index(current),
                        format_func=lambda v: VIEW_LABELS[v], label_visibility="collapsed")
st.session_state["view"] = view

caption = sync_caption(session.sync)
if caption:
    st.sidebar.caption(caption)

if st.sidebar.button("Finalizar Protocolo"):
    logout()
    st.rerun()

RENDERERS[view](session)
