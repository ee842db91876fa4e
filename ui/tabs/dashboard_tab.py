# ui/tabs/dashboard_tab.py
import streamlit as st

from core.constants import ALL, CATEGORIES, STATUS_LABELS, STATUS_OPTIONS, TODAY, YESTERDAY, CUSTOM, DATE_MODE_LABELS
from core.time_utils import today_local
from services.filter_service import current_tasks, pick_date, quick_date
from services.insight_service import get_productivity_insight
from services.items_service import add_note, delete_note
from services.session_service import AppSession
from services.stats_service import category_breakdown, summary_counters, weekly_series
from ui.components.charts import render_category_chart, render_weekly_chart
from ui.tabs.checklist_tab import render_goals_panel, render_tasks_panel


def _render_counters(session: AppSession):
    stats = summary_counters(session.get("goals"), session.get("tasks"))
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Mapeado", stats["total"], help="Objetivos")
    c2.metric("Sucesso", stats["completed"], help="Concluídos")
    c3.metric("Em aberto", stats["pending"], help="Pendentes")
    c4.metric("Eficiência", f"{stats['rate']}%")


FILTER_DAY_KEY = "filter_day"


def _on_quick_date(state, mode: str):
    quick_date(state, mode, today_local())
    st.session_state[FILTER_DAY_KEY] = state.day


def _on_pick_date(state):
    pick_date(state, st.session_state[FILTER_DAY_KEY])


def _render_filters(session: AppSession):
    state = session.filters
    st.session_state.setdefault(FILTER_DAY_KEY, state.day)
    c1, c2, c3, c4, c5 = st.columns([1, 1, 2, 2, 2])
    c1.button(DATE_MODE_LABELS[TODAY], type="primary" if state.mode == TODAY else "secondary",
              on_click=_on_quick_date, args=(state, TODAY))
    c2.button(DATE_MODE_LABELS[YESTERDAY], type="primary" if state.mode == YESTERDAY else "secondary",
              on_click=_on_quick_date, args=(state, YESTERDAY))
    c3.date_input(DATE_MODE_LABELS[CUSTOM], key=FILTER_DAY_KEY, on_change=_on_pick_date, args=(state,))

    cat_options = [ALL] + CATEGORIES
    state.category = c4.selectbox("Categoria", cat_options, index=cat_options.index(state.category),
                                  format_func=lambda c: "Tudo" if c == ALL else c)
    state.status = c5.selectbox("Status", STATUS_OPTIONS, index=STATUS_OPTIONS.index(state.status),
                                format_func=lambda s: STATUS_LABELS[s])


def _render_notes(session: AppSession):
    st.subheader("🗒️ Notas")
    notes = session.get("notes")
    for idx, note in enumerate(notes):
        c1, c2 = st.columns([0.9, 0.1])
        c1.info(note)
        if c2.button("✕", key=f"del_note_{idx}"):
            session.apply(notes=delete_note(notes, idx))
            st.rerun()
    with st.form("add_note", clear_on_submit=True):
        text = st.text_area("O que você quer lembrar?", height=80)
        if st.form_submit_button("Adicionar nota"):
            updated = add_note(notes, text)
            if updated is not notes:
                session.apply(notes=updated)
                st.rerun()


def _render_insight(session: AppSession):
    st.subheader("✨ Insight")
    if st.button("Gerar insight do dia"):
        with st.spinner("Analisando..."):
            session.insight = get_productivity_insight(current_tasks(session.get("tasks"), session.filters))
    if session.insight:
        st.success(session.insight)


def render_dashboard_tab(session: AppSession):
    st.header(f"{session.user['name']} Foco")
    _render_counters(session)
    st.divider()
    _render_filters(session)

    col1, col2 = st.columns(2)
    with col1:
        render_goals_panel(session)
    with col2:
        render_tasks_panel(session)

    st.divider()
    col3, col4 = st.columns(2)
    with col3:
        _render_notes(session)
    with col4:
        _render_insight(session)

    st.divider()
    goals, tasks = session.get("goals"), session.get("tasks")
    col5, col6 = st.columns(2)
    with col5:
        render_weekly_chart(weekly_series(goals, tasks), session.user["theme"])
    with col6:
        render_category_chart(category_breakdown(goals + tasks), session.user["theme"])
