# ui/tabs/checklist_tab.py
import streamlit as st

from core.constants import CATEGORIES, DEFAULT_CATEGORY, PRIORITIES, PRIORITY_MEDIUM
from services.filter_service import current_goals, current_tasks
from services.items_service import add_goal, add_task, remove_daily_items
from services.session_service import AppSession
from ui.components.item_list import render_item_list


def render_goals_panel(session: AppSession):
    st.subheader("🎯 Metas")
    if st.button("Remover diários", key="rm_daily_goals"):
        session.apply(goals=remove_daily_items(session.get("goals")))
        st.rerun()

    with st.form("add_goal", clear_on_submit=True):
        title = st.text_input("Definir nova meta...")
        c1, c2, c3, c4 = st.columns(4)
        category = c1.selectbox("Categoria", CATEGORIES, key="goal_cat")
        day = c2.date_input("Data", value=session.filters.day, key="goal_day")
        priority = c3.selectbox("Prioridade", PRIORITIES, index=PRIORITIES.index(PRIORITY_MEDIUM), key="goal_prio")
        daily = c4.checkbox("Todos os dias", key="goal_daily")
        if st.form_submit_button("Adicionar Meta", use_container_width=True):
            updated = add_goal(session.get("goals"), title, day, category, daily, priority)
            if updated is not session.get("goals"):
                session.apply(goals=updated)
                st.rerun()

    render_item_list(session, "goals", "date", current_goals(session.get("goals"), session.filters),
                     "Nenhuma meta ativa")


def render_tasks_panel(session: AppSession):
    st.subheader("📋 Checklist")
    st.caption("Execução diária")
    if st.button("Remover diários", key="rm_daily_tasks"):
        session.apply(tasks=remove_daily_items(session.get("tasks")))
        st.rerun()

    with st.form("add_task", clear_on_submit=True):
        title = st.text_input("O que precisa ser executado?")
        c1, c2, c3 = st.columns(3)
        category = c1.selectbox("Categoria", CATEGORIES, index=CATEGORIES.index(DEFAULT_CATEGORY), key="task_cat")
        day = c2.date_input("Data", value=session.filters.day, key="task_day")
        daily = c3.checkbox("Todos os dias", key="task_daily")
        if st.form_submit_button("Adicionar Tarefa", use_container_width=True):
            updated = add_task(session.get("tasks"), title, day, category, daily)
            if updated is not session.get("tasks"):
                session.apply(tasks=updated)
                st.rerun()

    render_item_list(session, "tasks", "scheduledDate", current_tasks(session.get("tasks"), session.filters),
                     "Nenhuma tarefa para o dia")


def render_checklist_tab(session: AppSession):
    st.header("Checklist")
    col1, col2 = st.columns(2)
    with col1:
        render_goals_panel(session)
    with col2:
        render_tasks_panel(session)
