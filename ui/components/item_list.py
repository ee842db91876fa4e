# ui/components/item_list.py
from typing import Any, Dict, List

import streamlit as st

from core.constants import CATEGORIES, DEFAULT_CATEGORY
from core.time_utils import parse_day
from services.filter_service import is_overdue
from services.items_service import delete_item, edit_item, toggle_item
from services.session_service import AppSession


def render_item_list(session: AppSession, key: str, date_key: str,
                     visible: List[Dict[str, Any]], empty_label: str):
    """Checklist rows for goals or tasks: toggle, edit, delete."""
    if not visible:
        st.caption(empty_label)
        return
    day = session.filters.day
    for item in visible:
        item_id = item["id"]
        item_day = parse_day(item.get(date_key))
        c1, c2, c3 = st.columns([0.08, 0.8, 0.12])
        with c1:
            checked = st.checkbox("feito", value=bool(item.get("completed")),
                                  key=f"chk_{key}_{item_id}", label_visibility="collapsed")
            if checked != bool(item.get("completed")):
                session.apply(**{key: toggle_item(session.get(key), item_id)})
                st.rerun()
        with c2:
            title = item.get("title", "")
            line = f"~~{title}~~" if item.get("completed") else f"**{title}**"
            meta = [item.get("category") or DEFAULT_CATEGORY]
            if item_day:
                meta.append(item_day.strftime("%d/%m"))
            if item.get("isDaily"):
                meta.append("diário")
            st.markdown(f"{line}  \n<small>{' · '.join(meta)}</small>", unsafe_allow_html=True)
            if key == "tasks" and is_overdue(item, date_key, day):
                st.markdown("<span class='foco-overdue'>ATRASADA</span>", unsafe_allow_html=True)
        with c3:
            if st.button("🗑️", key=f"del_{key}_{item_id}"):
                session.apply(**{key: delete_item(session.get(key), item_id)})
                st.rerun()
        with st.expander("Editar", expanded=False):
            with st.form(f"edit_{key}_{item_id}"):
                new_title = st.text_input("Título", value=item.get("title", ""), key=f"title_{key}_{item_id}")
                new_day = st.date_input("Data", value=item_day or day, key=f"day_{key}_{item_id}")
                current_cat = item.get("category") or DEFAULT_CATEGORY
                new_cat = st.selectbox("Categoria", CATEGORIES,
                                       index=CATEGORIES.index(current_cat) if current_cat in CATEGORIES else len(CATEGORIES) - 1,
                                       key=f"cat_{key}_{item_id}")
                daily = st.checkbox("Todos os dias", value=bool(item.get("isDaily")), key=f"daily_{key}_{item_id}")
                if st.form_submit_button("Salvar"):
                    session.apply(**{key: edit_item(session.get(key), item_id, date_key, new_title,
                                                    new_day, new_cat, daily)})
                    st.rerun()
