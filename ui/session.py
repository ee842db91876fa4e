# ui/session.py
from typing import Any, Dict, Optional

import streamlit as st

from services.session_service import AppSession

_KEY = "app_session"


def current_session() -> Optional[AppSession]:
    return st.session_state.get(_KEY)


def login(user: Dict[str, Any]) -> AppSession:
    old = current_session()
    if old is not None:
        old.close()
    session = AppSession(user)
    st.session_state[_KEY] = session
    st.session_state["view"] = "dashboard"
    st.session_state.pop("filter_day", None)
    return session


def logout() -> None:
    session = st.session_state.pop(_KEY, None)
    if session is not None:
        session.close()
    st.session_state.pop("view", None)
    st.session_state.pop("filter_day", None)


def sync_caption(sync) -> Optional[str]:
    """Sidebar note for unsaved edits or a session that could not load."""
    if sync.save_pending:
        return "Alterações pendentes"
    if sync.loaded and not sync.can_save:
        return "Modo somente leitura: não foi possível carregar seus dados."
    return None
