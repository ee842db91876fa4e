# ui/components/login.py
import streamlit as st

from services.auth_service import AuthError, authenticate
from ui.session import login


def render_login():
    st.title("⚡ Foco")
    st.caption("Acesso restrito")
    with st.form("login_form"):
        raw = st.text_input("Identificação do usuário", placeholder="IDENTIFICAÇÃO DO USUÁRIO")
        submitted = st.form_submit_button("Sincronizar Protocolo", use_container_width=True)
    if submitted:
        try:
            user = authenticate(raw)
        except AuthError as e:
            st.error(str(e))
            return
        login(user)
        st.rerun()
