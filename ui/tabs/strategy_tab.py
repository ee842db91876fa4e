# ui/tabs/strategy_tab.py
import streamlit as st

from core.constants import BLOCK_TYPES, COMPANIES, DEFAULT_BLOCK_TYPE, PROJECT_TYPES
from services.session_service import AppSession
from services.strategy_service import (
    UnknownBlockError, add_block, add_funnel_template, add_project, add_structure_template,
    company_projects, connect, delete_block, delete_edge, delete_project, duplicate_block,
    edit_block, move_block, node_position, project_blocks, project_edges,
)
from ui.components.diagram import render_diagram


def _render_company_picker(session: AppSession):
    st.subheader("Escolha a empresa")
    cols = st.columns(len(COMPANIES))
    for col, company in zip(cols, COMPANIES):
        count = len(company_projects(session.get("projects"), company))
        if col.button(f"{company}\n\n{count} projeto(s)", key=f"company_{company}", use_container_width=True):
            session.active_company = company
            st.rerun()


def _render_block_row(session: AppSession, project_id: str, block, index: int):
    block_id = block["id"]
    c1, c2 = st.columns([0.75, 0.25])
    c1.markdown(f"`{block.get('type')}` **{block.get('title')}**  \n{block.get('description', '')}")
    b1, b2 = c2.columns(2)
    if b1.button("Duplicar", key=f"dup_{block_id}"):
        session.apply(blocks=duplicate_block(session.get("blocks"), block_id))
        st.rerun()
    if b2.button("Excluir", key=f"delblk_{block_id}"):
        blocks, edges = delete_block(session.get("blocks"), session.get("edges"), block_id)
        session.apply(blocks=blocks, edges=edges)
        st.rerun()
    with st.expander("Editar / mover", expanded=False):
        pos = node_position(block, index)
        with st.form(f"edit_block_{block_id}"):
            title = st.text_input("Título do elemento", value=block.get("title", ""), key=f"bt_{block_id}")
            description = st.text_input("Descrição rápida", value=block.get("description", ""), key=f"bd_{block_id}")
            x1, x2 = st.columns(2)
            x = x1.number_input("x", value=float(pos["x"]), step=20.0, key=f"bx_{block_id}")
            y = x2.number_input("y", value=float(pos["y"]), step=20.0, key=f"by_{block_id}")
            if st.form_submit_button("Salvar"):
                blocks = edit_block(session.get("blocks"), block_id, title, description)
                if (x, y) != (pos["x"], pos["y"]):
                    blocks = move_block(blocks, block_id, x, y)
                session.apply(blocks=blocks)
                st.rerun()


def _render_edges(session: AppSession, project_id: str, blocks):
    titles = {b["id"]: b.get("title", "") for b in blocks}
    edges = project_edges(session.get("edges"), project_id)
    for e in edges:
        c1, c2 = st.columns([0.85, 0.15])
        c1.caption(f"{titles.get(e.get('source'), '?')} → {titles.get(e.get('target'), '?')}")
        if c2.button("✕", key=f"deledge_{e['id']}"):
            session.apply(edges=delete_edge(session.get("edges"), e["id"]))
            st.rerun()
    if len(blocks) < 1:
        return
    ids = [b["id"] for b in blocks]
    with st.form(f"connect_{project_id}"):
        c1, c2 = st.columns(2)
        source = c1.selectbox("Origem", ids, format_func=lambda i: titles[i], key=f"src_{project_id}")
        target = c2.selectbox("Destino", ids, format_func=lambda i: titles[i], key=f"dst_{project_id}")
        if st.form_submit_button("Conectar"):
            try:
                session.apply(edges=connect(session.get("blocks"), session.get("edges"), project_id, source, target))
            except UnknownBlockError:
                st.warning("Elemento não encontrado.")
                return
            st.rerun()


def _render_project(session: AppSession, project):
    project_id = project["id"]
    with st.container(border=True):
        h1, h2 = st.columns([0.8, 0.2])
        h1.markdown(f"### {project.get('title')}  \n`{project.get('type')}`")
        if h2.button("Excluir projeto", key=f"delproj_{project_id}"):
            projects, blocks, edges = delete_project(session.get("projects"), session.get("blocks"),
                                                     session.get("edges"), project_id)
            session.apply(projects=projects, blocks=blocks, edges=edges)
            st.rerun()

        t1, t2, t3, t4 = st.columns(4)
        if t1.button("Template Funil", key=f"tplf_{project_id}"):
            blocks, edges = add_funnel_template(session.get("blocks"), session.get("edges"), project_id)
            session.apply(blocks=blocks, edges=edges)
            st.rerun()
        if t2.button("Template Estrutura", key=f"tpls_{project_id}"):
            blocks, edges = add_structure_template(session.get("blocks"), session.get("edges"), project_id)
            session.apply(blocks=blocks, edges=edges)
            st.rerun()
        if t3.button("Adicionar Etapa", key=f"step_{project_id}"):
            session.apply(blocks=add_block(session.get("blocks"), project_id, "Nova Etapa", "Defina a ação", "funil"))
            st.rerun()
        if t4.button("Adicionar Nota", key=f"note_{project_id}"):
            session.apply(blocks=add_block(session.get("blocks"), project_id, "Nota Estratégica",
                                           "Insight rápido", "estrategico"))
            st.rerun()

        blocks = project_blocks(session.get("blocks"), project_id)
        render_diagram(blocks, project_edges(session.get("edges"), project_id),
                       session.user["theme"], key=f"diagram_{project_id}")

        for index, block in enumerate(blocks):
            _render_block_row(session, project_id, block, index)

        st.markdown("**Conexões**")
        _render_edges(session, project_id, blocks)

        with st.form(f"add_block_{project_id}", clear_on_submit=True):
            c1, c2, c3 = st.columns([1.2, 0.8, 1.4])
            title = c1.text_input("Elemento estratégico", key=f"nb_title_{project_id}")
            block_type = c2.selectbox("Tipo", BLOCK_TYPES, index=BLOCK_TYPES.index(DEFAULT_BLOCK_TYPE), key=f"nb_type_{project_id}")
            description = c3.text_input("Descrição", key=f"nb_desc_{project_id}")
            if st.form_submit_button("Adicionar"):
                updated = add_block(session.get("blocks"), project_id, title, description, block_type)
                if updated is not session.get("blocks"):
                    session.apply(blocks=updated)
                    st.rerun()


def render_strategy_tab(session: AppSession):
    st.header("Estratégia")
    company = session.active_company
    if company is None:
        _render_company_picker(session)
        return

    h1, h2 = st.columns([0.8, 0.2])
    h1.subheader(company)
    if h2.button("Voltar"):
        session.active_company = None
        st.rerun()

    with st.form("add_project", clear_on_submit=True):
        c1, c2 = st.columns([0.7, 0.3])
        title = c1.text_input("Novo projeto")
        project_type = c2.selectbox("Tipo", PROJECT_TYPES)
        if st.form_submit_button("Criar projeto"):
            updated = add_project(session.get("projects"), title, project_type, company)
            if updated is not session.get("projects"):
                session.apply(projects=updated)
                st.rerun()

    projects = company_projects(session.get("projects"), company)
    if not projects:
        st.info("Nenhum projeto ainda.")
    for project in projects:
        _render_project(session, project)
