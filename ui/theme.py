# ui/theme.py
import streamlit as st

from core.constants import THEME_FEMININE

_FEMININE = """
<style>
.stApp { background: #FFF8F8; color: #4c0519; }
section[data-testid="stSidebar"] { background: #ffffff; border-right: 1px solid #ffe4e6; }
h1, h2, h3 { color: #9f1239; font-style: italic; text-transform: uppercase; }
.stButton > button { border-radius: 2rem; border-color: #fecdd3; color: #be123c; }
.stButton > button:hover { background: #e11d48; color: #ffffff; }
.foco-overdue { color: #f87171; font-weight: 800; }
</style>
"""

_MASCULINE = """
<style>
.stApp { background: #000000; color: #e4e4e7; }
section[data-testid="stSidebar"] { background: #000000; border-right: 1px solid #18181b; }
h1, h2, h3 { color: #ffffff; font-style: italic; text-transform: uppercase; }
.stButton > button { border-radius: 2rem; border-color: #27272a; background: #18181b; color: #a1a1aa; }
.stButton > button:hover { background: #2563eb; color: #ffffff; }
.foco-overdue { color: #ef4444; font-weight: 800; }
</style>
"""

CHART_COLORS = {
    "feminine": ["#e11d48", "#fb7185", "#f472b6", "#c084fc", "#a1a1aa"],
    "masculine": ["#2563eb", "#10b981", "#06b6d4", "#8b5cf6", "#71717a"],
}


def apply_theme(theme: str):
    st.markdown(_FEMININE if theme == THEME_FEMININE else _MASCULINE, unsafe_allow_html=True)


def chart_colors(theme: str):
    return CHART_COLORS.get(theme, CHART_COLORS["masculine"])
