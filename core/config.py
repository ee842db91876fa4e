# core/config.py
import os
from typing import Optional

import streamlit as st

APP_TITLE = "Foco"
PAGE_ICON = "⚡"

DEFAULT_DB_NAME = "Foco_DB"
DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_SAVE_DEBOUNCE_MS = 400
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """st.secrets first, then the environment, then `default`."""
    try:
        value = st.secrets.get(name)
    except Exception:
        # no secrets.toml at all
        value = None
    if value is None:
        value = os.getenv(name) or os.getenv(name.lower())
    if value is None:
        return default
    return str(value).strip()


def mongo_uri() -> str:
    return get_setting("MONGO_URI", "") or ""


def db_name() -> str:
    return get_setting("DB_NAME", DEFAULT_DB_NAME) or DEFAULT_DB_NAME


def app_timezone() -> str:
    return get_setting("APP_TIMEZONE", DEFAULT_TIMEZONE) or DEFAULT_TIMEZONE


def save_debounce_seconds() -> float:
    raw = get_setting("SAVE_DEBOUNCE_MS")
    try:
        ms = int(raw) if raw else DEFAULT_SAVE_DEBOUNCE_MS
    except ValueError:
        ms = DEFAULT_SAVE_DEBOUNCE_MS
    return max(0, ms) / 1000.0


def gemini_api_key() -> str:
    return get_setting("GEMINI_API_KEY") or get_setting("API_KEY", "") or ""


def gemini_model_name() -> str:
    return get_setting("GEMINI_MODEL", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL
