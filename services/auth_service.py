# services/auth_service.py
from typing import Any, Dict

from core.constants import THEME_FEMININE, THEME_MASCULINE

DASHBOARD = "dashboard"
CHECKLIST = "checklist"
STRATEGY = "strategy"

ALLOWED_USERS: Dict[str, Dict[str, Any]] = {
    "pascoto": {"username": "pascoto", "name": "PASCOTO", "theme": THEME_MASCULINE, "strategy": True},
    "yasmin": {"username": "yasmin", "name": "YASMIN", "theme": THEME_FEMININE, "strategy": False},
}
ALIASES = {"pascot": "pascoto"}


class AuthError(ValueError):
    pass


def authenticate(raw_username: str) -> Dict[str, Any]:
    u = (raw_username or "").strip().lower()
    if not u:
        raise AuthError("Informe o acesso")
    user = ALLOWED_USERS.get(ALIASES.get(u, u))
    if user is None:
        raise AuthError("Acesso inválido")
    return dict(user)


def can_access_strategy(user: Dict[str, Any]) -> bool:
    return bool(user and ALLOWED_USERS.get(user.get("username"), {}).get("strategy"))


def available_views(user: Dict[str, Any]):
    views = [DASHBOARD, CHECKLIST]
    if can_access_strategy(user):
        views.append(STRATEGY)
    return views


def resolve_view(user: Dict[str, Any], requested: str) -> str:
    """Requested view if the user may see it, the dashboard otherwise."""
    return requested if requested in available_views(user) else DASHBOARD
