"""Route guards for protected and public pages."""

import enum
from typing import NamedTuple, Optional

from expense_client.services.session import SessionStore

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"


class RouteState(str, enum.Enum):
    loading = "loading"
    allow = "allow"
    redirect = "redirect"


class RouteDecision(NamedTuple):
    state: RouteState
    redirect_to: Optional[str] = None


def guard_protected(session: SessionStore) -> RouteDecision:
    """Pages that need a signed-in user."""
    if session.loading:
        return RouteDecision(RouteState.loading)
    if not session.is_authenticated:
        return RouteDecision(RouteState.redirect, LOGIN_PATH)
    return RouteDecision(RouteState.allow)


def guard_public(session: SessionStore) -> RouteDecision:
    """Login and register pages, which signed-in users skip."""
    if session.loading:
        return RouteDecision(RouteState.loading)
    if session.is_authenticated:
        return RouteDecision(RouteState.redirect, DASHBOARD_PATH)
    return RouteDecision(RouteState.allow)
